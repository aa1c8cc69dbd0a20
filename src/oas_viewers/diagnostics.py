"""Warning sink for non-fatal translation problems.

Every warning is recorded as a TranslationWarning and logged. In strict mode
the first warning is raised as a StrictModeError instead.
"""

import logging

from pydantic import BaseModel

from oas_viewers.errors import StrictModeError

WARNING_MESSAGES = {
    "UNSUPPORTED_HTTP_AUTH_SCHEME": "Unsupported HTTP authentication scheme '{culprit}'",
    "UNSUPPORTED_SECURITY_SCHEME": "Unsupported security scheme type '{culprit}'",
    "DUPLICATE_SECURITY_SCHEME": "Security scheme '{culprit}' is declared by more than one document",
    "NO_QUERY_OPERATIONS": "No query operation found in '{culprit}'",
}

MITIGATIONS = {
    "UNSUPPORTED_HTTP_AUTH_SCHEME": "Viewer is created with the generic 'httpAuth' label and no credential arguments.",
    "UNSUPPORTED_SECURITY_SCHEME": "Ignore scheme; operations requiring only this scheme are not wrapped in a viewer.",
    "DUPLICATE_SECURITY_SCHEME": "Key the later scheme by its document title.",
    "NO_QUERY_OPERATIONS": "Add a placeholder query field.",
}


class TranslationWarning(BaseModel):
    """A single recorded warning."""

    type_key: str
    culprit: str
    message: str
    mitigation: str = ""


class Diagnostics:
    """Collects warnings emitted while building viewers."""

    def __init__(self, strict: bool = False, logger: logging.Logger | None = None):
        self.strict = strict
        self.logger = logger or logging.getLogger("oas_viewers.translation")
        self.warnings: list[TranslationWarning] = []

    def warn(self, type_key: str, culprit: str) -> TranslationWarning:
        """Record a warning, or raise it when strict mode is on."""
        template = WARNING_MESSAGES.get(type_key, "{culprit}")
        warning = TranslationWarning(
            type_key=type_key,
            culprit=culprit,
            message=template.format(culprit=culprit),
            mitigation=MITIGATIONS.get(type_key, ""),
        )
        if self.strict:
            raise StrictModeError(warning)

        self.warnings.append(warning)
        self.logger.warning("%s: %s", type_key, warning.message)
        return warning
