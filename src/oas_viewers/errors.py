"""Exceptions raised while building viewers and their schema.

Non-fatal problems go through the diagnostics sink instead; these are only
raised for unusable input or when strict mode escalates a warning.
"""


class ViewerBuildError(Exception):
    """Base exception for everything this package raises."""

    pass


class UnsupportedDocumentError(ViewerBuildError):
    """Raised when a file is not an OpenAPI or Swagger description."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class StrictModeError(ViewerBuildError):
    """Raised in strict mode in place of emitting a warning.

    Attributes:
        warning: The TranslationWarning that was escalated.
    """

    def __init__(self, warning):
        super().__init__(warning.message)
        self.warning = warning
