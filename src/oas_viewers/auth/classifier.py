"""Map a security scheme to the auth-kind its viewer is named after."""

from oas_viewers.diagnostics import Diagnostics
from oas_viewers.parser.base import SecurityScheme

HTTP_FALLBACK_KIND = "httpAuth"

# http is a family of protocols; the sub-scheme picks the concrete one
HTTP_SCHEME_KINDS = {
    "basic": "basicAuth",
}


def classify(scheme: SecurityScheme, diagnostics: Diagnostics) -> str:
    """Return the auth-kind label of `scheme`.

    Unsupported http sub-schemes produce one warning and the generic
    'httpAuth' label.
    """
    if scheme.kind.type != "http":
        return scheme.kind.type

    sub_scheme = scheme.kind.scheme or ""
    kind = HTTP_SCHEME_KINDS.get(sub_scheme.lower())
    if kind is None:
        diagnostics.warn("UNSUPPORTED_HTTP_AUTH_SCHEME", sub_scheme)
        return HTTP_FALLBACK_KIND
    return kind
