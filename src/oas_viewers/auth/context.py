"""The security context viewers hand down to nested operation fields.

A viewer resolver returns `{RESERVED_KEY: {"security": {...}}}`. The key is
never exposed as a GraphQL field; operation resolvers check for it on their
parent value to find out whether a viewer was used and with which
credentials.
"""

from oas_viewers.schema.naming import desanitize

RESERVED_KEY = "_oasViewers"


def security_context(security: dict) -> dict:
    """Wrap a security mapping under the reserved key."""
    return {RESERVED_KEY: {"security": security}}


def get_security(parent) -> dict | None:
    """Return the security mapping stored on a resolved parent value, if any."""
    if not isinstance(parent, dict):
        return None
    context = parent.get(RESERVED_KEY)
    if not isinstance(context, dict):
        return None
    return context.get("security")


def credentials_for(parent, protocol_name: str, sane_map: dict[str, str]) -> dict | None:
    """Return the credentials supplied for `protocol_name` through a viewer.

    `protocol_name` is the raw protocol name; the context is keyed by the
    sanitized name, which is mapped back through `sane_map`.
    """
    security = get_security(parent)
    if not security:
        return None
    for safe_name, credentials in security.items():
        if desanitize(safe_name, sane_map) == protocol_name:
            return credentials
    return None
