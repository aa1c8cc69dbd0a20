"""Identifier sanitization.

GraphQL names must match /[_A-Za-z][_0-9A-Za-z]*/. `sanitize_and_store`
additionally records the raw name so resolvers can recover it later.
"""

import re
from enum import Enum

_WORD_SEPARATOR = re.compile(r"[^a-zA-Z0-9]+")


class CaseStyle(str, Enum):
    CAMEL = "camelCase"  # field and argument names
    PASCAL = "PascalCase"  # type names


def sanitize(raw: str, case: CaseStyle = CaseStyle.CAMEL) -> str:
    """Turn an arbitrary string into a GraphQL-safe identifier."""
    words = [w for w in _WORD_SEPARATOR.split(raw) if w]
    if not words:
        return "_"

    head = words[0]
    if case == CaseStyle.PASCAL:
        head = head[0].upper() + head[1:]
    else:
        head = head[0].lower() + head[1:]
    name = head + "".join(w[0].upper() + w[1:] for w in words[1:])

    if name[0].isdigit():
        name = "_" + name
    return name


def sanitize_and_store(raw: str, sane_map: dict[str, str]) -> str:
    """Sanitize `raw` and remember the mapping back to it.

    A raw name stored before gets its earlier safe name back. A safe name
    already taken by another raw name is suffixed until it is free, so the
    mapping stays reversible.
    """
    for safe, stored in sane_map.items():
        if stored == raw:
            return safe

    base = sanitize(raw)
    safe, suffix = base, 2
    while safe in sane_map:
        safe = f"{base}{suffix}"
        suffix += 1

    sane_map[safe] = raw
    return safe


def desanitize(safe: str, sane_map: dict[str, str]) -> str:
    """Recover the raw name registered for `safe`, or `safe` itself."""
    return sane_map.get(safe, safe)


def sort_by_key(mapping: dict) -> dict:
    return dict(sorted(mapping.items(), key=lambda item: item[0]))
