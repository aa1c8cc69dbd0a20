"""Collision-free viewer names, scoped by auth-kind."""

from oas_viewers.schema.naming import sanitize


class NameAllocator:
    """Hands out viewer names that are unique within each auth-kind.

    Suffixes count from the number of names already used by the kind. A
    candidate is only accepted once it is absent from every kind's list and
    from `reserved`, so names are also unique across kinds.
    """

    def __init__(self, reserved: set[str] | frozenset[str] = frozenset()):
        self.reserved = frozenset(reserved)
        self.used: dict[str, list[str]] = {}

    def allocate(self, kind: str, desired: str) -> str:
        name = sanitize(desired)
        used = self.used.setdefault(kind, [])

        if self._taken(name):
            suffix = len(used) + 1
            while self._taken(f"{name}{suffix}"):
                suffix += 1
            name = f"{name}{suffix}"

        used.append(name)
        return name

    def _taken(self, name: str) -> bool:
        return name in self.reserved or any(name in names for names in self.used.values())
