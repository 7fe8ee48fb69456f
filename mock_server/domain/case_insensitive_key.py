"""Header names compared without regard to letter case."""

from typing import Iterable


class CaseInsensitiveKey:
    """A header name that keeps its spelling but compares case-insensitively."""

    __slots__ = ("_key",)

    def __init__(self, key: str) -> None:
        self._key = key

    @property
    def value(self) -> str:
        """Return the header name exactly as it was supplied."""
        return self._key

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CaseInsensitiveKey):
            other = other.value
        if isinstance(other, str):
            return self._key.casefold() == other.casefold()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key.casefold())

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"CaseInsensitiveKey({self._key!r})"


def to_case_insensitive_keys(names: Iterable[str]) -> tuple[CaseInsensitiveKey, ...]:
    """Wrap each name, keeping order and duplicates."""
    return tuple(CaseInsensitiveKey(name) for name in names)
