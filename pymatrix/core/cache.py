"""
Per-instance memoization for derived matrix values.

VersionedCache stores each value together with the table version it was
computed from. Matrix bumps the version on every mutation, so a lookup
after any set()/set_data()/apply() misses without the cache having to be
cleared by hand.
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

T = TypeVar('T')

_MISSING = object()


class VersionedCache:
    """
    Mapping of operation name to (version, value).

    Usage:
        cache = VersionedCache()
        cache.store('determinant', -2)
        cache.lookup('determinant')   # -2
        cache.invalidate()
        cache.lookup('determinant')   # _MISSING
    """

    def __init__(self) -> None:
        self._version = 0
        self._entries: dict[str, tuple[int, Any]] = {}

    @property
    def version(self) -> int:
        """Current table version."""
        return self._version

    def invalidate(self) -> None:
        """Mark every stored value as stale. Entries are overwritten on the next store()."""
        self._version += 1

    def lookup(self, key: str) -> Any:
        """Return the value stored for key at the current version, or _MISSING."""
        entry = self._entries.get(key)
        if entry is None or entry[0] != self._version:
            return _MISSING
        return entry[1]

    def store(self, key: str, value: Any) -> Any:
        self._entries[key] = (self._version, value)
        return value

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) is not _MISSING

    def __len__(self) -> int:
        return sum(1 for version, _ in self._entries.values() if version == self._version)


def cached(method: Callable[..., T]) -> Callable[..., T]:
    """
    Memoize a zero-argument method in the instance's ``_cache``.

    The method's name is the cache key.
    """
    key = method.__name__

    @wraps(method)
    def wrapper(self) -> T:
        value = self._cache.lookup(key)
        if value is _MISSING:
            value = self._cache.store(key, method(self))
        return value

    return wrapper
