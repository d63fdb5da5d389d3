from __future__ import annotations

from typing import Dict, Iterable, Optional, Protocol

from ..core.exceptions import StorageQuotaExceeded


class StorageMedium(Protocol):
    """Key/value interface for durable text storage.

    Note (DIP): the store depends on this interface, not on a concrete backend.
    Implementations raise StorageError when a read or write fails.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> Iterable[str]:
        raise NotImplementedError


class MemoryStorage:
    """Process-local medium, optionally limited to `quota_bytes` of UTF-8 text."""

    def __init__(self, initial: Optional[Dict[str, str]] = None, *, quota_bytes: Optional[int] = None):
        self._items: Dict[str, str] = dict(initial or {})
        self._quota_bytes = quota_bytes

    def _used_bytes(self, *, excluding: str = "") -> int:
        return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in self._items.items() if k != excluding)

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self._quota_bytes is not None:
            needed = self._used_bytes(excluding=key) + len(key.encode("utf-8")) + len(value.encode("utf-8"))
            if needed > self._quota_bytes:
                raise StorageQuotaExceeded(f"Quota exceeded writing {key!r} ({needed} > {self._quota_bytes} bytes)")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> Iterable[str]:
        return list(self._items)
