"""Reactive container binding UI code to one kind's façade.

The held collection is only ever replaced by a value the façade returned,
so listeners never observe a half-applied mutation. Façade methods may be
plain functions or coroutines.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Mapping, Optional, TypeVar

from ..common.async_utils import resolve

T = TypeVar("T")

Listener = Callable[[List[T]], None]


class StoredCollection(Generic[T]):
    def __init__(self, facade, *, initial: Optional[List[T]] = None):
        self._facade = facade
        self._data: List[T] = list(initial or [])
        self._loading = True
        self._listeners: List[Listener] = []

    @property
    def data(self) -> List[T]:
        return list(self._data)

    @property
    def loading(self) -> bool:
        return self._loading

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, records: List[T]) -> List[T]:
        self._data = list(records)
        for listener in list(self._listeners):
            listener(self.data)
        return self.data

    async def activate(self) -> List[T]:
        """Load the collection; `loading` stays True until this resolves."""
        return await self.refresh()

    async def refresh(self) -> List[T]:
        self._loading = True
        try:
            records = await resolve(self._facade.list())
            return self._publish(records)
        finally:
            self._loading = False

    async def add_item(self, record: T) -> List[T]:
        return self._publish(await resolve(self._facade.add(record)))

    async def update_item(self, item_id: str, changes: Mapping[str, Any]) -> List[T]:
        return self._publish(await resolve(self._facade.update(item_id, changes)))

    async def delete_item(self, item_id: str) -> List[T]:
        return self._publish(await resolve(self._facade.delete(item_id)))

    async def set_data(self, records: List[T]) -> List[T]:
        return self._publish(await resolve(self._facade.replace_all(list(records))))
