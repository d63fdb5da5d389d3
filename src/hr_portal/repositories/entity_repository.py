from __future__ import annotations

import dataclasses
import logging
import uuid
from typing import Any, Callable, Generic, List, Mapping, Optional, TypeVar

from ..core.enums import EntityKind
from ..core.exceptions import DuplicateRecordError
from ..records.codec import apply_changes, record_id
from ..store.serialized_store import SerializedStore

T = TypeVar("T")

logger = logging.getLogger(__name__)


def new_record_id() -> str:
    return uuid.uuid4().hex


class EntityRepository(Generic[T]):
    """CRUD façade for one kind, layered directly over the serialized store.

    Every operation loads a fresh collection, mutates it, saves it and
    returns the resulting full collection. Business rules are the caller's
    job; update/delete on an unknown id are silent no-ops.
    """

    kind: EntityKind

    def __init__(self, store: SerializedStore, *, id_factory: Callable[[], str] = new_record_id):
        self._store = store
        self._id_factory = id_factory

    def list(self) -> List[T]:
        return self._store.load(self.kind)

    def get(self, item_id: str) -> Optional[T]:
        return next((r for r in self.list() if record_id(r) == str(item_id)), None)

    def add(self, record: T) -> List[T]:
        records = self.list()
        if not record_id(record):
            record = dataclasses.replace(record, id=self._id_factory())
        if any(record_id(r) == record_id(record) for r in records):
            raise DuplicateRecordError(f"{self.kind.value}: id {record_id(record)!r} already exists")
        records.append(record)
        self._store.save(self.kind, records)
        return records

    def update(self, item_id: str, changes: Mapping[str, Any]) -> List[T]:
        records = self.list()
        for i, r in enumerate(records):
            if record_id(r) == str(item_id):
                records[i] = apply_changes(r, changes)
                self._store.save(self.kind, records)
                break
        else:
            logger.debug("%s: update ignored, unknown id %r", self.kind.value, item_id)
        return records

    def delete(self, item_id: str) -> List[T]:
        before = self.list()
        records = [r for r in before if record_id(r) != str(item_id)]
        if len(records) != len(before):
            self._store.save(self.kind, records)
        return records

    def replace_all(self, records: List[T]) -> List[T]:
        records = list(records)
        self._store.save(self.kind, records)
        return records
