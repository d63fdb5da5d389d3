"""Serialized store: typed collections <-> durable JSON text, one key per kind.

The store is purely call/response. It never raises for expected storage
conditions: missing or corrupt text yields the kind's defaults and failed
writes are logged and reported through the return value.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..common.datetime_utils import now_iso
from ..core.constants import DEFAULT_STORAGE_KEY_PREFIX, EXPORT_DATE_FIELD
from ..core.enums import EntityKind
from ..core.exceptions import StorageError
from ..records.codec import RecordDecodeError, decode_list, encode_list, record_id
from ..storage.medium import StorageMedium
from .kinds import KIND_SPECS, KindSpec

logger = logging.getLogger(__name__)

KindLike = Union[EntityKind, str]


@dataclass(frozen=True)
class StorageInfo:
    kind: EntityKind
    size_bytes: int
    item_count: int

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "sizeBytes": self.size_bytes, "itemCount": self.item_count}


class SerializedStore:
    def __init__(
        self,
        medium: StorageMedium,
        *,
        key_prefix: str = DEFAULT_STORAGE_KEY_PREFIX,
        kinds: Optional[Mapping[EntityKind, KindSpec]] = None,
    ):
        self._medium = medium
        self._prefix = key_prefix
        self._kinds: Dict[EntityKind, KindSpec] = dict(kinds or KIND_SPECS)

    @property
    def kinds(self) -> List[EntityKind]:
        return list(self._kinds)

    def _spec(self, kind: KindLike) -> KindSpec:
        return self._kinds[EntityKind(kind)]

    def key_for(self, kind: KindLike) -> str:
        return f"{self._prefix}{self._spec(kind).key_suffix}"

    # ------------------------------------------------------------------ save/load
    def save(self, kind: KindLike, records: Sequence[Any]) -> bool:
        """Persist `records` for `kind`. Returns False (and logs) when the write fails."""
        spec = self._spec(kind)
        key = self.key_for(kind)

        ids = [record_id(r) for r in records]
        if len(ids) != len(set(ids)):
            logger.error("Refusing to save %s: duplicate ids in collection", key)
            return False

        try:
            text = json.dumps(encode_list(records), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error("Refusing to save %s: collection is not JSON serializable (%s)", key, e)
            return False

        try:
            self._medium.set_item(key, text)
        except StorageError as e:
            logger.error("Failed to save %s: %s", key, e)
            return False

        logger.debug("Saved %s (%d %s)", key, len(records), spec.kind.value)
        return True

    def load(self, kind: KindLike) -> List[Any]:
        spec = self._spec(kind)
        key = self.key_for(kind)

        try:
            text = self._medium.get_item(key)
        except StorageError as e:
            logger.warning("Failed to read %s, using defaults: %s", key, e)
            return spec.defaults()

        if text is None:
            return spec.defaults()

        try:
            records = self._decode(spec, json.loads(text))
        except (ValueError, TypeError) as e:
            logger.warning("Corrupt data under %s, using defaults: %s", key, e)
            return spec.defaults()

        logger.debug("Loaded %s (%d items)", key, len(records))
        return records

    @staticmethod
    def _decode(spec: KindSpec, data: Any) -> List[Any]:
        records = decode_list(spec.record_type, data)
        ids = [record_id(r) for r in records]
        if len(ids) != len(set(ids)):
            raise RecordDecodeError(f"{spec.kind.value}: duplicate ids")
        return records

    # ------------------------------------------------------------------ snapshot
    def export_all(self) -> str:
        data: Dict[str, Any] = {kind.value: encode_list(self.load(kind)) for kind in self._kinds}
        data[EXPORT_DATE_FIELD] = now_iso()
        return json.dumps(data, ensure_ascii=False, indent=2)

    def import_all(self, snapshot: str) -> bool:
        """Replace every kind present in `snapshot`; all-or-nothing.

        Kinds missing from the document (or set to null) are left untouched.
        Returns False without writing anything when the document is malformed.
        """
        try:
            data = json.loads(snapshot)
        except (TypeError, ValueError) as e:
            logger.error("Import failed: snapshot is not valid JSON (%s)", e)
            return False

        if not isinstance(data, dict):
            logger.error("Import failed: snapshot is not a JSON object")
            return False

        decoded: Dict[EntityKind, List[Any]] = {}
        for kind, spec in self._kinds.items():
            if data.get(kind.value) is None:
                continue
            try:
                decoded[kind] = self._decode(spec, data[kind.value])
            except (ValueError, TypeError) as e:
                logger.error("Import failed: invalid %s (%s)", kind.value, e)
                return False

        previous = {kind: self._read_raw(kind) for kind in decoded}
        written: List[EntityKind] = []
        for kind, records in decoded.items():
            if not self.save(kind, records):
                self._restore(previous, written)
                return False
            written.append(kind)

        logger.info("Import succeeded (%s)", ", ".join(k.value for k in written) or "nothing to import")
        return True

    def _read_raw(self, kind: EntityKind) -> Optional[str]:
        try:
            return self._medium.get_item(self.key_for(kind))
        except StorageError:
            return None

    def _restore(self, previous: Mapping[EntityKind, Optional[str]], written: Sequence[EntityKind]) -> None:
        for kind in written:
            key = self.key_for(kind)
            try:
                if previous[kind] is None:
                    self._medium.remove_item(key)
                else:
                    self._medium.set_item(key, previous[kind])
            except StorageError as e:
                logger.error("Could not roll back %s after failed import: %s", key, e)

    # ------------------------------------------------------------------ maintenance
    def clear_all(self) -> None:
        for kind in self._kinds:
            key = self.key_for(kind)
            try:
                self._medium.remove_item(key)
            except StorageError as e:
                logger.error("Failed to clear %s: %s", key, e)
        logger.info("All persisted collections cleared")

    def info(self) -> List[StorageInfo]:
        out: List[StorageInfo] = []
        for kind in self._kinds:
            text = self._read_raw(kind)
            if text is None:
                out.append(StorageInfo(kind=kind, size_bytes=0, item_count=0))
                continue
            try:
                parsed = json.loads(text)
                count = len(parsed) if isinstance(parsed, list) else 0
            except ValueError:
                count = 0
            out.append(StorageInfo(kind=kind, size_bytes=len(text.encode("utf-8")), item_count=count))
        return out
