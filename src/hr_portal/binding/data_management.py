from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..common.datetime_utils import today_iso
from ..core.constants import BACKUP_FILE_PREFIX
from ..store.serialized_store import SerializedStore, StorageInfo

logger = logging.getLogger(__name__)


class DataManagement:
    """Backup, restore and reset helpers for the admin data page."""

    def __init__(self, store: SerializedStore):
        self._store = store

    def backup_filename(self) -> str:
        return f"{BACKUP_FILE_PREFIX}{today_iso()}.json"

    def export_to_file(self, directory: str | Path) -> Path:
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        out_file = out_dir / self.backup_filename()
        out_file.write_text(self._store.export_all(), encoding="utf-8")
        logger.info("Backup written to %s", out_file)
        return out_file

    def import_from_file(self, path: str | Path) -> bool:
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read backup %s: %s", path, e)
            return False
        return self._store.import_all(content)

    def clear_all(self) -> None:
        self._store.clear_all()

    def storage_info(self) -> List[StorageInfo]:
        return self._store.info()
