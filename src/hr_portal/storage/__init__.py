"""Durable string-keyed storage media used by the serialized store."""

from .file_storage import FileStorage
from .medium import MemoryStorage, StorageMedium
from .mysql_storage import MySQLStorage

__all__ = ["FileStorage", "MemoryStorage", "MySQLStorage", "StorageMedium"]
