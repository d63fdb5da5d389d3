from .serialized_store import SerializedStore, StorageInfo

__all__ = ["SerializedStore", "StorageInfo"]
