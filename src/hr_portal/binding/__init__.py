from .data_management import DataManagement
from .stored_collection import StoredCollection

__all__ = ["DataManagement", "StoredCollection"]
