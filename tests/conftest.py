from __future__ import annotations

import pytest

from hr_portal.storage.medium import MemoryStorage
from hr_portal.store.serialized_store import SerializedStore


@pytest.fixture
def medium() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(medium: MemoryStorage) -> SerializedStore:
    return SerializedStore(medium)
