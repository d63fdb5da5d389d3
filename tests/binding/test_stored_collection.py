from __future__ import annotations

import asyncio
import dataclasses
import json

from hr_portal.binding.data_management import DataManagement
from hr_portal.binding.stored_collection import StoredCollection
from hr_portal.core.enums import EntityKind
from hr_portal.objectives.repository import ObjectiveRepository
from hr_portal.store.defaults import default_objectives


class AsyncFacade:
    """Wraps a synchronous repository behind coroutine methods."""

    def __init__(self, repo):
        self._repo = repo
        self.calls = 0

    async def _call(self, fn, *args):
        self.calls += 1
        await asyncio.sleep(0)
        return fn(*args)

    async def list(self):
        return await self._call(self._repo.list)

    async def add(self, record):
        return await self._call(self._repo.add, record)

    async def update(self, item_id, changes):
        return await self._call(self._repo.update, item_id, changes)

    async def delete(self, item_id):
        return await self._call(self._repo.delete, item_id)

    async def replace_all(self, records):
        return await self._call(self._repo.replace_all, records)


def test_loading_until_first_load(store):
    collection = StoredCollection(ObjectiveRepository(store))
    assert collection.loading is True
    assert collection.data == []

    asyncio.run(collection.activate())

    assert collection.loading is False
    assert [o.id for o in collection.data] == ["1", "2"]


def test_mutations_publish_facade_result(store):
    repo = ObjectiveRepository(store)
    collection = StoredCollection(repo)
    seen = []
    collection.subscribe(lambda records: seen.append([r.id for r in records]))

    async def run():
        await collection.activate()
        await collection.add_item(dataclasses.replace(default_objectives()[0], id="9"))
        await collection.update_item("9", {"progress": 10})
        await collection.delete_item("1")

    asyncio.run(run())

    assert seen == [["1", "2"], ["1", "2", "9"], ["1", "2", "9"], ["2", "9"]]
    assert collection.data == repo.list()


def test_async_facade_is_transparent(store):
    facade = AsyncFacade(ObjectiveRepository(store))
    collection = StoredCollection(facade)

    async def run():
        await collection.activate()
        return await collection.set_data([])

    assert asyncio.run(run()) == []
    assert facade.calls == 2
    assert store.load(EntityKind.OBJECTIVES) == []


def test_unsubscribe_stops_notifications(store):
    collection = StoredCollection(ObjectiveRepository(store))
    seen = []
    unsubscribe = collection.subscribe(seen.append)

    asyncio.run(collection.refresh())
    unsubscribe()
    unsubscribe()
    asyncio.run(collection.refresh())

    assert len(seen) == 1


def test_data_management_backup_and_restore(store, tmp_path):
    dm = DataManagement(store)
    ObjectiveRepository(store).delete("1")

    path = dm.export_to_file(tmp_path)
    assert path.name.startswith("teal-backup-")
    assert [o["id"] for o in json.loads(path.read_text(encoding="utf-8"))["objectives"]] == ["2"]

    dm.clear_all()
    assert len(store.load(EntityKind.OBJECTIVES)) == 2

    assert dm.import_from_file(path) is True
    assert [o.id for o in store.load(EntityKind.OBJECTIVES)] == ["2"]
    assert dm.import_from_file(tmp_path / "missing.json") is False
    assert {i.kind for i in dm.storage_info()} == set(EntityKind)
