from __future__ import annotations

import dataclasses
import json
from datetime import datetime

import pytest

from hr_portal.core.enums import ActivityCategory, EntityKind, ObjectiveStatus
from hr_portal.records.codec import to_json_dict
from hr_portal.storage.medium import MemoryStorage
from hr_portal.store.defaults import default_employees, default_objectives, default_trainings
from hr_portal.store.serialized_store import SerializedStore
from hr_portal.users.model import ActivityLog
from hr_portal.users.repository import UserRepository


def _ids(records):
    return sorted(r.id for r in records)


def test_keys_are_namespaced_per_kind(store):
    assert store.key_for(EntityKind.EMPLOYEES) == "teal-employees"
    assert store.key_for("vacations") == "teal-vacations"
    assert len({store.key_for(k) for k in store.kinds}) == 5


def test_load_returns_defaults_when_nothing_persisted(store):
    assert store.load(EntityKind.OBJECTIVES) == default_objectives()
    assert store.load(EntityKind.EMPLOYEES) == default_employees()


def test_save_then_load_round_trips(store):
    records = list(reversed(default_trainings()))
    assert store.save(EntityKind.TRAININGS, records) is True

    loaded = store.load(EntityKind.TRAININGS)
    assert sorted(loaded, key=lambda r: r.id) == sorted(records, key=lambda r: r.id)


def test_persisted_text_uses_camel_case_json_array(store, medium):
    store.save(EntityKind.OBJECTIVES, default_objectives()[:1])

    data = json.loads(medium.get_item("teal-objectives"))
    assert isinstance(data, list)
    assert data[0]["id"] == "1"
    assert data[0]["employeeId"] == "4"
    assert data[0]["status"] == "in_progress"
    assert "completedDate" not in data[0]


@pytest.mark.parametrize("text", ["{not json", '{"a": 1}', '[{"id": "1"}]', "[1, 2]"])
def test_corrupt_text_falls_back_to_defaults(medium, store, text):
    medium.set_item("teal-objectives", text)

    assert store.load(EntityKind.OBJECTIVES) == default_objectives()


def test_explicitly_saved_empty_collection_stays_empty(store):
    store.save(EntityKind.VACATIONS, [])

    assert store.load(EntityKind.VACATIONS) == []


def test_save_refuses_duplicate_ids(store, medium):
    dup = default_objectives()[0]

    assert store.save(EntityKind.OBJECTIVES, [dup, dup]) is False
    assert medium.get_item("teal-objectives") is None


def test_unserializable_values_are_not_saved(store, medium):
    users = UserRepository(store).list()
    entry = ActivityLog(
        user_id="1",
        action="login",
        description="Signed in",
        timestamp="2024-01-01T00:00:00.000Z",
        category=ActivityCategory.LOGIN,
        metadata={"at": datetime(2024, 1, 1)},
    )
    broken = [dataclasses.replace(users[0], activity_history=[entry]), *users[1:]]

    assert store.save(EntityKind.USERS, broken) is False
    assert medium.get_item("teal-users") is None


def test_failed_write_keeps_previous_persisted_state():
    medium = MemoryStorage(quota_bytes=4096)
    store = SerializedStore(medium)
    assert store.save(EntityKind.OBJECTIVES, default_objectives()[:1]) is True
    before = medium.get_item("teal-objectives")

    big = [
        dataclasses.replace(o, id=str(i), description="x" * 500)
        for i, o in enumerate(default_objectives() * 10)
    ]
    assert store.save(EntityKind.OBJECTIVES, big) is False
    assert medium.get_item("teal-objectives") == before


def test_export_contains_every_kind_and_date(store):
    snapshot = json.loads(store.export_all())

    assert set(snapshot) == {"employees", "objectives", "trainings", "vacations", "users", "exportDate"}
    assert snapshot["objectives"] == [to_json_dict(o) for o in default_objectives()]
    assert snapshot["exportDate"].endswith("Z")


def test_import_of_export_is_a_no_op(store):
    store.save(EntityKind.OBJECTIVES, default_objectives()[:1])
    before = {k: store.load(k) for k in store.kinds}

    assert store.import_all(store.export_all()) is True
    assert {k: store.load(k) for k in store.kinds} == before


def test_import_only_touches_present_kinds(store):
    store.save(EntityKind.TRAININGS, [])
    objective = to_json_dict(default_objectives()[1])

    assert store.import_all(json.dumps({"objectives": [objective]})) is True

    assert _ids(store.load(EntityKind.OBJECTIVES)) == ["2"]
    assert store.load(EntityKind.TRAININGS) == []


@pytest.mark.parametrize(
    "snapshot",
    [
        "not json at all",
        "[]",
        json.dumps({"objectives": "oops"}),
        json.dumps({"employees": [], "objectives": [{"id": "1"}]}),
    ],
)
def test_malformed_import_returns_false_and_changes_nothing(store, medium, snapshot):
    store.save(EntityKind.EMPLOYEES, default_employees()[:2])
    before = dict((k, medium.get_item(k)) for k in medium.keys())

    assert store.import_all(snapshot) is False
    assert dict((k, medium.get_item(k)) for k in medium.keys()) == before


def test_import_rolls_back_written_kinds_when_a_save_fails():
    medium = MemoryStorage(quota_bytes=6000)
    store = SerializedStore(medium)
    store.save(EntityKind.EMPLOYEES, default_employees()[:1])
    before = medium.get_item("teal-employees")

    huge = [
        {**to_json_dict(o), "id": str(i), "description": "y" * 800}
        for i, o in enumerate(default_objectives() * 5)
    ]
    snapshot = json.dumps({"employees": [to_json_dict(e) for e in default_employees()], "objectives": huge})

    assert store.import_all(snapshot) is False
    assert medium.get_item("teal-employees") == before
    assert medium.get_item("teal-objectives") is None


def test_clear_all_removes_every_key(store, medium):
    for kind in store.kinds:
        store.save(kind, [])

    store.clear_all()

    assert list(medium.keys()) == []
    assert store.load(EntityKind.OBJECTIVES) == default_objectives()


def test_info_reports_size_and_count(store, medium):
    store.save(EntityKind.OBJECTIVES, default_objectives())

    info = {i.kind: i for i in store.info()}

    assert info[EntityKind.OBJECTIVES].item_count == 2
    assert info[EntityKind.OBJECTIVES].size_bytes == len(medium.get_item("teal-objectives").encode("utf-8"))
    assert info[EntityKind.USERS].size_bytes == 0
    assert info[EntityKind.USERS].item_count == 0
    assert info[EntityKind.OBJECTIVES].as_dict()["itemCount"] == 2


def test_completed_status_survives_round_trip(store):
    done = dataclasses.replace(
        default_objectives()[0], status=ObjectiveStatus.COMPLETED, completed_date="2024-03-01"
    )
    store.save(EntityKind.OBJECTIVES, [done])

    assert store.load(EntityKind.OBJECTIVES) == [done]
