from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from hr_portal.core.enums import (
    ActivityCategory,
    EntityKind,
    ObjectiveStatus,
    RequestStatus,
    Role,
)
from hr_portal.core.exceptions import DuplicateRecordError, ValidationError
from hr_portal.employees.repository import EmployeeRepository
from hr_portal.objectives.repository import ObjectiveRepository
from hr_portal.store.defaults import default_objectives
from hr_portal.trainings.repository import TrainingRepository
from hr_portal.users.repository import UserRepository
from hr_portal.vacations.repository import VacationRepository


def test_objective_lifecycle_against_seeded_store(store):
    repo = ObjectiveRepository(store)
    assert [o.id for o in store.load(EntityKind.OBJECTIVES)] == ["1", "2"]

    new = dataclasses.replace(default_objectives()[0], id="9", title="X")
    assert [o.id for o in repo.add(new)] == ["1", "2", "9"]
    assert len(repo.list()) == 3

    after = repo.update("9", {"progress": 50})
    updated = next(o for o in after if o.id == "9")
    assert updated == dataclasses.replace(new, progress=50)

    remaining = repo.delete("9")
    assert [o.id for o in remaining] == ["1", "2"]
    assert all(o.id != "9" for o in repo.list())


def test_add_assigns_an_id_when_missing(store):
    repo = ObjectiveRepository(store, id_factory=lambda: "generated")
    record = dataclasses.replace(default_objectives()[0], id="")

    records = repo.add(record)

    assert records[-1].id == "generated"


def test_add_with_existing_id_is_refused(store):
    repo = ObjectiveRepository(store)

    with pytest.raises(DuplicateRecordError):
        repo.add(default_objectives()[0])
    assert len(repo.list()) == 2


def test_update_is_idempotent_and_ignores_unknown_ids(store):
    repo = ObjectiveRepository(store)
    before = repo.list()

    assert repo.update("1", {}) == before
    assert repo.update("404", {"progress": 10}) == before
    assert repo.list() == before


def test_delete_unknown_id_is_a_no_op(store, medium):
    repo = ObjectiveRepository(store)

    assert [o.id for o in repo.delete("404")] == ["1", "2"]
    assert medium.get_item("teal-objectives") is None


def test_deleting_everything_does_not_reseed(store):
    repo = ObjectiveRepository(store)

    repo.delete("1")
    repo.delete("2")

    assert repo.list() == []


def test_set_progress_clamps_and_completes(store):
    repo = ObjectiveRepository(store)

    repo.set_progress("1", 140)
    done = repo.get("1")
    assert done.progress == 100
    assert done.status is ObjectiveStatus.COMPLETED
    assert done.completed_date

    repo.set_progress("2", -5)
    assert repo.get("2").progress == 0
    assert repo.get("2").status is ObjectiveStatus.IN_PROGRESS


def test_employee_queries(store):
    repo = EmployeeRepository(store)

    assert {e.id for e in repo.by_manager("3")} == {"4", "5"}
    assert {e.id for e in repo.by_department("Développement")} == {"3", "4", "5"}
    assert repo.get("1").role is Role.ADMIN
    assert repo.get("404") is None


def test_vacation_decisions(store):
    repo = VacationRepository(store)
    assert [v.id for v in repo.pending()] == ["1"]

    with pytest.raises(ValidationError):
        repo.decide("1", RequestStatus.PENDING, approved_by="2")

    repo.decide("1", RequestStatus.APPROVED, approved_by="2", comments="OK")
    decided = repo.get("1")
    assert decided.status is RequestStatus.APPROVED
    assert decided.approved_by == "2"
    assert decided.comments == "OK"
    assert repo.pending() == []

    # Already decided requests are left alone.
    repo.decide("1", RequestStatus.REJECTED, approved_by="3")
    assert repo.get("1").status is RequestStatus.APPROVED
    assert [v.id for v in repo.for_employee("5")] == ["2"]


def test_training_enrollment(store):
    repo = TrainingRepository(store)
    repo.update("1", {"maxParticipants": 2})

    repo.enroll("1", "4")
    repo.enroll("1", "4")
    repo.enroll("1", "5")
    training = repo.get("1")
    assert training.participants == ["4", "5"]
    assert training.current_participants == 2

    with pytest.raises(ValidationError):
        repo.enroll("1", "3")

    # A stored count counts toward capacity even without named participants.
    repo.update("2", {"maxParticipants": 2, "currentParticipants": 2})
    with pytest.raises(ValidationError):
        repo.enroll("2", "9")
    assert repo.get("2").current_participants == 2
    assert repo.get("2").participants == []


def test_enrollment_increments_the_stored_count(store):
    repo = TrainingRepository(store)
    repo.update("1", {"currentParticipants": 12, "participants": ["3", "4", "5"]})

    repo.enroll("1", "2")

    training = repo.get("1")
    assert training.current_participants == 13
    assert training.participants == ["3", "4", "5", "2"]


def test_log_activity_prepends_entries(store):
    repo = UserRepository(store)

    repo.log_activity("4", "login", "Signed in", ActivityCategory.LOGIN)
    repo.log_activity("4", "profile_update", "Changed phone", ActivityCategory.PROFILE, {"field": "phone"})

    history = repo.activities_for("4")
    assert [a.action for a in history] == ["profile_update", "login"]
    assert history[0].id.startswith("act_")
    assert history[0].metadata == {"field": "phone"}
    assert repo.get("4").last_activity == history[0].timestamp
    assert repo.activities_for("404") == []


def test_log_activity_with_unserializable_metadata_keeps_stored_history(store):
    repo = UserRepository(store)
    repo.log_activity("4", "login", "Signed in", ActivityCategory.LOGIN)

    repo.log_activity("4", "export", "Exported report", ActivityCategory.DOCUMENT, {"at": datetime(2024, 1, 1)})

    assert [a.action for a in repo.activities_for("4")] == ["login"]
