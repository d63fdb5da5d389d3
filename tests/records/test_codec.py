from __future__ import annotations

import pytest

from hr_portal.core.enums import ActivityCategory, RequestStatus, Role
from hr_portal.core.exceptions import ValidationError
from hr_portal.records.codec import (
    RecordDecodeError,
    apply_changes,
    camel,
    from_json_dict,
    snake,
    to_json_dict,
)
from hr_portal.store.defaults import default_trainings, default_vacations
from hr_portal.users.model import ActivityLog, User
from hr_portal.vacations.model import VacationRequest


def test_name_conversion():
    assert camel("employee_id") == "employeeId"
    assert camel("id") == "id"
    assert snake("maxParticipants") == "max_participants"


def test_nested_user_decodes_activity_history():
    data = {
        "id": "u1",
        "email": "a@b.co",
        "firstName": "A",
        "lastName": "B",
        "role": "hr",
        "department": "RH",
        "position": "Lead",
        "hireDate": "2024-01-01",
        "activityHistory": [
            {
                "id": "act_1",
                "userId": "u1",
                "action": "login",
                "description": "Signed in",
                "timestamp": "2024-01-02T00:00:00.000Z",
                "category": "login",
                "metadata": {"ip": "127.0.0.1"},
            }
        ],
        "somethingUnknown": True,
    }

    user = from_json_dict(User, data)

    assert user.role is Role.HR
    assert user.is_active is True
    assert user.activity_history == [
        ActivityLog(
            id="act_1",
            user_id="u1",
            action="login",
            description="Signed in",
            timestamp="2024-01-02T00:00:00.000Z",
            category=ActivityCategory.LOGIN,
            metadata={"ip": "127.0.0.1"},
        )
    ]
    assert to_json_dict(user)["activityHistory"][0]["userId"] == "u1"


def test_encode_puts_id_first_and_omits_unset_optionals():
    encoded = to_json_dict(default_vacations()[0])

    assert list(encoded)[0] == "id"
    assert "approvedBy" not in encoded
    assert encoded["type"] == "vacation"


def test_decode_rejects_wrong_types():
    data = to_json_dict(default_vacations()[0])

    with pytest.raises(RecordDecodeError):
        from_json_dict(VacationRequest, {**data, "days": "five"})
    with pytest.raises(RecordDecodeError):
        from_json_dict(VacationRequest, {**data, "status": "maybe"})
    with pytest.raises(RecordDecodeError):
        from_json_dict(VacationRequest, {k: v for k, v in data.items() if k != "employeeId"})


def test_integral_floats_decode_as_ints():
    data = {**to_json_dict(default_vacations()[0]), "days": 5.0}

    assert from_json_dict(VacationRequest, data).days == 5


def test_apply_changes_merges_only_given_fields():
    original = default_vacations()[0]

    updated = apply_changes(original, {"status": "approved", "approvedBy": "2"})

    assert updated.status is RequestStatus.APPROVED
    assert updated.approved_by == "2"
    assert updated.reason == original.reason
    assert apply_changes(original, {}) is original


def test_apply_changes_never_replaces_identity():
    training = default_trainings()[0]

    assert apply_changes(training, {"id": "other", "title": "T"}).id == training.id


def test_apply_changes_rejects_unknown_fields_and_bad_values():
    training = default_trainings()[0]

    with pytest.raises(ValidationError):
        apply_changes(training, {"nope": 1})
    with pytest.raises(ValidationError):
        apply_changes(training, {"maxParticipants": "ten"})
