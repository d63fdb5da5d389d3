from __future__ import annotations

import asyncio
import time

import pytest

from hr_portal.core.enums import Role
from hr_portal.core.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from hr_portal.users.local_service import LocalUserService

NEW_USER = {
    "firstName": "Nora",
    "lastName": "Idrissi",
    "email": "nora.idrissi@teal-tech.com",
    "role": "manager",
    "department": "Design",
    "position": "Lead Designer",
    "password": "s3cret!",
}


def _service(**kwargs) -> LocalUserService:
    return LocalUserService(latency=0.0, **kwargs)


def test_every_call_waits_for_latency():
    service = LocalUserService(latency=0.05)

    started = time.perf_counter()
    asyncio.run(service.list())

    assert time.perf_counter() - started >= 0.045


def test_seeded_with_demo_accounts():
    users = asyncio.run(_service().list())

    assert [u.id for u in users] == ["1", "2", "3", "4", "5", "6"]


def test_create_inserts_first_and_is_visible():
    service = _service(id_factory=lambda: "n1")

    async def run():
        created = await service.create(NEW_USER)
        return created, await service.list(), await service.get_by_id("n1")

    created, users, fetched = asyncio.run(run())

    assert created.id == "n1"
    assert created.role is Role.MANAGER
    assert created.is_active is True
    assert users[0] == created
    assert fetched == created


def test_create_rejects_duplicate_email_case_insensitive():
    service = _service()

    with pytest.raises(DuplicateEmailError):
        asyncio.run(service.create({**NEW_USER, "email": "MERYEM.hamidi@teal-tech.com"}))


def test_create_validates_input():
    service = _service()

    with pytest.raises(ValidationError):
        asyncio.run(service.create({**NEW_USER, "email": "not-an-email"}))
    with pytest.raises(ValidationError):
        asyncio.run(service.create({**NEW_USER, "role": "ceo"}))


def test_update_merges_fields_and_requires_known_id():
    service = _service()

    updated = asyncio.run(service.update({"id": "4", "position": "Lead UX"}))
    assert updated.position == "Lead UX"
    assert updated.first_name == "Youssef"

    with pytest.raises(NotFoundError):
        asyncio.run(service.update({"id": "404", "position": "x"}))
    with pytest.raises(ValidationError):
        asyncio.run(service.update({"position": "x"}))
    with pytest.raises(DuplicateEmailError):
        asyncio.run(service.update({"id": "4", "email": "simo.hamidi@teal-tech.com"}))


def test_delete_and_toggle_raise_for_unknown_ids():
    service = _service()

    asyncio.run(service.delete("6"))
    assert asyncio.run(service.get_by_id("6")) is None

    with pytest.raises(NotFoundError):
        asyncio.run(service.delete("6"))
    with pytest.raises(NotFoundError):
        asyncio.run(service.toggle_status("404", False))


def test_filters():
    service = _service()

    assert {u.id for u in asyncio.run(service.by_role(Role.HR))} == {"2", "3"}
    assert {u.id for u in asyncio.run(service.by_department("Développement"))} == {"3", "5", "6"}


def test_authenticate_with_demo_and_custom_passwords():
    service = _service()

    user = asyncio.run(service.authenticate("meryem.hamidi@teal-tech.com", "Admin123"))
    assert user.id == "1"
    assert user.last_login

    created = asyncio.run(service.create(NEW_USER))
    assert asyncio.run(service.authenticate(NEW_USER["email"], "s3cret!")).id == created.id

    with pytest.raises(AuthenticationError):
        asyncio.run(service.authenticate(NEW_USER["email"], "Admin123"))


def test_inactive_users_cannot_authenticate():
    service = _service()
    asyncio.run(service.toggle_status("4", False))

    with pytest.raises(AuthenticationError):
        asyncio.run(service.authenticate("youssef.hamidi@teal-tech.com", "Admin123"))


def test_unknown_role_filter_is_a_validation_error():
    with pytest.raises(ValidationError):
        asyncio.run(_service().by_role("ceo"))
