from __future__ import annotations

import asyncio
import uuid
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_iso
from ..core.constants import DEFAULT_DEMO_PASSWORD, DEFAULT_LOCAL_SERVICE_LATENCY
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateEmailError, NotFoundError
from ..records.codec import apply_changes
from .model import User
from .seed import demo_users
from .service_contract import parse_new_user, parse_role, require_target_id, same_email


@lru_cache(maxsize=None)
def _demo_password_hash() -> str:
    return generate_password_hash(DEFAULT_DEMO_PASSWORD)


class LocalUserService:
    """In-memory stand-in for the remote user service.

    Every call sleeps `latency` seconds to mimic a network round trip.
    State lives only in this instance; it is not written to the serialized
    store and is lost on restart.
    """

    def __init__(
        self,
        *,
        latency: float = DEFAULT_LOCAL_SERVICE_LATENCY,
        users: Optional[List[User]] = None,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self._latency = max(0.0, float(latency))
        self._users: List[User] = list(demo_users() if users is None else users)
        self._password_hashes: Dict[str, str] = {}
        self._id_factory = id_factory

    async def _delay(self) -> None:
        await asyncio.sleep(self._latency)

    def _index_of(self, user_id: str) -> int:
        for i, user in enumerate(self._users):
            if user.id == str(user_id):
                return i
        raise NotFoundError(f"User {user_id!r} not found")

    def _email_taken(self, email: str, *, excluding: str = "") -> bool:
        return any(same_email(u.email, email) and u.id != excluding for u in self._users)

    async def create(self, data: Mapping[str, Any]) -> User:
        await self._delay()
        new_user = parse_new_user(data)
        if self._email_taken(new_user.email):
            raise DuplicateEmailError(f"Email already in use: {new_user.email}")

        user = new_user.to_user(user_id=self._id_factory(), hire_date=now_iso())
        self._password_hashes[user.id] = generate_password_hash(new_user.password)
        self._users.insert(0, user)
        return user

    async def list(self) -> List[User]:
        await self._delay()
        return list(self._users)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        await self._delay()
        return next((u for u in self._users if u.id == str(user_id)), None)

    async def update(self, changes: Mapping[str, Any]) -> User:
        await self._delay()
        user_id = require_target_id(changes)
        index = self._index_of(user_id)

        updated = apply_changes(self._users[index], changes)
        if self._email_taken(updated.email, excluding=user_id):
            raise DuplicateEmailError(f"Email already in use: {updated.email}")

        self._users[index] = updated
        return updated

    async def delete(self, user_id: str) -> None:
        await self._delay()
        index = self._index_of(user_id)
        del self._users[index]
        self._password_hashes.pop(str(user_id), None)

    async def by_role(self, role: Role) -> List[User]:
        await self._delay()
        role = parse_role(role)
        return [u for u in self._users if u.role == role]

    async def by_department(self, department: str) -> List[User]:
        await self._delay()
        return [u for u in self._users if u.department == department]

    async def toggle_status(self, user_id: str, is_active: bool) -> None:
        await self._delay()
        index = self._index_of(user_id)
        self._users[index] = apply_changes(self._users[index], {"is_active": bool(is_active)})

    async def authenticate(self, email: str, password: str) -> User:
        await self._delay()
        user = next((u for u in self._users if same_email(u.email, email or "")), None)
        if not user or not user.is_active:
            raise AuthenticationError("Invalid credentials")

        password_hash = self._password_hashes.get(user.id) or _demo_password_hash()
        if not check_password_hash(password_hash, password or ""):
            raise AuthenticationError("Invalid credentials")

        user = apply_changes(user, {"last_login": now_iso()})
        self._users[self._index_of(user.id)] = user
        return user
