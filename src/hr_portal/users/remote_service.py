from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Callable, List, Mapping, Optional, TypeVar

import mysql.connector
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_iso
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DuplicateEmailError, NotFoundError, RemoteServiceError
from ..records.codec import apply_changes
from .model import User
from .mysql_user_repository import MySQLUserRepository
from .service_contract import parse_new_user, parse_role, require_target_id, same_email

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RemoteUserService:
    """User service backed by the MySQL accounts table.

    The driver is blocking, so each repository call runs in a worker thread.
    Driver failures surface as RemoteServiceError, never as raw mysql errors.
    """

    def __init__(self, users: MySQLUserRepository, *, id_factory: Callable[[], str] = lambda: uuid.uuid4().hex):
        self._users = users
        self._id_factory = id_factory

    async def _call(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        try:
            return await asyncio.to_thread(fn, *args, **kwargs)
        except mysql.connector.IntegrityError as e:
            raise DuplicateEmailError("Email already in use") from e
        except mysql.connector.Error as e:
            logger.warning("Remote user service error: %s", e)
            raise RemoteServiceError(f"User service unavailable: {e}") from e

    async def _require(self, user_id: str) -> User:
        user = await self._call(self._users.get_by_id, str(user_id))
        if user is None:
            raise NotFoundError(f"User {user_id!r} not found")
        return user

    async def create(self, data: Mapping[str, Any]) -> User:
        new_user = parse_new_user(data)
        if await self._call(self._users.get_by_email, new_user.email):
            raise DuplicateEmailError(f"Email already in use: {new_user.email}")

        user = new_user.to_user(user_id=self._id_factory(), hire_date=now_iso())
        await self._call(self._users.create_user, user, password_hash=generate_password_hash(new_user.password))
        return user

    async def list(self) -> List[User]:
        return await self._call(self._users.list_users)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return await self._call(self._users.get_by_id, str(user_id))

    async def update(self, changes: Mapping[str, Any]) -> User:
        user_id = require_target_id(changes)
        current = await self._require(user_id)
        updated = apply_changes(current, changes)

        if not same_email(updated.email, current.email):
            other = await self._call(self._users.get_by_email, updated.email)
            if other and other.id != user_id:
                raise DuplicateEmailError(f"Email already in use: {updated.email}")

        await self._call(self._users.save_user, updated)
        return updated

    async def delete(self, user_id: str) -> None:
        if not await self._call(self._users.delete_by_id, str(user_id)):
            raise NotFoundError(f"User {user_id!r} not found")

    async def by_role(self, role: Role) -> List[User]:
        return await self._call(self._users.list_users, role=parse_role(role))

    async def by_department(self, department: str) -> List[User]:
        return await self._call(self._users.list_users, department=department)

    async def toggle_status(self, user_id: str, is_active: bool) -> None:
        await self._require(user_id)
        await self._call(self._users.set_active, str(user_id), is_active=bool(is_active))

    async def authenticate(self, email: str, password: str) -> User:
        user = await self._call(self._users.get_by_email, email or "")
        if not user or not user.is_active:
            raise AuthenticationError("Invalid credentials")

        password_hash = await self._call(self._users.get_password_hash, user.id)
        try:
            ok = check_password_hash(password_hash or "", password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False
        if not ok:
            raise AuthenticationError("Invalid credentials")

        user = apply_changes(user, {"last_login": now_iso()})
        await self._call(self._users.save_user, user)
        return user
