from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol

from ..common.validators import require_email, require_non_empty
from ..core.constants import DEFAULT_DEMO_PASSWORD
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import User


class UserServiceContract(Protocol):
    """User-management capability.

    Both the remote (MySQL) and the local (in-memory) implementations satisfy
    this interface; callers obtain one from the ServiceSelector and cannot
    tell them apart. Unknown ids raise NotFoundError.
    """

    async def create(self, data: Mapping[str, Any]) -> User:
        raise NotImplementedError

    async def list(self) -> List[User]:
        raise NotImplementedError

    async def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    async def update(self, changes: Mapping[str, Any]) -> User:
        """`changes` must carry the target `id`; other keys are merged."""
        raise NotImplementedError

    async def delete(self, user_id: str) -> None:
        raise NotImplementedError

    async def by_role(self, role: Role) -> List[User]:
        raise NotImplementedError

    async def by_department(self, department: str) -> List[User]:
        raise NotImplementedError

    async def toggle_status(self, user_id: str, is_active: bool) -> None:
        raise NotImplementedError

    async def authenticate(self, email: str, password: str) -> User:
        raise NotImplementedError


@dataclass(frozen=True)
class NewUser:
    first_name: str
    last_name: str
    email: str
    role: Role
    department: str
    position: str
    password: str
    phone: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[str] = None

    def to_user(self, *, user_id: str, hire_date: str) -> User:
        return User(
            id=user_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            role=self.role,
            department=self.department,
            position=self.position,
            hire_date=hire_date,
            is_active=True,
            phone=self.phone,
            address=self.address,
            birth_date=self.birth_date,
            created_at=hire_date,
        )


def _get(data: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if data.get(name) not in (None, ""):
            return data[name]
    return None


def parse_role(value: Any) -> Role:
    try:
        return Role(value)
    except ValueError:
        raise ValidationError(f"Unknown role: {value!r}")


def parse_new_user(data: Mapping[str, Any]) -> NewUser:
    """Validate creation data (camelCase or snake_case keys).

    Accounts created without a password get the temporary demo password.
    """
    role = parse_role(_get(data, "role") or Role.EMPLOYEE.value)

    return NewUser(
        first_name=require_non_empty(_get(data, "firstName", "first_name"), "First name"),
        last_name=require_non_empty(_get(data, "lastName", "last_name"), "Last name"),
        email=require_email(_get(data, "email")),
        role=role,
        department=require_non_empty(_get(data, "department"), "Department"),
        position=require_non_empty(_get(data, "position"), "Position"),
        password=str(_get(data, "password", "temporaryPassword", "temporary_password") or DEFAULT_DEMO_PASSWORD),
        phone=_get(data, "phone"),
        address=_get(data, "address"),
        birth_date=_get(data, "birthDate", "birth_date"),
    )


def require_target_id(changes: Mapping[str, Any]) -> str:
    user_id = changes.get("id")
    if not user_id:
        raise ValidationError("Update requires the user id")
    return str(user_id)


def same_email(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()
