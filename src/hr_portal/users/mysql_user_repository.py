from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User

_COLUMNS = """
    id, email, first_name, last_name, role, department, position, hire_date,
    is_active, phone, address, birth_date, avatar, last_login, created_at
"""


def _iso(value: Any) -> Optional[str]:
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _row_to_user(row: Dict[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        email=row["email"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        role=Role(row["role"]),
        department=row.get("department") or "",
        position=row.get("position") or "",
        hire_date=_iso(row.get("hire_date")) or "",
        is_active=bool(row.get("is_active", True)),
        phone=row.get("phone"),
        address=row.get("address"),
        birth_date=_iso(row.get("birth_date")),
        avatar=row.get("avatar"),
        last_login=_iso(row.get("last_login")),
        created_at=_iso(row.get("created_at")),
    )


class MySQLUserRepository:
    """Accounts table of the remote backend (see database/schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE LOWER(email)=LOWER(%s)", (email,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_password_hash(self, user_id: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT password_hash FROM users WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return row["password_hash"] if row else None

    def list_users(self, *, role: Optional[Role] = None, department: Optional[str] = None) -> List[User]:
        where: List[str] = []
        params: List[Any] = []
        if role is not None:
            where.append("role=%s")
            params.append(Role(role).value)
        if department is not None:
            where.append("department=%s")
            params.append(department)

        sql = f"SELECT {_COLUMNS} FROM users"
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY created_at DESC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_row_to_user(r) for r in fetchall(cur)]

    def create_user(self, user: User, *, password_hash: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(id, email, first_name, last_name, role, department, position,
                                  hire_date, is_active, phone, address, birth_date, password_hash,
                                  created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,NOW(),NOW())
                """,
                (
                    user.id,
                    user.email,
                    user.first_name,
                    user.last_name,
                    user.role.value,
                    user.department,
                    user.position,
                    user.hire_date,
                    1 if user.is_active else 0,
                    user.phone,
                    user.address,
                    user.birth_date,
                    password_hash,
                ),
            )

    def save_user(self, user: User) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE users
                SET email=%s, first_name=%s, last_name=%s, role=%s, department=%s, position=%s,
                    hire_date=%s, is_active=%s, phone=%s, address=%s, birth_date=%s, avatar=%s,
                    last_login=%s, updated_at=NOW()
                WHERE id=%s
                """,
                (
                    user.email,
                    user.first_name,
                    user.last_name,
                    user.role.value,
                    user.department,
                    user.position,
                    user.hire_date,
                    1 if user.is_active else 0,
                    user.phone,
                    user.address,
                    user.birth_date,
                    user.avatar,
                    user.last_login,
                    user.id,
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (user_id,))
            return cur.rowcount > 0

    def set_active(self, user_id: str, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET is_active=%s, updated_at=NOW() WHERE id=%s",
                (1 if is_active else 0, user_id),
            )
            return cur.rowcount > 0
