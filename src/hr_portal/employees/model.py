from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no storage access).
    """

    email: str
    first_name: str
    last_name: str
    role: Role
    department: str
    position: str
    hire_date: str
    is_active: bool = True
    id: str = ""
    avatar: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    salary: Optional[float] = None
    manager_id: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    performance: Optional[float] = None
    vacation_days: Optional[int] = None
    used_vacation_days: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
