from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ObjectiveCategory, ObjectiveStatus, Priority


@dataclass(frozen=True)
class Objective:
    employee_id: str
    employee_name: str
    title: str
    description: str
    category: ObjectiveCategory
    priority: Priority
    status: ObjectiveStatus
    start_date: str
    due_date: str
    progress: int
    manager_id: str
    manager_name: str
    id: str = ""
    completed_date: Optional[str] = None
