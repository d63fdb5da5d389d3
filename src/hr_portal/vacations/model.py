from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import RequestStatus, VacationType


@dataclass(frozen=True)
class VacationRequest:
    employee_id: str
    employee_name: str
    start_date: str
    end_date: str
    days: int
    type: VacationType
    reason: str
    status: RequestStatus
    request_date: str
    id: str = ""
    approved_by: Optional[str] = None
    approved_date: Optional[str] = None
    comments: Optional[str] = None
    days_requested: Optional[int] = None
