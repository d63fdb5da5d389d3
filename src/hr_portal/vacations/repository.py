from __future__ import annotations

from typing import List, Optional

from ..common.datetime_utils import today_iso
from ..core.enums import EntityKind, RequestStatus
from ..core.exceptions import ValidationError
from ..repositories.entity_repository import EntityRepository
from .model import VacationRequest


class VacationRepository(EntityRepository[VacationRequest]):
    kind = EntityKind.VACATIONS

    def pending(self) -> List[VacationRequest]:
        return [v for v in self.list() if v.status == RequestStatus.PENDING]

    def for_employee(self, employee_id: str) -> List[VacationRequest]:
        return [v for v in self.list() if v.employee_id == str(employee_id)]

    def decide(
        self,
        request_id: str,
        status: RequestStatus,
        *,
        approved_by: str,
        comments: Optional[str] = None,
    ) -> List[VacationRequest]:
        """Approve or reject a pending request; decided requests stay as they are."""
        status = RequestStatus(status)
        if status == RequestStatus.PENDING:
            raise ValidationError("A decision must approve or reject the request")

        current = self.get(request_id)
        if current is None or current.status != RequestStatus.PENDING:
            return self.list()

        changes = {"status": status, "approved_by": str(approved_by), "approved_date": today_iso()}
        if comments:
            changes["comments"] = comments
        return self.update(request_id, changes)
