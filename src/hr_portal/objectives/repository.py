from __future__ import annotations

from typing import List

from ..common.datetime_utils import today_iso
from ..common.validators import clamp_percent
from ..core.enums import EntityKind, ObjectiveStatus
from ..repositories.entity_repository import EntityRepository
from .model import Objective


class ObjectiveRepository(EntityRepository[Objective]):
    kind = EntityKind.OBJECTIVES

    def for_employee(self, employee_id: str) -> List[Objective]:
        return [o for o in self.list() if o.employee_id == str(employee_id)]

    def set_progress(self, objective_id: str, progress: float) -> List[Objective]:
        """Record progress (0-100); reaching 100 completes the objective."""
        value = clamp_percent(progress)
        changes = {"progress": value}
        if value == 100:
            changes.update(status=ObjectiveStatus.COMPLETED, completed_date=today_iso())
        return self.update(objective_id, changes)
