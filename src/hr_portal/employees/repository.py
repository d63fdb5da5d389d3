from __future__ import annotations

from typing import List

from ..core.enums import EntityKind
from ..repositories.entity_repository import EntityRepository
from .model import Employee


class EmployeeRepository(EntityRepository[Employee]):
    kind = EntityKind.EMPLOYEES

    def by_department(self, department: str) -> List[Employee]:
        return [e for e in self.list() if e.department == department]

    def by_manager(self, manager_id: str) -> List[Employee]:
        return [e for e in self.list() if e.manager_id == str(manager_id)]
