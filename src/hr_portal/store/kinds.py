from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from ..core.enums import EntityKind
from ..employees.model import Employee
from ..objectives.model import Objective
from ..trainings.model import Training
from ..users.model import User
from ..vacations.model import VacationRequest
from . import defaults


@dataclass(frozen=True)
class KindSpec:
    """Everything the store needs to persist one kind."""

    kind: EntityKind
    record_type: type
    defaults: Callable[[], List[Any]]

    @property
    def key_suffix(self) -> str:
        return self.kind.value


KIND_SPECS: Dict[EntityKind, KindSpec] = {
    EntityKind.EMPLOYEES: KindSpec(EntityKind.EMPLOYEES, Employee, defaults.default_employees),
    EntityKind.OBJECTIVES: KindSpec(EntityKind.OBJECTIVES, Objective, defaults.default_objectives),
    EntityKind.TRAININGS: KindSpec(EntityKind.TRAININGS, Training, defaults.default_trainings),
    EntityKind.VACATIONS: KindSpec(EntityKind.VACATIONS, VacationRequest, defaults.default_vacations),
    EntityKind.USERS: KindSpec(EntityKind.USERS, User, defaults.default_users),
}
