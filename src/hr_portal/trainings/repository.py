from __future__ import annotations

from typing import List

from ..core.enums import EntityKind
from ..core.exceptions import ValidationError
from ..repositories.entity_repository import EntityRepository
from .model import Training


class TrainingRepository(EntityRepository[Training]):
    kind = EntityKind.TRAININGS

    def enroll(self, training_id: str, employee_id: str) -> List[Training]:
        training = self.get(training_id)
        if training is None or str(employee_id) in training.participants:
            return self.list()
        if training.is_full:
            raise ValidationError(f"Training {training.title!r} is full")

        participants = [*training.participants, str(employee_id)]
        return self.update(
            training_id,
            {"participants": participants, "current_participants": training.enrolled_count + 1},
        )
