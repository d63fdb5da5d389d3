from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.enums import TrainingStatus


@dataclass(frozen=True)
class Training:
    title: str
    description: str
    instructor: str
    duration: float
    start_date: str
    end_date: str
    status: TrainingStatus
    category: str
    id: str = ""
    location: Optional[str] = None
    max_participants: Optional[int] = None
    current_participants: Optional[int] = None
    progress: Optional[int] = None
    cost: Optional[float] = None
    participants: List[str] = field(default_factory=list)

    @property
    def enrolled_count(self) -> int:
        # currentParticipants and the named participants list are kept independently.
        return max(self.current_participants or 0, len(self.participants))

    @property
    def is_full(self) -> bool:
        if self.max_participants is None:
            return False
        return self.enrolled_count >= self.max_participants
