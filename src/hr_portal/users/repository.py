from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import now_iso
from ..core.enums import ActivityCategory, EntityKind
from ..repositories.entity_repository import EntityRepository
from .model import ActivityLog, User


class UserRepository(EntityRepository[User]):
    """Persisted user profiles, including each profile's activity history."""

    kind = EntityKind.USERS

    def log_activity(
        self,
        user_id: str,
        action: str,
        description: str,
        category: ActivityCategory,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> List[User]:
        user = self.get(user_id)
        if user is None:
            return self.list()

        timestamp = now_iso()
        entry = ActivityLog(
            id=f"act_{uuid.uuid4().hex[:12]}",
            user_id=user.id,
            action=action,
            description=description,
            timestamp=timestamp,
            category=ActivityCategory(category),
            metadata=metadata,
        )
        return self.update(
            user.id,
            {"activity_history": [entry, *user.activity_history], "last_activity": timestamp},
        )

    def activities_for(self, user_id: str) -> List[ActivityLog]:
        user = self.get(user_id)
        return list(user.activity_history) if user else []
