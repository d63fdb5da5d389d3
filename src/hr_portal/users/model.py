from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.enums import ActivityCategory, Role


@dataclass(frozen=True)
class ActivityLog:
    user_id: str
    action: str
    description: str
    timestamp: str
    category: ActivityCategory
    id: str = ""
    metadata: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class NotificationPreferences:
    email: bool = True
    push: bool = True
    sms: bool = False


@dataclass(frozen=True)
class PrivacyPreferences:
    profile_visible: bool = True
    activity_visible: bool = False


@dataclass(frozen=True)
class UserPreferences:
    language: str = "fr"
    theme: str = "light"
    notifications: NotificationPreferences = field(default_factory=NotificationPreferences)
    privacy: PrivacyPreferences = field(default_factory=PrivacyPreferences)


@dataclass(frozen=True)
class User:
    """Domain entity: User (account + profile).

    The activity history is a sub-collection owned by the profile; it is
    persisted together with the user record.
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
    last_login: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    last_activity: Optional[str] = None
    profile_completeness: Optional[int] = None
    activity_history: List[ActivityLog] = field(default_factory=list)
    preferences: Optional[UserPreferences] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
