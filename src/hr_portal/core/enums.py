from __future__ import annotations

from enum import Enum


class EntityKind(str, Enum):
    """Collections managed by the serialized store."""

    EMPLOYEES = "employees"
    OBJECTIVES = "objectives"
    TRAININGS = "trainings"
    VACATIONS = "vacations"
    USERS = "users"


class Role(str, Enum):
    """User role used for permissions and filtering."""

    ADMIN = "admin"
    HR = "hr"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class ObjectiveCategory(str, Enum):
    PERFORMANCE = "performance"
    DEVELOPMENT = "development"
    PROJECT = "project"
    BEHAVIORAL = "behavioral"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ObjectiveStatus(str, Enum):
    NOT_STARTED = "not_started"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class TrainingStatus(str, Enum):
    SCHEDULED = "scheduled"
    AVAILABLE = "available"
    ENROLLED = "enrolled"
    ONGOING = "ongoing"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class VacationType(str, Enum):
    PAID = "paid"
    UNPAID = "unpaid"
    SICK = "sick"
    MATERNITY = "maternity"
    PATERNITY = "paternity"
    VACATION = "vacation"
    PERSONAL = "personal"


class RequestStatus(str, Enum):
    """Leave request approval flow."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ActivityCategory(str, Enum):
    LOGIN = "login"
    PROFILE = "profile"
    VACATION = "vacation"
    TRAINING = "training"
    DOCUMENT = "document"
    PERFORMANCE = "performance"
    SYSTEM = "system"


class Capability(str, Enum):
    """Named capabilities served by either a remote or a local implementation."""

    USER = "user"


class ServiceBackend(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"
