from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .binding.data_management import DataManagement
from .core.constants import DEFAULT_LOCAL_SERVICE_LATENCY, DEFAULT_STORAGE_KEY_PREFIX
from .core.enums import Capability, EntityKind
from .database.connection import DBConfig, DatabaseConnection
from .employees.repository import EmployeeRepository
from .objectives.repository import ObjectiveRepository
from .repositories.entity_repository import EntityRepository
from .services.selector import ServiceSelector
from .storage.file_storage import FileStorage
from .storage.medium import MemoryStorage, StorageMedium
from .storage.mysql_storage import MySQLStorage
from .store.serialized_store import SerializedStore
from .trainings.repository import TrainingRepository
from .users.local_service import LocalUserService
from .users.mysql_user_repository import MySQLUserRepository
from .users.remote_service import RemoteUserService
from .users.repository import UserRepository
from .vacations.repository import VacationRepository


@dataclass(frozen=True)
class Container:
    store: SerializedStore

    employees: EmployeeRepository
    objectives: ObjectiveRepository
    trainings: TrainingRepository
    vacations: VacationRepository
    users: UserRepository

    data_management: DataManagement

    local_user_service: LocalUserService
    remote_user_service: Optional[RemoteUserService]
    selector: ServiceSelector

    def repository_for(self, kind: EntityKind | str) -> EntityRepository:
        repos: Dict[EntityKind, EntityRepository] = {
            EntityKind.EMPLOYEES: self.employees,
            EntityKind.OBJECTIVES: self.objectives,
            EntityKind.TRAININGS: self.trainings,
            EntityKind.VACATIONS: self.vacations,
            EntityKind.USERS: self.users,
        }
        return repos[EntityKind(kind)]


def build_medium(
    backend: str,
    *,
    storage_dir: str = "",
    conn: Optional[DatabaseConnection] = None,
) -> StorageMedium:
    backend = (backend or "memory").lower()
    if backend == "file":
        if not storage_dir:
            raise ValueError("STORAGE_DIR must be set for the file storage backend")
        return FileStorage(storage_dir)
    if backend == "mysql":
        if conn is None:
            raise ValueError("DB_CONFIG must be set for the mysql storage backend")
        return MySQLStorage(conn)
    if backend == "memory":
        return MemoryStorage()
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    db_config: Optional[dict],
    storage_backend: str = "memory",
    storage_dir: str = "",
    key_prefix: str = DEFAULT_STORAGE_KEY_PREFIX,
    local_latency: float = DEFAULT_LOCAL_SERVICE_LATENCY,
    force_local: bool = False,
    medium: Optional[StorageMedium] = None,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)) if db_config else None

    store = SerializedStore(
        medium or build_medium(storage_backend, storage_dir=storage_dir, conn=conn),
        key_prefix=key_prefix,
    )

    local_user_service = LocalUserService(latency=local_latency)
    remote_user_service = RemoteUserService(MySQLUserRepository(conn)) if conn else None

    selector = ServiceSelector(probe=remote_user_service.list if remote_user_service else None)
    selector.register(Capability.USER, local=local_user_service, remote=remote_user_service)
    if force_local:
        selector.force_local()

    return Container(
        store=store,
        employees=EmployeeRepository(store),
        objectives=ObjectiveRepository(store),
        trainings=TrainingRepository(store),
        vacations=VacationRepository(store),
        users=UserRepository(store),
        data_management=DataManagement(store),
        local_user_service=local_user_service,
        remote_user_service=remote_user_service,
        selector=selector,
    )
