"""Example: use the persistence and service layers without Flask.

Repositories are synchronous; user-management services are async and come
from the selector, which falls back to the local substitute when MySQL is
unreachable.
"""

import asyncio

from hr_portal.container import build_container
from hr_portal.core.enums import Capability


async def show_users(container):
    service = await container.selector.get_service(Capability.USER)
    users = await service.list()
    print(container.selector.get_status().as_dict())
    for user in users:
        print(f"- {user.full_name} <{user.email}> ({user.role.value})")


def main():
    container = build_container(db_config=None, storage_backend="memory", local_latency=0.0)

    objectives = container.objectives.set_progress("1", 100)
    print([(o.title, o.status.value, o.progress) for o in objectives])

    print([v.employee_name for v in container.vacations.pending()])

    asyncio.run(show_users(container))


if __name__ == "__main__":
    main()
