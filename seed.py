import logging

from models import Role
from stores.tasks import TaskStore
from stores.users import UserStore

logger = logging.getLogger(__name__)

SEED_USERS = [
    {"email": "admin@test.com", "first_name": "Admin", "role": Role.ADMIN,
     "task": ("Admin Task", "Admin only task")},
    {"email": "user@test.com", "first_name": "User", "role": Role.USER,
     "task": ("User Task", "Regular user task")},
]


def seed_defaults(users: UserStore, tasks: TaskStore, password: str) -> int:
    """
    Create the default admin and user accounts with one task each

    Accounts whose email already exists are left alone. Returns the number
    of accounts created.
    """
    created = 0
    for entry in SEED_USERS:
        if users.find_by_email(entry["email"]):
            continue
        user = users.register(entry["email"], password, entry["first_name"], entry["role"])
        title, description = entry["task"]
        tasks.create(user.id, title, description)
        created += 1

    logger.info(f"Seeded {created} default account(s)")
    return created
