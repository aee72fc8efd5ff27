import logging

from hr_api.core.config import settings
from hr_api.core.security import get_password_hash
from hr_api.database import SessionLocal
from hr_api.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "password123"

DEFAULT_USERS = [
    ("admin", "ROLE_ADMIN"),
    ("hr_specialist", "ROLE_HR_SPECIALIST"),
    ("manager", "ROLE_MANAGER"),
    ("employee", "ROLE_USER"),
]


def seed_default_users(db) -> int:
    """
    Creates the default credentials when the users table is empty.
    Returns the number of users created.
    """
    if db.query(User).count() > 0:
        return 0

    hashed = get_password_hash(DEFAULT_PASSWORD)
    for username, role in DEFAULT_USERS:
        db.add(User(username=username, hashed_password=hashed, role=role, enabled=True))
    db.commit()
    return len(DEFAULT_USERS)


def init_system_data():
    """
    Checks if the system needs initialization.
    If no credential exists, creates the default users.
    """
    if not settings.seed_default_users:
        logger.info("Default user seeding disabled")
        return

    db = SessionLocal()
    try:
        created = seed_default_users(db)
        if created:
            logger.warning(
                f"Created {created} default users with the shared default password (change immediately)"
            )
        else:
            logger.info("System initialization check: users already present")
    except Exception:
        db.rollback()
        logger.error("Error during system initialization check", exc_info=True)
        raise
    finally:
        db.close()
