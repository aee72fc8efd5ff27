"""
Creates the admin credential, or resets its password and re-enables it.

Usage:
    python -m scripts.seed_admin [username] [password]
"""
import sys

from hr_api.core.security import get_password_hash
from hr_api.database import SessionLocal, init_db
from hr_api.models.user import User


def upsert_admin(db, username: str, password: str) -> bool:
    """Returns True when the account was created, False when it was reset."""
    admin = db.query(User).filter(User.username == username).first()

    if not admin:
        db.add(User(
            username=username,
            hashed_password=get_password_hash(password),
            role=User.role_label("ADMIN"),
            enabled=True
        ))
        db.commit()
        return True

    admin.hashed_password = get_password_hash(password)
    admin.role = User.role_label("ADMIN")
    admin.enabled = True
    db.commit()
    return False


def seed(username: str = "admin", password: str = "password123"):
    init_db()
    db = SessionLocal()
    try:
        if upsert_admin(db, username, password):
            print(f"Admin user '{username}' created")
        else:
            print(f"Admin user '{username}' already exists. Password reset and account enabled")
    finally:
        db.close()


if __name__ == "__main__":
    seed(*sys.argv[1:3])
