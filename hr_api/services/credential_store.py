from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from hr_api.models.user import User


class CredentialStore:
    """Lookup and persistence of credentials by username."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def find_enabled_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(
            User.username == username,
            User.enabled == True  # noqa: E712
        ).first()

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        return self.db.get(User, user_id)

    def exists_by_username(self, username: str) -> bool:
        return self.db.query(User.id).filter(User.username == username).first() is not None

    def find_enabled_by_role(self, role_label: str) -> List[User]:
        return self.db.query(User).filter(
            User.role == role_label,
            User.enabled == True  # noqa: E712
        ).order_by(User.username).all()

    def add(self, user: User) -> User:
        self.db.add(user)
        self.db.flush()
        return user
