"""
Credential model used by the authentication flow.
"""
import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Uuid
from sqlalchemy.sql import func
from hr_api.database import Base

ROLE_PREFIX = "ROLE_"


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(50), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)

    # Single free-form role label, stored with the ROLE_ prefix (e.g. "ROLE_ADMIN")
    role = Column(String(50), index=True, nullable=False)

    enabled = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"

    @staticmethod
    def role_label(role: str) -> str:
        """Normalize a bare role name ("admin") to its stored label ("ROLE_ADMIN")."""
        role = role.strip().upper()
        return role if role.startswith(ROLE_PREFIX) else f"{ROLE_PREFIX}{role}"
