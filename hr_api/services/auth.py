"""
Authentication Flow.

Login:     credentials -> enabled user -> password check -> token
Validate:  token -> subject -> enabled user -> expiry check -> identity
Register:  unique username -> hashed credential -> Login
"""
import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from hr_api.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidTokenError,
    ResourceNotFoundError,
    TokenExpiredError,
    UserNotFoundError,
)
from hr_api.core.security import get_password_hash, verify_password
from hr_api.models.user import ROLE_PREFIX, User
from hr_api.services.base import BaseService
from hr_api.services.credential_store import CredentialStore
from hr_api.services.token_service import TokenService


class Permission(str, enum.Enum):
    ADMIN = "ADMIN"
    HR = "HR"
    MANAGER = "MANAGER"
    USER = "USER"


_ROLE_PERMISSIONS = {
    "ADMIN": frozenset({Permission.ADMIN, Permission.USER}),
    "ADMINISTRADOR": frozenset({Permission.ADMIN, Permission.USER}),
    "HR": frozenset({Permission.HR, Permission.USER}),
    "HR_SPECIALIST": frozenset({Permission.HR, Permission.USER}),
    "RECURSOS_HUMANOS": frozenset({Permission.HR, Permission.USER}),
    "MANAGER": frozenset({Permission.MANAGER, Permission.USER}),
    "GERENTE": frozenset({Permission.MANAGER, Permission.USER}),
}
_DEFAULT_PERMISSIONS = frozenset({Permission.USER})


def permissions_for_role(role: Optional[str]) -> FrozenSet[Permission]:
    """Static mapping from a stored role label to permission labels."""
    if not role:
        return _DEFAULT_PERMISSIONS
    name = role.strip().upper()
    if name.startswith(ROLE_PREFIX):
        name = name[len(ROLE_PREFIX):]
    return _ROLE_PERMISSIONS.get(name, _DEFAULT_PERMISSIONS)


@dataclass(frozen=True)
class Identity:
    user_id: UUID
    username: str
    role: str
    permissions: FrozenSet[Permission] = field(default_factory=frozenset)

    @classmethod
    def of(cls, user: User) -> "Identity":
        return cls(
            user_id=user.id,
            username=user.username,
            role=user.role,
            permissions=permissions_for_role(user.role),
        )

    def has_any(self, *required: Permission) -> bool:
        return any(p in self.permissions for p in required)


@dataclass(frozen=True)
class AuthResult:
    token: str
    username: str
    roles: List[str]
    expires_in: int


@dataclass(frozen=True)
class ValidatedToken:
    token: str
    identity: Identity
    expires_at: datetime


class AuthService(BaseService):
    def __init__(self, db: Session, tokens: TokenService):
        super().__init__(db)
        self.tokens = tokens
        self.users = CredentialStore(db)

    def login(self, username: str, password: str) -> AuthResult:
        user = self.users.find_enabled_by_username(username)
        if user is None:
            self._logger.info("Login rejected: unknown or disabled user", extra={"username": username})
            raise UserNotFoundError()
        if not verify_password(password, user.hashed_password):
            self._logger.info("Login rejected: bad password", extra={"username": username})
            raise InvalidCredentialsError()

        identity = Identity.of(user)
        token = self.tokens.issue(user.username, {
            "role": user.role,
            "userId": str(user.id),
            "roles": sorted(f"{ROLE_PREFIX}{p.value}" for p in identity.permissions),
        })
        self.log_info("User logged in", username=user.username)
        return AuthResult(
            token=token,
            username=user.username,
            roles=[user.role],
            expires_in=self.tokens.expires_in_seconds,
        )

    def validate_token(self, token: Optional[str]) -> ValidatedToken:
        if not token or not token.strip():
            raise InvalidTokenError("Token must not be empty")
        token = token.strip()
        subject = self.tokens.verify_subject(token)

        user = self.users.find_enabled_by_username(subject)
        if user is None:
            raise UserNotFoundError()
        if not self.tokens.is_valid(token, user.username):
            raise TokenExpiredError()

        return ValidatedToken(
            token=token,
            identity=Identity.of(user),
            expires_at=self.tokens.expires_at(token),
        )

    def register(self, username: str, password: str, role: str) -> AuthResult:
        if self.users.exists_by_username(username):
            raise DuplicateUsernameError(username)

        user = User(
            username=username,
            hashed_password=get_password_hash(password),
            role=User.role_label(role),
            enabled=True,
        )
        self.users.add(user)
        self.commit()
        self.log_info("User registered", username=username, role=user.role)
        return self.login(username, password)

    def is_username_available(self, username: str) -> bool:
        return not self.users.exists_by_username(username)

    # --- Administration ---

    def list_users_by_role(self, role: str) -> List[User]:
        return self.users.find_enabled_by_role(User.role_label(role))

    def set_enabled(self, user_id: UUID, enabled: bool) -> User:
        user = self._get_user(user_id)
        user.enabled = enabled
        self.commit()
        self.log_info("User enabled flag changed", username=user.username, enabled=enabled)
        return user

    def change_role(self, user_id: UUID, role: str) -> User:
        user = self._get_user(user_id)
        user.role = User.role_label(role)
        self.commit()
        self.log_info("User role changed", username=user.username, role=user.role)
        return user

    def _get_user(self, user_id: UUID) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user
