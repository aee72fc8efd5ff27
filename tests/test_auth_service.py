import pytest
from datetime import datetime, timedelta, timezone

from hr_api.core.config import DEV_JWT_SECRET
from hr_api.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    UserNotFoundError,
)
from hr_api.core.security import get_password_hash, verify_password
from hr_api.models.user import User
from hr_api.services.auth import AuthService, Permission, permissions_for_role
from hr_api.services.token_service import TokenService


@pytest.fixture
def auth(db_session, token_service):
    return AuthService(db_session, token_service)


def test_password_hashing():
    """Test that password hashing and verification works correctly."""
    password = "MySecurePassword123!"
    hashed = get_password_hash(password)
    assert hashed != password
    assert verify_password(password, hashed)
    assert not verify_password("WrongPassword", hashed)
    assert not verify_password(password, "")


def test_register_then_login(auth, db_session, token_service):
    result = auth.register("newhire", "Password123", "user")
    assert result.username == "newhire"
    assert token_service.verify_subject(result.token) == "newhire"
    assert result.roles == ["ROLE_USER"]
    assert result.token

    saved = db_session.query(User).filter(User.username == "newhire").first()
    assert saved is not None
    assert saved.role == "ROLE_USER"
    assert verify_password("Password123", saved.hashed_password)

    login = auth.login("newhire", "Password123")
    assert login.username == "newhire"
    assert token_service.verify_subject(login.token) == "newhire"


def test_register_duplicate_username(auth, admin_user):
    with pytest.raises(DuplicateUsernameError):
        auth.register("admin", "Password123", "USER")


def test_login_wrong_password(auth, admin_user):
    with pytest.raises(InvalidCredentialsError):
        auth.login("admin", "wrong-password")


def test_login_unknown_user(auth):
    with pytest.raises(UserNotFoundError):
        auth.login("ghost", "password123")


def test_login_disabled_user(auth, make_user):
    make_user("former", enabled=False)
    with pytest.raises(UserNotFoundError):
        auth.login("former", "password123")


def test_validate_token_returns_identity(auth, admin_user):
    token = auth.login("admin", "password123").token
    validated = auth.validate_token(token)
    assert validated.identity.username == "admin"
    assert validated.identity.role == "ROLE_ADMIN"
    assert Permission.ADMIN in validated.identity.permissions


def test_validate_blank_token(auth):
    with pytest.raises(InvalidTokenError):
        auth.validate_token("   ")


def test_validate_token_of_disabled_user(auth, make_user):
    user = make_user("leaver")
    token = auth.login("leaver", "password123").token
    auth.set_enabled(user.id, False)
    with pytest.raises(UserNotFoundError):
        auth.validate_token(token)


def test_validate_expired_token(db_session, admin_user):
    issued_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    now = {"value": issued_at}
    tokens = TokenService(DEV_JWT_SECRET, 60_000, clock=lambda: now["value"])
    auth = AuthService(db_session, tokens)

    token = auth.login("admin", "password123").token
    now["value"] = issued_at + timedelta(minutes=5)
    with pytest.raises(TokenExpiredError):
        auth.validate_token(token)


def test_token_claims_carry_role_and_permissions(auth, token_service, admin_user):
    token = auth.login("admin", "password123").token
    claims = token_service.extract_claims(token)
    assert claims["sub"] == "admin"
    assert claims["role"] == "ROLE_ADMIN"
    assert claims["userId"] == str(admin_user.id)
    assert claims["roles"] == ["ROLE_ADMIN", "ROLE_USER"]


def test_change_role_and_list_by_role(auth, make_user):
    user = make_user("promoted")
    auth.change_role(user.id, "manager")
    assert [u.username for u in auth.list_users_by_role("MANAGER")] == ["promoted"]


@pytest.mark.parametrize("role, expected", [
    ("ROLE_ADMIN", {Permission.ADMIN, Permission.USER}),
    ("ROLE_HR_SPECIALIST", {Permission.HR, Permission.USER}),
    ("manager", {Permission.MANAGER, Permission.USER}),
    ("ROLE_USER", {Permission.USER}),
    (None, {Permission.USER}),
])
def test_permissions_for_role(role, expected):
    assert permissions_for_role(role) == expected
