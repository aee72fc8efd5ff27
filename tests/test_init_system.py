from hr_api.core.init_system import DEFAULT_USERS, seed_default_users
from hr_api.models.user import User
from hr_api.services.auth import AuthService


def test_seeds_default_users_on_empty_table(db_session, token_service):
    assert seed_default_users(db_session) == len(DEFAULT_USERS)
    roles = {u.username: u.role for u in db_session.query(User).all()}
    assert roles == {
        "admin": "ROLE_ADMIN",
        "hr_specialist": "ROLE_HR_SPECIALIST",
        "manager": "ROLE_MANAGER",
        "employee": "ROLE_USER",
    }
    assert AuthService(db_session, token_service).login("manager", "password123").roles == ["ROLE_MANAGER"]


def test_does_not_seed_when_users_exist(db_session, admin_user):
    assert seed_default_users(db_session) == 0
    assert db_session.query(User).count() == 1


def test_seed_admin_script_resets_disabled_admin(db_session, make_user):
    from hr_api.core.security import verify_password
    from scripts.seed_admin import upsert_admin

    assert upsert_admin(db_session, "root", "Secret123") is True

    user = make_user("locked", role="ROLE_USER", enabled=False)
    assert upsert_admin(db_session, "locked", "Fresh1234") is False
    db_session.refresh(user)
    assert user.enabled is True
    assert user.role == "ROLE_ADMIN"
    assert verify_password("Fresh1234", user.hashed_password)
