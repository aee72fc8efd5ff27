from fastapi import status

from hr_api.models.user import User


def test_anonymous_request_is_rejected(client):
    response = client.get("/api/employees")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["success"] is False


def test_garbage_bearer_token_is_anonymous(client):
    response = client.get("/api/departments", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_token_of_disabled_user_is_anonymous(client, db_session, regular_user, user_headers):
    regular_user.enabled = False
    db_session.commit()
    response = client.get("/api/employees", headers=user_headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_expired_token_is_anonymous(client, regular_user):
    from datetime import datetime, timedelta, timezone
    from hr_api.core.config import DEV_JWT_SECRET
    from hr_api.services.token_service import TokenService

    issued = TokenService(
        DEV_JWT_SECRET, 60_000, clock=lambda: datetime.now(timezone.utc) - timedelta(hours=1)
    ).issue(regular_user.username)
    response = client.get("/api/employees", headers={"Authorization": f"Bearer {issued}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_authenticated_user_reaches_protected_routes(client, user_headers):
    response = client.get("/api/employees", headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_reports_require_admin(client, user_headers):
    response = client.get("/api/reports/departments", headers=user_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["errors"][0]["code"] == "PERMISSION_DENIED"


def test_admin_reaches_reports(client, admin_headers):
    response = client.get("/api/reports/departments", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK


def test_public_auth_routes_need_no_token(client):
    assert client.get("/api/auth/check-username/anyone").status_code == status.HTTP_200_OK
    assert client.get("/api/auth/health").status_code == status.HTTP_200_OK


def test_role_label_normalization():
    assert User.role_label("admin") == "ROLE_ADMIN"
    assert User.role_label("ROLE_MANAGER") == "ROLE_MANAGER"
