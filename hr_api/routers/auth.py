from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from hr_api.core.config import settings
from hr_api.core.exceptions import ValidationError
from hr_api.core.limiter import limiter
from hr_api.dependencies import get_auth_service
from hr_api.routers.auth_deps import bearer_scheme, require_admin
from hr_api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenValidationResponse,
    UserEnabledUpdate,
    UserResponse,
    UserRoleUpdate,
    UsernameAvailability,
)
from hr_api.services.auth import AuthResult, AuthService


router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        username=result.username,
        roles=result.roles,
        expires_in=result.expires_in,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    """Create an account and return a token for immediate use."""
    return _auth_response(auth.register(data.username, data.password, data.role))


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.login_rate_limit)
def login(request: Request, login_data: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return _auth_response(auth.login(login_data.username, login_data.password))


@router.post("/validate", response_model=TokenValidationResponse)
def validate_token(
    token: Optional[str] = Query(None, description="Token, when not sent as a Bearer header"),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
):
    raw_token = credentials.credentials if credentials else token
    if not raw_token or not raw_token.strip():
        raise ValidationError("A token is required, as 'Authorization: Bearer <token>' or the 'token' query parameter")

    validated = auth.validate_token(raw_token)
    identity = validated.identity
    remaining = validated.expires_at - auth.tokens.clock()
    return TokenValidationResponse(
        token=validated.token,
        username=identity.username,
        role=identity.role,
        roles=[identity.role],
        permissions=sorted(p.value for p in identity.permissions),
        expires_in=max(0, int(remaining.total_seconds())),
    )


@router.get("/check-username/{username}", response_model=UsernameAvailability)
def check_username(username: str, auth: AuthService = Depends(get_auth_service)):
    available = auth.is_username_available(username)
    return UsernameAvailability(
        username=username,
        available=available,
        message="Username is available" if available else "Username is already taken",
    )


@router.get("/health")
def auth_health():
    return {
        "status": "UP",
        "service": "Authentication Service",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# --- User administration (ADMIN) ---

@router.get("/users", response_model=List[UserResponse], dependencies=[Depends(require_admin)])
def list_users_by_role(
    role: str = Query(..., min_length=2, description="Role name without the ROLE_ prefix"),
    auth: AuthService = Depends(get_auth_service),
):
    return auth.list_users_by_role(role)


@router.put("/users/{user_id}/enabled", response_model=UserResponse, dependencies=[Depends(require_admin)])
def set_user_enabled(user_id: UUID, data: UserEnabledUpdate, auth: AuthService = Depends(get_auth_service)):
    return auth.set_enabled(user_id, data.enabled)


@router.put("/users/{user_id}/role", response_model=UserResponse, dependencies=[Depends(require_admin)])
def change_user_role(user_id: UUID, data: UserRoleUpdate, auth: AuthService = Depends(get_auth_service)):
    return auth.change_role(user_id, data.role)
