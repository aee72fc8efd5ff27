"""
Authorization Gate.

Resolves the bearer token of each request into a SecurityContext that is
handed to route handlers as an explicit dependency. The gate itself never
rejects a request: a missing, malformed or unverifiable token simply yields
an anonymous context, and the ``require_*`` dependencies below decide whether
the route accepts it.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from hr_api.core.exceptions import AccessDeniedError, AuthenticationError, InvalidTokenError
from hr_api.database import get_db
from hr_api.services.auth import Identity, Permission
from hr_api.services.credential_store import CredentialStore
from hr_api.services.token_service import TokenService, get_token_service

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class SecurityContext:
    identity: Optional[Identity] = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None


ANONYMOUS = SecurityContext()


def get_security_context(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> SecurityContext:
    existing = getattr(request.state, "security_context", None)
    if existing is not None and existing.is_authenticated:
        return existing

    token = credentials.credentials.strip() if credentials else ""
    if not token:
        return ANONYMOUS

    try:
        username = tokens.verify_subject(token)
    except InvalidTokenError as e:
        logger.warning(f"Bearer token rejected: {e.message}", extra={"path": request.url.path})
        return ANONYMOUS

    user = CredentialStore(db).find_enabled_by_username(username)
    if user is None:
        logger.warning("Bearer token subject is unknown or disabled", extra={"username": username})
        return ANONYMOUS
    if not tokens.is_valid(token, user.username):
        logger.info("Bearer token expired", extra={"username": username})
        return ANONYMOUS

    context = SecurityContext(identity=Identity.of(user))
    request.state.security_context = context
    return context


def require_authenticated(context: SecurityContext = Depends(get_security_context)) -> Identity:
    """Rejects anonymous requests with 401."""
    if not context.is_authenticated:
        raise AuthenticationError("Authentication required")
    return context.identity


def require_permissions(*allowed: Permission) -> Callable:
    """
    Dependency factory that checks the caller holds at least one of the permissions.

    Usage:
        @router.get("/reports")
        def reports(identity: Identity = Depends(require_permissions(Permission.ADMIN))):
            ...
    """
    def permission_checker(identity: Identity = Depends(require_authenticated)) -> Identity:
        if not identity.has_any(*allowed):
            raise AccessDeniedError(
                f"Access denied. Required permissions: {[p.value for p in allowed]}"
            )
        return identity
    return permission_checker


require_admin = require_permissions(Permission.ADMIN)
require_admin_or_hr = require_permissions(Permission.ADMIN, Permission.HR)
