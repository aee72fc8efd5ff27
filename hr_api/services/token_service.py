"""
Token Service: issues and validates signed, time-bound session tokens.

Tokens are HS256 JWTs carrying the username as ``sub`` plus ``iat``/``exp``.
Expiry is evaluated against an injectable clock, not by the JWT library,
which only verifies signature and shape.
"""
import base64
import binascii
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from jose import JWTError, jwt

from hr_api.core.config import settings
from hr_api.core.exceptions import InvalidTokenError, NullSubjectError


ALGORITHM = "HS256"
DEFAULT_TTL_MS = 86_400_000

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    def __init__(self, secret: str, ttl_ms: int = DEFAULT_TTL_MS, clock: Clock = utc_now):
        try:
            self._key = base64.b64decode(secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("JWT secret must be base64 encoded") from e
        if not self._key:
            raise ValueError("JWT secret must not be empty")
        self.ttl = timedelta(milliseconds=ttl_ms)
        self.clock = clock

    @property
    def expires_in_seconds(self) -> int:
        return int(self.ttl.total_seconds())

    def issue(self, subject: str, extra_claims: Optional[Dict[str, Any]] = None) -> str:
        now = self.clock()
        claims = dict(extra_claims or {})
        claims.update({
            "sub": subject,
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        })
        return jwt.encode(claims, self._key, algorithm=ALGORITHM)

    def extract_claims(self, token: str) -> Dict[str, Any]:
        """Signature-verified claim set. Expiry is checked by ``is_valid``."""
        if not token or not token.strip():
            raise InvalidTokenError("Token must not be empty")
        try:
            return jwt.decode(
                token.strip(),
                self._key,
                algorithms=[ALGORITHM],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

    def verify_subject(self, token: str) -> str:
        subject = self.extract_claims(token).get("sub")
        if not subject:
            raise InvalidTokenError("Missing subject in token")
        return subject

    def expires_at(self, token: str) -> datetime:
        exp = self.extract_claims(token).get("exp")
        if not isinstance(exp, (int, float)):
            raise InvalidTokenError("Missing expiry in token")
        return datetime.fromtimestamp(exp, tz=timezone.utc)

    def is_expired(self, token: str) -> bool:
        return self.clock() >= self.expires_at(token)

    def is_valid(self, token: str, expected_subject: Optional[str]) -> bool:
        if expected_subject is None:
            raise NullSubjectError("expected_subject must not be None")
        try:
            return self.verify_subject(token) == expected_subject and not self.is_expired(token)
        except InvalidTokenError:
            return False


def get_token_service() -> TokenService:
    """FastAPI dependency; override it in tests to inject a fake clock."""
    return TokenService(settings.jwt_secret, settings.jwt_expiration_ms)
