import base64
import binascii
import os
import logging
from pydantic import BaseModel, Field
from typing import List
from dotenv import load_dotenv

load_dotenv()

# base64 of "dev-only-insecure-jwt-signing-key-change-me!!"
DEV_JWT_SECRET = "ZGV2LW9ubHktaW5zZWN1cmUtand0LXNpZ25pbmcta2V5LWNoYW5nZS1tZSEh"


class Config(BaseModel):
    app_name: str = "HR API"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./hr_api.db")

    # Auth (secret is base64 encoded, TTL in milliseconds)
    jwt_secret: str = os.getenv("JWT_SECRET", DEV_JWT_SECRET)
    jwt_expiration_ms: int = int(os.getenv("JWT_EXPIRATION_MS", "86400000"))  # 24 hours

    version: str = "1.0.0"
    request_id_header: str = "X-Request-ID"

    # CORS: comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://127.0.0.1:3000",
            ).split(",")
            if o.strip()
        ]
    )

    # Rate limiting
    rate_limit_enabled: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    login_rate_limit: str = os.getenv("LOGIN_RATE_LIMIT", "10/minute")

    # Bootstrap default credentials on an empty users table
    seed_default_users: bool = os.getenv("SEED_DEFAULT_USERS", "true").lower() == "true"


def check_jwt_secret(secret: str) -> None:
    """The signing key must decode from base64 to a non-empty byte string."""
    try:
        key = base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as e:
        raise RuntimeError("FATAL: JWT_SECRET must be a base64-encoded value.") from e
    if not key:
        raise RuntimeError("FATAL: JWT_SECRET must not be empty.")


settings = Config()

# --- Startup Validation for Production ---
_logger = logging.getLogger(__name__)
check_jwt_secret(settings.jwt_secret)
if settings.environment not in ("development", "testing"):
    if settings.jwt_secret == DEV_JWT_SECRET:
        raise RuntimeError(
            "FATAL: JWT_SECRET must be set for non-development environments. "
            "Set it as a base64-encoded environment variable."
        )
else:
    if settings.jwt_secret == DEV_JWT_SECRET:
        _logger.warning("Using insecure default JWT_SECRET, only acceptable in development.")
