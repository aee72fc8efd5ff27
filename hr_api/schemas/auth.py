import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from uuid import UUID
from datetime import datetime

USERNAME_PATTERN = r"^[a-zA-Z0-9._-]+$"
REGISTRABLE_ROLES = ("ADMIN", "USER", "MANAGER", "HR_SPECIALIST")


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50, pattern=USERNAME_PATTERN)
    password: str = Field(..., min_length=8, max_length=72)
    role: str

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        if not (re.search(r"[a-z]", v) and re.search(r"[A-Z]", v) and re.search(r"\d", v)):
            raise ValueError("Password must contain a lowercase letter, an uppercase letter and a digit")
        return v

    @field_validator("role")
    @classmethod
    def known_role(cls, v: str) -> str:
        role = v.strip().upper()
        if role not in REGISTRABLE_ROLES:
            raise ValueError(f"Role must be one of: {', '.join(REGISTRABLE_ROLES)}")
        return role


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    token_type: str = "bearer"
    username: str
    roles: List[str]
    expires_in: int = Field(..., serialization_alias="expiresIn")


class TokenValidationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    username: str
    role: str
    roles: List[str]
    permissions: List[str]
    expires_in: int = Field(..., serialization_alias="expiresIn")


class UsernameAvailability(BaseModel):
    username: str
    available: bool
    message: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    role: str
    enabled: bool
    created_at: Optional[datetime] = None


class UserEnabledUpdate(BaseModel):
    enabled: bool


class UserRoleUpdate(BaseModel):
    role: str = Field(..., min_length=2, max_length=45)
