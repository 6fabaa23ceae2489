"""User and auth schemas."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from farmbooks.domain.records.enums import UserRole
from .common import CamelModel


class SignupRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)


class SigninRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    token: str


class ChangePasswordRequest(CamelModel):
    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=100)


class ProfileUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)


class UserResponse(CamelModel):
    """User without credentials."""
    id: int
    name: str
    email: str
    role: UserRole
    is_email_verified: bool
    created_at: datetime
