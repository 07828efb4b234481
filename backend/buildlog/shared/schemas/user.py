"""
Account Schemas

Bodies and responses of the /auth routes.

    POST /auth/register   UserCreate → AuthResponse (201)
    POST /auth/login      UserLogin  → AuthResponse
    GET  /auth/me                    → UserResponse

Emails are matched case-insensitively: both request bodies hand the
service a stripped, lowercased address.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from buildlog.shared.schemas.common import BaseSchema


MIN_PASSWORD_LENGTH = 8


class Credentials(BaseModel):
    """Email and password as typed into the sign-in form."""

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class UserCreate(Credentials):
    """Sign-up body. The password is hashed before it is stored."""

    password: str = Field(
        min_length=MIN_PASSWORD_LENGTH,
        description=f"At least {MIN_PASSWORD_LENGTH} characters",
    )


class UserLogin(Credentials):
    """Sign-in body. Any non-empty password is checked against the stored hash."""


class UserResponse(BaseSchema):
    """The signed-in builder."""

    id: str
    email: str
    created_at: datetime


class AuthResponse(BaseModel):
    """Bearer token issued on sign-up or sign-in."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token lifetime in seconds")
