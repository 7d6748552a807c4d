import re
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)

    @field_validator("username")
    @classmethod
    def username_alphanumeric(cls, value: str) -> str:
        if not value.isascii() or not value.isalnum():
            raise ValueError("Username must be alphanumeric")
        return value

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not re.search(r"[a-zA-Z]", value):
            raise ValueError("Password must contain at least one letter")
        if not re.search(r"[0-9]", value):
            raise ValueError("Password must contain at least one number")
        return value


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(CamelModel):
    id: int
    username: str
    email: str
    created_at: Optional[datetime] = None


class TokenUser(CamelModel):
    """Identity carried inside an access token."""

    id: int
    username: str
    email: str
