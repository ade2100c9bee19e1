# backend/models/user.py
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Literal, Optional

UserStatus = Literal["online", "offline", "away"]
UserRole = Literal["user", "admin"]

# bcrypt solo acepta hasta 72 bytes
MAX_PASSWORD_BYTES = 72


def _clean_email(value):
    return value.strip().lower() if isinstance(value, str) else value


def _clean_username(value):
    return value.strip() if isinstance(value, str) else value


def _check_password_bytes(value):
    if isinstance(value, str) and len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"La contraseña no puede superar {MAX_PASSWORD_BYTES} bytes")
    return value


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=30)
    email: EmailStr
    password: str = Field(..., min_length=8)
    avatar: str = ""

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _clean_email(value)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        return _clean_username(value)

    @field_validator("password")
    @classmethod
    def limit_password_bytes(cls, value):
        return _check_password_bytes(value)


class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=30)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)
    avatar: Optional[str] = None
    status: Optional[UserStatus] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _clean_email(value)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        return _clean_username(value)

    @field_validator("password")
    @classmethod
    def limit_password_bytes(cls, value):
        return _check_password_bytes(value)


class User(BaseModel):
    """Usuario tal como lo devuelve la API (sin password)."""
    id: str
    username: str
    email: EmailStr
    avatar: str = ""
    status: UserStatus = "offline"
    role: UserRole = "user"
    is_verified: bool = True
    last_seen: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
