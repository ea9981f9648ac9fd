from dataclasses import dataclass
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from ...core.security import BCRYPT_MAX_PASSWORD_BYTES
from .base import CamelModel
from .user_dto import UserResponse


class UserRegistrationRequest(CamelModel):
    """DTO for user registration request"""
    name: str = Field(min_length=3, max_length=12)
    email: EmailStr
    password: str = Field(min_length=8)
    login_directly: bool = False

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return value


class UserLoginRequest(CamelModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(CamelModel):
    """DTO for register / login / me responses"""
    msg: str
    user: UserResponse


@dataclass
class AuthResult:
    """Use case output: the public user plus a freshly signed token, if any"""
    msg: str
    user: UserResponse
    token: Optional[str] = None
