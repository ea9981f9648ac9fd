from datetime import datetime
from typing import Optional

from .base import CamelModel


class UserResponse(CamelModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None


def to_user_response(user) -> UserResponse:
    """Build the public view of a domain user (hash stripped)"""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
    )
