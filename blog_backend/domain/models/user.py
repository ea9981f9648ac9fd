from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: str
    name: str
    email: str
    hashed_password: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.id:
            raise ValueError("User ID is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
