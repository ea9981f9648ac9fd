# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Post:
    """
    Pure domain model for Post entity - no external dependencies.
    
    ``author_id`` is fixed at creation from the session identity and is the
    only access-control relationship: a post may be changed only by the user
    whose id equals ``author_id``.
    """
    id: str
    title: str
    author_id: str
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    edited: bool = False
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id:
            raise ValueError("Post ID is required")
        if not self.author_id:
            raise ValueError("Author ID is required")
        if not self.title or len(self.title.strip()) < 1:
            raise ValueError("Post title is required")

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and self.author_id == user_id


@dataclass
class PostWithAuthor:
    """Read model: a post joined with its author's display name"""
    post: Post
    author_name: str
