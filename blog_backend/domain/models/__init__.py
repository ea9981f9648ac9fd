from .user import User
from .post import Post, PostWithAuthor

__all__ = ["User", "Post", "PostWithAuthor"]
