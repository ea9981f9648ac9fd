from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.post import Post, PostWithAuthor


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""
    
    @abstractmethod
    async def list_with_authors(self) -> List[PostWithAuthor]:
        """All posts joined with author name, newest first"""
        pass
    
    @abstractmethod
    async def find_with_author(self, post_id: str) -> Optional[PostWithAuthor]:
        """Find a single post joined with its author name"""
        pass
    
    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass
    
    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post"""
        pass
    
    @abstractmethod
    async def update_content(self, post_id: str, title: str, content: str) -> Optional[Post]:
        """Set title and content, mark the post edited; None if it vanished"""
        pass
    
    @abstractmethod
    async def delete(self, post_id: str) -> Optional[Post]:
        """Remove a post and return what was removed; None if it vanished"""
        pass
