# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....core.exceptions import NotFoundError
from ...dto.post_dto import PostResponse, to_post_response
from ...session import Session
from .ownership import load_owned_post

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post owned by the session user"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str, session: Session) -> PostResponse:
        """
        Delete a post and return the removed data
        
        Raises:
            UnauthenticatedError, InvalidTokenError, NotFoundError, ForbiddenError
        """
        await load_owned_post(self.post_repository, session, post_id, action="delete")
        
        deleted = await self.post_repository.delete(post_id)
        if deleted is None:
            raise NotFoundError("Post not found")
        
        logger.info(f"User {session.user_id} deleted post {post_id}")
        return to_post_response(deleted)
