# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....core.exceptions import NotFoundError
from ...dto.post_dto import PostUpdateRequest, PostResponse, to_post_response
from ...session import Session
from .ownership import load_owned_post

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for editing a post owned by the session user"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(
        self,
        post_id: str,
        request: PostUpdateRequest,
        session: Session,
    ) -> PostResponse:
        """
        Replace title and content; the post is always marked edited,
        even when nothing changed.
        
        Raises:
            UnauthenticatedError, InvalidTokenError, NotFoundError, ForbiddenError
        """
        await load_owned_post(self.post_repository, session, post_id, action="update")
        
        updated = await self.post_repository.update_content(
            post_id,
            title=request.title,
            content=request.content,
        )
        if updated is None:
            # Deleted between the ownership check and the write
            raise NotFoundError("Post not found")
        
        logger.info(f"User {session.user_id} updated post {post_id}")
        return to_post_response(updated)
