# Standard library imports
import logging
import uuid

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Post
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import PostCreateRequest, PostResponse, to_post_response
from ...session import Session

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a post as the session user"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, request: PostCreateRequest, session: Session) -> PostResponse:
        """
        Create a new post
        
        The author is always the verified session identity.
        
        Args:
            request: Post creation request
            session: The caller's session
            
        Returns:
            PostResponse with created post information
            
        Raises:
            UnauthenticatedError: No session cookie
            InvalidTokenError: Token did not verify
        """
        author_id = session.require_user_id(invalid_message="Unauthorized to create")
        
        new_post = Post(
            id=str(uuid.uuid4()),
            title=request.title,
            content=request.content,
            author_id=author_id,
            created_at=utc_now(),
            edited=False,
        )
        
        saved_post = await self.post_repository.create(new_post)
        logger.info(f"User {author_id} created post {saved_post.id}")
        
        return to_post_response(saved_post)
