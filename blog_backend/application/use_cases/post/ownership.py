# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Post
from ....core.exceptions import ForbiddenError, NotFoundError
from ...session import Session

logger = logging.getLogger(__name__)


async def load_owned_post(
    post_repository: PostRepository,
    session: Session,
    post_id: str,
    action: str,
) -> Post:
    """
    Gate a mutation on ``post_id``.

    Checks run in order and the first failure is final: session cookie
    present, token verifies, post exists, session user is the author.

    Raises:
        UnauthenticatedError, InvalidTokenError, NotFoundError, ForbiddenError
    """
    user_id = session.require_user_id(invalid_message=f"Unauthorized to {action}")
    
    post = await post_repository.find_by_id(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    
    if not post.is_owned_by(user_id):
        logger.warning(f"User {user_id} denied {action} on post {post_id}")
        raise ForbiddenError(f"Unauthorized to {action}")
    
    return post
