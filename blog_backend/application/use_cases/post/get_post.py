# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....core.exceptions import NotFoundError
from ...dto.post_dto import PostWithAuthorResponse, to_post_with_author_response


class GetPostUseCase:
    """Use case for getting a post by ID"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str) -> PostWithAuthorResponse:
        """
        Get a post by ID
        
        Raises:
            NotFoundError: If no post has that ID
        """
        row = await self.post_repository.find_with_author(post_id)
        if row is None:
            raise NotFoundError("Post not found")
        return to_post_with_author_response(row)
