# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostWithAuthorResponse, to_post_with_author_response


class ListPostsUseCase:
    """Use case for listing every post, newest first"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self) -> List[PostWithAuthorResponse]:
        rows = await self.post_repository.list_with_authors()
        return [to_post_with_author_response(row) for row in rows]
