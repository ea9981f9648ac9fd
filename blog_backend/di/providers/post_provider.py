from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...application.use_cases.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (
            ListPostsUseCase,
            GetPostUseCase,
            CreatePostUseCase,
            UpdatePostUseCase,
            DeletePostUseCase,
        ):
            # Bind the loop variable; every use case takes the post repository
            container.register_factory(
                use_case,
                lambda cls=use_case: cls(post_repository=container.get(PostRepository)),
            )
