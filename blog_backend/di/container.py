# Local application imports
from ..infrastructure.db.mongo_connection import MongoDatabase
from ..domain.repositories.user_repository import UserRepository
from ..domain.repositories.post_repository import PostRepository
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    PostProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database handle and collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (AuthProvider, PostProvider) - depend on repositories
    """
    
    def __init__(self, database: MongoDatabase) -> None:
        super().__init__()
        self.database = database
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self, self.database)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        PostProvider.register(self)


def build_use_case_container(
    user_repository: UserRepository,
    post_repository: PostRepository,
) -> BaseContainer:
    """
    Container wired to the given repositories instead of MongoDB.

    Used when the store is provided by the caller (tests, scripts).
    """
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(PostRepository, post_repository)
    AuthProvider.register(container)
    PostProvider.register(container)
    return container
