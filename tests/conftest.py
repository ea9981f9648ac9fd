"""
Shared pytest fixtures for blog backend tests.
"""
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

from blog_backend.core.exceptions import ConstraintViolationError
from blog_backend.core.security import create_session_token, hash_password
from blog_backend.domain.models.post import Post, PostWithAuthor
from blog_backend.domain.models.user import User
from blog_backend.domain.repositories.post_repository import PostRepository
from blog_backend.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """UserRepository double with the store's unique-email behaviour"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def create(self, user: User) -> User:
        if await self.find_by_email(user.email) is not None:
            raise ConstraintViolationError()
        self.users[user.id] = user
        return user


class InMemoryPostRepository(PostRepository):
    """PostRepository double; joins against an InMemoryUserRepository"""

    def __init__(self, user_repository: InMemoryUserRepository) -> None:
        self.user_repository = user_repository
        self.posts: Dict[str, Post] = {}

    def _join(self, post: Post) -> Optional[PostWithAuthor]:
        author = self.user_repository.users.get(post.author_id)
        if author is None:
            return None
        return PostWithAuthor(post=post, author_name=author.name)

    async def list_with_authors(self) -> List[PostWithAuthor]:
        ordered = sorted(self.posts.values(), key=lambda p: p.created_at, reverse=True)
        return [row for row in (self._join(p) for p in ordered) if row is not None]

    async def find_with_author(self, post_id: str) -> Optional[PostWithAuthor]:
        post = self.posts.get(post_id)
        return self._join(post) if post else None

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        return self.posts.get(post_id)

    async def create(self, post: Post) -> Post:
        self.posts[post.id] = post
        return post

    async def update_content(self, post_id: str, title: str, content: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is None:
            return None
        post.title = title
        post.content = content
        post.edited = True
        return post

    async def delete(self, post_id: str) -> Optional[Post]:
        return self.posts.pop(post_id, None)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_blog_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "SESSION_COOKIE_NAME": "TOKEN",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.session_max_age_seconds = 7200
    mock.session_cookie_name = "TOKEN"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("blog_backend.core.config.get_settings", return_value=mock), patch(
        "blog_backend.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def post_repo(user_repo):
    return InMemoryPostRepository(user_repo)


@pytest.fixture
def make_user(user_repo):
    """Insert a user directly into the in-memory store."""
    def _make(
        user_id: str = "usr-1",
        name: str = "alice",
        email: str = "alice@example.com",
        password: str = "correct-horse",
    ) -> User:
        user = User(
            id=user_id,
            name=name,
            email=email,
            hashed_password=hash_password(password),
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )
        user_repo.users[user.id] = user
        return user
    return _make


@pytest.fixture
def make_post(post_repo):
    """Insert a post directly into the in-memory store."""
    def _make(
        post_id: str = "post-1",
        author_id: str = "usr-1",
        title: str = "First post",
        content: Optional[str] = "hello",
        created_at: Optional[datetime] = None,
    ) -> Post:
        post = Post(
            id=post_id,
            title=title,
            content=content,
            author_id=author_id,
            created_at=created_at or datetime(2025, 1, 2, tzinfo=timezone.utc),
        )
        post_repo.posts[post.id] = post
        return post
    return _make


@pytest.fixture
def session_for():
    """Build a verified Session for a user id."""
    from blog_backend.application.session import Session

    def _session(user_id: str) -> Session:
        return Session.from_token(create_session_token(user_id))
    return _session
