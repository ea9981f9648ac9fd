"""
Unit tests for the MongoDB repositories, using mocked motor collections.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from blog_backend.core.exceptions import ConstraintViolationError
from blog_backend.domain.models.post import Post
from blog_backend.domain.models.user import User
from blog_backend.infrastructure.db.mongo_post_repository import MongoPostRepository
from blog_backend.infrastructure.db.mongo_user_repository import MongoUserRepository


class FakeCursor:
    """Async iterator standing in for a motor aggregation cursor"""

    def __init__(self, documents):
        self._documents = list(documents)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._documents:
            raise StopAsyncIteration
        return self._documents.pop(0)


CREATED = datetime(2025, 1, 1, tzinfo=timezone.utc)


def user_document(**overrides):
    document = {
        "_id": "usr-1",
        "name": "alice",
        "email": "alice@example.com",
        "password": "$2b$12$hash",
        "created_at": CREATED,
    }
    document.update(overrides)
    return document


def post_document(**overrides):
    document = {
        "_id": "post-1",
        "title": "Hello!",
        "content": "hi",
        "created_at": CREATED,
        "edited": False,
        "author_id": "usr-1",
    }
    document.update(overrides)
    return document


class TestMongoUserRepository:

    @pytest.mark.asyncio
    async def test_find_by_email_maps_document(self):
        collection = MagicMock()
        collection.find_one = AsyncMock(return_value=user_document())

        user = await MongoUserRepository(collection).find_by_email("alice@example.com")

        collection.find_one.assert_awaited_once_with({"email": "alice@example.com"})
        assert user.id == "usr-1"
        assert user.hashed_password == "$2b$12$hash"
        assert user.created_at == CREATED

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self):
        collection = MagicMock()
        collection.find_one = AsyncMock(return_value=None)
        assert await MongoUserRepository(collection).find_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_blank_email_skips_query(self):
        collection = MagicMock()
        collection.find_one = AsyncMock()
        assert await MongoUserRepository(collection).find_by_email("") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_inserts_hash_under_uuid(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock()
        user = User(id="usr-1", name="alice", email="alice@example.com", hashed_password="h", created_at=CREATED)

        await MongoUserRepository(collection).create(user)

        inserted = collection.insert_one.await_args.args[0]
        assert inserted["_id"] == "usr-1"
        assert inserted["password"] == "h"

    @pytest.mark.asyncio
    async def test_duplicate_email_becomes_constraint_violation(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock(side_effect=DuplicateKeyError("E11000 duplicate key"))
        user = User(id="usr-2", name="bob", email="alice@example.com", hashed_password="h")

        with pytest.raises(ConstraintViolationError):
            await MongoUserRepository(collection).create(user)

    @pytest.mark.asyncio
    async def test_driver_failure_wrapped(self):
        collection = MagicMock()
        collection.find_one = AsyncMock(side_effect=ConnectionError("down"))
        with pytest.raises(RuntimeError, match="Error finding user by email"):
            await MongoUserRepository(collection).find_by_email("alice@example.com")


class TestMongoPostRepository:

    @pytest.mark.asyncio
    async def test_list_joins_author_and_sorts_newest_first(self):
        collection = MagicMock()
        collection.aggregate = MagicMock(
            return_value=FakeCursor([post_document(author={"_id": "usr-1", "name": "alice"})])
        )

        rows = await MongoPostRepository(collection).list_with_authors()

        pipeline = collection.aggregate.call_args.args[0]
        assert {"$sort": {"created_at": -1}} in pipeline
        assert pipeline[-1] == {"$unwind": "$author"}
        assert rows[0].author_name == "alice"
        assert rows[0].post.author_id == "usr-1"

    @pytest.mark.asyncio
    async def test_find_with_author_matches_id(self):
        collection = MagicMock()
        collection.aggregate = MagicMock(return_value=FakeCursor([]))

        assert await MongoPostRepository(collection).find_with_author("post-9") is None
        pipeline = collection.aggregate.call_args.args[0]
        assert pipeline[0] == {"$match": {"_id": "post-9"}}

    @pytest.mark.asyncio
    async def test_update_sets_edited_flag(self):
        collection = MagicMock()
        collection.find_one_and_update = AsyncMock(
            return_value=post_document(title="New title", content="new", edited=True)
        )

        post = await MongoPostRepository(collection).update_content("post-1", title="New title", content="new")

        args, kwargs = collection.find_one_and_update.await_args
        assert args[0] == {"_id": "post-1"}
        assert args[1] == {"$set": {"title": "New title", "content": "new", "edited": True}}
        assert kwargs["return_document"] == ReturnDocument.AFTER
        assert post.edited is True

    @pytest.mark.asyncio
    async def test_delete_returns_removed_post(self):
        collection = MagicMock()
        collection.find_one_and_delete = AsyncMock(return_value=post_document())

        post = await MongoPostRepository(collection).delete("post-1")

        collection.find_one_and_delete.assert_awaited_once_with({"_id": "post-1"})
        assert post.title == "Hello!"

    @pytest.mark.asyncio
    async def test_delete_missing(self):
        collection = MagicMock()
        collection.find_one_and_delete = AsyncMock(return_value=None)
        assert await MongoPostRepository(collection).delete("post-1") is None

    @pytest.mark.asyncio
    async def test_create_keeps_null_content(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock()
        post = Post(id="post-1", title="Hello!", author_id="usr-1", created_at=CREATED)

        await MongoPostRepository(collection).create(post)

        inserted = collection.insert_one.await_args.args[0]
        assert inserted["content"] is None
        assert inserted["edited"] is False
        assert inserted["author_id"] == "usr-1"
