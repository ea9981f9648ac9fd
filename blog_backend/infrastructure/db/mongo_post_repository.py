# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post, PostWithAuthor
from ...domain.constants import PostFields, UserFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import USERS_COLLECTION

logger = logging.getLogger(__name__)


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""
    
    def __init__(self, post_collection: AsyncIOMotorCollection) -> None:
        self.post_collection = post_collection
    
    def _author_join_pipeline(self, match: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Aggregation joining each post with its author.
        
        Posts whose author is missing are dropped ($unwind without
        preserveNullAndEmptyArrays behaves like an inner join).
        """
        pipeline: List[Dict[str, Any]] = []
        if match:
            pipeline.append({"$match": match})
        pipeline.extend([
            {"$sort": {PostFields.CREATED_AT: DESCENDING}},
            {
                "$lookup": {
                    "from": USERS_COLLECTION,
                    "localField": PostFields.AUTHOR_ID,
                    "foreignField": UserFields.MONGO_ID,
                    "as": PostFields.AUTHOR,
                }
            },
            {"$unwind": f"${PostFields.AUTHOR}"},
        ])
        return pipeline
    
    async def list_with_authors(self) -> List[PostWithAuthor]:
        """
        All posts with their author name, newest first
        
        Returns:
            List of PostWithAuthor read models
        """
        try:
            logger.debug("posts.aggregate list_with_authors")
            cursor = self.post_collection.aggregate(self._author_join_pipeline())
            rows = []
            async for document in cursor:
                rows.append(self._document_to_row(document))
            return rows
        except Exception as e:
            raise RuntimeError(f"Error listing posts: {str(e)}") from e
    
    async def find_with_author(self, post_id: str) -> Optional[PostWithAuthor]:
        if not post_id:
            return None
        
        try:
            logger.debug(f"posts.aggregate find_with_author _id={post_id}")
            cursor = self.post_collection.aggregate(
                self._author_join_pipeline({PostFields.MONGO_ID: post_id})
            )
            async for document in cursor:
                return self._document_to_row(document)
            return None
        except Exception as e:
            raise RuntimeError(f"Error finding post by ID: {str(e)}") from e
    
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID
        
        Args:
            post_id: The post ID to find
            
        Returns:
            Post domain model if found, None otherwise
        """
        if not post_id:
            return None
        
        try:
            logger.debug(f"posts.find_one _id={post_id}")
            document = await self.post_collection.find_one({PostFields.MONGO_ID: post_id})
            if document is None:
                return None
            return self._document_to_post(document)
        except Exception as e:
            raise RuntimeError(f"Error finding post by ID: {str(e)}") from e
    
    async def create(self, post: Post) -> Post:
        try:
            logger.debug(f"posts.insert_one _id={post.id}")
            await self.post_collection.insert_one(self._post_to_dict(post))
        except Exception as e:
            raise RuntimeError(f"Error saving post: {str(e)}") from e
        return post
    
    async def update_content(self, post_id: str, title: str, content: str) -> Optional[Post]:
        """
        Set title and content and flag the post as edited
        
        Returns:
            The updated Post, or None if no post has that ID
        """
        try:
            logger.debug(f"posts.find_one_and_update _id={post_id}")
            document = await self.post_collection.find_one_and_update(
                {PostFields.MONGO_ID: post_id},
                {"$set": {
                    PostFields.TITLE: title,
                    PostFields.CONTENT: content,
                    PostFields.EDITED: True,
                }},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise RuntimeError(f"Error updating post: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_post(document)
    
    async def delete(self, post_id: str) -> Optional[Post]:
        try:
            logger.debug(f"posts.find_one_and_delete _id={post_id}")
            document = await self.post_collection.find_one_and_delete({PostFields.MONGO_ID: post_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting post: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_post(document)
    
    def _document_to_post(self, document: dict) -> Post:
        """
        Convert MongoDB document to Post domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT),
            author_id=str(document.get(PostFields.AUTHOR_ID, "")),
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
            edited=bool(document.get(PostFields.EDITED, False)),
        )
    
    def _document_to_row(self, document: dict) -> PostWithAuthor:
        author = document.get(PostFields.AUTHOR) or {}
        return PostWithAuthor(
            post=self._document_to_post(document),
            author_name=author.get(UserFields.NAME, ""),
        )
    
    def _post_to_dict(self, post: Post) -> dict:
        """
        Convert Post domain model to MongoDB document
        
        Args:
            post: Post domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            PostFields.MONGO_ID: post.id,
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.CREATED_AT: post.created_at,
            PostFields.EDITED: post.edited,
            PostFields.AUTHOR_ID: post.author_id,
        }
