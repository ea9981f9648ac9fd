from .mongo_connection import MongoDatabase
from .mongo_user_repository import MongoUserRepository
from .mongo_post_repository import MongoPostRepository

__all__ = [
    "MongoDatabase",
    "MongoUserRepository",
    "MongoPostRepository",
]
