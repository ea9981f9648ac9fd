from .base import CamelModel, MessageResponse
from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse, AuthResult
from .user_dto import UserResponse
from .post_dto import (
    PostCreateRequest,
    PostUpdateRequest,
    PostResponse,
    PostWithAuthorResponse,
    PostEnvelope,
    PostDetailEnvelope,
    PostListResponse,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "AuthResult",
    "UserResponse",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostResponse",
    "PostWithAuthorResponse",
    "PostEnvelope",
    "PostDetailEnvelope",
    "PostListResponse",
]
