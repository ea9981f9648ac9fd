# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.post_dto import (
    PostCreateRequest,
    PostUpdateRequest,
    PostEnvelope,
    PostDetailEnvelope,
    PostListResponse,
)
from ...application.session import Session
from ...application.use_cases.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from ...di.base_container import BaseContainer
from .dependencies import get_container, get_session


router = APIRouter(tags=["posts"])


@router.get("", response_model=PostListResponse)
@router.get("/", response_model=PostListResponse, include_in_schema=False)
async def list_posts(
    container: BaseContainer = Depends(get_container),
) -> PostListResponse:
    """
    List all posts with author names, newest first
    """
    list_posts_use_case = container.get(ListPostsUseCase)
    posts = await list_posts_use_case.execute()
    return PostListResponse(msg="All posts", posts=posts)


@router.get("/post/{post_id}", response_model=PostDetailEnvelope)
async def get_post(
    post_id: str,
    container: BaseContainer = Depends(get_container),
) -> PostDetailEnvelope:
    """
    Get a post by ID
    """
    get_post_use_case = container.get(GetPostUseCase)
    post = await get_post_use_case.execute(post_id)
    return PostDetailEnvelope(msg="Post found", post=post)


@router.post("/create-post", response_model=PostEnvelope, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    session: Session = Depends(get_session),
    container: BaseContainer = Depends(get_container),
) -> PostEnvelope:
    """
    Create a post authored by the session user
    """
    create_post_use_case = container.get(CreatePostUseCase)
    post = await create_post_use_case.execute(request, session)
    return PostEnvelope(msg="Post created", post=post)


@router.patch("/update-post/{post_id}", response_model=PostEnvelope)
async def update_post(
    post_id: str,
    request: PostUpdateRequest,
    session: Session = Depends(get_session),
    container: BaseContainer = Depends(get_container),
) -> PostEnvelope:
    """
    Update a post owned by the session user
    """
    update_post_use_case = container.get(UpdatePostUseCase)
    post = await update_post_use_case.execute(post_id, request, session)
    return PostEnvelope(msg="Post updated", post=post)


@router.delete("/delete-post/{post_id}", response_model=PostEnvelope)
async def delete_post(
    post_id: str,
    session: Session = Depends(get_session),
    container: BaseContainer = Depends(get_container),
) -> PostEnvelope:
    """
    Delete a post owned by the session user
    """
    delete_post_use_case = container.get(DeletePostUseCase)
    post = await delete_post_use_case.execute(post_id, session)
    return PostEnvelope(msg="Post deleted", post=post)
