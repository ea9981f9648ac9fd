# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ...application.dto.base import MessageResponse
from ...application.session import Session
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.logout_user import LogoutUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...core.config import Settings
from ...di.base_container import BaseContainer
from .cookies import clear_session_cookie, set_session_cookie
from .dependencies import get_app_settings, get_container, get_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: UserRegistrationRequest,
    response: Response,
    container: BaseContainer = Depends(get_container),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    """
    Register a new user
    
    When ``loginDirectly`` is true the session cookie is set as well.
    """
    register_use_case = container.get(RegisterUserUseCase)
    result = await register_use_case.execute(request)
    
    if result.token:
        set_session_cookie(response, result.token, settings)
    return AuthResponse(msg=result.msg, user=result.user)


@router.post("/login", response_model=AuthResponse)
async def login_user(
    request: UserLoginRequest,
    response: Response,
    session: Session = Depends(get_session),
    container: BaseContainer = Depends(get_container),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    """
    Authenticate user and set the session cookie
    """
    login_use_case = container.get(LoginUserUseCase)
    result = await login_use_case.execute(request, session)
    
    set_session_cookie(response, result.token, settings)
    return AuthResponse(msg=result.msg, user=result.user)


@router.post("/logout", response_model=MessageResponse)
async def logout_user(
    response: Response,
    session: Session = Depends(get_session),
    container: BaseContainer = Depends(get_container),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    """
    End the session by removing the session cookie
    """
    logout_use_case = container.get(LogoutUserUseCase)
    msg = await logout_use_case.execute(session)
    
    clear_session_cookie(response, settings)
    if session.user_id:
        logger.info(f"User {session.user_id} logged out")
    return MessageResponse(msg=msg)


@router.get("/me", response_model=AuthResponse)
async def get_me(
    session: Session = Depends(get_session),
    container: BaseContainer = Depends(get_container),
) -> AuthResponse:
    """
    Get current authenticated user information
    """
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    user = await get_current_user_use_case.execute(session)
    return AuthResponse(msg="User exists", user=user)
