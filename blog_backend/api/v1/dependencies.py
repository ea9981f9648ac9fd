# External package imports
from fastapi import Depends, Request

# Local application imports
from ...application.session import Session
from ...core.config import Settings
from ...core.exceptions import ServiceUnavailableError
from ...di.base_container import BaseContainer


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with"""
    return request.app.state.settings


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the DI container built during startup
    
    Raises:
        ServiceUnavailableError: If the application has not finished starting
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise ServiceUnavailableError()
    return container


async def get_session(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> Session:
    """
    FastAPI dependency resolving the caller's session from the session cookie
    
    Never raises: a missing or bad token is recorded on the Session and each
    use case decides whether that is fatal.
    """
    token = request.cookies.get(settings.session_cookie_name)
    return Session.from_token(token)
