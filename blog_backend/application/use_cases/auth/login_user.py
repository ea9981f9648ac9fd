# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import (
    AlreadyAuthenticatedError,
    InvalidCredentialsError,
    NotFoundError,
)
from ....core.security import verify_password, create_session_token
from ...dto.auth_dto import UserLoginRequest, AuthResult
from ...dto.user_dto import to_user_response
from ...session import Session

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a session token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserLoginRequest, session: Session) -> AuthResult:
        """
        Authenticate user and generate a session token
        
        An existing session is never replaced by logging in again; the
        caller has to log out first.
        
        Args:
            request: Login request with email and password
            session: The caller's current session
            
        Returns:
            AuthResult carrying the signed session token
            
        Raises:
            AlreadyAuthenticatedError: A session cookie is already present
            NotFoundError: No user with that email
            InvalidCredentialsError: Password does not match
        """
        if session.present:
            raise AlreadyAuthenticatedError()
        
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise NotFoundError(f"No user with email {request.email} exists")
        
        if not verify_password(request.password, user.hashed_password):
            logger.warning(f"Failed login for user {user.id}")
            raise InvalidCredentialsError()
        
        token = create_session_token(user.id)
        logger.info(f"User {user.id} logged in")
        
        return AuthResult(msg="Logged in", user=to_user_response(user), token=token)
