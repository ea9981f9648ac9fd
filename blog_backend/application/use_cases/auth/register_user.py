# Standard library imports
import logging
import uuid

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password, create_session_token
from ....utils.datetime_utils import utc_now
from ...dto.auth_dto import UserRegistrationRequest, AuthResult
from ...dto.user_dto import to_user_response

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRegistrationRequest) -> AuthResult:
        """
        Register a new user, optionally logging them in straight away
        
        Args:
            request: Registration request with user details
            
        Returns:
            AuthResult with the created user and, when ``login_directly``
            is set, a signed session token
            
        Raises:
            ConstraintViolationError: If a user with this email already exists
        """
        new_user = User(
            id=str(uuid.uuid4()),
            name=request.name,
            email=request.email,
            hashed_password=hash_password(request.password),
            created_at=utc_now(),
        )
        
        # Uniqueness of email is enforced by the store
        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.id}")
        
        user = to_user_response(saved_user)
        if request.login_directly:
            token = create_session_token(saved_user.id)
            return AuthResult(msg="Registered and logged in", user=user, token=token)
        
        return AuthResult(msg="Registered", user=user)
