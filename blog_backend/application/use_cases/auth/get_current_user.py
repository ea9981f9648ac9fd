# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import NoSessionError, NotFoundError
from ...dto.user_dto import UserResponse, to_user_response
from ...session import Session


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from the session token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, session: Session) -> UserResponse:
        """
        Get current user from the session
        
        The profile is re-read from the store; nothing but the id is taken
        from the token.
        
        Args:
            session: The caller's session
            
        Returns:
            UserResponse with user information
            
        Raises:
            NoSessionError: No session cookie
            InvalidTokenError: Token is invalid or expired
            NotFoundError: Token names a user that does not exist
        """
        user_id = session.require_user_id(missing=NoSessionError)
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        
        return to_user_response(user)
