# Local application imports
from ....core.exceptions import NoSessionError
from ...session import Session


class LogoutUserUseCase:
    """Use case for ending the caller's session"""
    
    async def execute(self, session: Session) -> str:
        """
        Check that there is a session to end.
        
        The token is not verified: any cookie, valid or not, can be cleared.
        The API layer removes the cookie.
        
        Raises:
            NoSessionError: No session cookie was sent
        """
        if not session.present:
            raise NoSessionError()
        return "Logged out"
