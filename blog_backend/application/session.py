# Standard library imports
import logging
from dataclasses import dataclass
from typing import Optional, Type

# Local application imports
from ..core.exceptions import InvalidTokenError, UnauthenticatedError
from ..core.security import decode_session_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """
    The caller's session, resolved once per request from the session cookie.

    Three states:
      - absent: no cookie was sent
      - verified: cookie present and the token verified, ``user_id`` is set
      - rejected: cookie present but the token failed verification, ``error`` is set
    """
    token: Optional[str] = None
    user_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def absent(cls) -> "Session":
        return cls()

    @classmethod
    def from_token(cls, token: Optional[str]) -> "Session":
        """Verify ``token`` and capture the outcome instead of raising."""
        if token is None:
            return cls.absent()
        try:
            user_id = decode_session_token(token)
        except InvalidTokenError as exception:
            reason = exception.details.get("reason", exception.message)
            logger.warning(f"Session token rejected: {reason}")
            return cls(token=token, error=str(reason))
        return cls(token=token, user_id=user_id)

    @property
    def present(self) -> bool:
        return self.token is not None

    @property
    def verified(self) -> bool:
        return self.user_id is not None

    def require_user_id(
        self,
        missing: Type[UnauthenticatedError] = UnauthenticatedError,
        invalid_message: Optional[str] = None,
    ) -> str:
        """
        Return the verified user id or raise.

        Args:
            missing: Error raised when no cookie was sent
            invalid_message: Message for the InvalidTokenError raised when the token did not verify

        Raises:
            UnauthenticatedError (or ``missing``): no session cookie
            InvalidTokenError: token present but not valid
        """
        if not self.present:
            raise missing()
        if self.user_id is None:
            raise InvalidTokenError(invalid_message, details={"reason": self.error})
        return self.user_id
