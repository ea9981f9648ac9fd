# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt

# Local application imports
from .config import get_settings
from .exceptions import InvalidTokenError


# Claim carrying the session identity inside the signed token
SESSION_USER_CLAIM = "loggedInUserId"

# bcrypt ignores everything after this many bytes
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash or over-long password
        return False


def create_jwt_token(payload: Dict[str, Any], expires_in_seconds: Optional[int] = None) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims
        expires_in_seconds: Lifetime override, defaults to the session max-age

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    lifetime = settings.session_max_age_seconds if expires_in_seconds is None else expires_in_seconds
    issued_at = int(time.time())
    expires_at = issued_at + int(lifetime)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    token = jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )
    return token


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        InvalidTokenError: If token is tampered, signed with another secret or expired
    """
    if not token:
        raise InvalidTokenError(details={"reason": "token_blank"})
    settings = get_settings()
    try:
        decoded = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
        return decoded
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError(details={"reason": "token_expired"})
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(details={"reason": f"token_invalid: {e}"})


def create_session_token(user_id: str) -> str:
    """Sign a session token asserting ``user_id``."""
    return create_jwt_token({SESSION_USER_CLAIM: user_id})


def decode_session_token(token: str) -> str:
    """
    Verify a session token and return the user id it carries

    Raises:
        InvalidTokenError: If the token does not verify or lacks the identity claim
    """
    payload = decode_jwt_token(token)
    user_id = payload.get(SESSION_USER_CLAIM)
    if not user_id or not isinstance(user_id, str):
        raise InvalidTokenError(details={"reason": "token_missing_user"})
    return user_id
