# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: bool) -> bool:
    """Parse a boolean environment variable, falling back to ``default``."""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "blog")
        
        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        
        # Session cookie. The token expiry follows the cookie max-age.
        self.session_max_age_seconds: Final[int] = int(
            os.getenv("SESSION_MAX_AGE_SECONDS", str(60 * 60 * 2))
        )
        self.session_cookie_name: Final[str] = os.getenv("SESSION_COOKIE_NAME", "TOKEN")
        self.session_cookie_path: Final[str] = os.getenv("SESSION_COOKIE_PATH", "/")
        self.session_cookie_secure: Final[bool] = _env_bool("SESSION_COOKIE_SECURE", True)
        # NOTE: readable by client script unless SESSION_COOKIE_HTTPONLY=1
        self.session_cookie_httponly: Final[bool] = _env_bool("SESSION_COOKIE_HTTPONLY", False)
        self.session_cookie_samesite: Final[str] = os.getenv("SESSION_COOKIE_SAMESITE", "lax")
        
        # HTTP
        self.cors_allow_origins: Final[List[str]] = _env_list(
            "CORS_ALLOW_ORIGINS", "http://localhost:5173"
        )
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
