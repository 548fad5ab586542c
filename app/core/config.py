# Standard library imports
import os
from typing import Final, List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        self.app_name: Final[str] = os.getenv("APP_NAME", "user-api")
        
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "user_api")
        self.mongo_users_collection: Final[str] = os.getenv("MONGO_USERS_COLLECTION", "users")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format: Final[str] = os.getenv("LOG_FORMAT", "json").lower()
        
        # Error responses carry the raw store error only when explicitly enabled
        self.expose_internal_errors: Final[bool] = _env_flag("EXPOSE_INTERNAL_ERRORS")
        
        # HTTP Configuration
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.api_host: Final[str] = os.getenv("API_HOST", "0.0.0.0")
        self.api_port: Final[int] = int(os.getenv("API_PORT", "8000"))


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
