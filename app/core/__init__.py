from .config import Settings, get_settings
from .logging import setup_logging
from .security import hash_password

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "hash_password",
]
