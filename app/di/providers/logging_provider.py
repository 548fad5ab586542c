import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..base_container import BaseContainer


USERS_LOGGER_NAME = "app.users"


class LoggingProvider:
    """Registers the logger handed to request handlers"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(logging.Logger, logging.getLogger(USERS_LOGGER_NAME))
