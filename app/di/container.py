# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    LoggingProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Logger and database connections (LoggingProvider, DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (UserProvider) - depend on repositories
    
    One container is built per application and kept on ``app.state``.
    """
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        self.register_singleton(Settings, self.settings)
        
        LoggingProvider.register(self)
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        UserProvider.register(self)
