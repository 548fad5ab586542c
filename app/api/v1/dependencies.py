# Standard library imports
import logging
from typing import Any, Callable, Hashable

# External package imports
from fastapi import Depends, Request

# Local application imports
from ...core.config import Settings
from ...di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the DI container of the running application
    
    Args:
        request: Incoming request (gives access to ``app.state``)
        
    Returns:
        Container built by ``create_application``
    """
    return request.app.state.container


def provide(key: Hashable) -> Callable[..., Any]:
    """
    Build a FastAPI dependency that resolves ``key`` from the container
    
    Args:
        key: Registration key (usually a class)
        
    Returns:
        Dependency callable suitable for ``Depends``
    """
    def _resolve(container: BaseContainer = Depends(get_container)) -> Any:
        return container.get(key)
    
    _resolve.__name__ = f"provide_{getattr(key, '__name__', key)}"
    return _resolve


get_logger = provide(logging.Logger)
get_app_settings = provide(Settings)
