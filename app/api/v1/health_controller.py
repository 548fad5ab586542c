# Standard library imports
from typing import Dict

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...core.config import Settings
from .dependencies import get_app_settings


router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)) -> Dict[str, str]:
    return {"status": "healthy", "service": settings.app_name}
