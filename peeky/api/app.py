"""Application-level commands."""

from typing import Annotated

from fastapi import APIRouter, Depends

from peeky.config import Settings, get_settings
from peeky.schemas.app import AppInfo

router = APIRouter(prefix="/invoke", tags=["app"])


@router.post("/ping")
def ping() -> str:
    """Liveness check for the shell's command bridge."""
    return "pong"


@router.post("/get_app_info", response_model=AppInfo)
def get_app_info(settings: Annotated[Settings, Depends(get_settings)]):
    """Report app metadata and the shell's default window labels and shortcuts."""
    return AppInfo(
        name=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        window_labels={
            "main": settings.main_window_label,
            "overlay": settings.overlay_window_label,
        },
        shortcuts={
            "toggleOverlay": settings.toggle_overlay_shortcut,
            "toggleMain": settings.toggle_main_shortcut,
        },
    )
