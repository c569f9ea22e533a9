"""Settings dependency."""

from typing import Annotated

from fastapi import Depends, Request

from src.portfolio.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]
