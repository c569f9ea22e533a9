"""Admin key guard for administrative routes."""

import secrets

from fastapi import Depends
from fastapi.security import APIKeyHeader

from src.portfolio.api.dependencies.config import AppSettings
from src.portfolio.core.exceptions import UnauthorizedError

admin_key_header = APIKeyHeader(name="X-Admin-Key", auto_error=False)


async def require_admin(
    settings: AppSettings,
    api_key: str | None = Depends(admin_key_header),
) -> None:
    """Require ``X-Admin-Key`` when ``ADMIN_API_KEY`` is configured.

    With no key configured every caller is allowed through.
    """
    if settings.admin_api_key is None:
        return
    if api_key is None or not secrets.compare_digest(api_key, settings.admin_api_key):
        raise UnauthorizedError()


AdminGuard = Depends(require_admin)
