"""Health endpoints."""

import secrets
import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.portfolio.core.config import Settings
from src.portfolio.core.db import get_session
from src.portfolio.schemas.common import StatusResponse

API_STATUS = "API running"


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the root status route and the store health check."""

    @app.get("/", response_model=StatusResponse, tags=["health"])
    async def root() -> StatusResponse:
        return StatusResponse(status=API_STATUS)

    @app.get("/health", tags=["health"])
    async def health(request: Request) -> JSONResponse:
        """Health check with store connectivity validation."""
        health_status: dict[str, Any] = {
            "status": "healthy",
            "database": "unknown",
            "timestamp": time.time(),
        }

        engine = request.app.state.engine
        try:
            if engine is None:
                raise RuntimeError("store not initialised")
            async with get_session(engine) as session:
                await session.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            health_status["database"] = f"unhealthy: {e!s}"
            health_status["status"] = "unhealthy"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)


def setup_metrics_endpoint(app: FastAPI, settings: Settings) -> None:
    """Expose Prometheus metrics, behind X-Metrics-Key when one is configured."""
    instrumentator = Instrumentator().instrument(app)

    if not settings.metrics_api_key:
        instrumentator.expose(app, endpoint="/metrics")
        return

    api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
        expected = settings.metrics_api_key or ""
        if api_key is None or not secrets.compare_digest(api_key, expected):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])
