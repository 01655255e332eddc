from fastapi import APIRouter, Depends, Response, status

from modulepreload.api.dependencies import get_config
from modulepreload.api.schemas import HealthResponse, ReadinessResponse
from modulepreload.config import ServerConfig

router = APIRouter()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe — is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    config: ServerConfig = Depends(get_config),
) -> ReadinessResponse:
    """Readiness probe — checks that the static root can be served."""
    if config.static_root.is_dir():
        return ReadinessResponse(status="ok", static_root="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", static_root="down")
