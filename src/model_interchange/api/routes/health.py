from fastapi import APIRouter, Depends, Response, status

from model_interchange.api.dependencies import get_store
from model_interchange.api.schemas import HealthResponse, ReadinessResponse
from model_interchange.core.ports.elements import ElementStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(response: Response, store: ElementStore = Depends(get_store)) -> ReadinessResponse:
    """Ready once the element store answers a ping."""
    if not await store.ping():
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadinessResponse(status="degraded", store="down")
    return ReadinessResponse()
