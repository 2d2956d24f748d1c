from datetime import UTC, datetime

from fastapi import APIRouter

from core.models.random_result import HealthResponse, InfoResponse
from server.api.dependencies import SettingsDep

router = APIRouter(tags=["Service"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(timestamp=datetime.now(UTC))


@router.get("/info", response_model=InfoResponse)
async def info(settings: SettingsDep) -> InfoResponse:
    return InfoResponse(
        service=settings.service_name,
        version=settings.service_version,
        docs=settings.service_docs,
    )
