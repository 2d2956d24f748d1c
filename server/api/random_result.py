from fastapi import APIRouter

from core.constants import TEST_MESSAGE
from core.models.random_result import ErrorResponse, HistoryResponse, TestResponse
from server.api.dependencies import RandomResultServiceDep
from server.services import normalize_limit

router = APIRouter(tags=["Random"])

ERROR_RESPONSES = {500: {"model": ErrorResponse}}


@router.get("/test", response_model=TestResponse, responses=ERROR_RESPONSES)
async def test(service: RandomResultServiceDep) -> TestResponse:
    """Generate a random value and save it."""
    record = await service.record()

    return TestResponse(
        message=TEST_MESSAGE,
        random=record.value,
        id=record.id,
        created_at=record.created_at,
    )


@router.get("/history", response_model=HistoryResponse, responses=ERROR_RESPONSES)
async def history(service: RandomResultServiceDep, limit: str | None = None) -> HistoryResponse:
    """Most recently saved values, newest first. ``limit`` is clamped to 1..50."""
    results = await service.history(normalize_limit(limit))

    return HistoryResponse(count=len(results), results=results)
