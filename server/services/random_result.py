import logging
import math
import random
import re

from core.constants import (
    HISTORY_DEFAULT_LIMIT,
    HISTORY_ERROR_MESSAGE,
    HISTORY_MAX_LIMIT,
    HISTORY_MIN_LIMIT,
    RANDOM_DIGITS,
    SAVE_ERROR_MESSAGE,
)
from core.models.random_result import RandomResultRecord
from server.api.errors import APIError
from server.repository import RandomResultRepository

logger = logging.getLogger(__name__)

DECIMAL_NUMBER = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def generate_value() -> float:
    """Uniform value in [0, 1) with six fractional digits."""
    value = round(random.random(), RANDOM_DIGITS)
    # rounding can carry 0.9999995+ up to 1.0, which is outside the range
    return value if value < 1 else round(1 - 10**-RANDOM_DIGITS, RANDOM_DIGITS)


def normalize_limit(raw: str | float | None) -> int:
    """
    Turn the ``limit`` query value into a usable page size.

    Absent, empty, unparseable or non-finite input falls back to the default;
    anything else is truncated and clamped to the allowed range. Only plain
    decimal notation is accepted, so forms like ``1_5`` count as unparseable.
    """
    if raw is None:
        return HISTORY_DEFAULT_LIMIT

    if isinstance(raw, str) and not DECIMAL_NUMBER.fullmatch(raw):
        return HISTORY_DEFAULT_LIMIT

    number = float(raw)

    if not math.isfinite(number):
        return HISTORY_DEFAULT_LIMIT

    return max(HISTORY_MIN_LIMIT, min(HISTORY_MAX_LIMIT, int(number)))


class RandomResultService:
    def __init__(self, repository: RandomResultRepository) -> None:
        self.repository = repository

    async def record(self) -> RandomResultRecord:
        value = generate_value()
        try:
            record = await self.repository.create_random_result(value)
        except Exception as e:
            logger.error(f"Failed to persist random value {value}: {e}", exc_info=True)
            raise APIError(SAVE_ERROR_MESSAGE) from e

        logger.debug(f"Stored random value {record.value} as #{record.id}")
        return record

    async def history(self, limit: int) -> list[RandomResultRecord]:
        try:
            return await self.repository.list_recent(limit)
        except Exception as e:
            logger.error(f"Failed to fetch history (limit={limit}): {e}", exc_info=True)
            raise APIError(HISTORY_ERROR_MESSAGE) from e
