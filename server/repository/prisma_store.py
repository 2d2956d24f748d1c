import logging
from typing import TYPE_CHECKING, Any

from core.models.random_result import RandomResultRecord

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)

NEWEST_FIRST = [{"createdAt": "desc"}, {"id": "desc"}]


class PrismaRandomResultRepository:
    """Repository backed by the generated Prisma client (see schema.prisma)."""

    def __init__(self, db: "Prisma") -> None:
        self.db = db

    async def connect(self) -> None:
        await self.db.connect()
        logger.info("Connected to database")

    async def disconnect(self) -> None:
        if self.db.is_connected():
            await self.db.disconnect()

    async def create_random_result(self, value: float) -> RandomResultRecord:
        row = await self.db.randomresult.create(data={"value": value})
        return self._to_record(row)

    async def list_recent(self, limit: int) -> list[RandomResultRecord]:
        rows = await self.db.randomresult.find_many(take=limit, order=NEWEST_FIRST)
        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row: Any) -> RandomResultRecord:
        return RandomResultRecord(id=row.id, value=row.value, created_at=row.createdAt)
