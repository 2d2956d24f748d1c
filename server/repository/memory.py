import asyncio
from datetime import UTC, datetime

from core.models.random_result import RandomResultRecord


class InMemoryRandomResultRepository:
    """List-backed store for local demos and tests. Data is lost on restart."""

    def __init__(self) -> None:
        self._records: list[RandomResultRecord] = []
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def connect(self) -> None:
        return

    async def disconnect(self) -> None:
        return

    async def create_random_result(self, value: float) -> RandomResultRecord:
        async with self._lock:
            record = RandomResultRecord(
                id=self._next_id, value=value, created_at=datetime.now(UTC)
            )
            self._records.append(record)
            self._next_id += 1
        return record

    async def list_recent(self, limit: int) -> list[RandomResultRecord]:
        ordered = sorted(self._records, key=lambda r: (r.created_at, r.id), reverse=True)
        return ordered[:limit]

    def __len__(self) -> int:
        return len(self._records)
