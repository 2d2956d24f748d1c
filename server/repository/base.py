from typing import Protocol

from core.models.random_result import RandomResultRecord


class RandomResultRepository(Protocol):
    """Storage for generated random values."""

    async def connect(self) -> None: ...

    async def disconnect(self) -> None: ...

    async def create_random_result(self, value: float) -> RandomResultRecord:
        """
        Persist a new value.

        Args:
            value: Random value to store

        Returns:
            The stored record, with its generated id and creation time
        """
        ...

    async def list_recent(self, limit: int) -> list[RandomResultRecord]:
        """
        Fetch the most recent records, newest first.

        Args:
            limit: Maximum number of records to return
        """
        ...
