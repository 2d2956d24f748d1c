from core.config import Settings
from server.repository.base import RandomResultRepository
from server.repository.memory import InMemoryRandomResultRepository
from server.repository.prisma_store import PrismaRandomResultRepository


def build_repository(settings: Settings) -> RandomResultRepository:
    """Pick the store configured by DATABASE_BACKEND."""
    if settings.database_backend == "memory":
        return InMemoryRandomResultRepository()

    # the generated client only exists after `prisma generate`
    from prisma import Prisma

    return PrismaRandomResultRepository(Prisma())


__all__ = [
    "InMemoryRandomResultRepository",
    "PrismaRandomResultRepository",
    "RandomResultRepository",
    "build_repository",
]
