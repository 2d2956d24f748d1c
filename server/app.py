import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.abstract import App
from core.config import Settings
from server.api.errors import APIError, api_error_handler
from server.repository import RandomResultRepository, build_repository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ANN201
    repository: RandomResultRepository = app.state.repository
    try:
        await repository.connect()
    except Exception as e:
        # keep serving; store-backed routes answer with their own 500 until it is reachable
        logger.error(f"Could not connect to the store at startup: {e}", exc_info=True)

    yield

    await repository.disconnect()


def create_app(settings: Settings, repository: RandomResultRepository | None = None) -> FastAPI:
    app = FastAPI(
        title="Pulseboard API",
        description="Health, random value and history endpoints for the Pulseboard dashboard",
        version=settings.service_version,
        docs_url="/docs" if settings.server_debug else None,
        redoc_url="/redoc" if settings.server_debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.repository = repository if repository is not None else build_repository(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]

    from .api.random_result import router as random_result_router
    from .api.service import router as service_router

    app.include_router(service_router)
    app.include_router(random_result_router)

    return app


class ServerApp(App):
    component = "server"

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        self.app = create_app(settings)

    def run(self) -> None:
        self.configure_logging()
        logger.info(f"API ready on http://localhost:{self.settings.server_port}")
        uvicorn.run(
            self.app,
            host=self.settings.server_bind,
            port=self.settings.server_port,
            log_level=self.settings.log_level.lower(),
        )
