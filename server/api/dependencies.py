from typing import Annotated

from fastapi import Depends, Request

from core.config import Settings
from server.repository import RandomResultRepository
from server.services import RandomResultService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> RandomResultRepository:
    return request.app.state.repository


def get_random_result_service(
    repository: Annotated[RandomResultRepository, Depends(get_repository)],
) -> RandomResultService:
    return RandomResultService(repository)


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
RandomResultServiceDep = Annotated[RandomResultService, Depends(get_random_result_service)]
