from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseSettings):
    server_bind: str = "0.0.0.0"
    server_port: int = Field(default=4000, validation_alias=AliasChoices("PORT", "SERVER_PORT"))
    server_debug: bool = False

    database_backend: Literal["prisma", "memory"] = "prisma"

    service_name: str = "pulseboard-api"
    service_version: str = "1.0.0"
    service_docs: str = "https://fastapi.tiangolo.com/reference/"

    # the VITE_ name is kept so one .env serves both the old web frontend and this client
    api_base_url: str = Field(
        default="http://localhost:4000",
        validation_alias=AliasChoices("VITE_API_BASE_URL", "API_BASE_URL"),
    )
    client_request_timeout: float | None = None

    client_title: str = "Service Pulseboard"
    client_width: int = 1000
    client_height: int = 860
    client_fps: int = 30

    # names understood by both logging and uvicorn
    log_level: LogLevel = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().upper()
            return LOG_LEVEL_ALIASES.get(value, value)
        return value


settings = Settings()


def get_settings() -> Settings:
    return settings
