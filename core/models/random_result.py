from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RandomResultRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    value: float
    created_at: datetime = Field(alias="createdAt")


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: datetime


class TestResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    random: float
    id: int
    created_at: datetime = Field(alias="createdAt")


class HistoryResponse(BaseModel):
    count: int
    results: list[RandomResultRecord] = Field(default_factory=list)


class InfoResponse(BaseModel):
    service: str
    version: str
    docs: str


class ErrorResponse(BaseModel):
    error: str
