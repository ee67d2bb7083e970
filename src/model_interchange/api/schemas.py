from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from model_interchange.core.jmi import JmiType


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    store: str = "up"


class ConvertRequest(BaseModel):
    """POST /convert — conversion request."""

    source: JmiType = JmiType.FLAT
    target: JmiType
    data: Any
    key_field: str | None = Field(default=None, min_length=1)
    unique_field: str | None = Field(default=None, min_length=1)
