from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from model_interchange.api.schemas import ConvertRequest
from model_interchange.config import get_settings
from model_interchange.core.jmi import convert_jmi

router = APIRouter(tags=["convert"])


@router.post("/convert")
async def convert(body: ConvertRequest) -> Any:
    """Convert posted records between JMI types."""
    settings = get_settings()
    return convert_jmi(
        body.source,
        body.target,
        body.data,
        key_field=body.key_field or settings.key_field,
        unique_field=body.unique_field or settings.unique_field,
    )
