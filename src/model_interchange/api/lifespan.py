from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from model_interchange.api.dependencies import get_store_instance, shutdown_store
from model_interchange.config import get_settings
from model_interchange.db.seed import load_seed_file


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    if settings.seed_file:
        await load_seed_file(get_store_instance(), settings.seed_file)
    yield
    await shutdown_store()
