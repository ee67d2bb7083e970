from __future__ import annotations

from collections.abc import AsyncIterator

from model_interchange.core.ports.elements import ElementStore
from model_interchange.db.memory import InMemoryElementStore

_store: InMemoryElementStore | None = None


def get_store_instance() -> InMemoryElementStore:
    """Return the process-wide store, creating it lazily on first call."""
    global _store  # noqa: PLW0603
    if _store is None:
        _store = InMemoryElementStore()
    return _store


async def get_store() -> AsyncIterator[ElementStore]:
    yield get_store_instance()


async def shutdown_store() -> None:
    global _store  # noqa: PLW0603
    if _store is not None:
        await _store.dispose()
        _store = None
