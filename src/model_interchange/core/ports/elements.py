from typing import Any, Protocol

from model_interchange.models import Element


class ElementStore(Protocol):
    async def ensure_ready(self) -> None: ...

    async def find_elements(
        self,
        org: str,
        project: str,
        branch: str,
        ids: list[str] | None = None,
    ) -> list[dict[str, Any]]: ...

    async def create_elements(
        self,
        org: str,
        project: str,
        branch: str,
        elements: list[Element],
    ) -> list[dict[str, Any]]: ...

    async def ping(self) -> bool: ...

    async def dispose(self) -> None: ...
