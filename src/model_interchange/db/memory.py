import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from model_interchange.core.errors import DataFormatError
from model_interchange.core.jmi import to_map, to_tree
from model_interchange.models import Element

logger = logging.getLogger(__name__)

ScopeKey = tuple[str, str, str]


@dataclass(frozen=True)
class InMemoryElement:
    id: str
    name: str
    parent: str | None
    type: str
    documentation: str
    source: str | None
    target: str | None
    custom: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_element(cls, element: Element) -> "InMemoryElement":
        return cls(**element.model_dump())


class InMemoryElementStore:
    def __init__(self) -> None:
        self.branches: dict[ScopeKey, dict[str, InMemoryElement]] = {}

    async def ensure_ready(self) -> None:
        pass

    async def find_elements(
        self,
        org: str,
        project: str,
        branch: str,
        ids: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        scope = (org, project, branch)
        stored = self.branches.get(scope, {})
        children = _children_by_parent(stored.values())
        wanted = set(ids) if ids is not None else None
        return [
            _public_data(element, scope, children.get(element.id, []))
            for element in stored.values()
            if wanted is None or element.id in wanted
        ]

    async def create_elements(
        self,
        org: str,
        project: str,
        branch: str,
        elements: list[Element],
    ) -> list[dict[str, Any]]:
        scope = (org, project, branch)
        stored = self.branches.get(scope, {})
        batch = to_map([e.model_dump() for e in elements])

        existing = sorted(set(batch) & set(stored))
        if existing:
            raise DataFormatError(f"Elements with the following IDs already exist [{', '.join(existing)}].")

        for element in elements:
            for ref_name in ("parent", "source", "target"):
                ref = getattr(element, ref_name)
                if ref is not None and ref not in batch and ref not in stored:
                    raise DataFormatError(f"The {ref_name} element [{ref}] of [{element.id}] was not found.")

        merged = {**stored, **{e.id: InMemoryElement.from_element(e) for e in elements}}
        children = _children_by_parent(merged.values())
        # Rejects parent cycles introduced by the batch.
        to_tree([_public_data(e, scope, children.get(e.id, [])) for e in merged.values()])

        self.branches[scope] = merged
        logger.info("Created %d element(s) in %s/%s/%s", len(elements), org, project, branch)
        return [_public_data(merged[e.id], scope, children.get(e.id, [])) for e in elements]

    async def ping(self) -> bool:
        return True

    async def dispose(self) -> None:
        pass


def _children_by_parent(elements: Iterable[InMemoryElement]) -> dict[str, list[str]]:
    children: dict[str, list[str]] = {}
    for element in elements:
        if element.parent is not None:
            children.setdefault(element.parent, []).append(element.id)
    return children


def _public_data(element: InMemoryElement, scope: ScopeKey, contains: list[str]) -> dict[str, Any]:
    org, project, branch = scope
    return {
        "id": element.id,
        "name": element.name,
        "parent": element.parent,
        "type": element.type,
        "documentation": element.documentation,
        "source": element.source,
        "target": element.target,
        "custom": dict(element.custom),
        "contains": list(contains),
        "org": org,
        "project": project,
        "branch": branch,
    }
