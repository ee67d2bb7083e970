from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Query, Response, status

from model_interchange.api.dependencies import get_store
from model_interchange.core.elements import create_elements as _create_elements
from model_interchange.core.elements import find_elements as _find_elements
from model_interchange.core.ports.elements import ElementStore
from model_interchange.models import Element

router = APIRouter(prefix="/orgs/{org}/projects/{project}/branches/{branch}", tags=["elements"])


def _json_response(data: Any, minified: bool, status_code: int = status.HTTP_200_OK) -> Response:
    content = json.dumps(data) if minified else json.dumps(data, indent=2)
    return Response(content=content, status_code=status_code, media_type="application/json")


@router.get("/elements")
async def get_elements(
    org: str,
    project: str,
    branch: str,
    ids: list[str] | None = Query(None),
    format: str = Query("jmi1"),
    minified: bool = Query(False),
    store: ElementStore = Depends(get_store),
) -> Response:
    """Return branch elements as a JMI type 1 list, type 2 map or type 3 tree."""
    await store.ensure_ready()
    data = await _find_elements(store, org, project, branch, ids, format)
    return _json_response(data, minified)


@router.post("/elements", status_code=status.HTTP_201_CREATED)
async def post_elements(
    org: str,
    project: str,
    branch: str,
    elements: list[Element],
    minified: bool = Query(False),
    store: ElementStore = Depends(get_store),
) -> Response:
    await store.ensure_ready()
    created = await _create_elements(store, org, project, branch, elements)
    return _json_response(created, minified, status.HTTP_201_CREATED)
