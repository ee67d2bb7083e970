from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint."""
    return {
        "meta": {
            "title": "Model Interchange API",
            "description": "Serve engineering model elements as JMI lists, maps and trees.",
            "version": "0.1.0",
            "formats": ["jmi1", "jmi2", "jmi3"],
        },
        "links": {
            "self": "/",
            "elements": "/orgs/{org}/projects/{project}/branches/{branch}/elements",
            "convert": "/convert",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
