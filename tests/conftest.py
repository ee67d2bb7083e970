"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from model_interchange.db import InMemoryElementStore

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def chain_records() -> list[dict[str, Any]]:
    """root -> mid -> leaf."""
    return [
        {"id": "leaf", "parent": "mid", "contains": [], "name": "Leaf"},
        {"id": "mid", "parent": "root", "contains": ["leaf"], "name": "Mid"},
        {"id": "root", "parent": None, "contains": ["mid"], "name": "Root"},
    ]


@pytest.fixture
def forest_records() -> list[dict[str, Any]]:
    """Two trees: model -> {a -> {a1, a2}, b} and other -> {c}."""
    return [
        {"id": "model", "parent": None, "contains": ["a", "b"]},
        {"id": "a", "parent": "model", "contains": ["a1", "a2"]},
        {"id": "a1", "parent": "a", "contains": []},
        {"id": "a2", "parent": "a", "contains": []},
        {"id": "b", "parent": "model", "contains": []},
        {"id": "other", "parent": None, "contains": ["c"]},
        {"id": "c", "parent": "other", "contains": []},
    ]


@pytest.fixture
def store() -> InMemoryElementStore:
    return InMemoryElementStore()
