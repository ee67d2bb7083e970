from pathlib import Path

import pytest

from model_interchange.core.errors import DataFormatError
from model_interchange.db import InMemoryElementStore, load_seed_file
from model_interchange.models import Element

SCOPE = ("org", "proj", "master")


def _elements() -> list[Element]:
    return [
        Element(id="model", name="Model"),
        Element(id="pkg", name="Package", parent="model"),
        Element(id="block", name="Block", parent="pkg", type="Block"),
        Element(id="rel", name="Satisfies", parent="model", source="block", target="pkg"),
    ]


@pytest.mark.asyncio
async def test_created_elements_report_contains(store: InMemoryElementStore) -> None:
    created = await store.create_elements(*SCOPE, _elements())

    assert [e["id"] for e in created] == ["model", "pkg", "block", "rel"]
    by_id = {e["id"]: e for e in created}
    assert by_id["model"]["contains"] == ["pkg", "rel"]
    assert by_id["pkg"]["contains"] == ["block"]
    assert by_id["block"]["contains"] == []
    assert by_id["block"]["org"] == "org"
    assert by_id["block"]["branch"] == "master"


@pytest.mark.asyncio
async def test_find_elements_filters_by_id(store: InMemoryElementStore) -> None:
    await store.create_elements(*SCOPE, _elements())

    found = await store.find_elements(*SCOPE, ids=["pkg", "missing"])

    assert [e["id"] for e in found] == ["pkg"]
    assert found[0]["contains"] == ["block"]


@pytest.mark.asyncio
async def test_branches_are_isolated(store: InMemoryElementStore) -> None:
    await store.create_elements(*SCOPE, _elements())

    assert await store.find_elements("org", "proj", "other") == []


@pytest.mark.asyncio
async def test_contains_includes_children_from_later_batches(store: InMemoryElementStore) -> None:
    await store.create_elements(*SCOPE, _elements())
    await store.create_elements(*SCOPE, [Element(id="port", parent="block")])

    found = await store.find_elements(*SCOPE, ids=["block"])

    assert found[0]["contains"] == ["port"]


@pytest.mark.asyncio
async def test_duplicate_ids_in_batch_are_rejected(store: InMemoryElementStore) -> None:
    with pytest.raises(DataFormatError, match="duplicate keys"):
        await store.create_elements(*SCOPE, [Element(id="a"), Element(id="a")])
    assert store.branches == {}


@pytest.mark.asyncio
async def test_existing_ids_are_rejected(store: InMemoryElementStore) -> None:
    await store.create_elements(*SCOPE, _elements())

    with pytest.raises(DataFormatError, match=r"already exist \[pkg\]"):
        await store.create_elements(*SCOPE, [Element(id="pkg")])


@pytest.mark.asyncio
async def test_unknown_parent_is_rejected(store: InMemoryElementStore) -> None:
    with pytest.raises(DataFormatError, match=r"parent element \[ghost\]"):
        await store.create_elements(*SCOPE, [Element(id="a", parent="ghost")])


@pytest.mark.asyncio
async def test_unknown_relationship_target_is_rejected(store: InMemoryElementStore) -> None:
    with pytest.raises(DataFormatError, match=r"target element \[nowhere\]"):
        await store.create_elements(*SCOPE, [Element(id="a"), Element(id="r", source="a", target="nowhere")])


@pytest.mark.asyncio
async def test_parent_cycles_are_rejected(store: InMemoryElementStore) -> None:
    with pytest.raises(DataFormatError, match="circular reference"):
        await store.create_elements(*SCOPE, [Element(id="a", parent="b"), Element(id="b", parent="a")])
    assert await store.find_elements(*SCOPE) == []


@pytest.mark.asyncio
async def test_self_parent_is_rejected(store: InMemoryElementStore) -> None:
    with pytest.raises(DataFormatError, match="circular reference"):
        await store.create_elements(*SCOPE, [Element(id="a", parent="a")])


@pytest.mark.asyncio
async def test_ping(store: InMemoryElementStore) -> None:
    assert await store.ping() is True


@pytest.mark.asyncio
async def test_load_seed_file_groups_by_branch(tmp_path: Path, store: InMemoryElementStore) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text(
        """[
            {"org": "o", "project": "p", "branch": "b1", "id": "model"},
            {"org": "o", "project": "p", "branch": "b2", "id": "model"},
            {"org": "o", "project": "p", "branch": "b1", "id": "a", "parent": "model"}
        ]""",
        encoding="utf-8",
    )

    count = await load_seed_file(store, seed)

    assert count == 3
    assert [e["id"] for e in await store.find_elements("o", "p", "b1")] == ["model", "a"]
    assert [e["id"] for e in await store.find_elements("o", "p", "b2")] == ["model"]


@pytest.mark.asyncio
async def test_load_seed_file_rejects_invalid_json(tmp_path: Path, store: InMemoryElementStore) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text("[{", encoding="utf-8")

    with pytest.raises(DataFormatError, match="Invalid seed file"):
        await load_seed_file(store, seed)


@pytest.mark.asyncio
async def test_load_seed_file_rejects_unscoped_elements(tmp_path: Path, store: InMemoryElementStore) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text('[{"id": "model"}]', encoding="utf-8")

    with pytest.raises(DataFormatError, match="Invalid seed file"):
        await load_seed_file(store, seed)


@pytest.mark.asyncio
async def test_load_seed_file_rejects_missing_file(tmp_path: Path, store: InMemoryElementStore) -> None:
    with pytest.raises(DataFormatError, match="Invalid seed file"):
        await load_seed_file(store, tmp_path / "missing.json")


@pytest.mark.asyncio
async def test_load_seed_file_rejects_non_utf8(tmp_path: Path, store: InMemoryElementStore) -> None:
    seed = tmp_path / "seed.json"
    seed.write_bytes(b'[{"id": "\xff"}]')

    with pytest.raises(DataFormatError, match="Invalid seed file"):
        await load_seed_file(store, seed)
