"""JSON Model Interchange (JMI) conversions.

Three interchange shapes describe the same set of parent-linked records:

* type 1 (flat): a list of records
* type 2 (map): ``{key: record}``
* type 3 (tree): ``{root_key: record}`` where every record's ``contains``
  maps child keys to the nested child records

Only flat -> map and flat -> tree are supported. The tree path works on deep
copies of the input, so caller records are never modified.
"""

import copy
import logging
from collections.abc import Mapping, Sequence
from enum import IntEnum
from typing import Any

from model_interchange.core.errors import ConversionNotImplementedError, DataFormatError

logger = logging.getLogger(__name__)

Record = dict[str, Any]

_TREE_FIELDS = ("contains", "parent")


class JmiType(IntEnum):
    FLAT = 1
    MAP = 2
    TREE = 3


def _format_error(message: str) -> DataFormatError:
    logger.warning(message)
    return DataFormatError(message)


def _coerce_type(value: int) -> JmiType:
    try:
        return JmiType(value)
    except ValueError:
        raise _format_error(f"Unknown JMI type {value!r}.") from None


def _require_flat(data: Any) -> None:
    if isinstance(data, (str, bytes, Mapping)) or not isinstance(data, Sequence):
        raise _format_error("Data is not in JMI type 1.")
    if not all(isinstance(record, Mapping) for record in data):
        raise _format_error("Every JMI type 1 record must be an object.")


def _require_tree_fields(records: Sequence[Mapping[str, Any]]) -> None:
    for field in _TREE_FIELDS:
        if not all(field in record for record in records):
            raise _format_error(f"Elements must have the '{field}' field to convert to JMI type 3.")


def _parent_key(record: Mapping[str, Any], unique_field: str) -> str | None:
    """Return the parent key of a record whose parent is a key, an object or None."""
    parent = record.get("parent")
    if isinstance(parent, Mapping):
        if unique_field not in parent:
            raise _format_error(f"Embedded parent object is missing the '{unique_field}' field.")
        parent = parent[unique_field]
    if parent is None or isinstance(parent, str):
        return parent
    raise _format_error(f"Invalid parent reference {parent!r}.")


def convert_jmi(
    source: int,
    target: int,
    data: Any,
    key_field: str = "id",
    unique_field: str = "id",
) -> list[Record] | dict[str, Record]:
    """Convert ``data`` from JMI type ``source`` to JMI type ``target``.

    ``key_field`` names the record attribute used as the map key.
    ``unique_field`` names the attribute read from an embedded parent object.
    """
    src = _coerce_type(source)
    dst = _coerce_type(target)
    logger.debug("Converting JMI type %d to type %d", src, dst)

    if src is JmiType.FLAT and dst is JmiType.MAP:
        return to_map(data, key_field)
    if src is JmiType.FLAT and dst is JmiType.TREE:
        return to_tree(data, key_field, unique_field)

    message = f"JMI conversion from type {int(src)} to type {int(dst)} is not implemented."
    logger.warning(message)
    raise ConversionNotImplementedError(message)


def to_map(data: Any, key_field: str = "id") -> dict[str, Record]:
    """Key a flat list of records by ``key_field``; any duplicate key is an error."""
    _require_flat(data)

    result: dict[str, Record] = {}
    for record in data:
        if key_field not in record:
            raise _format_error(f"Record is missing the key field '{key_field}'.")
        key = record[key_field]
        if not isinstance(key, str):
            raise _format_error(f"Key field '{key_field}' must be a string, got {key!r}.")
        if key in result:
            raise _format_error(f"Invalid object, duplicate keys [{key}] exist.")
        result[key] = record
    return result


def to_tree(data: Any, key_field: str = "id", unique_field: str = "id") -> dict[str, Record]:
    """Nest a flat list of records into a containment tree.

    A ``contains`` key with no record in ``data`` is kept as a ``{key: key}``
    placeholder, and the record holding it is never nested itself.
    """
    _require_flat(data)
    _require_tree_fields(data)

    working = to_map([copy.deepcopy(dict(record)) for record in data], key_field)
    return _assemble(working, unique_field)


def assemble_contains(map_data: Mapping[str, Mapping[str, Any]], unique_field: str = "id") -> dict[str, Record]:
    """Nest a JMI type 2 map into a containment tree."""
    if not isinstance(map_data, Mapping):
        raise _format_error("Data is not in JMI type 2.")
    records = list(map_data.values())
    if not all(isinstance(record, Mapping) for record in records):
        raise _format_error("Every JMI type 2 value must be an object.")
    _require_tree_fields(records)

    working = {key: copy.deepcopy(dict(record)) for key, record in map_data.items()}
    return _assemble(working, unique_field)


def _check_containment(index: Mapping[str, Record], unique_field: str) -> None:
    for key, record in index.items():
        children = record["contains"]
        if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
            raise _format_error(f"The 'contains' field of [{key}] must be a list of keys.")
        for child in children:
            if not isinstance(child, str):
                raise _format_error(f"The 'contains' field of [{key}] must be a list of keys.")
            # Keys outside the batch stay as placeholders.
            if child in index and _parent_key(index[child], unique_field) != key:
                raise _format_error(f"Element [{child}] is contained by [{key}] but names a different parent.")


def _check_cycles(index: Mapping[str, Record], unique_field: str) -> None:
    """Walk every parent chain once; revisiting a key on the current chain is a cycle."""
    done: set[str] = set()
    for start in index:
        chain: list[str] = []
        on_chain: set[str] = set()
        key: str | None = start
        while key is not None and key in index and key not in done:
            if key in on_chain:
                raise _format_error("A circular reference exists in the given data.")
            on_chain.add(key)
            chain.append(key)
            key = _parent_key(index[key], unique_field)
        done.update(chain)


def _assemble(working: dict[str, Record], unique_field: str) -> dict[str, Record]:
    # ``working`` holds the top level; ``index`` keeps every record reachable
    # by key after it has been nested.
    index = dict(working)
    _check_containment(index, unique_field)
    _check_cycles(index, unique_field)

    frontier: list[str] = []
    for key, record in index.items():
        children = record["contains"]
        if not children:
            frontier.append(key)
        record["contains"] = {child: child for child in children}

    passes = _promote(working, index, frontier, unique_field)
    logger.debug("Assembled %d record(s) into %d root(s) in %d pass(es)", len(index), len(working), passes)

    for record in working.values():
        if _parent_key(record, unique_field) in index:
            raise _format_error("A circular reference exists in the given data.")

    return working


def _promote(working: dict[str, Record], index: Mapping[str, Record], frontier: list[str], unique_field: str) -> int:
    """Move resolved records into their parents, one tree level per pass.

    Returns the number of passes taken.
    """
    passes = 0
    while frontier:
        passes += 1
        ready: dict[str, None] = {}
        for key in frontier:
            record = index[key]
            parent_key = _parent_key(record, unique_field)
            if parent_key is None or parent_key not in index:
                continue
            parent = index[parent_key]
            parent["contains"][key] = record
            working.pop(key, None)

            grandparent_key = _parent_key(parent, unique_field)
            if (
                parent_key in working
                and grandparent_key is not None
                and grandparent_key in index
                and all(isinstance(child, Mapping) for child in parent["contains"].values())
            ):
                ready[parent_key] = None
        # A parent readied earlier in the pass may already have been moved.
        frontier = [key for key in ready if key in working]
    return passes


def flatten_tree(tree: Mapping[str, Mapping[str, Any]]) -> list[Record]:
    """Collect every record of a JMI type 3 tree, parents before children.

    Returned records are new dicts whose ``contains`` is a list of child keys
    again.
    """
    flat: list[Record] = []
    stack = list(reversed(list(tree.values())))
    while stack:
        record = stack.pop()
        contains = record.get("contains") or {}
        item = {k: v for k, v in record.items() if k != "contains"}
        item["contains"] = list(contains)
        flat.append(item)
        if isinstance(contains, Mapping):
            stack.extend(reversed([child for child in contains.values() if isinstance(child, Mapping)]))
    return flat
