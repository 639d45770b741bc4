"""
Path-addressed JSON tree writer and reader.

WHAT: Set and get values inside plain dict/list JSON trees by field path
WHY: One generic mapper replaces every provider-specific (de)serializer
HOW: Writer creates intermediate containers on demand; reader only walks
     existing ones and reports NOT_FOUND on any structural mismatch
"""

import enum
import json
from typing import Any

from .path_address import bare_index, parse_segment, split_path


class _Missing(enum.Enum):
    NOT_FOUND = "NOT_FOUND"

    def __repr__(self) -> str:
        return "NOT_FOUND"


# Returned by read_path when the path does not resolve. Distinct from a JSON null.
NOT_FOUND = _Missing.NOT_FOUND


def write_path(root: dict | list, path: str, value: Any) -> None:
    """
    Set `value` at `path` inside `root`, creating containers as needed.

    Intermediate `name[i]` segments become arrays padded with None up to
    index i, with an empty object placed in slot i. Plain segments become
    objects. A standalone `[i]` segment indexes the current array directly,
    and an intermediate followed by one is created as an array.

    Existing values at the final segment are overwritten.

    Raises:
        TypeError: If a property segment has to be applied to an array root
    """
    texts = split_path(path)
    current = root

    for position, text in enumerate(texts[:-1]):
        kind = list if bare_index(texts[position + 1]) is not None else dict
        current = _descend(current, text, kind)

    _assign(current, texts[-1], value)


def read_path(root: Any, path: str) -> Any:
    """
    Return the node at `path` inside `root`, or NOT_FOUND.

    Never raises and never mutates `root`. Absent properties, out-of-range
    indexes and traversal into scalars all yield NOT_FOUND. A found JSON null
    is returned as None.
    """
    current = root

    for text in split_path(path):
        if isinstance(current, dict):
            segment = parse_segment(text)
            if segment.name not in current:
                return NOT_FOUND
            current = current[segment.name]
            if segment.is_indexed:
                current = _item_at(current, segment.array_index)
        elif isinstance(current, list):
            index = bare_index(text)
            if index is None and text.isascii() and text.isdigit():
                index = int(text)
            current = _item_at(current, index)
        else:
            return NOT_FOUND

        if current is NOT_FOUND:
            return NOT_FOUND

    return current


def as_text(node: Any) -> str | None:
    """
    Coerce a scalar JSON node to text.

    Strings are returned unchanged, numbers and booleans as their JSON
    spelling. Containers, null and NOT_FOUND yield None.
    """
    if isinstance(node, str):
        return node
    if isinstance(node, (bool, int, float)):
        return json.dumps(node)
    return None


def _item_at(node: Any, index: int | None) -> Any:
    if index is None or not isinstance(node, list):
        return NOT_FOUND
    if index < 0 or index >= len(node):
        return NOT_FOUND
    return node[index]


def _grow(array: list, index: int) -> None:
    while len(array) <= index:
        array.append(None)


def _ensure_array(container: dict, name: str) -> list:
    existing = container.get(name)
    if isinstance(existing, list):
        return existing
    array = []
    container[name] = array
    return array


def _ensure_slot(array: list, index: int, kind: type) -> dict | list:
    _grow(array, index)
    slot = array[index]
    if not isinstance(slot, kind):
        slot = kind()
        array[index] = slot
    return slot


def _descend(current: dict | list, text: str, kind: type) -> dict | list:
    index = bare_index(text)
    if index is not None and isinstance(current, list):
        return _ensure_slot(current, index, kind)

    if not isinstance(current, dict):
        raise TypeError(f"Cannot address property '{text}' inside a JSON array")

    segment = parse_segment(text)
    if segment.is_indexed:
        return _ensure_slot(_ensure_array(current, segment.name), segment.array_index, kind)

    child = current.get(segment.name)
    if not isinstance(child, kind):
        child = kind()
        current[segment.name] = child
    return child


def _assign(current: dict | list, text: str, value: Any) -> None:
    index = bare_index(text)
    if index is not None and isinstance(current, list):
        _grow(current, index)
        current[index] = value
        return

    if not isinstance(current, dict):
        raise TypeError(f"Cannot address property '{text}' inside a JSON array")

    segment = parse_segment(text)
    if segment.is_indexed:
        array = _ensure_array(current, segment.name)
        _grow(array, segment.array_index)
        array[segment.array_index] = value
    else:
        current[segment.name] = value
