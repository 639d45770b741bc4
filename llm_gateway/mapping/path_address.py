"""
Field path parsing.

WHAT: Split dotted field paths and parse `name[index]` segments
WHY: Provider schemas are addressed by user-authored strings in the config file
HOW: Pure functions, permissive fallback to a literal property name on bad syntax
"""

import re
from dataclasses import dataclass

# name[digits], name may not contain an opening bracket
_INDEXED_SEGMENT = re.compile(r"(?P<name>[^\[]+)\[(?P<index>[0-9]+)\]")
_BARE_INDEX = re.compile(r"\[(?P<index>[0-9]+)\]")


@dataclass(frozen=True)
class PathSegment:
    """One dotted segment of a field path."""
    name: str
    array_index: int | None = None

    @property
    def is_indexed(self) -> bool:
        return self.array_index is not None


def split_path(path: str) -> list[str]:
    """Split a dotted field path into segment texts."""
    return path.split(".")


def parse_segment(text: str) -> PathSegment:
    """
    Parse a single path segment.

    `parts[0]` yields PathSegment("parts", 0). Anything without that exact
    shape (including `[0]`, `parts[]`, `parts[x]`, `parts[0]x`) is returned
    as a plain property name equal to the whole text.
    """
    match = _INDEXED_SEGMENT.fullmatch(text)
    if match is None:
        return PathSegment(name=text)
    return PathSegment(name=match.group("name"), array_index=int(match.group("index")))


def bare_index(text: str) -> int | None:
    """Return n for a standalone `[n]` segment, else None."""
    match = _BARE_INDEX.fullmatch(text)
    if match is None:
        return None
    return int(match.group("index"))
