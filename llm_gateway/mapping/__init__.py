"""Path-addressed JSON mapping engine."""

from .path_address import PathSegment, parse_segment, split_path, bare_index
from .json_path import NOT_FOUND, read_path, write_path, as_text
from .translator import build_request_tree, build_request_body, extract_result, validate_mapping

__all__ = [
    "PathSegment",
    "parse_segment",
    "split_path",
    "bare_index",
    "NOT_FOUND",
    "read_path",
    "write_path",
    "as_text",
    "build_request_tree",
    "build_request_body",
    "extract_result",
    "validate_mapping",
]
