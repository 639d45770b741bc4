"""
Payload translator.

WHAT: Build provider request bodies and extract answers/errors from responses
WHY: Provider behaviour is pure data (field paths), never per-provider code
HOW: Repeated write_path calls assemble the outbound tree; read_path pulls
     the answer or error text from the parsed inbound tree

Build order for the outbound tree:
    1. static fields, then the model name (if a path is configured)
    2. system prompt (if a path is configured and a prompt is present)
    3. temperature
    4. one object per turn (role + content at their relative paths)
    5. the array of turns at the messages-array path
"""

import copy
import json
from typing import Any

from ..models.result import CanonicalResult
from ..models.chat import LLMRequest
from ..models.provider_config import ModelConfig, RequestResponseMapping
from ..utils.exceptions import ConfigurationError, ParseError
from ..utils.logger import get_logger
from .json_path import NOT_FOUND, as_text, read_path, write_path

logger = get_logger(__name__)


def validate_mapping(mapping: RequestResponseMapping, model_name: str | None = None) -> None:
    """
    Fail fast on blank required paths.

    Raises:
        ConfigurationError: Naming the first blank required path
    """
    missing = mapping.missing_required()
    if missing:
        raise ConfigurationError(
            f"Mapping for model '{model_name}' is missing required path(s): {', '.join(missing)}",
            field=missing[0],
            details={"missing": missing, "model_name": model_name},
        )


def build_request_tree(model: ModelConfig, request: LLMRequest) -> dict:
    """
    Assemble the outbound JSON tree for one request.

    Raises:
        ConfigurationError: If a required mapping path is blank
    """
    mapping = model.mapping
    validate_mapping(mapping, model.model_name)

    root: dict = {}

    for path, value in mapping.static_fields.items():
        write_path(root, path, copy.deepcopy(value))

    if mapping.model_name_path:
        write_path(root, mapping.model_name_path, model.model_name)

    if request.system_prompt and mapping.system_prompt_path:
        write_path(root, mapping.system_prompt_path, request.system_prompt)

    write_path(root, mapping.temperature_path, request.temperature)

    messages: list[dict] = []
    for message in request.conversation:
        turn: dict = {}
        write_path(turn, mapping.message_role_path, message.role.value.lower())
        write_path(turn, mapping.message_content_path, message.content)
        messages.append(turn)
    write_path(root, mapping.messages_array_path, messages)

    logger.debug(
        f"Built request tree for {model.model_name} "
        f"({len(messages)} turns, system_prompt={'yes' if request.system_prompt and mapping.system_prompt_path else 'no'})"
    )
    return root


def build_request_body(model: ModelConfig, request: LLMRequest) -> str:
    """Serialized outbound JSON body for one request."""
    return json.dumps(build_request_tree(model, request), ensure_ascii=False)


def extract_result(model: ModelConfig, status_code: int, body_text: str) -> CanonicalResult:
    """
    Translate a raw provider response into a canonical result.

    Non-success statuses become a failure carrying the status and the text
    found at the error path, or the raw body when that path is blank, absent,
    non-scalar, or the body is not JSON.

    Raises:
        ParseError: Success status but the body is not valid JSON
        ConfigurationError: Success body has no scalar at the response-content path
    """
    mapping = model.mapping

    if not 200 <= status_code < 300:
        message = _extract_error_message(mapping, body_text)
        logger.debug(f"Extracted provider error for {model.model_name} (status={status_code})")
        return CanonicalResult.failure(status_code, message)

    try:
        tree = json.loads(body_text)
    except json.JSONDecodeError as e:
        raise ParseError(raw_body=body_text, status_code=status_code, reason=str(e)) from e

    node = read_path(tree, mapping.response_content_path)
    if node is NOT_FOUND:
        raise ConfigurationError(
            "Failed to extract content from the successful API response. "
            "Check the 'response_content_path' mapping.",
            path=mapping.response_content_path,
            field="response_content_path",
            details={"reason": "Content path not found in JSON response."},
        )

    text = as_text(node)
    if text is None:
        raise ConfigurationError(
            "Content path did not resolve to a scalar. Check the 'response_content_path' mapping.",
            path=mapping.response_content_path,
            field="response_content_path",
            details={"node_type": _json_type(node)},
        )

    return CanonicalResult.success(text, status_code=status_code)


def _extract_error_message(mapping: RequestResponseMapping, body_text: str) -> str:
    if not mapping.response_error_path:
        return body_text

    try:
        tree = json.loads(body_text)
    except json.JSONDecodeError:
        return body_text

    text = as_text(read_path(tree, mapping.response_error_path))
    return body_text if text is None else text


def _json_type(node: Any) -> str:
    if isinstance(node, dict):
        return "object"
    if isinstance(node, list):
        return "array"
    return "null" if node is None else type(node).__name__
