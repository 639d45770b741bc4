"""
Tests for the payload translator.

WHAT: Test request tree assembly and response/error extraction
WHY: Provider behaviour must be fully described by mapping data
HOW: Gemini- and OpenAI-style mappings against canned request/response bodies
"""

import json

import pytest

from llm_gateway.mapping.translator import (
    build_request_body,
    build_request_tree,
    extract_result,
    validate_mapping,
)
from llm_gateway.models.chat import ChatMessage, LLMRequest, MessageRole
from llm_gateway.models.provider_config import ModelConfig, RequestResponseMapping
from llm_gateway.utils.exceptions import ConfigurationError, ParseError, ProviderError
from tests.conftest import GEMINI_MAPPING, GEMINI_SUCCESS_BODY, OPENAI_SUCCESS_BODY


def make_request(system_prompt="Be terse.", turns=None, temperature=0.3):
    """Helper to build a canonical request."""
    turns = turns if turns is not None else [ChatMessage(MessageRole.USER, "Hi")]
    return LLMRequest.create("gemini", turns, system_prompt=system_prompt, temperature=temperature)


def model_with(**mapping_overrides) -> ModelConfig:
    """Helper to build a Gemini-style model with some mapping fields replaced."""
    mapping = {**GEMINI_MAPPING, **mapping_overrides}
    return ModelConfig.model_validate({"modelName": "gemini-test", "mapping": mapping})


@pytest.mark.unit
class TestBuildRequest:
    """Test outbound request assembly."""

    def test_gemini_request_tree(self, gemini_model):
        """Test system prompt, turn, and temperature land at their nested paths."""
        tree = build_request_tree(gemini_model, make_request())

        assert tree["systemInstruction"]["parts"][0]["text"] == "Be terse."
        assert tree["contents"][0]["role"] == "user"
        assert tree["contents"][0]["parts"][0]["text"] == "Hi"
        assert tree["generationConfig"]["temperature"] == 0.3

    def test_gemini_request_exact_shape(self, gemini_model):
        """Test no extra fields are emitted."""
        tree = build_request_tree(gemini_model, make_request())

        assert tree == {
            "systemInstruction": {"parts": [{"text": "Be terse."}]},
            "generationConfig": {"temperature": 0.3},
            "contents": [{"role": "user", "parts": [{"text": "Hi"}]}],
        }

    def test_turns_keep_order_and_lowercase_roles(self, openai_model):
        """Test every turn is emitted in order with a lower-cased role."""
        turns = [
            ChatMessage(MessageRole.USER, "What is the capital of Spain?"),
            ChatMessage(MessageRole.ASSISTANT, "Madrid"),
            ChatMessage(MessageRole.USER, "And France?"),
        ]
        tree = build_request_tree(openai_model, make_request(system_prompt=None, turns=turns))

        assert tree["messages"] == [
            {"role": "user", "content": "What is the capital of Spain?"},
            {"role": "assistant", "content": "Madrid"},
            {"role": "user", "content": "And France?"},
        ]

    def test_model_name_path(self, openai_model):
        """Test the provider model name is written when configured."""
        tree = build_request_tree(openai_model, make_request(system_prompt=None))
        assert tree["model"] == "gpt-test"
        assert tree["temperature"] == 0.3

    def test_system_prompt_skipped_without_path(self, openai_model):
        """Test no system prompt field is emitted when its path is blank."""
        tree = build_request_tree(openai_model, make_request(system_prompt="Be terse."))
        assert set(tree) == {"model", "temperature", "messages"}

    def test_system_prompt_skipped_when_absent(self, gemini_model):
        """Test no system prompt field is emitted for an empty instruction."""
        tree = build_request_tree(gemini_model, make_request(system_prompt=None))
        assert "systemInstruction" not in tree

    def test_whitespace_optional_paths_not_emitted(self):
        """Test whitespace-only system prompt and model name paths write nothing."""
        model = model_with(systemPromptPath="  ", modelNamePath=" ")

        tree = build_request_tree(model, make_request(system_prompt="Be terse."))

        assert model.mapping.system_prompt_path is None
        assert model.mapping.model_name_path is None
        assert set(tree) == {"generationConfig", "contents"}

    def test_static_fields(self):
        """Test static fields are written and later fields merge into them."""
        model = model_with(staticFields={"generationConfig": {"maxOutputTokens": 64}, "safety[0].level": "low"})
        tree = build_request_tree(model, make_request())

        assert tree["generationConfig"] == {"maxOutputTokens": 64, "temperature": 0.3}
        assert tree["safety"] == [{"level": "low"}]
        # the configured static value itself is untouched
        assert model.mapping.static_fields["generationConfig"] == {"maxOutputTokens": 64}

    def test_empty_conversation(self, gemini_model):
        """Test an empty conversation still writes an empty array."""
        tree = build_request_tree(gemini_model, make_request(turns=[]))
        assert tree["contents"] == []

    def test_request_body_is_json(self, gemini_model):
        """Test serialized body parses back to the same tree."""
        request = make_request(turns=[ChatMessage(MessageRole.USER, "¿Qué tal?")])
        body = build_request_body(gemini_model, request)

        assert json.loads(body) == build_request_tree(gemini_model, request)
        assert "¿Qué tal?" in body

    @pytest.mark.parametrize("field,alias", [
        ("messages_array_path", "messagesArrayPath"),
        ("message_role_path", "messageRolePath"),
        ("message_content_path", "messageContentPath"),
        ("temperature_path", "temperaturePath"),
        ("response_content_path", "responseContentPath"),
    ])
    def test_blank_required_path_fails_fast(self, field, alias):
        """Test a blank required path raises ConfigurationError."""
        model = model_with(**{alias: "  "})

        with pytest.raises(ConfigurationError) as exc_info:
            build_request_tree(model, make_request())

        assert exc_info.value.field == field
        assert exc_info.value.code == "CONFIGURATION_ERROR"

    def test_optional_paths_may_be_blank(self):
        """Test system prompt and error paths are optional."""
        validate_mapping(RequestResponseMapping(
            messages_array_path="messages",
            message_role_path="role",
            message_content_path="content",
            temperature_path="temperature",
            response_content_path="choices[0].message.content",
        ))


@pytest.mark.unit
class TestExtractResult:
    """Test inbound response extraction."""

    def test_success_extracts_answer(self, gemini_model):
        """Test the answer text is read at the response-content path."""
        result = extract_result(gemini_model, 200, json.dumps(GEMINI_SUCCESS_BODY))

        assert result.ok is True
        assert result.text == "Madrid"
        assert result.unwrap() == "Madrid"

    def test_success_openai_shape(self, openai_model):
        """Test OpenAI-style responses with the same engine."""
        result = extract_result(openai_model, 200, json.dumps(OPENAI_SUCCESS_BODY))
        assert result.text == "Hello, world!"

    def test_any_2xx_is_success(self, gemini_model):
        """Test non-200 success statuses are treated as success."""
        result = extract_result(gemini_model, 201, json.dumps(GEMINI_SUCCESS_BODY))
        assert result.ok is True

    @pytest.mark.parametrize("status,ok", [(199, False), (200, True), (299, True), (300, False), (404, False)])
    def test_success_status_range(self, gemini_model, status, ok):
        """Test only 2xx statuses take the success branch."""
        result = extract_result(gemini_model, status, json.dumps(GEMINI_SUCCESS_BODY))
        assert result.ok is ok
        assert result.status_code == status

    def test_success_numeric_answer(self, gemini_model):
        """Test scalar numbers are coerced to text."""
        body = {"candidates": [{"content": {"parts": [{"text": 42}]}}]}
        assert extract_result(gemini_model, 200, json.dumps(body)).text == "42"

    def test_non_json_success_is_parse_error(self, gemini_model):
        """Test a non-JSON body on 200 raises ParseError with the raw body."""
        with pytest.raises(ParseError) as exc_info:
            extract_result(gemini_model, 200, "not json")

        assert exc_info.value.raw_body == "not json"
        assert exc_info.value.status_code == 200
        assert exc_info.value.code == "PARSE_ERROR"

    def test_missing_content_path_is_configuration_error(self, gemini_model):
        """Test an absent content path points at the mapping config."""
        with pytest.raises(ConfigurationError) as exc_info:
            extract_result(gemini_model, 200, json.dumps({"candidates": []}))

        assert exc_info.value.path == "candidates[0].content.parts[0].text"
        assert exc_info.value.field == "response_content_path"

    def test_container_content_is_configuration_error(self):
        """Test a content path resolving to an object is a configuration error."""
        model = model_with(responseContentPath="candidates[0].content")

        with pytest.raises(ConfigurationError, match="scalar") as exc_info:
            extract_result(model, 200, json.dumps(GEMINI_SUCCESS_BODY))

        assert exc_info.value.details["node_type"] == "object"

    def test_null_content_is_configuration_error(self, gemini_model):
        """Test a JSON null answer does not count as text."""
        body = {"candidates": [{"content": {"parts": [{"text": None}]}}]}
        with pytest.raises(ConfigurationError):
            extract_result(gemini_model, 200, json.dumps(body))

    def test_error_path_extraction(self, gemini_model):
        """Test 401 with a structured error carries status and message."""
        result = extract_result(gemini_model, 401, json.dumps({"error": {"message": "bad key"}}))

        assert result.ok is False
        assert result.status_code == 401
        assert result.text == "bad key"

        with pytest.raises(ProviderError) as exc_info:
            result.unwrap(provider_name="Google", model_alias="gemini")

        assert exc_info.value.status_code == 401
        assert exc_info.value.provider_message == "bad key"
        assert exc_info.value.provider_name == "Google"
        assert exc_info.value.code == "PROVIDER_ERROR"

    def test_error_falls_back_to_raw_body_when_path_missing(self, gemini_model):
        """Test a body without the error path yields the raw body."""
        body = json.dumps({"detail": "quota exceeded"})
        result = extract_result(gemini_model, 429, body)
        assert result.text == body

    def test_error_falls_back_to_raw_body_when_not_json(self, gemini_model):
        """Test a non-JSON error body yields the raw body."""
        result = extract_result(gemini_model, 502, "<html>Bad Gateway</html>")
        assert result.status_code == 502
        assert result.text == "<html>Bad Gateway</html>"

    def test_error_falls_back_to_raw_body_when_not_scalar(self, gemini_model):
        """Test an error path resolving to an object yields the raw body."""
        body = json.dumps({"error": {"message": {"nested": True}}})
        assert extract_result(gemini_model, 400, body).text == body

    def test_error_without_error_path_uses_raw_body(self):
        """Test a blank error path skips structured extraction."""
        model = model_with(responseErrorPath="")
        body = json.dumps({"error": {"message": "bad key"}})
        assert extract_result(model, 401, body).text == body

    def test_whitespace_error_path_uses_raw_body(self):
        """Test a whitespace-only error path counts as blank."""
        model = model_with(responseErrorPath="   ")
        body = json.dumps({"error": {"message": "bad key"}})
        assert extract_result(model, 401, body).text == body
