"""
Provider and model configuration schema.

WHAT: Pydantic models for the providers JSON file
WHY: Validate user-authored mapping config once at load time
HOW: Pydantic v2 models accepting camelCase or snake_case keys
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

API_KEY_PLACEHOLDER = "{ApiKey}"
MODEL_NAME_PLACEHOLDER = "{ModelName}"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        protected_namespaces=(),
    )


class RequestResponseMapping(_ConfigModel):
    """Field paths translating canonical fields to/from one provider schema."""
    system_prompt_path: Optional[str] = Field(default=None, description="Where the system prompt goes; blank = not sent")
    messages_array_path: str = Field(default="", description="Where the array of turns goes")
    message_role_path: str = Field(default="", description="Role path relative to one turn object")
    message_content_path: str = Field(default="", description="Content path relative to one turn object")
    temperature_path: str = Field(default="", description="Where the temperature goes")
    response_content_path: str = Field(default="", description="Answer text in a success response")
    response_error_path: Optional[str] = Field(default=None, description="Error text in a failure response")
    model_name_path: Optional[str] = Field(default=None, description="Where the provider model name goes")
    static_fields: Dict[str, Any] = Field(default_factory=dict, description="Constant path -> value pairs")

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = (
        "messages_array_path",
        "message_role_path",
        "message_content_path",
        "temperature_path",
        "response_content_path",
    )

    @field_validator("system_prompt_path", "response_error_path", "model_name_path", mode="before")
    @classmethod
    def blank_optional_path_is_unset(cls, v):
        """Whitespace-only optional paths mean the field is not used."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def missing_required(self) -> list[str]:
        """Names of required paths that are blank."""
        return [name for name in self.REQUIRED_FIELDS if not (getattr(self, name) or "").strip()]


class ModelConfig(_ConfigModel):
    """One model exposed by a provider."""
    model_name: str
    aliases: List[str] = Field(default_factory=list)
    endpoint: str = ""
    mapping: RequestResponseMapping = Field(default_factory=RequestResponseMapping)

    def resolved_endpoint(self) -> str:
        return self.endpoint.replace(MODEL_NAME_PLACEHOLDER, self.model_name)


class ProviderConfig(_ConfigModel):
    """One provider: base URL, auth scheme and its models."""
    provider_name: str
    base_url: str
    auth_header_name: str = "Authorization"
    auth_header_value_template: str = f"Bearer {API_KEY_PLACEHOLDER}"
    api_key_env: Optional[str] = None
    extra_headers: Dict[str, str] = Field(default_factory=dict)
    models: List[ModelConfig] = Field(default_factory=list)

    def build_url(self, model: ModelConfig) -> str:
        return self.base_url.rstrip("/") + "/" + model.resolved_endpoint().lstrip("/")

    def build_headers(self, api_key: str) -> dict[str, str]:
        headers = {"Content-Type": "application/json", **self.extra_headers}
        headers[self.auth_header_name] = self.auth_header_value_template.replace(API_KEY_PLACEHOLDER, api_key)
        return headers


class GatewayConfiguration(_ConfigModel):
    """Root of the providers JSON file."""
    providers: List[ProviderConfig] = Field(default_factory=list)
