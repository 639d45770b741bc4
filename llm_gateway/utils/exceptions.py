"""
Gateway exception taxonomy.

WHAT: Typed errors for every way a chat completion can fail
WHY: Callers decide retry/abort from the error kind, never from message text
HOW: Base exception with code and details, one subclass per failure kind
"""

from typing import Optional, Any


class GatewayException(Exception):
    """Base class for all gateway errors."""

    def __init__(self, message: str, code: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class ConfigurationError(GatewayException):
    """Raised when the mapping configuration is missing, invalid, or does not match the response."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        field: Optional[str] = None,
        code: str = "CONFIGURATION_ERROR",
        details: Optional[dict] = None,
    ):
        merged = {"path": path, "field": field}
        if details:
            merged.update(details)
        super().__init__(message=message, code=code, details=merged)
        self.path = path
        self.field = field


class ModelNotFoundError(ConfigurationError):
    """Raised when a model alias is not present in the configuration."""

    def __init__(self, alias: str):
        super().__init__(
            message=f"Model alias '{alias}' not found in configuration.",
            code="MODEL_NOT_FOUND",
            details={"alias": alias}
        )
        self.alias = alias


class MissingApiKeyError(ConfigurationError):
    """Raised when no API key is available for a provider."""

    def __init__(self, provider_name: str, api_key_env: Optional[str] = None):
        hint = f" or set {api_key_env}" if api_key_env else ""
        super().__init__(
            message=f"API key for provider '{provider_name}' has not been set. Use set_api_key(){hint}.",
            code="MISSING_API_KEY",
            details={"provider": provider_name, "api_key_env": api_key_env}
        )
        self.provider_name = provider_name


class TransportError(GatewayException):
    """Raised when the HTTP exchange itself fails (connection, DNS, protocol)."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        provider_name: Optional[str] = None,
        model_alias: Optional[str] = None,
        code: str = "TRANSPORT_ERROR",
    ):
        super().__init__(
            message=message,
            code=code,
            details={"url": url, "provider": provider_name, "model_alias": model_alias}
        )
        self.url = url
        self.provider_name = provider_name
        self.model_alias = model_alias


class TransportTimeoutError(TransportError):
    """Raised when the HTTP exchange times out."""

    def __init__(self, message: str, url: Optional[str] = None, **kwargs):
        super().__init__(message, url=url, code="TRANSPORT_TIMEOUT", **kwargs)


class ProviderError(GatewayException):
    """Raised when the provider answers with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        provider_message: str,
        provider_name: Optional[str] = None,
        model_alias: Optional[str] = None,
    ):
        super().__init__(
            message=f"API call failed with status code {status_code}.",
            code="PROVIDER_ERROR",
            details={
                "status_code": status_code,
                "provider_message": provider_message,
                "provider": provider_name,
                "model_alias": model_alias,
            }
        )
        self.status_code = status_code
        self.provider_message = provider_message
        self.provider_name = provider_name
        self.model_alias = model_alias


class ParseError(GatewayException):
    """Raised when a success response body is not valid JSON."""

    def __init__(self, raw_body: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(
            message="Failed to parse the successful API response as JSON.",
            code="PARSE_ERROR",
            details={"status_code": status_code, "reason": reason, "raw_body": raw_body}
        )
        self.raw_body = raw_body
        self.status_code = status_code
