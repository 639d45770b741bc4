"""
Config-driven HTTP API client.

WHAT: Send a canonical request to any configured provider and return the answer
WHY: One client for every provider; schema differences live in the mapping config
HOW: URL + auth headers from ProviderConfig, body/answer via the payload translator,
     POST via the transport, failures raised as typed gateway exceptions
"""

from .provider import Transport
from .transport import HttpTransport
from ..mapping.translator import build_request_body, extract_result
from ..models.chat import LLMRequest
from ..models.provider_config import ModelConfig, ProviderConfig
from ..utils.exceptions import GatewayException, TransportError
from ..utils.logger import get_logger, mask_secret

logger = get_logger(__name__)


class HttpApiClient:
    """Generic API client driven entirely by provider/model configuration."""

    def __init__(self, transport: Transport | None = None):
        """Initialize with a transport (pooled httpx transport by default)."""
        self.transport = transport or HttpTransport()

    async def send_request(
        self,
        provider: ProviderConfig,
        model: ModelConfig,
        request: LLMRequest,
        api_key: str,
    ) -> str:
        """
        Send one request and return the extracted answer text.

        Args:
            provider: Provider base URL and auth scheme
            model: Model endpoint and field mapping
            request: Canonical request
            api_key: Credential substituted into the auth header template

        Returns:
            Answer text found at the response-content path

        Raises:
            ConfigurationError: Blank required path, or response path did not resolve
            TransportError: Network failure (TransportTimeoutError on timeout)
            ProviderError: Non-success HTTP status
            ParseError: Success status with a non-JSON body
        """
        # Build before sending so configuration errors never hit the network
        body = build_request_body(model, request)
        url = provider.build_url(model)
        headers = provider.build_headers(api_key)

        logger.info(
            f"Sending request to {provider.provider_name} "
            f"(model: {model.model_name}, alias: {request.model_alias}, turns: {len(request.conversation)})"
        )
        logger.debug(f"POST {url} ({provider.auth_header_name}: {mask_secret(api_key)}, body: {len(body)} chars)")

        try:
            response = await self.transport.send(url, headers, body)
        except TransportError as e:
            e.provider_name = provider.provider_name
            e.model_alias = request.model_alias
            e.details.update({"provider": provider.provider_name, "model_alias": request.model_alias})
            raise

        try:
            result = extract_result(model, response.status_code, response.text)
            text = result.unwrap(provider_name=provider.provider_name, model_alias=request.model_alias)
        except GatewayException as e:
            logger.warning(f"{provider.provider_name} request failed ({e.code}, status: {response.status_code})")
            raise

        logger.info(f"{provider.provider_name} request succeeded (status: {response.status_code}, chars: {len(text)})")
        return text

    async def close(self):
        """Close the transport."""
        await self.transport.close()
