"""
HTTP transport.

WHAT: POST a serialized JSON body and return status + raw text
WHY: Keep connection pooling and timeouts out of the mapping engine
HOW: Shared httpx.AsyncClient; httpx failures become TransportError
"""

import httpx

from ..models.result import TransportResponse
from ..core.config import settings
from ..utils.exceptions import ConfigurationError, TransportError, TransportTimeoutError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class HttpTransport:
    """httpx-backed POST transport with connection pooling, no retries."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        """
        Args:
            client: Pre-built client (tests, custom transports); a pooled one is created otherwise
        """
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.LLM_CONNECT_TIMEOUT, read=settings.LLM_REQUEST_TIMEOUT),
            limits=httpx.Limits(
                max_keepalive_connections=settings.LLM_MAX_KEEPALIVE_CONNECTIONS,
                max_connections=settings.LLM_MAX_CONNECTIONS
            ),
            http2=False
        )

    async def send(self, url: str, headers: dict[str, str], body: str) -> TransportResponse:
        """
        POST `body` to `url`.

        Returns:
            TransportResponse for any HTTP status

        Raises:
            ConfigurationError: URL built from baseUrl/endpoint is not a valid URL
            TransportTimeoutError: Connect/read timeout
            TransportError: Connection refused, DNS, protocol errors
        """
        try:
            response = await self.client.post(url, headers=headers, content=body.encode("utf-8"))
        except httpx.InvalidURL as e:
            logger.error(f"Invalid provider URL {url}: {e}")
            raise ConfigurationError(
                f"Invalid provider URL '{url}': {e}. Check baseUrl and endpoint in the providers file.",
                field="base_url",
                details={"url": url},
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"Request to {url} timed out")
            raise TransportTimeoutError(f"Request timed out: {e}", url=url) from e
        except httpx.HTTPError as e:
            logger.error(f"Network error sending request to {url}: {e}")
            raise TransportError(
                "A network error occurred while sending the request to the provider.",
                url=url
            ) from e

        return TransportResponse(status_code=response.status_code, text=response.text)

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()
