"""
Transport and translation results.

WHAT: Result records exchanged between transport, translator and client
WHY: Keep provider outcomes explicit instead of passing raw httpx objects around
HOW: Frozen dataclasses; CanonicalResult turns failures into ProviderError on unwrap
"""

from dataclasses import dataclass

from ..utils.exceptions import ProviderError


@dataclass(frozen=True)
class TransportResponse:
    """Raw outcome of one HTTP exchange."""
    status_code: int
    text: str


@dataclass(frozen=True)
class CanonicalResult:
    """Either success(text) or failure(status_code, message)."""
    ok: bool
    text: str
    status_code: int | None = None

    @classmethod
    def success(cls, text: str, status_code: int | None = None) -> "CanonicalResult":
        return cls(ok=True, text=text, status_code=status_code)

    @classmethod
    def failure(cls, status_code: int, message: str) -> "CanonicalResult":
        return cls(ok=False, text=message, status_code=status_code)

    def unwrap(self, provider_name: str | None = None, model_alias: str | None = None) -> str:
        """
        Return the answer text.

        Raises:
            ProviderError: If this is a failure result
        """
        if not self.ok:
            raise ProviderError(
                status_code=self.status_code,
                provider_message=self.text,
                provider_name=provider_name,
                model_alias=model_alias,
            )
        return self.text
