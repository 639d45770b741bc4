"""
Canonical chat models.

WHAT: Provider-agnostic request/response records
WHY: Decouple callers from every provider's wire schema
HOW: Str enum for roles, frozen dataclasses for messages, requests and responses
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class MessageRole(str, Enum):
    """Author of a chat turn."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """Single turn of a conversation."""
    role: MessageRole
    content: str


@dataclass(frozen=True)
class LLMRequest:
    """Standardized request handed to the API client."""
    model_alias: str
    system_prompt: str | None
    conversation: tuple[ChatMessage, ...] = field(default_factory=tuple)
    temperature: float = 0.7

    @classmethod
    def create(
        cls,
        model_alias: str,
        conversation: Iterable[ChatMessage],
        *,
        system_prompt: str | None = None,
        temperature: float = 0.7,
    ) -> "LLMRequest":
        """Build a request, freezing the conversation into a tuple."""
        return cls(
            model_alias=model_alias,
            system_prompt=system_prompt,
            conversation=tuple(conversation),
            temperature=temperature,
        )


@dataclass(frozen=True)
class LLMResponse:
    """Answer text plus the request that produced it."""
    content: str
    original_request: LLMRequest

    def to_history(self) -> list[ChatMessage]:
        """Conversation including this answer, for the next turn."""
        return [*self.original_request.conversation, ChatMessage(MessageRole.ASSISTANT, self.content)]
