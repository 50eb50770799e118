"""LLM Client Package"""

from rmit.config import Config
from rmit.llm.base import (
    LLMClient, GenerationResult, GenerationError, TransportError,
    RemoteError, ParseError, EmptyResponseError,
)
from rmit.llm.openrouter import OpenRouterClient


def get_client(config: Config, model: str | None = None) -> LLMClient:
    """Build the completion client from resolved configuration."""
    return OpenRouterClient(
        api_key=config.api_key,
        api_url=config.api_url,
        model=model or config.default_model,
    )


__all__ = [
    "LLMClient",
    "GenerationResult",
    "GenerationError",
    "TransportError",
    "RemoteError",
    "ParseError",
    "EmptyResponseError",
    "OpenRouterClient",
    "get_client",
]
