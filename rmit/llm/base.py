"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class GenerationResult:
    """First candidate returned by the completion endpoint."""
    text: str
    model: str = ""
    tokens_used: int = 0


class GenerationError(Exception):
    """Raised when a completion request fails."""
    pass


class TransportError(GenerationError):
    """The request could not be sent or the response not received."""
    pass


class RemoteError(GenerationError):
    """The endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error: {body.strip() or '<empty body>'} (status code: {status_code})")


class ParseError(GenerationError):
    """The response body did not have the expected shape."""
    pass


class EmptyResponseError(GenerationError):
    """The response decoded fine but held no candidate text."""
    pass


class LLMClient(ABC):
    """Abstract base for completion clients."""

    @abstractmethod
    def generate(self, prompt: str, model: str | None = None) -> GenerationResult:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
