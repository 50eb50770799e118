"""OpenRouter Chat-Completion Client"""

import http.client
import json
import urllib.error
import urllib.request

from rmit.llm.base import (
    LLMClient, GenerationResult, GenerationError, TransportError,
    RemoteError, ParseError, EmptyResponseError,
)

REFERER = "https://github.com/aixoio/rmit"


class OpenRouterClient(LLMClient):
    """Single-shot chat-completion client. One request per call, no retries."""

    def __init__(self, api_key: str, api_url: str, model: str):
        if not api_key:
            raise GenerationError(
                "No API key found. Set one with:\n"
                "  rmit set api_key 'your-key-here'\n"
                "or export OPENROUTER_API_KEY='your-key-here'"
            )
        self.api_key = api_key
        self.api_url = api_url
        self.model = model

    @property
    def name(self) -> str:
        return f"OpenRouter ({self.model})"

    def _build_request(self, prompt: str, model: str) -> urllib.request.Request:
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": REFERER,
            "X-Title": "rmit",
        }
        data = json.dumps(payload).encode('utf-8')
        return urllib.request.Request(self.api_url, data=data, headers=headers, method="POST")

    def _call_api(self, request: urllib.request.Request) -> tuple[int, str]:
        """Send the request and return (status, body)."""
        try:
            with urllib.request.urlopen(request) as response:
                return response.status, response.read().decode('utf-8', errors='replace')
        except urllib.error.HTTPError as e:
            body = e.read().decode('utf-8', errors='replace') if e.fp else ""
            raise RemoteError(e.code, body)
        except urllib.error.URLError as e:
            raise TransportError(f"Failed to send request to {self.api_url}: {e.reason}")
        except http.client.HTTPException as e:
            raise TransportError(f"Incomplete response from {self.api_url}: {e}")
        except (OSError, ValueError) as e:
            raise TransportError(f"Request to {self.api_url} failed: {e}")

    def generate(self, prompt: str, model: str | None = None) -> GenerationResult:
        model = model or self.model
        status, body = self._call_api(self._build_request(prompt, model))
        if status != 200:
            raise RemoteError(status, body)
        return self.parse_response(body, model)

    @staticmethod
    def parse_response(body: str, model: str = "") -> GenerationResult:
        """Extract ``choices[0].message.content``; later choices are ignored."""
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ParseError(f"Failed to parse response: {e}")
        if not isinstance(data, dict):
            raise ParseError("Failed to parse response: expected a JSON object")

        choices = data.get("choices")
        if choices is None:
            choices = []
        if not isinstance(choices, list):
            raise ParseError("Failed to parse response: 'choices' is not a list")
        if not choices:
            raise EmptyResponseError("No response from AI model")

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        if not isinstance(message, dict):
            raise ParseError("Failed to parse response: first choice has no message")
        content = message.get("content")
        if content is not None and not isinstance(content, str):
            raise ParseError("Failed to parse response: message content is not text")

        text = (content or "").strip()
        if not text:
            raise EmptyResponseError("No response from AI model")

        usage = data.get("usage")
        tokens = usage.get("total_tokens", 0) if isinstance(usage, dict) else 0
        return GenerationResult(
            text=text,
            model=data.get("model") or model,
            tokens_used=tokens if isinstance(tokens, int) else 0,
        )
