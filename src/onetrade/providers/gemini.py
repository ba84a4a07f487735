"""Google Gemini text-generation provider."""

from __future__ import annotations

from typing import Any

from onetrade.providers.base import BaseHTTPClient

DEFAULT_MODEL = "gemini-2.0-flash-lite"


class GeminiClient(BaseHTTPClient):
    """Generate text with the Gemini ``generateContent`` endpoint.

    Capabilities: text.
    """

    name = "gemini"
    base_url = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(self, *args: Any, model: str = DEFAULT_MODEL, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.model = model or DEFAULT_MODEL

    def capabilities(self) -> set[str]:
        return {"text"}

    def generate(self, prompt: str) -> str:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        data = self._post_json(
            f"/models/{self.model}:generateContent",
            {"key": self.api_key},
            payload,
        )
        if not isinstance(data, dict):
            raise self._malformed("expected an object")
        candidates = data.get("candidates") or []
        if not isinstance(candidates, list):
            raise self._malformed("candidates is not a list")
        text = self._first_text(candidates)
        if not text:
            raise self._empty("no content in response")
        return text

    def _first_text(self, candidates: list[Any]) -> str | None:
        if not candidates:
            return None
        first = candidates[0]
        content = first.get("content") if isinstance(first, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if parts is None:
            return None
        if not isinstance(parts, list):
            raise self._malformed("content parts is not a list")
        if not parts or not isinstance(parts[0], dict):
            return None
        text = parts[0].get("text")
        if text is not None and not isinstance(text, str):
            raise self._malformed("part text is not a string")
        return text
