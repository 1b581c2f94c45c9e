"""Gemini text completion for quiz generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from core.errors import CompletionError
from core.logging_utils import get_logger, looks_like_auth_error, safe_key_fingerprint

LOGGER = get_logger()

DEFAULT_MODEL_NAME = "gemini-2.0-flash"


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str
    model_name: str = DEFAULT_MODEL_NAME
    temperature: float = 0.7
    max_output_tokens: int = 1500
    request_timeout: int = 60


def _split_messages(messages: List[Dict[str, str]]) -> tuple[Optional[str], List[Dict[str, Any]]]:
    """Separate system text from the conversation turns Gemini expects."""
    system_parts: List[str] = []
    contents: List[Dict[str, Any]] = []
    for m in messages:
        role = m.get("role")
        content = m.get("content") or ""
        if role == "system":
            system_parts.append(content)
        else:
            contents.append({"role": "model" if role == "assistant" else "user", "parts": [content]})
    return ("\n\n".join(system_parts) or None), contents


class GeminiCompletion:
    """Completion client backed by the google-generativeai SDK."""

    def __init__(self, cfg: GeminiConfig):
        if not cfg.api_key:
            raise CompletionError("Missing GEMINI_API_KEY", auth_related=True)
        self.cfg = cfg
        genai.configure(api_key=cfg.api_key)
        LOGGER.info("Gemini completion configured: model=%s key=%s", cfg.model_name, safe_key_fingerprint(cfg.api_key))

    def generate_text(self, messages: List[Dict[str, str]], temperature: Optional[float] = None) -> str:
        system_instruction, contents = _split_messages(messages)
        generation_config: Dict[str, Any] = {
            "temperature": float(self.cfg.temperature if temperature is None else temperature),
            "max_output_tokens": int(self.cfg.max_output_tokens),
            # Ask the SDK/model to return JSON when possible.
            "response_mime_type": "application/json",
        }
        model = genai.GenerativeModel(
            model_name=self.cfg.model_name,
            generation_config=generation_config,
            system_instruction=system_instruction,
        )

        LOGGER.info("Calling Gemini (%s) with %d message(s)", self.cfg.model_name, len(messages))
        try:
            resp = model.generate_content(contents, request_options={"timeout": self.cfg.request_timeout})
        except google_exceptions.GoogleAPIError as e:
            LOGGER.error("Gemini request failed: %s", e)
            raise CompletionError(f"Gemini request failed: {e}", auth_related=looks_like_auth_error(str(e))) from e

        try:
            text = resp.text
        except ValueError:
            # Blocked or empty candidates; resp.text raises instead of returning None.
            text = None
        if not text:
            raise CompletionError("Gemini returned an empty response")

        LOGGER.info("Gemini returned %d characters", len(text))
        return text
