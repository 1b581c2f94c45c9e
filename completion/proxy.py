"""OpenAI-compatible chat completion through an HTTP proxy."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from core.errors import CompletionError
from core.logging_utils import get_logger, looks_like_auth_error, safe_key_fingerprint

LOGGER = get_logger()


def normalize_base_url(url: str) -> str:
    """Normalize a URL by stripping whitespace and trailing slashes."""
    s = (url or '').strip()
    while s.endswith('/'):
        s = s[:-1]
    return s


@dataclass(frozen=True)
class ProxyConfig:
    url: str
    model: str = "gpt-4o-mini"
    api_key: str = ""
    max_tokens: int = 1500
    temperature: float = 0.7
    timeout_s: int = 60
    verify_tls: bool = True


class ProxyCompletion:
    """POSTs chat payloads to a proxy that forwards them to a chat completions API."""

    def __init__(self, cfg: ProxyConfig):
        url = normalize_base_url(cfg.url)
        if not url:
            raise CompletionError("Missing completion proxy URL (QUIZ_PROXY_URL)")
        self.cfg = cfg
        self.url = url

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.cfg.api_key:
            headers["Authorization"] = f"Bearer {self.cfg.api_key}"
        return headers

    def generate_text(self, messages: List[Dict[str, str]], temperature: Optional[float] = None) -> str:
        payload: Dict[str, Any] = {
            "model": self.cfg.model,
            "messages": messages,
            "max_tokens": self.cfg.max_tokens,
            "temperature": self.cfg.temperature if temperature is None else temperature,
            "top_p": 1,
            "frequency_penalty": 0,
            "presence_penalty": 0,
        }

        LOGGER.info(
            "Calling completion proxy %s (model=%s, key=%s) with %d message(s)",
            self.url, self.cfg.model, safe_key_fingerprint(self.cfg.api_key), len(messages),
        )
        try:
            resp = requests.post(
                self.url,
                json=payload,
                headers=self._headers(),
                timeout=self.cfg.timeout_s,
                verify=self.cfg.verify_tls,
            )
        except requests.RequestException as e:
            LOGGER.error("Completion proxy request failed: %s", e)
            raise CompletionError(f"Request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            LOGGER.error("Completion proxy returned an error (HTTP %s): %s", resp.status_code, message)
            raise CompletionError(
                f"HTTP {resp.status_code}: {message}",
                auth_related=looks_like_auth_error(message, resp.status_code),
            )

        if not resp.ok:
            LOGGER.error("Completion proxy returned HTTP %s", resp.status_code)
            raise CompletionError(f"HTTP error! status: {resp.status_code}", auth_related=looks_like_auth_error(None, resp.status_code))

        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise CompletionError("Completion response missing choices[0].message.content") from e
        if not isinstance(text, str) or not text:
            raise CompletionError("Completion response content was empty")

        LOGGER.info("Completion proxy returned %d characters", len(text))
        return text
