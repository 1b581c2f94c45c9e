"""Pick a completion client from configuration."""

from typing import Any

from completion.gemini import GeminiCompletion, GeminiConfig
from completion.mock import MockCompletion
from completion.proxy import ProxyCompletion, ProxyConfig
from core.config import GenerationConfig


def build_completion_client(config: GenerationConfig) -> Any:
    """Return an object with ``generate_text(messages, temperature=None) -> str``."""
    if config.use_mock_responses or config.provider == 'mock':
        return MockCompletion()

    if config.provider == 'proxy':
        return ProxyCompletion(ProxyConfig(
            url=config.proxy_url,
            model=config.proxy_model,
            api_key=config.proxy_api_key,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            timeout_s=config.request_timeout,
            verify_tls=config.verify_tls,
        ))

    return GeminiCompletion(GeminiConfig(
        api_key=config.api_key,
        model_name=config.model_name,
        temperature=config.temperature,
        max_output_tokens=config.max_tokens,
        request_timeout=config.request_timeout,
    ))
