"""Generation configuration loaded from the environment."""

import os
from dataclasses import dataclass
from typing import Any, Dict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PROVIDERS = ('gemini', 'proxy', 'mock')


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in {'1', 'true', 'yes', 'on'}


def get_generation_defaults() -> Dict[str, Any]:
    """Return default values for quiz generation, read from the environment."""
    return {
        # Completion provider
        'provider': os.getenv('QUIZ_COMPLETION_PROVIDER', 'gemini').strip().lower(),
        'use_mock_responses': _env_flag('QUIZ_USE_MOCK_RESPONSES'),

        # Gemini
        'api_key': os.getenv('GEMINI_API_KEY', ''),
        'model_name': os.getenv('QUIZ_MODEL_NAME', 'gemini-2.0-flash'),

        # OpenAI-compatible chat proxy
        'proxy_url': os.getenv('QUIZ_PROXY_URL', ''),
        'proxy_api_key': os.getenv('QUIZ_PROXY_API_KEY', ''),
        'proxy_model': os.getenv('QUIZ_PROXY_MODEL', 'gpt-4o-mini'),
        'verify_tls': os.getenv('QUIZ_PROXY_VERIFY_TLS', 'true').strip().lower() not in {'0', 'false', 'no'},

        # Model settings
        'temperature': _env_float('QUIZ_TEMPERATURE', 0.7),
        'max_tokens': _env_int('QUIZ_MAX_TOKENS', 1500),
        'request_timeout': _env_int('QUIZ_REQUEST_TIMEOUT', 60),

        # Prompt settings
        'num_questions': _env_int('QUIZ_NUM_QUESTIONS', 5),
        'content_max_chars': _env_int('QUIZ_CONTENT_MAX_CHARS', 4000),
    }


@dataclass(frozen=True)
class GenerationConfig:
    provider: str = 'gemini'
    use_mock_responses: bool = False
    api_key: str = ''
    model_name: str = 'gemini-2.0-flash'
    proxy_url: str = ''
    proxy_api_key: str = ''
    proxy_model: str = 'gpt-4o-mini'
    verify_tls: bool = True
    temperature: float = 0.7
    max_tokens: int = 1500
    request_timeout: int = 60
    num_questions: int = 5
    content_max_chars: int = 4000


def load_generation_config(**overrides: Any) -> GenerationConfig:
    """Build a GenerationConfig from the environment, with keyword overrides."""
    values = get_generation_defaults()
    values.update(overrides)
    if values['provider'] not in PROVIDERS:
        raise ValueError(f"Unknown completion provider {values['provider']!r} (expected one of {', '.join(PROVIDERS)})")
    return GenerationConfig(**values)
