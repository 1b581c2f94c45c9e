"""Application logger plus helpers for logging completion calls without leaking credentials."""

import logging
import os
from typing import Optional

LOGGER_NAME = "quiz_ingest"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

AUTH_STATUS_CODES = (401, 403)
AUTH_ERROR_MARKERS = (
    "api key",
    "api_key",
    "invalid key",
    "authentication",
    "unauthorized",
    "unauthenticated",
    "permission denied",
    "permission_denied",
    "forbidden",
)


def resolve_log_level(name: Optional[str]) -> int:
    """Map a level name such as ``debug`` to its number; unknown names give INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger() -> logging.Logger:
    """Get or create the quiz_ingest logger.

    ``QUIZ_LOG_LEVEL`` sets the level and ``QUIZ_LOG_FILE`` the log file path;
    an empty ``QUIZ_LOG_FILE`` logs to the console only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(resolve_log_level(os.getenv('QUIZ_LOG_LEVEL', 'INFO')))
    fmt = logging.Formatter(LOG_FORMAT)

    log_path = os.getenv('QUIZ_LOG_FILE', os.path.join(os.getcwd(), "quiz_ingest.log"))
    if log_path:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    logger.addHandler(stream_handler)

    return logger


def safe_key_fingerprint(key: Optional[str]) -> str:
    """Describe a completion API key by length and last four characters only."""
    if not isinstance(key, str) or not key:
        return "<empty>"
    return f"len={len(key)} tail=***{key[-4:]}"


def looks_like_auth_error(message: Optional[str], status_code: Optional[int] = None) -> bool:
    """Decide whether a failed completion call was a credentials problem.

    An HTTP 401/403 is decisive; otherwise the provider's message is searched
    for auth markers (Gemini puts the gRPC status and code in the text).
    """
    if status_code in AUTH_STATUS_CODES:
        return True
    m = (message or "").lower()
    if any(str(code) in m.split() for code in AUTH_STATUS_CODES):
        return True
    return any(marker in m for marker in AUTH_ERROR_MARKERS)
