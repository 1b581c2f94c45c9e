import logging
import os
import unittest
from unittest.mock import patch

from core.config import GenerationConfig, get_generation_defaults, load_generation_config
from core.logging_utils import (
    LOGGER_NAME,
    get_logger,
    looks_like_auth_error,
    resolve_log_level,
    safe_key_fingerprint,
)


class TestGenerationConfig(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        cfg = load_generation_config()
        self.assertEqual(cfg, GenerationConfig())
        self.assertEqual(cfg.num_questions, 5)
        self.assertEqual(cfg.content_max_chars, 4000)

    @patch.dict(os.environ, {
        "QUIZ_COMPLETION_PROVIDER": " Proxy ",
        "QUIZ_PROXY_URL": "https://proxy.example",
        "QUIZ_TEMPERATURE": "0.25",
        "QUIZ_MAX_TOKENS": "2000",
        "QUIZ_USE_MOCK_RESPONSES": "yes",
        "QUIZ_PROXY_VERIFY_TLS": "false",
    }, clear=True)
    def test_environment_values(self):
        cfg = load_generation_config()
        self.assertEqual(cfg.provider, "proxy")
        self.assertEqual(cfg.proxy_url, "https://proxy.example")
        self.assertEqual(cfg.temperature, 0.25)
        self.assertEqual(cfg.max_tokens, 2000)
        self.assertTrue(cfg.use_mock_responses)
        self.assertFalse(cfg.verify_tls)

    @patch.dict(os.environ, {"QUIZ_MAX_TOKENS": "many", "QUIZ_TEMPERATURE": "hot"}, clear=True)
    def test_malformed_numbers_fall_back(self):
        defaults = get_generation_defaults()
        self.assertEqual(defaults["max_tokens"], 1500)
        self.assertEqual(defaults["temperature"], 0.7)

    @patch.dict(os.environ, {}, clear=True)
    def test_overrides_and_unknown_provider(self):
        self.assertEqual(load_generation_config(num_questions=8).num_questions, 8)
        with self.assertRaises(ValueError):
            load_generation_config(provider="carrier-pigeon")


class TestLoggingUtils(unittest.TestCase):
    def test_safe_key_fingerprint(self):
        self.assertEqual(safe_key_fingerprint(""), "<empty>")
        self.assertEqual(safe_key_fingerprint("sk-abcdef1234"), "len=13 tail=***1234")

    def test_looks_like_auth_error(self):
        self.assertTrue(looks_like_auth_error("403 Forbidden"))
        self.assertTrue(looks_like_auth_error("invalid_api_key"))
        self.assertFalse(looks_like_auth_error("HTTP error! status: 500"))
        self.assertFalse(looks_like_auth_error(None))

    def test_status_code_decides_auth_errors(self):
        self.assertTrue(looks_like_auth_error(None, 401))
        self.assertTrue(looks_like_auth_error("quota exceeded", 403))
        self.assertFalse(looks_like_auth_error("quota exceeded", 429))
        self.assertFalse(looks_like_auth_error("request id 14030 failed"))

    def test_resolve_log_level(self):
        self.assertEqual(resolve_log_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_log_level(" Warning "), logging.WARNING)
        self.assertEqual(resolve_log_level("verbose"), logging.INFO)
        self.assertEqual(resolve_log_level(""), logging.INFO)
        self.assertEqual(resolve_log_level(None), logging.INFO)

    @patch.dict(os.environ, {"QUIZ_LOG_LEVEL": "verbose", "QUIZ_LOG_FILE": ""})
    def test_unknown_log_level_does_not_break_logger_setup(self):
        logger = logging.getLogger(LOGGER_NAME)
        saved, saved_level = logger.handlers[:], logger.level
        logger.handlers.clear()
        try:
            self.assertEqual(get_logger().level, logging.INFO)
        finally:
            logger.handlers[:] = saved
            logger.setLevel(saved_level)


if __name__ == "__main__":
    unittest.main()
