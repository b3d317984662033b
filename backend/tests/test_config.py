"""Tests for Settings and the AI router."""

import os
import unittest
from unittest.mock import patch


class SettingsTests(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        from quickcaption.core.config import Settings

        s = Settings()
        self.assertEqual(s.ollama_api_url, "http://localhost:11434")
        self.assertEqual(s.ollama_model, "llava")
        self.assertEqual(s.ai_alttext_provider, "ollama")
        self.assertEqual(s.ai_temperature, 0.7)
        self.assertEqual(s.ai_max_tokens, 200)
        self.assertEqual(s.cors_allow_origins, [])

    @patch.dict(
        os.environ,
        {"OLLAMA_API_URL": "http://10.0.0.5:11434/", "OLLAMA_MODEL": "llama3.2-vision"},
        clear=False,
    )
    def test_env_overrides(self):
        from quickcaption.core.config import Settings

        s = Settings()
        self.assertEqual(s.ollama_api_url, "http://10.0.0.5:11434")
        self.assertEqual(s.ollama_model, "llama3.2-vision")

    @patch.dict(os.environ, {"CORS_ALLOW_ORIGINS": "http://a.test, http://b.test,"}, clear=False)
    def test_cors_origins_csv(self):
        from quickcaption.core.config import Settings

        self.assertEqual(Settings().cors_allow_origins, ["http://a.test", "http://b.test"])

    @patch.dict(os.environ, {"AI_ALTTEXT_PROVIDER": " Mock "}, clear=False)
    def test_provider_name_normalized(self):
        from quickcaption.core.config import Settings

        self.assertEqual(Settings().ai_alttext_provider, "mock")

    @patch.dict(os.environ, {"AI_ALTTEXT_PROVIDER": "olama"}, clear=False)
    def test_misspelled_provider_rejected_at_startup(self):
        from pydantic import ValidationError

        from quickcaption.core.config import Settings

        with self.assertRaises(ValidationError):
            Settings()

    @patch.dict(os.environ, {"AI_ALTTEXT_PROVIDER": ""}, clear=False)
    def test_empty_provider_rejected(self):
        from pydantic import ValidationError

        from quickcaption.core.config import Settings

        with self.assertRaises(ValidationError):
            Settings()

    @patch.dict(os.environ, {"AI_ALTTEXT_MAX_ATTEMPTS": "5"}, clear=False)
    def test_attempt_budget_is_not_configurable(self):
        from quickcaption.core.config import Settings

        self.assertFalse(hasattr(Settings(), "ai_alttext_max_attempts"))


class RouterTests(unittest.TestCase):
    """Tests for AI router resolve logic."""

    @patch.dict(
        os.environ,
        {"AI_ALTTEXT_PROVIDER": "ollama", "OLLAMA_MODEL": "bakllava", "OLLAMA_TIMEOUT_SECONDS": "15"},
        clear=False,
    )
    def test_resolve_alttext_ollama(self):
        from quickcaption.services.ai.common.providers.ollama import OllamaProvider
        from quickcaption.services.ai.common.router import resolve

        config = resolve("alttext")
        self.assertIsInstance(config.provider, OllamaProvider)
        self.assertEqual(config.model, "bakllava")
        self.assertEqual(config.timeout_seconds, 15.0)

    @patch.dict(os.environ, {"AI_ALTTEXT_PROVIDER": "mock"}, clear=False)
    def test_resolve_alttext_mock(self):
        from quickcaption.services.ai.common.providers.mock import MockProvider
        from quickcaption.services.ai.common.router import resolve

        config = resolve("alttext")
        self.assertIsInstance(config.provider, MockProvider)
        self.assertEqual(config.model, "")

    def test_unknown_scope_raises(self):
        from quickcaption.services.ai.common.router import resolve

        with self.assertRaises(ValueError):
            resolve("captioning")


class LoggingSetupTests(unittest.TestCase):
    @patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=False)
    def test_setup_logging_is_idempotent(self):
        import logging

        from quickcaption.core.logging import setup_logging

        root = logging.getLogger()
        previous_level = root.level
        try:
            setup_logging()
            setup_logging()
            named = [h for h in root.handlers if h.get_name() == "quickcaption-console"]
            self.assertEqual(len(named), 1)
            self.assertEqual(root.level, logging.DEBUG)
        finally:
            for handler in root.handlers[:]:
                if handler.get_name() == "quickcaption-console":
                    root.removeHandler(handler)
            root.setLevel(previous_level)
