import os
import unittest
from unittest.mock import patch

from studio_backend.config import Settings


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.port, 5000)
        self.assertEqual(settings.api_prefix, "/api")
        self.assertIsNone(settings.gemini_api_key)

    def test_reads_environment(self):
        env = {"PORT": "8080", "GEMINI_API_KEY": "g", "OPENAI_API_KEY": "o"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.port, 8080)
        self.assertEqual(
            settings.provider_credentials(),
            {"GEMINI_API_KEY": "g", "CLAUDE_API_KEY": None, "OPENAI_API_KEY": "o"},
        )


if __name__ == "__main__":
    unittest.main()
