"""Test settings loading"""
import os
import unittest
from unittest.mock import patch

from poster_app.config import Settings


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertIsNone(settings.openai_api_key)
        self.assertEqual(settings.model_name, "dall-e-3")
        self.assertEqual(settings.download_dir, "downloads")
        self.assertIsNone(settings.share_webhook_url)
        self.assertEqual(settings.log_level, "INFO")

    def test_environment_overrides(self):
        env = {
            "OPENAI_API_KEY": "sk-from-env",
            "MODEL_NAME": "dall-e-2",
            "SHARE_WEBHOOK_URL": "https://hooks.example/share",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.openai_api_key, "sk-from-env")
        self.assertEqual(settings.model_name, "dall-e-2")
        self.assertEqual(settings.share_webhook_url, "https://hooks.example/share")


if __name__ == "__main__":
    unittest.main()
