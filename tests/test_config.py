import argparse
import os
import unittest
from unittest.mock import patch

from deepseek_chat import Config
from deepseek_chat.cli import load_config
from deepseek_chat.core import ConfigurationError


class TestConfig(unittest.TestCase):
    def setUp(self):
        # Never pick up a developer's real .env file
        self.dotenv_patcher = patch("deepseek_chat.config.load_dotenv")
        self.dotenv_patcher.start()

    def tearDown(self):
        self.dotenv_patcher.stop()

    def test_defaults(self):
        with patch.dict(os.environ, {"DEEPSEEK_API_KEY": "sk-test"}, clear=True):
            config = Config.from_env()

        self.assertEqual(config.api_key, "sk-test")
        self.assertEqual(config.api_base, "https://api.deepseek.com")
        self.assertEqual(config.model, "deepseek-chat")
        self.assertEqual(config.max_tokens, 4096)
        self.assertAlmostEqual(config.temperature, 0.7)
        self.assertEqual(config.timeout, 300)
        config.validate()

    def test_environment_overrides(self):
        env = {
            "DEEPSEEK_API_KEY": "sk-test",
            "DEEPSEEK_API_BASE": "http://localhost:8080/v1",
            "DEEPSEEK_MODEL": "deepseek-reasoner",
            "MAX_TOKENS": "256",
            "TEMPERATURE": "1.5",
            "TIMEOUT": "30",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()

        self.assertEqual(config.api_base, "http://localhost:8080/v1")
        self.assertEqual(config.model, "deepseek-reasoner")
        self.assertEqual(config.max_tokens, 256)
        self.assertAlmostEqual(config.temperature, 1.5)
        self.assertEqual(config.timeout, 30)

    def test_missing_api_key(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigurationError) as ctx:
                Config.from_env()
        self.assertIn("DEEPSEEK_API_KEY", str(ctx.exception))

    def test_unparseable_number(self):
        with patch.dict(os.environ, {"DEEPSEEK_API_KEY": "sk-test", "MAX_TOKENS": "lots"}, clear=True):
            with self.assertRaises(ConfigurationError) as ctx:
                Config.from_env()
        self.assertIn("MAX_TOKENS", str(ctx.exception))

    def test_validate(self):
        Config(api_key="sk-test", temperature=0.0).validate()
        Config(api_key="sk-test", temperature=2.0).validate()

        for bad in [
            Config(api_key=""),
            Config(api_key="   "),
            Config(api_key="sk-test", temperature=-0.1),
            Config(api_key="sk-test", temperature=2.1),
            Config(api_key="sk-test", max_tokens=0),
            Config(api_key="sk-test", timeout=0),
        ]:
            with self.assertRaises(ConfigurationError, msg=repr(bad)):
                bad.validate()

    def test_command_line_overrides(self):
        args = argparse.Namespace(model="deepseek-reasoner", temperature=0.2, max_tokens=128, verbose=False)
        with patch.dict(os.environ, {"DEEPSEEK_API_KEY": "sk-test"}, clear=True):
            config = load_config(args)

        self.assertEqual(config.model, "deepseek-reasoner")
        self.assertAlmostEqual(config.temperature, 0.2)
        self.assertEqual(config.max_tokens, 128)

    def test_command_line_overrides_are_validated(self):
        args = argparse.Namespace(model=None, temperature=3.0, max_tokens=None, verbose=False)
        with patch.dict(os.environ, {"DEEPSEEK_API_KEY": "sk-test"}, clear=True):
            with self.assertRaises(ConfigurationError):
                load_config(args)

    def test_api_key_with_pasted_characters(self):
        """Keys the HTTP layer could not put in a header are rejected up front"""
        for key in ["sk-abc\u200b", "sk-abc\u00a0", "sk abc", "sk-abc\n", "sk-ключ"]:
            with self.assertRaises(ConfigurationError, msg=repr(key)):
                Config(api_key=key).validate()

        with patch.dict(os.environ, {"DEEPSEEK_API_KEY": "sk-abc\u200b"}, clear=True):
            args = argparse.Namespace(model=None, temperature=None, max_tokens=None, verbose=False)
            with self.assertRaises(ConfigurationError):
                load_config(args)
