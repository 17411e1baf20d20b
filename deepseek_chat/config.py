"""Runtime configuration loaded from the environment (and an optional ``.env``)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

from .core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.deepseek.com"
DEFAULT_MODEL = "deepseek-chat"

T = TypeVar("T")


def _env(name: str, default: str, parse: Callable[[str], T]) -> T:
    raw = os.getenv(name, default)
    try:
        return parse(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a valid number (got {raw!r})") from None


@dataclass
class Config:
    """Settings used when building chat completion requests."""

    api_key: str = ""
    api_base: str = DEFAULT_API_BASE
    model: str = DEFAULT_MODEL
    max_tokens: int = 4096
    temperature: float = 0.7
    timeout: float = 300

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """Build a config from ``DEEPSEEK_*`` and related environment variables.

        A ``.env`` file is loaded first when present; variables already set in
        the environment take precedence over it.
        """
        load_dotenv(dotenv_path)

        api_key = os.getenv("DEEPSEEK_API_KEY")
        if api_key is None:
            raise ConfigurationError("DEEPSEEK_API_KEY environment variable is required")

        config = cls(
            api_key=api_key,
            api_base=os.getenv("DEEPSEEK_API_BASE", DEFAULT_API_BASE),
            model=os.getenv("DEEPSEEK_MODEL", DEFAULT_MODEL),
            max_tokens=_env("MAX_TOKENS", "4096", int),
            temperature=_env("TEMPERATURE", "0.7", float),
            timeout=_env("TIMEOUT", "300", float),
        )
        logger.debug(
            "Loaded config: base=%s model=%s max_tokens=%d temperature=%.2f timeout=%s",
            config.api_base,
            config.model,
            config.max_tokens,
            config.temperature,
            config.timeout,
        )
        return config

    def validate(self) -> None:
        if not self.api_key.strip():
            raise ConfigurationError("API key cannot be empty")
        if not self.api_key.isascii() or any(ch.isspace() for ch in self.api_key):
            raise ConfigurationError("API key must be ASCII with no whitespace (check for pasted spaces)")
        if not 0.0 <= self.temperature <= 2.0:
            raise ConfigurationError("Temperature must be between 0.0 and 2.0")
        if self.max_tokens <= 0:
            raise ConfigurationError("Max tokens must be greater than 0")
        if self.timeout <= 0:
            raise ConfigurationError("Timeout must be greater than 0")
