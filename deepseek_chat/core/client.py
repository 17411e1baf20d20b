"""Async wrapper around the OpenAI SDK pointed at the DeepSeek API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

import openai
from openai import AsyncOpenAI  # type: ignore

from .errors import RemoteCallFailure

if TYPE_CHECKING:  # pragma: no cover
    from ..config import Config

logger = logging.getLogger(__name__)


class DeepSeekClientWrapper:
    """Thin wrapper that turns one conversation into one reply string.

    SDK exceptions are converted into :class:`RemoteCallFailure` whose message
    carries the signal (status code, "timeout", "network") the session loop
    classifies on.
    """

    def __init__(self, client: AsyncOpenAI, config: "Config"):
        self.client = client
        self.config = config

    @classmethod
    def from_config(cls, config: "Config") -> "DeepSeekClientWrapper":
        client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.api_base,
            timeout=config.timeout,
            max_retries=0,
        )
        return cls(client, config)

    @property
    def model(self) -> str:
        return self.config.model

    async def complete(self, messages: List[Dict[str, Any]]) -> str:
        """Send *messages* as a non-streaming chat completion and return the reply."""
        logger.debug("Requesting completion: model=%s messages=%d", self.config.model, len(messages))
        try:
            response = await self.client.chat.completions.create(
                model=self.config.model,
                messages=messages,  # type: ignore[arg-type]
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                stream=False,
            )
        except openai.APITimeoutError as e:
            raise RemoteCallFailure(f"Request timeout: {e}") from e
        except openai.APIConnectionError as e:
            raise RemoteCallFailure(f"Network error: {e}") from e
        except openai.APIStatusError as e:
            raise RemoteCallFailure(
                f"API request failed with status {e.status_code}: {e.message}"
            ) from e
        except openai.OpenAIError as e:
            raise RemoteCallFailure(str(e)) from e
        except UnicodeError as e:
            # header or body values the HTTP layer cannot encode
            raise RemoteCallFailure(f"Failed to build request: {e}") from e

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if content is None:
            raise RemoteCallFailure("No response choices received from API")
        return content
