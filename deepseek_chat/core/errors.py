"""Exceptions and failure classification for remote calls."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict

logger = logging.getLogger(__name__)


class DeepSeekChatError(Exception):
    """Base class for errors raised by the chat client."""


class ConfigurationError(DeepSeekChatError):
    """Configuration is missing or invalid; fatal at startup."""


class InputError(DeepSeekChatError):
    """Reading from the terminal failed; ends the session."""


class RemoteCallFailure(DeepSeekChatError):
    """A single chat completion request failed; recoverable per turn."""


class FailureCategory(Enum):
    AUTH_FAILURE = "auth"
    NETWORK_FAILURE = "network"
    RATE_LIMITED = "rate_limited"
    UNCLASSIFIED = "unclassified"


# Checked in order, first match wins.
_SIGNALS = (
    (FailureCategory.AUTH_FAILURE, ("unauthorized", "401")),
    (FailureCategory.NETWORK_FAILURE, ("network", "timeout")),
    (FailureCategory.RATE_LIMITED, ("rate limit", "429")),
)

HINTS: Dict[FailureCategory, str] = {
    FailureCategory.AUTH_FAILURE: "Please check your DEEPSEEK_API_KEY in the .env file",
    FailureCategory.NETWORK_FAILURE: "Please check your internet connection and try again",
    FailureCategory.RATE_LIMITED: "Rate limit exceeded. Please wait a moment before trying again",
}


def classify_failure(message: str) -> FailureCategory:
    """Map the rendered message of a failed call to a :class:`FailureCategory`."""
    folded = str(message).casefold()
    for category, needles in _SIGNALS:
        if any(needle in folded for needle in needles):
            break
    else:
        category = FailureCategory.UNCLASSIFIED
    logger.debug("Classified failure %r as %s", message, category.name)
    return category


def hint_for(category: FailureCategory) -> str:
    """Return the actionable hint for *category*, or ``""`` if there is none."""
    return HINTS.get(category, "")
