"""Interactive terminal chat with DeepSeek models.

Features
--------
1. Running conversation: every turn sends the dialogue so far, bounded to the
   system prompt plus the 20 most recent messages once it grows past 41.
2. Slash commands: `/help`, `/clear`, `/history`, `/exit` (or `/quit`).
3. Graceful shutdown: Ctrl+C ends the session at any time, even while a
   request is in flight.

Environment variables (a `.env` file is read too)
-------------------------------------------------
* DEEPSEEK_API_KEY – your DeepSeek API key (required)
* DEEPSEEK_API_BASE, DEEPSEEK_MODEL, MAX_TOKENS, TEMPERATURE, TIMEOUT – optional

Run `python -m deepseek_chat` or the `deepseek-chat` console script.
"""
# Re-export useful symbols for convenience
from .config import Config
from .core import (
    ConversationHistory,
    Message,
    Role,
    SYSTEM_PROMPT,
    FailureCategory,
    classify_failure,
    classify_input,
)
from .core.client import DeepSeekClientWrapper
from .cli import ChatCLI, run_cli

__all__ = [
    "Config",
    "ConversationHistory",
    "Message",
    "Role",
    "SYSTEM_PROMPT",
    "FailureCategory",
    "classify_failure",
    "classify_input",
    "DeepSeekClientWrapper",
    "ChatCLI",
    "run_cli",
]
