from .history import (
    ConversationHistory,
    Message,
    Role,
    SYSTEM_PROMPT,
    MAX_MESSAGES,
    KEEP_RECENT,
    retained_range,
)
from .commands import Command, CommandOutcome, OutcomeKind, classify_input
from .errors import (
    DeepSeekChatError,
    ConfigurationError,
    InputError,
    RemoteCallFailure,
    FailureCategory,
    HINTS,
    classify_failure,
    hint_for,
)

__all__ = [
    "ConversationHistory",
    "Message",
    "Role",
    "SYSTEM_PROMPT",
    "MAX_MESSAGES",
    "KEEP_RECENT",
    "retained_range",
    "Command",
    "CommandOutcome",
    "OutcomeKind",
    "classify_input",
    "DeepSeekChatError",
    "ConfigurationError",
    "InputError",
    "RemoteCallFailure",
    "FailureCategory",
    "HINTS",
    "classify_failure",
    "hint_for",
]
