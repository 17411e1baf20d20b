"""Conversation buffer management for chat sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)

# The single system message every request starts with. It frames the
# assistant's behaviour and is never evicted from the buffer.
SYSTEM_PROMPT = (
    "You are DeepSeek, a helpful AI assistant. Provide clear, informative, "
    "and engaging responses. Be concise but thorough in your explanations."
)

# 1 system message + 20 user/assistant pairs.
MAX_MESSAGES = 41
# Messages kept after the system message once the buffer overflows.
KEEP_RECENT = 20


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single, immutable conversation entry."""

    role: Role
    content: str

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(Role.SYSTEM, content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(Role.USER, content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(Role.ASSISTANT, content)

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role.value, "content": self.content}


def retained_range(length: int) -> Tuple[int, int]:
    """Return the ``(start, stop)`` slice of messages to drop from a buffer.

    Nothing is dropped while *length* fits in :data:`MAX_MESSAGES`; the
    returned range is then empty (``start == stop``). Otherwise everything
    between the system message and the :data:`KEEP_RECENT` most recent
    messages goes.
    """
    if length <= MAX_MESSAGES:
        return 1, 1
    return 1, length - KEEP_RECENT


class ConversationHistory:
    """Ordered message buffer whose first entry is always the system prompt."""

    def __init__(self, system_prompt: str = SYSTEM_PROMPT) -> None:
        self._system = Message.system(system_prompt)
        self._messages: List[Message] = [self._system]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def system_message(self) -> Message:
        return self._system

    def append(self, role: Role, content: str) -> Message:
        role = Role(role)
        if role is Role.SYSTEM:
            raise ValueError("the conversation holds exactly one system message")
        message = Message(role, content)
        self._messages.append(message)
        return message

    def add_user_message(self, content: str) -> Message:
        return self.append(Role.USER, content)

    def add_assistant_message(self, content: str) -> Message:
        return self.append(Role.ASSISTANT, content)

    def trim(self) -> int:
        """Evict the oldest turns once the buffer outgrows the context window.

        Returns the number of messages removed (0 when nothing was dropped).
        """
        start, stop = retained_range(len(self._messages))
        removed = stop - start
        if removed <= 0:
            return 0

        del self._messages[start:stop]
        if self._messages[0] != self._system:
            self._messages[0] = self._system
        logger.debug("Trimmed %d messages, %d remain", removed, len(self._messages))
        return removed

    def clear(self) -> None:
        """Drop every turn but keep the system prompt."""
        self._messages = [self._system]

    def as_payload(self) -> List[Dict[str, str]]:
        return [message.to_dict() for message in self._messages]
