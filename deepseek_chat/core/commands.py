"""Classification of prompt input into slash commands and chat turns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Command(Enum):
    HELP = "/help"
    CLEAR = "/clear"
    HISTORY = "/history"
    EXIT = "/exit"
    QUIT = "/quit"
    UNKNOWN = None


class OutcomeKind(Enum):
    HANDLED = "handled"
    EXIT = "exit"
    CHAT = "chat"


@dataclass(frozen=True)
class CommandOutcome:
    """Result of classifying one line of input.

    ``command`` is set for anything that started with ``/``; ``text`` holds
    the trimmed line (the chat message for ``CHAT`` outcomes).
    """

    kind: OutcomeKind
    command: Optional[Command] = None
    text: str = ""

    @property
    def is_chat(self) -> bool:
        return self.kind is OutcomeKind.CHAT

    @property
    def is_exit(self) -> bool:
        return self.kind is OutcomeKind.EXIT


_KNOWN_COMMANDS = {c.value: c for c in Command if c.value is not None}
_EXIT_COMMANDS = {Command.EXIT, Command.QUIT}


def classify_input(line: str) -> CommandOutcome:
    """Decide whether *line* is a control command or a chat message."""
    text = line.strip()
    if not text:
        return CommandOutcome(OutcomeKind.HANDLED)

    command = _KNOWN_COMMANDS.get(text.lower())
    if command in _EXIT_COMMANDS:
        return CommandOutcome(OutcomeKind.EXIT, command, text)
    if command is not None:
        return CommandOutcome(OutcomeKind.HANDLED, command, text)

    if text.startswith("/"):
        return CommandOutcome(OutcomeKind.HANDLED, Command.UNKNOWN, text)

    return CommandOutcome(OutcomeKind.CHAT, text=text)
