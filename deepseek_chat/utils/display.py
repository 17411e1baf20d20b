"""Terminal rendering and input for the chat session."""
from __future__ import annotations

import asyncio
import threading
from typing import List, Optional

from rich.panel import Panel
from rich.rule import Rule

from .ansi import (
    ASSISTANT_LABEL,
    ERROR_LABEL,
    INFO_LABEL,
    USER_LABEL,
    Ansi,
    console,
)
from .spinner import Spinner

PROMPT = Ansi.style("Enter your message:", Ansi.FG_WHITE) + " "

COMMANDS = (
    ("/help", "Show this help message"),
    ("/clear", "Clear conversation history"),
    ("/history", "Show conversation history"),
    ("/exit", "Exit the application (also /quit or Ctrl+C)"),
)

TIPS = (
    "Press Ctrl+C to exit at any time",
    "Your conversation history is maintained during the session",
    "Use clear, specific questions for better responses",
)


def _resolve(future: "asyncio.Future[str]", line: Optional[str], exc: Optional[BaseException]) -> None:
    # The waiter may have been cancelled while the thread was blocked.
    if future.done():
        return
    if exc is not None:
        future.set_exception(exc)
    else:
        future.set_result(line or "")


class Display:
    """Everything the session prints, plus the log behind ``/history``."""

    def __init__(self) -> None:
        self._log: List[str] = []
        self._spinner: Optional[Spinner] = None

    @property
    def log(self) -> List[str]:
        return list(self._log)

    # ---------------- Banners ----------------

    def print_welcome(self, model: str = "") -> None:
        console.print(Panel.fit("DeepSeek Chat Console", style="bold bright_green"))
        console.print(Ansi.style("Welcome to DeepSeek Chat!", Ansi.FG_WHITE))
        if model:
            console.print(Ansi.style(f"Current model: {model}.", Ansi.FG_YELLOW))
        console.print("Type your message and press Enter to chat.")
        console.print(Ansi.style("Special commands:", Ansi.FG_YELLOW))
        for name, description in COMMANDS:
            console.print(f"  {Ansi.style(name, Ansi.FG_YELLOW)} - {description}")
        console.print(Rule(style=Ansi.FG_GREY))
        console.print()

    def print_help(self) -> None:
        console.print(Ansi.style("Available Commands:", Ansi.FG_CYAN, Ansi.BOLD))
        console.print()
        for name, description in COMMANDS:
            console.print(f"  {Ansi.style(name, Ansi.FG_YELLOW)} - {description}")
        console.print()
        console.print(Ansi.style("Tips:", Ansi.FG_CYAN, Ansi.BOLD))
        for tip in TIPS:
            console.print(f"  • {tip}")
        console.print()

    def print_goodbye(self) -> None:
        console.print()
        console.print(Ansi.style("Thank you for using DeepSeek Chat!", Ansi.FG_GREEN))
        console.print(Ansi.style("Goodbye!", Ansi.FG_CYAN))
        console.print()

    # ---------------- Conversation lines ----------------

    def print_user_message(self, message: str) -> None:
        self._log.append(f"You: {message}")
        console.print(f"{USER_LABEL}: ", end="")
        console.print(message, markup=False, style=Ansi.FG_BLUE)

    def print_assistant_message(self, message: str) -> None:
        self._log.append(f"DeepSeek: {message}")
        console.print(f"{ASSISTANT_LABEL}: ", end="")
        console.print(message, markup=False, style=Ansi.FG_GREEN)
        console.print()

    def print_error(self, error: str) -> None:
        console.print(f"{ERROR_LABEL} ", end="")
        console.print(error, markup=False, style="red")
        console.print()

    def print_info(self, info: str) -> None:
        console.print(f"{INFO_LABEL} ", end="")
        console.print(info, markup=False, style="cyan")
        console.print()

    # ---------------- Thinking indicator ----------------

    def start_thinking(self) -> None:
        if self._spinner is None:
            self._spinner = Spinner(prefix=Ansi.style("DeepSeek is thinking", Ansi.FG_YELLOW))
        self._spinner.start()

    def clear_thinking(self) -> None:
        if self._spinner is not None:
            self._spinner.stop()

    # ---------------- History log ----------------

    def show_history(self) -> None:
        if not self._log:
            self.print_info("No conversation history yet.")
            return

        console.print(Ansi.style("Conversation History:", Ansi.FG_CYAN, Ansi.BOLD))
        console.print()
        for idx, entry in enumerate(self._log, start=1):
            console.print(f"{Ansi.style(f'{idx}.', Ansi.FG_GREY)} ", end="")
            console.print(entry, markup=False)
        console.print()

    def clear_log(self) -> None:
        self._log.clear()

    # ---------------- Input ----------------

    def read_line(self, prompt: str = PROMPT) -> "asyncio.Future[str]":
        """Read one line from the terminal without blocking the event loop.

        ``console.input`` runs on a daemon thread so an abandoned read never
        holds up interpreter shutdown. ``EOFError`` and ``OSError`` are
        delivered through the returned future.
        """
        loop = asyncio.get_running_loop()
        future: "asyncio.Future[str]" = loop.create_future()

        def _worker() -> None:
            line: Optional[str] = None
            error: Optional[BaseException] = None
            try:
                line = console.input(prompt)
            except (EOFError, OSError) as exc:
                error = exc
            if not loop.is_closed():
                loop.call_soon_threadsafe(_resolve, future, line, error)

        threading.Thread(target=_worker, name="deepseek-chat-input", daemon=True).start()
        return future
