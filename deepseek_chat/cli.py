"""Terminal chat client for the DeepSeek chat-completion API.

The conversation lives in memory for the lifetime of the process. Every turn
sends the whole (bounded) conversation and prints the reply; Ctrl+C ends the
session at any point, including while a request is in flight.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import platform
import readline  # noqa: F401 – side-effect: history & line editing
import signal
import sys
from typing import Any, Awaitable, List, Optional, TypeVar

from .config import Config
from .core import (
    ConversationHistory,
    Command,
    CommandOutcome,
    ConfigurationError,
    InputError,
    RemoteCallFailure,
    classify_failure,
    classify_input,
    hint_for,
)
from .core.client import DeepSeekClientWrapper
from .utils import Display

logger = logging.getLogger(__name__)

_IS_WINDOWS = platform.system() == "Windows"

T = TypeVar("T")


class SessionCancelled(Exception):
    """The cancellation signal won the race against the current wait."""


async def _first_or_cancel(awaitable: Awaitable[T], cancel_event: asyncio.Event) -> T:
    """Await *awaitable* unless *cancel_event* is set first.

    The loser is cancelled: an abandoned request is aborted rather than left
    running, and an abandoned read simply never resolves.
    """
    task = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        done, _ = await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        waiter.cancel()
        if not task.done():
            task.cancel()

    if task in done:
        return task.result()
    raise SessionCancelled()


# ---------------------------------------------------------------------------
# Session loop
# ---------------------------------------------------------------------------


class ChatCLI:
    """High-level orchestration class for the interactive REPL."""

    def __init__(
        self,
        client: DeepSeekClientWrapper,
        history: Optional[ConversationHistory] = None,
        display: Optional[Display] = None,
    ):
        self.client = client
        self.history = history if history is not None else ConversationHistory()
        self.display = display if display is not None else Display()

    # ---------------- Command handling ---------------

    def handle_command(self, outcome: CommandOutcome) -> bool:
        """Run the side effect of a handled command. Return False to exit REPL."""
        if outcome.is_exit:
            return False

        command = outcome.command
        if command is Command.HELP:
            self.display.print_help()

        elif command is Command.CLEAR:
            self.history.clear()
            self.display.clear_log()
            self.display.print_info("Conversation history cleared!")

        elif command is Command.HISTORY:
            self.display.show_history()

        elif command is Command.UNKNOWN:
            self.display.print_error(f"Unknown command: {outcome.text}")
            self.display.print_info("Type /help to see available commands")

        return True

    def report_failure(self, failure: RemoteCallFailure) -> None:
        self.display.print_error(f"Failed to get response: {failure}")
        hint = hint_for(classify_failure(str(failure)))
        if hint:
            self.display.print_info(hint)

    # ---------------- Chat turn ---------------

    async def chat_turn(self, text: str, cancel_event: asyncio.Event) -> None:
        """Send *text* with the running conversation and render the reply.

        A failed request leaves the user message in the history so the next
        turn still carries the question.
        """
        self.display.print_user_message(text)
        self.history.add_user_message(text)

        self.display.start_thinking()
        try:
            reply = await _first_or_cancel(
                self.client.complete(self.history.as_payload()), cancel_event
            )
        except RemoteCallFailure as exc:
            self.display.clear_thinking()
            logger.debug("Request failed: %s", exc)
            self.report_failure(exc)
            return
        except SessionCancelled:
            self.display.clear_thinking()
            raise

        self.display.clear_thinking()
        self.display.print_assistant_message(reply)
        self.history.add_assistant_message(reply)
        self.history.trim()

    # ---------------- Interaction loop ---------------

    async def _conversation_loop(self, cancel_event: asyncio.Event) -> None:
        while True:
            try:
                line = await _first_or_cancel(self.display.read_line(), cancel_event)
            except EOFError:
                logger.debug("End of input, leaving the conversation loop")
                return
            except OSError as exc:
                raise InputError(f"Failed to read input: {exc}") from exc

            outcome = classify_input(line)
            if outcome.is_chat:
                await self.chat_turn(outcome.text, cancel_event)
            elif not self.handle_command(outcome):
                logger.debug("Exit requested with %s", outcome.text)
                return

    async def run(self, cancel_event: Optional[asyncio.Event] = None) -> None:
        """Run the read–eval–print loop until exit, end of input or cancellation."""
        if cancel_event is None:
            cancel_event = asyncio.Event()

        self.display.print_welcome(self.client.model)
        try:
            await self._conversation_loop(cancel_event)
        except SessionCancelled:
            logger.debug("Cancellation signal received, shutting down")
            self.display.print_info("Received interrupt signal. Shutting down gracefully...")
        finally:
            self.display.print_goodbye()


# ---------------------------------------------------------------------------
# Entrypoint helpers (keeping it separate simplifies __main__ handling)
# ---------------------------------------------------------------------------


def _add_signal_handler(loop: asyncio.AbstractEventLoop, sig: int, callback: Any) -> bool:
    """Add a signal handler, returning False on Windows where it's unsupported."""
    if _IS_WINDOWS:
        return False
    try:
        loop.add_signal_handler(sig, callback)
        return True
    except NotImplementedError:
        return False


def _remove_signal_handler(loop: asyncio.AbstractEventLoop, sig: int) -> None:
    """Remove a signal handler, no-op on Windows."""
    if _IS_WINDOWS:
        return
    try:
        loop.remove_signal_handler(sig)
    except NotImplementedError:
        pass


async def _serve(cli: ChatCLI) -> None:
    cancel_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    installed = _add_signal_handler(loop, signal.SIGINT, cancel_event.set)
    try:
        await cli.run(cancel_event)
    finally:
        if installed:
            _remove_signal_handler(loop, signal.SIGINT)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive terminal chat with DeepSeek models."
    )
    parser.add_argument("--model", "-m", help="Model name to use (overrides DEEPSEEK_MODEL)")
    parser.add_argument(
        "--temperature", "-t", type=float, help="Sampling temperature between 0.0 and 2.0"
    )
    parser.add_argument("--max-tokens", type=int, help="Maximum tokens per response")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Read the environment, apply command-line overrides and validate."""
    config = Config.from_env()
    if args.model:
        config.model = args.model
    if args.temperature is not None:
        config.temperature = args.temperature
    if args.max_tokens is not None:
        config.max_tokens = args.max_tokens
    config.validate()
    return config


def run_cli(argv: Optional[List[str]] = None) -> None:  # pragma: no cover
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
    except ConfigurationError as exc:
        sys.stderr.write(f"Error: failed to load configuration: {exc}\n")
        sys.exit(1)

    cli = ChatCLI(DeepSeekClientWrapper.from_config(config))
    try:
        asyncio.run(_serve(cli))
    except KeyboardInterrupt:
        # No loop signal handler on this platform: asyncio.run already
        # cancelled the session, which printed its goodbye.
        logger.debug("Interrupted without a loop signal handler")
    except InputError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    run_cli()
