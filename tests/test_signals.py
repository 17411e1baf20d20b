import asyncio
import os
import signal
import sys
import unittest
from unittest.mock import Mock

from deepseek_chat.cli import _serve
from .test_base import BaseChatCLITest


@unittest.skipIf(sys.platform == "win32", "loop signal handlers are unavailable on Windows")
class TestInterruptSignal(BaseChatCLITest):
    async def test_sigint_ends_session_while_waiting_for_input(self):
        loop = asyncio.get_running_loop()
        pending = loop.create_future()
        self.mock_display.read_line = Mock(return_value=pending)

        session = asyncio.ensure_future(_serve(self.chat_cli))
        # Let the session install its handler and start waiting for input
        for _ in range(5):
            await asyncio.sleep(0)
        self.mock_display.read_line.assert_called_once()

        os.kill(os.getpid(), signal.SIGINT)
        await asyncio.wait_for(session, timeout=5)

        self.assertTrue(pending.cancelled())
        self.assertEqual(len(self.history), 1)
        self.mock_display.print_goodbye.assert_called_once()
        # The handler was removed again once the session ended
        self.assertFalse(loop.remove_signal_handler(signal.SIGINT))

    async def test_sigint_aborts_outstanding_request(self):
        aborted = []
        started = asyncio.Event()

        async def slow_complete(messages):
            started.set()
            try:
                await asyncio.sleep(3600)
            except asyncio.CancelledError:
                aborted.append(True)
                raise

        self.script_input("Hello", "/exit")
        self.mock_client.complete.side_effect = slow_complete

        session = asyncio.ensure_future(_serve(self.chat_cli))
        await asyncio.wait_for(started.wait(), timeout=5)

        os.kill(os.getpid(), signal.SIGINT)
        await asyncio.wait_for(session, timeout=5)
        await asyncio.sleep(0)
        await asyncio.sleep(0)

        self.assertEqual(aborted, [True])
        self.assertEqual(self.contents()[1:], ["Hello"])
        self.mock_display.print_assistant_message.assert_not_called()
        self.mock_display.print_goodbye.assert_called_once()
        self.assertFalse(asyncio.get_running_loop().remove_signal_handler(signal.SIGINT))
