import unittest
from unittest.mock import AsyncMock, Mock

from deepseek_chat import ChatCLI, ConversationHistory, DeepSeekClientWrapper
from deepseek_chat.utils import Display


class BaseChatCLITest(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        # Mock the remote call collaborator
        self.mock_client = Mock(spec=DeepSeekClientWrapper)
        self.mock_client.model = "deepseek-chat"
        self.mock_client.complete = AsyncMock()

        # Mock the display so nothing is printed and the input can be scripted
        self.mock_display = Mock(spec=Display)
        self.mock_display.read_line = AsyncMock()

        self.history = ConversationHistory()

        # Create ChatCLI instance
        self.chat_cli = ChatCLI(self.mock_client, self.history, self.mock_display)

    def script_input(self, *lines):
        """Feed *lines* to the prompt, one per read."""
        self.mock_display.read_line.side_effect = list(lines)

    def script_replies(self, *replies):
        """Queue replies (or exceptions) for successive remote calls."""
        self.mock_client.complete.side_effect = list(replies)

    def contents(self):
        return [message.content for message in self.history]
