"""Tests for the Claude API client."""

import socket

import pytest
from unittest.mock import Mock, patch

from clearpoint.claude_client import ClaudeClient


class TestClaudeClient:
    """Test the ClaudeClient class."""

    @pytest.fixture
    def mock_anthropic(self):
        """Mock the Anthropic client."""
        with patch('clearpoint.claude_client.anthropic.Anthropic') as mock:
            yield mock

    @pytest.fixture
    def mock_config(self):
        """Mock configuration for testing."""
        config = Mock()
        config.anthropic_api_key = "test-api-key"
        config.claude_model = "claude-3-opus-20240229"
        config.claude_max_tokens = 4096
        return config

    @pytest.fixture
    def claude_client(self, mock_anthropic, mock_config):
        """Create a Claude client instance."""
        return ClaudeClient(mock_config)

    @pytest.fixture
    def mock_create(self, mock_anthropic):
        """The messages.create call reached through with_options()."""
        return mock_anthropic.return_value.with_options.return_value.messages.create

    def _reply(self, mock_create, text):
        mock_response = Mock()
        mock_response.content = [Mock(text=text)]
        mock_create.return_value = mock_response

    def test_initialization(self, mock_anthropic, mock_config):
        """Test that the SDK client is built without its own retries."""
        client = ClaudeClient(mock_config)

        mock_anthropic.assert_called_once_with(api_key="test-api-key", max_retries=0)
        assert client.config == mock_config
        assert client.client == mock_anthropic.return_value

    def test_send_message_success(self, claude_client, mock_anthropic, mock_create):
        """Test successful message sending as a single request."""
        self._reply(mock_create, '{"items": [{"content": "We decided", "type": "decision"}]}')

        result = claude_client.send_message({
            "system": "Extract items",
            "user": "We decided to ship"
        })

        mock_anthropic.return_value.with_options.assert_called_once_with(max_retries=0)
        mock_create.assert_called_once_with(
            model="claude-3-opus-20240229",
            max_tokens=4096,
            temperature=0.3,
            system="Extract items",
            messages=[{"role": "user", "content": "We decided to ship"}]
        )
        assert result == '{"items": [{"content": "We decided", "type": "decision"}]}'

    def test_retries_forwarded_to_sdk(self, claude_client, mock_anthropic, mock_create):
        """Test that an explicit retry count is handed to the SDK."""
        self._reply(mock_create, "{}")

        claude_client.send_message({"user": "Test"}, max_retries=2)

        mock_anthropic.return_value.with_options.assert_called_once_with(max_retries=2)

    def test_custom_temperature(self, claude_client, mock_create):
        """Test that the temperature is passed through."""
        self._reply(mock_create, "{}")

        claude_client.send_message({"user": "Test"}, temperature=0.0)

        assert mock_create.call_args[1]['temperature'] == 0.0

    def test_raw_text_returned(self, claude_client, mock_create):
        """Test that non-JSON text is returned as is; parsing happens elsewhere."""
        self._reply(mock_create, "This is just plain text, not JSON")

        assert claude_client.send_message({"user": "Test"}) == "This is just plain text, not JSON"

    def test_empty_response(self, claude_client, mock_create):
        """Test handling of empty response."""
        mock_response = Mock()
        mock_response.content = []
        mock_create.return_value = mock_response

        assert claude_client.send_message({"user": "Test"}) == ""

    def test_errors_propagate_after_one_attempt(self, claude_client, mock_create):
        """Test that failures are raised after a single request."""
        mock_create.side_effect = socket.timeout("Request timed out")

        with pytest.raises(socket.timeout):
            claude_client.send_message({"user": "Test"})

        assert mock_create.call_count == 1

    def test_custom_max_tokens(self, claude_client, mock_config, mock_create):
        """Test using custom max tokens."""
        mock_config.claude_max_tokens = 8192
        self._reply(mock_create, "{}")

        claude_client.send_message({"user": "Test"})

        assert mock_create.call_args[1]['max_tokens'] == 8192
