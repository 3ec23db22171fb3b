"""Claude API client implementation."""

import logging
from typing import Dict
import anthropic
from anthropic import APIError

# Constants
DEFAULT_MAX_RETRIES = 0
CLAUDE_TEMPERATURE = 0.3


logger = logging.getLogger(__name__)


class ClaudeClient:
    """Client for interacting with Claude API."""

    def __init__(self, config):
        """
        Initialize Claude client.

        The SDK's own retry default is overridden so that one call to
        ``send_message`` is one request unless retries are asked for.

        Args:
            config: Configuration object with API key, model and token settings
        """
        self.client = anthropic.Anthropic(
            api_key=config.anthropic_api_key,
            max_retries=DEFAULT_MAX_RETRIES
        )
        self.config = config

    def send_message(self, prompt: Dict[str, str], max_retries: int = DEFAULT_MAX_RETRIES,
                     temperature: float = CLAUDE_TEMPERATURE) -> str:
        """
        Send a message to Claude and get response.

        Args:
            prompt: Dictionary with 'system' and 'user' prompts
            max_retries: Retry attempts handed to the SDK
            temperature: Sampling temperature

        Returns:
            Claude's response as a string
        """
        try:
            message = self.client.with_options(max_retries=max_retries).messages.create(
                model=self.config.claude_model,
                max_tokens=self.config.claude_max_tokens,
                temperature=temperature,
                system=prompt.get('system', ''),
                messages=[
                    {
                        "role": "user",
                        "content": prompt.get('user', '')
                    }
                ]
            )
        except APIError as e:
            logger.error(f"Claude API error: {e}")
            raise

        response_text = self._extract_text_from_response(message.content)
        logger.info("Successfully received response from Claude")
        return response_text

    def _extract_text_from_response(self, content) -> str:
        """
        Extract text from Claude's response content, handling different block types.

        Args:
            content: Response content from Claude API

        Returns:
            Extracted text content
        """
        if not content:
            return ""

        for block in content:
            if hasattr(block, 'text'):
                return block.text

        # If no text block found, return empty string
        logger.warning("No text content found in Claude response")
        return ""
