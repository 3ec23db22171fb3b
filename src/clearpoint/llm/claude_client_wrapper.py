"""Wrapper for the direct Claude client to fit the LLM abstraction."""

import logging
from typing import Dict, Any

from ..claude_client import ClaudeClient, CLAUDE_TEMPERATURE
from .base_client import BaseLLMClient


logger = logging.getLogger(__name__)


class ClaudeClientWrapper(BaseLLMClient):
    """Wrapper for ClaudeClient to fit the LLM abstraction."""

    def __init__(self, config: Any):
        """
        Initialize Claude client wrapper.

        Args:
            config: Configuration object with Claude settings
        """
        super().__init__(config)

        self.claude_client = ClaudeClient(config)

        self._model = getattr(config, 'claude_model', 'claude-sonnet-4-20250514')
        self._max_tokens = getattr(config, 'claude_max_tokens', 4096)

        logger.info(f"Initialized Claude client wrapper with model: {self._model}")

    def send_message(self, prompt: Dict[str, str], **kwargs) -> str:
        """
        Send a message using the wrapped Claude client.

        The Messages API has no JSON mode, so ``response_format`` is ignored
        and the prompt alone asks for JSON.

        Args:
            prompt: Dictionary with 'system' and 'user' prompts
            **kwargs: Additional parameters (max_retries, temperature)

        Returns:
            Claude's response as a string
        """
        response = self.claude_client.send_message(
            prompt,
            max_retries=kwargs.get('max_retries', 0),
            temperature=kwargs.get('temperature', CLAUDE_TEMPERATURE)
        )

        logger.info(f"Successfully received response from {self.provider_name}")
        return response

    @property
    def provider_name(self) -> str:
        """Return the name of the LLM provider."""
        return "anthropic/claude"

    @property
    def model_name(self) -> str:
        """Return the model name being used."""
        return self._model

    def has_credentials(self) -> bool:
        return bool(getattr(self.config, 'anthropic_api_key', ''))

    def validate_config(self) -> bool:
        """Validate that the Claude client configuration is correct."""
        if not self.has_credentials():
            logger.error("No Anthropic API key found in configuration")
            return False

        if not self._model:
            logger.error("No Claude model specified in configuration")
            return False

        return True
