"""LiteLLM client implementation for unified LLM access."""

import logging
import os
from typing import Dict, Any, Optional

import litellm
from litellm import completion

from .base_client import BaseLLMClient


logger = logging.getLogger(__name__)

# Environment variables LiteLLM reads credentials from, per provider
PROVIDER_KEY_ENV_VARS = {
    'openai': 'OPENAI_API_KEY',
    'anthropic': 'ANTHROPIC_API_KEY',
    'google': 'GEMINI_API_KEY',
    'gemini': 'GEMINI_API_KEY',
}


class LiteLLMClient(BaseLLMClient):
    """LiteLLM client for unified access to multiple LLM providers."""

    def __init__(self, config: Any):
        """
        Initialize LiteLLM client.

        Args:
            config: Configuration object with LLM settings
        """
        super().__init__(config)

        # Extract LiteLLM configuration
        self.llm_config = getattr(config, 'llm', None) or {}
        self.provider_config = self.llm_config.get('providers', {}).get('litellm', {})

        # Core parameters
        self._model = self.provider_config.get('model', 'gpt-4o')
        self._max_tokens = self.provider_config.get('max_tokens')
        self._temperature = self.provider_config.get('temperature', 0.3)
        self._timeout = self.provider_config.get('timeout_seconds', 30)
        self._retry_attempts = self.provider_config.get('retry_attempts', 0)

        # Explicit key from settings, else the key already loaded into config
        self._api_key = self.provider_config.get('api_key') or self._key_from_config()

        # Configure LiteLLM settings
        litellm.set_verbose = self.provider_config.get('verbose', False)

        # Track usage for the last request
        self._last_usage = None

        logger.info(f"Initialized LiteLLM client with model: {self._model}")

    def send_message(self, prompt: Dict[str, str], **kwargs) -> str:
        """
        Send a message using LiteLLM.

        Args:
            prompt: Dictionary with 'system' and 'user' prompts
            **kwargs: Additional parameters to override defaults

        Returns:
            LLM's response as a string
        """
        messages = []

        # Add system message if provided
        if prompt.get('system'):
            messages.append({
                "role": "system",
                "content": prompt['system']
            })

        # Add user message
        messages.append({
            "role": "user",
            "content": prompt.get('user', '')
        })

        # Prepare completion parameters
        completion_kwargs = {
            'model': self._model,
            'messages': messages,
            'temperature': kwargs.get('temperature', self._temperature),
            'timeout': kwargs.get('timeout', self._timeout),
        }
        max_tokens = kwargs.get('max_tokens', self._max_tokens)
        if max_tokens:
            completion_kwargs['max_tokens'] = max_tokens
        if kwargs.get('response_format'):
            completion_kwargs['response_format'] = kwargs['response_format']
        if self._api_key:
            completion_kwargs['api_key'] = self._api_key

        # Add any additional provider-specific parameters
        extra_params = kwargs.get('extra_params', {})
        completion_kwargs.update(extra_params)

        # Retries are left to the provider SDK; 0 means a single request
        completion_kwargs['max_retries'] = kwargs.get('max_retries', self._retry_attempts)

        try:
            response = completion(**completion_kwargs)
        except Exception as e:
            logger.error(f"LLM request to {self.provider_name} failed: {e}")
            raise

        # Store usage information
        self._last_usage = getattr(response, 'usage', None)

        content = response.choices[0].message.content
        logger.info(f"Successfully received response from {self.provider_name}")
        return content or ""

    @property
    def provider_name(self) -> str:
        """Return the name of the LLM provider."""
        provider = self._extract_provider_from_model(self._model)
        return f"litellm/{provider}"

    @property
    def model_name(self) -> str:
        """Return the model name being used."""
        return self._model

    def has_credentials(self) -> bool:
        """Check for a key in settings or the provider's environment variable."""
        if self._api_key:
            return True
        provider = self._extract_provider_from_model(self._model)
        env_var = PROVIDER_KEY_ENV_VARS.get(provider)
        return bool(env_var and os.environ.get(env_var))

    def get_usage_info(self) -> Optional[Dict[str, Any]]:
        """
        Get usage information for the last request.

        Returns:
            Dictionary with usage information, or None if not available
        """
        if self._last_usage is None:
            return None

        return {
            'prompt_tokens': getattr(self._last_usage, 'prompt_tokens', None),
            'completion_tokens': getattr(self._last_usage, 'completion_tokens', None),
            'total_tokens': getattr(self._last_usage, 'total_tokens', None),
        }

    def validate_config(self) -> bool:
        """Validate that the client configuration is correct."""
        if not super().validate_config():
            return False

        # Check if model is specified
        if not self._model:
            logger.error("No model specified in LiteLLM configuration")
            return False

        return True

    def _key_from_config(self) -> str:
        provider = self._extract_provider_from_model(self._model)
        if provider == 'openai':
            return getattr(self.config, 'openai_api_key', '') or ''
        if provider == 'anthropic':
            return getattr(self.config, 'anthropic_api_key', '') or ''
        return ''

    def _extract_provider_from_model(self, model: str) -> str:
        """Extract the provider name from the model string."""
        # LiteLLM model naming conventions
        if '/' in model:
            # Format like "anthropic/claude-3-opus" or "openai/gpt-4o"
            return model.split('/')[0]
        elif model.startswith('claude'):
            return 'anthropic'
        elif model.startswith(('gpt', 'o1', 'o3')):
            return 'openai'
        elif model.startswith('gemini'):
            return 'google'
        else:
            # Default fallback
            return 'unknown'
