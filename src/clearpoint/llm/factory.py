"""Factory for creating LLM clients based on configuration."""

import logging
from typing import Any, Optional

from ..errors import ConfigurationError
from .base_client import BaseLLMClient
from .litellm_client import LiteLLMClient
from .claude_client_wrapper import ClaudeClientWrapper


logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = 'litellm'

# Registry of available LLM clients
CLIENT_REGISTRY = {
    'litellm': LiteLLMClient,
    'claude_direct': ClaudeClientWrapper,
}


def create_llm_client(config: Any, provider_name: Optional[str] = None) -> BaseLLMClient:
    """
    Create an LLM client based on configuration.

    Args:
        config: Configuration object containing LLM settings
        provider_name: Optional override for the provider name

    Returns:
        BaseLLMClient: Configured LLM client instance

    Raises:
        ConfigurationError: If the provider is not supported, its
            configuration is invalid, or no API credential is available
    """
    # Determine provider name
    if provider_name is None:
        llm_config = getattr(config, 'llm', None) or {}
        provider_name = llm_config.get('primary_provider', DEFAULT_PROVIDER)

    # Validate provider is supported
    if provider_name not in CLIENT_REGISTRY:
        available_providers = list(CLIENT_REGISTRY.keys())
        raise ConfigurationError(
            f"Unsupported LLM provider: {provider_name}. "
            f"Available providers: {available_providers}"
        )

    client_class = CLIENT_REGISTRY[provider_name]
    client = client_class(config)

    if not client.validate_config():
        raise ConfigurationError(f"Invalid configuration for {provider_name} provider")

    if not client.has_credentials():
        raise ConfigurationError(
            f"No API credential configured for {provider_name} ({client.model_name})"
        )

    logger.info(f"Created {provider_name} client: {client.model_name}")
    return client


def list_available_providers() -> list[str]:
    """
    Get a list of available LLM providers.

    Returns:
        List of provider names that can be used
    """
    return list(CLIENT_REGISTRY.keys())


def get_provider_info(provider_name: str) -> dict[str, Any]:
    """
    Get information about a specific provider.

    Args:
        provider_name: Name of the provider

    Returns:
        Dictionary with provider information

    Raises:
        ValueError: If provider is not found
    """
    if provider_name not in CLIENT_REGISTRY:
        raise ValueError(f"Unknown provider: {provider_name}")

    client_class = CLIENT_REGISTRY[provider_name]

    return {
        'name': provider_name,
        'class': client_class.__name__,
        'module': client_class.__module__,
    }
