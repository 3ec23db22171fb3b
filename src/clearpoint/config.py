"""Configuration management for ClearPoint."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

# Default configuration constants
DEFAULT_NOTES_DIR = "notes"
DEFAULT_PROVIDER = "litellm"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_CLAUDE_MAX_TOKENS = 4096
USAGE_TYPES = ("meetings", "school")

SETTINGS_ENV_VAR = "CLEARPOINT_SETTINGS"
DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent.parent / 'config' / 'settings.yaml'


@dataclass
class Config:
    """Application configuration."""

    # Credentials (loaded in __post_init__, may stay empty)
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Extraction settings
    ai_enabled: bool = True
    usage_type: str = "meetings"

    # Storage settings
    notes_dir: str = DEFAULT_NOTES_DIR

    # LLM configuration
    llm: Dict[str, Any] = field(default_factory=lambda: {
        "primary_provider": DEFAULT_PROVIDER,
        "providers": {
            "litellm": {
                "model": DEFAULT_MODEL,
                "temperature": DEFAULT_TEMPERATURE,
                "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
            }
        }
    })

    # Direct Anthropic client settings
    claude_model: str = "claude-sonnet-4-20250514"
    claude_max_tokens: int = DEFAULT_CLAUDE_MAX_TOKENS

    settings_path: Optional[str] = None

    def __post_init__(self):
        """Initialize configuration from environment and config files after dataclass init."""
        # Load from environment
        self.openai_api_key = os.environ.get('OPENAI_API_KEY', self.openai_api_key)
        self.anthropic_api_key = os.environ.get('ANTHROPIC_API_KEY', self.anthropic_api_key)
        self.notes_dir = os.environ.get('CLEARPOINT_NOTES_DIR', self.notes_dir)

        # Missing credentials are not an error here: the AI classifier
        # reports them when it is used, and extraction falls back.
        config_path = Path(
            self.settings_path or os.environ.get(SETTINGS_ENV_VAR, '') or DEFAULT_SETTINGS_PATH
        )
        if config_path.exists():
            with open(config_path, 'r') as f:
                settings = yaml.safe_load(f) or {}
                self._load_settings(settings)

    def _load_settings(self, settings: Dict[str, Any]):
        """Load settings from YAML configuration."""
        if 'extraction' in settings:
            extraction = settings['extraction'] or {}
            self.ai_enabled = extraction.get('ai_enabled', self.ai_enabled)
            self.usage_type = extraction.get('usage_type', self.usage_type)
            if self.usage_type not in USAGE_TYPES:
                raise ValueError(
                    f"Unsupported usage_type: {self.usage_type}. Expected one of {list(USAGE_TYPES)}"
                )

        if 'storage' in settings:
            storage = settings['storage'] or {}
            # Environment override wins over the settings file
            if not os.environ.get('CLEARPOINT_NOTES_DIR'):
                self.notes_dir = storage.get('notes_dir', self.notes_dir)

        # Load LLM configuration
        if 'llm' in settings:
            self.llm = settings['llm'] or {}
            claude = self.llm.get('providers', {}).get('claude_direct', {})
            self.claude_model = claude.get('model', self.claude_model)
            self.claude_max_tokens = claude.get('max_tokens', self.claude_max_tokens)
