"""Test configuration and fixtures for pytest."""

import sys
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest

# Add src to path so the package imports without installing
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


EXAMPLE_NOTES = """Meeting Notes - Product Roadmap Discussion (Jan 15, 2024)

Attendees: Sarah, Mike, Jessica, Tom

We decided to move forward with the mobile app redesign for Q1.

ACTION: Mike will create wireframes by next Friday and share them with the design team.

Should we consider adding dark mode in this release or push it to Q2?

Follow-up: check budget numbers with finance

TODO: hi

The weather was nice today overall."""


@pytest.fixture
def example_notes():
    """Provide a realistic block of meeting notes."""
    return EXAMPLE_NOTES


@pytest.fixture
def temp_notes_dir():
    """Create a temporary directory for the note store."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config(temp_notes_dir):
    """Create a mock configuration object."""
    from clearpoint.config import Config

    config = Mock(spec=Config)
    config.openai_api_key = "test-openai-key"
    config.anthropic_api_key = "test-anthropic-key"
    config.ai_enabled = True
    config.usage_type = "meetings"
    config.notes_dir = str(temp_notes_dir)
    config.llm = {
        "primary_provider": "litellm",
        "providers": {
            "litellm": {"model": "gpt-4o", "temperature": 0.3, "timeout_seconds": 30}
        }
    }
    config.claude_model = "claude-sonnet-4-20250514"
    config.claude_max_tokens = 4096
    return config


@pytest.fixture
def mock_llm_client():
    """Mock LLM client returning a well-formed extraction reply."""
    client = Mock()
    client.provider_name = "litellm/openai"
    client.model_name = "gpt-4o"
    client.send_message.return_value = (
        '{"items": ['
        '{"content": "We decided to ship", "type": "decision"},'
        '{"content": "Mike will draft the plan", "type": "action"},'
        '{"content": "Do we have budget?", "type": "question"}'
        ']}'
    )
    return client
