"""Prompt management and response parsing for AI extraction."""

import json
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
import logging

from .errors import ParseError


logger = logging.getLogger(__name__)

DEFAULT_PROMPTS_PATH = Path(__file__).parent.parent.parent / 'config' / 'prompts.yaml'

# Checked in order, first key present wins
ITEM_CONTAINER_KEYS = ('items', 'cards', 'results')

DEFAULT_PROMPTS = {
    'system': """You are an AI assistant that extracts and categorizes meeting notes. Analyze the provided meeting notes and extract:
- DECISIONS: Final choices, agreements, or conclusions made
- ACTIONS: Tasks, todos, or action items with owners/deadlines
- QUESTIONS: Open questions, uncertainties, or items needing clarification

Return a JSON object with an "items" array. Each element has "content" (the extracted text) and "type" (either "decision", "action", or "question").
Only extract meaningful items, skip headers, attendee lists, and short/irrelevant lines.""",

    'user': "{note_content}"
}


class PromptManager:
    """Builds extraction prompts and reads the model's reply."""

    def __init__(self, config=None, prompts_path: Optional[Path] = None):
        """
        Initialize the prompt manager.

        Args:
            config: Configuration object (kept for symmetry with other components)
            prompts_path: Optional override of the prompts YAML location
        """
        self.config = config
        self.prompts_path = Path(prompts_path) if prompts_path else DEFAULT_PROMPTS_PATH
        self.prompts = self._load_prompts()

    def _load_prompts(self) -> Dict[str, str]:
        """Load prompts from YAML configuration, falling back to the built-in ones."""
        if self.prompts_path.exists():
            with open(self.prompts_path, 'r') as f:
                prompt_config = yaml.safe_load(f) or {}
                prompts = dict(DEFAULT_PROMPTS)
                prompts.update(prompt_config.get('prompts', {}))
                return prompts

        return dict(DEFAULT_PROMPTS)

    def format_extraction_prompt(self, note_content: str) -> Dict[str, str]:
        """
        Format the extraction prompt for a block of notes.

        Args:
            note_content: The raw notes text

        Returns:
            Dict with system and user prompts
        """
        user_prompt = self.prompts['user'].format(note_content=note_content)

        return {
            'system': self.prompts['system'],
            'user': user_prompt
        }

    def parse_extraction_response(self, response: str) -> List[Dict[str, Any]]:
        """
        Parse the model's reply into a list of raw item dictionaries.

        An empty reply means nothing was extracted. Anything that cannot be
        read as an object holding a list of objects fails the whole reply;
        individual items are never skipped.

        Args:
            response: Raw response text from the model

        Returns:
            List of item dicts, in the order the model returned them

        Raises:
            ParseError: If the reply is not JSON or has an unexpected shape
        """
        response_clean = _strip_code_fence(response or "")
        if not response_clean:
            return []

        try:
            parsed = json.loads(response_clean)
        except (ValueError, RecursionError) as e:
            logger.debug(f"Raw response that failed to parse: {response}")
            raise ParseError(f"Response is not valid JSON: {e}", raw=response) from e

        if not isinstance(parsed, dict):
            raise ParseError(f"Response is not a JSON object, got {type(parsed).__name__}",
                             raw=response)

        items: Any = []
        for key in ITEM_CONTAINER_KEYS:
            if parsed.get(key) is not None:
                items = parsed[key]
                break

        if not isinstance(items, list):
            raise ParseError(f"Item container is not a list, got {type(items).__name__}",
                             raw=response)

        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise ParseError(f"Item {index} is not an object", raw=response)

        logger.debug(f"Parsed {len(items)} items from model response")
        return items


def _strip_code_fence(response: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    response_clean = response.strip()
    if response_clean.startswith('```'):
        lines = response_clean.split('\n')
        if lines[0].strip() in ('```', '```json') and lines[-1].strip() == '```':
            response_clean = '\n'.join(lines[1:-1]).strip()
    return response_clean
