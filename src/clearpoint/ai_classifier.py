"""AI-backed note classifier."""

import logging
from typing import Any, List, Optional

from .categories import normalize_category
from .errors import ClassificationError, ServiceError
from .heuristic import FRAGMENT_ID_PREFIX
from .llm import BaseLLMClient, create_llm_client
from .models import NoteFragment
from .prompt_manager import PromptManager

# Label used when the model leaves out an item's type
DEFAULT_ITEM_TYPE = "questions"
RESPONSE_FORMAT = {"type": "json_object"}
EXTRACTION_TEMPERATURE = 0.3


logger = logging.getLogger(__name__)


class AIClassifier:
    """Classifies notes with a single language model request."""

    name = "ai"

    def __init__(self, config: Any, llm_client: Optional[BaseLLMClient] = None,
                 prompt_manager: Optional[PromptManager] = None):
        """
        Initialize the AI classifier.

        The LLM client is created lazily so that a missing credential only
        surfaces when classification is attempted.

        Args:
            config: Configuration object with LLM settings and credentials
            llm_client: Optional pre-built client (mainly for tests)
            prompt_manager: Optional prompt manager override
        """
        self.config = config
        self._llm_client = llm_client
        self.prompt_manager = prompt_manager or PromptManager(config)

    @property
    def llm_client(self) -> BaseLLMClient:
        """Return the LLM client, creating it on first use.

        Raises:
            ConfigurationError: If the provider is unknown or has no credential
        """
        if self._llm_client is None:
            self._llm_client = create_llm_client(self.config)
        return self._llm_client

    def classify(self, text: str) -> List[NoteFragment]:
        """
        Ask the language model to categorize ``text``.

        Exactly one request is made. The model's categorization is taken as
        is, only its labels are normalized into the current taxonomy.

        Args:
            text: Freeform multi-line notes

        Returns:
            Ordered list of fragments

        Raises:
            ConfigurationError: If no API credential is available
            ServiceError: If the request fails
            ParseError: If the reply cannot be interpreted
        """
        client = self.llm_client
        prompt = self.prompt_manager.format_extraction_prompt(note_content=text)

        logger.info(f"Requesting extraction from {client.provider_name} ({client.model_name})")
        try:
            response = client.send_message(
                prompt,
                max_retries=0,
                temperature=EXTRACTION_TEMPERATURE,
                response_format=RESPONSE_FORMAT
            )
        except ClassificationError:
            raise
        except Exception as e:
            raise ServiceError(
                f"{client.provider_name} request failed: {e}",
                body=_error_body(e),
                status_code=getattr(e, 'status_code', None)
            ) from e

        usage = client.get_usage_info()
        if usage:
            logger.debug(f"Token usage for extraction: {usage}")

        items = self.prompt_manager.parse_extraction_response(response)

        fragments = [
            NoteFragment(
                id=f"{FRAGMENT_ID_PREFIX}{index}",
                content=item.get('content') or item.get('text') or "",
                category=normalize_category(item.get('type') or DEFAULT_ITEM_TYPE)
            )
            for index, item in enumerate(items)
        ]

        logger.info(f"AI classifier extracted {len(fragments)} fragments")
        return fragments


def _error_body(error: Exception) -> str:
    """Best-effort extraction of the upstream error body."""
    body = getattr(error, 'body', None)
    if body is None:
        body = getattr(error, 'message', None) or str(error)
    return body if isinstance(body, str) else str(body)
