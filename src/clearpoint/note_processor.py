"""Extraction service: AI classification with heuristic fallback."""

import logging
from typing import Any, Optional

from .ai_classifier import AIClassifier
from .errors import ClassificationError
from .heuristic import HeuristicClassifier
from .models import ExtractionMode, ExtractionResult


logger = logging.getLogger(__name__)


class NoteProcessor:
    """Runs one extraction pass over a block of notes.

    The AI classifier is tried first. Any classification failure is logged
    and the heuristic classifier runs on the same text instead; callers only
    see a different ``mode`` and message, never the error itself.
    """

    def __init__(self, config: Any, ai_classifier: Optional[AIClassifier] = None,
                 heuristic: Optional[HeuristicClassifier] = None):
        """
        Initialize the extraction service.

        Args:
            config: Configuration object (usage_type, ai_enabled, LLM settings)
            ai_classifier: Optional AI classifier override, built from config otherwise
            heuristic: Optional heuristic classifier override
        """
        self.config = config
        self.ai_classifier = ai_classifier or AIClassifier(config)
        self.heuristic = heuristic or HeuristicClassifier()

    def process(self, text: str, usage_type: Optional[str] = None,
                use_ai: bool = True) -> ExtractionResult:
        """
        Classify ``text`` into fragments.

        Args:
            text: Freeform multi-line notes
            usage_type: Optional tag ("meetings", "school") carried into the result
            use_ai: Set to False to skip the AI classifier

        Returns:
            ExtractionResult with the fragments and how they were produced
        """
        usage_type = usage_type or getattr(self.config, 'usage_type', None)
        ai_enabled = use_ai and getattr(self.config, 'ai_enabled', True)

        if not (text or "").strip():
            logger.info("No text to process")
            return self._fallback(text, usage_type, error=None)

        if not ai_enabled:
            logger.info("AI extraction disabled, using heuristic classifier")
            return self._fallback(text, usage_type, error=None)

        try:
            fragments = self.ai_classifier.classify(text)
        except ClassificationError as e:
            logger.warning(f"AI extraction failed ({type(e).__name__}), "
                           f"falling back to heuristic classifier: {e}")
            return self._fallback(text, usage_type, error=str(e))

        message = f"AI extracted {len(fragments)} items from your notes"
        logger.info(message)
        return ExtractionResult(
            fragments=fragments,
            mode=ExtractionMode.AI,
            message=message,
            usage_type=usage_type
        )

    def _fallback(self, text: str, usage_type: Optional[str],
                  error: Optional[str]) -> ExtractionResult:
        fragments = self.heuristic.classify(text)
        message = f"Extracted {len(fragments)} items from your notes (fallback mode)"
        logger.info(message)
        return ExtractionResult(
            fragments=fragments,
            mode=ExtractionMode.FALLBACK,
            message=message,
            usage_type=usage_type,
            error=error
        )
