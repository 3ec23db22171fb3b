"""ClearPoint - classify meeting and study notes into board categories."""

__version__ = "0.1.0"

from .config import Config
from .categories import Category, LegacyCategory, normalize_category, to_legacy
from .models import NoteFragment, LegacyFragment, Note, ExtractionResult, ExtractionMode
from .heuristic import HeuristicClassifier, extract_fragments
from .ai_classifier import AIClassifier
from .note_processor import NoteProcessor
from .note_store import NoteStore
from .errors import (
    ClassificationError,
    ConfigurationError,
    ServiceError,
    ParseError,
    NoteValidationError,
    NoteNotFoundError
)

__all__ = [
    "Config",
    "Category",
    "LegacyCategory",
    "normalize_category",
    "to_legacy",
    "NoteFragment",
    "LegacyFragment",
    "Note",
    "ExtractionResult",
    "ExtractionMode",
    "HeuristicClassifier",
    "extract_fragments",
    "AIClassifier",
    "NoteProcessor",
    "NoteStore",
    "ClassificationError",
    "ConfigurationError",
    "ServiceError",
    "ParseError",
    "NoteValidationError",
    "NoteNotFoundError"
]
