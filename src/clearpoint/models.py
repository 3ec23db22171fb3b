"""Value types shared across the package."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .categories import Category, LegacyCategory, to_legacy


@dataclass(frozen=True)
class NoteFragment:
    """One categorized line of the source text."""

    id: str
    content: str
    category: Category

    def with_category(self, category: Category) -> "NoteFragment":
        """Return a copy of this fragment moved to another category."""
        return replace(self, category=Category(category))

    def with_content(self, content: str) -> "NoteFragment":
        """Return a copy of this fragment with edited text."""
        return replace(self, content=content)

    def to_dict(self) -> Dict[str, str]:
        return {'id': self.id, 'content': self.content, 'type': self.category.value}


@dataclass(frozen=True)
class LegacyFragment:
    """A fragment frozen into the persisted three-category shape."""

    id: str
    content: str
    category: LegacyCategory

    @classmethod
    def from_fragment(cls, fragment: NoteFragment) -> "LegacyFragment":
        return cls(
            id=fragment.id,
            content=fragment.content,
            category=to_legacy(fragment.category)
        )

    def to_dict(self) -> Dict[str, str]:
        return {'id': self.id, 'content': self.content, 'type': self.category.value}


def to_legacy_fragments(fragments: Sequence[NoteFragment]) -> List[LegacyFragment]:
    """Apply the legacy mapping to every fragment, preserving order."""
    return [LegacyFragment.from_fragment(fragment) for fragment in fragments]


class ExtractionMode(Enum):
    """Which classifier produced an extraction result."""
    AI = "ai"
    FALLBACK = "fallback"


@dataclass
class ExtractionResult:
    """Outcome of one extraction pass."""

    fragments: List[NoteFragment]
    mode: ExtractionMode
    message: str
    usage_type: Optional[str] = None
    error: Optional[str] = None

    @property
    def used_fallback(self) -> bool:
        return self.mode is ExtractionMode.FALLBACK


@dataclass
class Note:
    """A saved note: title, original text and its legacy fragments."""

    note_id: str
    title: str
    content: str
    cards: List[LegacyFragment] = field(default_factory=list)
    usage_type: Optional[str] = None
    saved_at: Optional[datetime] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
