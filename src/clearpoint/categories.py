"""Category taxonomies and the mappings between them.

Two taxonomies exist side by side:

- ``Category``: the five categories shown on the board.
- ``LegacyCategory``: the three categories understood by saved notes.

``normalize_category`` coerces any free-text label into a ``Category`` and
``to_legacy`` folds a ``Category`` into its ``LegacyCategory``. The legacy
mapping is lossy, so there is no inverse.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple


class Category(str, Enum):
    """Current five-category taxonomy."""

    HIGH_IMPORTANCE = "high_importance"
    TODO = "todo"
    PEOPLE = "people"
    QUESTIONS = "questions"
    FOLLOW_UP = "follow_up"


class LegacyCategory(str, Enum):
    """Three-category taxonomy used at the persistence boundary."""

    DECISION = "decision"
    ACTION = "action"
    QUESTION = "question"


# Board column order
DISPLAY_ORDER: Tuple[Category, ...] = (
    Category.HIGH_IMPORTANCE,
    Category.TODO,
    Category.PEOPLE,
    Category.QUESTIONS,
    Category.FOLLOW_UP,
)

# Evaluated top to bottom, first keyword hit wins
_NORMALIZATION_RULES: List[Tuple[Tuple[str, ...], Category]] = [
    (("decision", "high"), Category.HIGH_IMPORTANCE),
    (("action", "todo", "task"), Category.TODO),
    (("question", "?"), Category.QUESTIONS),
    (("people", "owner", "assignee", "assigned"), Category.PEOPLE),
    (("follow",), Category.FOLLOW_UP),
]

DEFAULT_CATEGORY = Category.TODO

LEGACY_MAPPING: Dict[Category, LegacyCategory] = {
    Category.HIGH_IMPORTANCE: LegacyCategory.DECISION,
    Category.TODO: LegacyCategory.ACTION,
    Category.PEOPLE: LegacyCategory.ACTION,
    Category.QUESTIONS: LegacyCategory.QUESTION,
    Category.FOLLOW_UP: LegacyCategory.ACTION,
}


def normalize_category(label: Optional[str]) -> Category:
    """
    Coerce an arbitrary label into the current taxonomy.

    Matching is a case-insensitive substring test against each rule in
    order. Labels that match nothing fall back to ``Category.TODO``, so the
    function never fails and never returns an unknown value.

    Args:
        label: Label from the AI service, a legacy record, or user input

    Returns:
        One of the five ``Category`` members
    """
    if isinstance(label, Category):
        return label
    if isinstance(label, Enum):
        label = label.value

    text = str(label or "").lower()
    for keywords, category in _NORMALIZATION_RULES:
        if any(keyword in text for keyword in keywords):
            return category

    return DEFAULT_CATEGORY


def to_legacy(category: Category) -> LegacyCategory:
    """
    Map a current category onto the legacy taxonomy.

    Args:
        category: A ``Category`` member (or its string value)

    Returns:
        The corresponding ``LegacyCategory``
    """
    return LEGACY_MAPPING[Category(category)]
