"""Rule-based note classifier.

This is the degraded-mode path used whenever the AI classifier is
unavailable. Each line is classified on its own: no context from
neighbouring lines is used.
"""

import logging
import re
from typing import List, Optional, Pattern, Sequence, Tuple

from .categories import Category
from .models import NoteFragment

# Lines shorter than this (after trimming) are noise
MIN_LINE_LENGTH = 10
HEADER_PREFIXES = ("meeting", "attendees")
FRAGMENT_ID_PREFIX = "card-"

_WEEKDAYS = "monday|tuesday|wednesday|thursday|friday|saturday|sunday"


logger = logging.getLogger(__name__)


# Ordered by priority. A category may own several patterns; the first
# pattern that matches decides the line.
CATEGORY_RULES: Sequence[Tuple[Pattern[str], Category]] = (
    (re.compile(r"follow[-\s]?up", re.IGNORECASE), Category.FOLLOW_UP),
    (re.compile(r"we decided|final decision|agreed that|we're going with|going with",
                re.IGNORECASE), Category.HIGH_IMPORTANCE),
    # Capital letter is significant here, so no IGNORECASE
    (re.compile(r"\b[A-Z][a-z]+\s+(?:will|needs to|to)\b"), Category.PEOPLE),
    (re.compile(r"owner|assignee", re.IGNORECASE), Category.PEOPLE),
    (re.compile(r"TODO:|ACTION:|needs to|will\s+\w+|"
                r"by\s+(?:next\s+)?(?:" + _WEEKDAYS + r"|week|month|end)",
                re.IGNORECASE), Category.TODO),
    (re.compile(r"\?|should we|question:|what's|how do we", re.IGNORECASE), Category.QUESTIONS),
)


def is_noise(line: str) -> bool:
    """
    Check whether a trimmed line should be skipped before classification.

    Args:
        line: A single line with surrounding whitespace removed

    Returns:
        True for short lines and header/attendee lines
    """
    if len(line) < MIN_LINE_LENGTH:
        return True
    return line.lower().startswith(HEADER_PREFIXES)


def classify_line(line: str) -> Optional[Category]:
    """
    Return the category of the first matching rule, or None.

    Args:
        line: A single trimmed line

    Returns:
        The winning category, or None when no rule matches
    """
    for pattern, category in CATEGORY_RULES:
        if pattern.search(line):
            return category
    return None


def extract_fragments(text: str) -> List[NoteFragment]:
    """
    Classify every meaningful line of ``text``.

    Lines are processed in source order. Skipped lines do not consume an
    identifier, so ids run ``card-0``, ``card-1``... in emission order.

    Args:
        text: Freeform multi-line notes

    Returns:
        Ordered list of fragments; empty when nothing matched
    """
    fragments: List[NoteFragment] = []

    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if is_noise(line):
            continue

        category = classify_line(line)
        if category is None:
            continue

        fragments.append(NoteFragment(
            id=f"{FRAGMENT_ID_PREFIX}{len(fragments)}",
            content=line,
            category=category
        ))

    logger.debug(f"Heuristic classifier extracted {len(fragments)} fragments")
    return fragments


class HeuristicClassifier:
    """Object wrapper around ``extract_fragments`` for injection."""

    name = "heuristic"

    def classify(self, text: str) -> List[NoteFragment]:
        """
        Classify notes line by line with the ordered keyword rules.

        Args:
            text: Freeform multi-line notes

        Returns:
            Ordered list of fragments; never raises
        """
        return extract_fragments(text)
