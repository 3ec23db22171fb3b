"""Board operations on fragment lists.

Every function returns a new list and leaves its input untouched; edited
fragments are replaced by new values rather than mutated.
"""

from typing import Dict, List, Sequence

from .categories import Category, DISPLAY_ORDER
from .models import NoteFragment

NEW_FRAGMENT_PREFIX = "free-"
NEW_FRAGMENT_CONTENT = "New note…"

SECTION_TITLES = {
    Category.HIGH_IMPORTANCE: "HIGH IMPORTANCE",
    Category.TODO: "TO DO",
    Category.PEOPLE: "PEOPLE",
    Category.QUESTIONS: "QUESTIONS",
    Category.FOLLOW_UP: "FOLLOW-UP",
}


def group_by_category(fragments: Sequence[NoteFragment]) -> Dict[Category, List[NoteFragment]]:
    """Group fragments into board columns, keeping their relative order."""
    groups: Dict[Category, List[NoteFragment]] = {category: [] for category in DISPLAY_ORDER}
    for fragment in fragments:
        groups[fragment.category].append(fragment)
    return groups


def _index_of(fragments: Sequence[NoteFragment], fragment_id: str) -> int:
    for index, fragment in enumerate(fragments):
        if fragment.id == fragment_id:
            return index
    raise KeyError(fragment_id)


def recategorize(fragments: Sequence[NoteFragment], fragment_id: str,
                 category: Category) -> List[NoteFragment]:
    """
    Move one fragment to another category.

    Args:
        fragments: Current board fragments
        fragment_id: Id of the fragment to move
        category: Target category

    Returns:
        New fragment list with the moved fragment in its original position

    Raises:
        KeyError: If no fragment has ``fragment_id``
    """
    index = _index_of(fragments, fragment_id)
    updated = list(fragments)
    updated[index] = updated[index].with_category(category)
    return updated


def update_content(fragments: Sequence[NoteFragment], fragment_id: str,
                   content: str) -> List[NoteFragment]:
    """Replace the text of one fragment. Raises KeyError for unknown ids."""
    index = _index_of(fragments, fragment_id)
    updated = list(fragments)
    updated[index] = updated[index].with_content(content)
    return updated


def add_fragment(fragments: Sequence[NoteFragment], content: str = NEW_FRAGMENT_CONTENT,
                 category: Category = Category.TODO) -> List[NoteFragment]:
    """Prepend a user-created fragment with a fresh ``free-<n>`` id."""
    taken = {fragment.id for fragment in fragments}
    counter = 0
    while f"{NEW_FRAGMENT_PREFIX}{counter}" in taken:
        counter += 1

    new_fragment = NoteFragment(
        id=f"{NEW_FRAGMENT_PREFIX}{counter}",
        content=content,
        category=Category(category)
    )
    return [new_fragment, *fragments]


def remove_fragment(fragments: Sequence[NoteFragment], fragment_id: str) -> List[NoteFragment]:
    """Drop one fragment. Raises KeyError for unknown ids."""
    index = _index_of(fragments, fragment_id)
    return [fragment for i, fragment in enumerate(fragments) if i != index]


def export_summary(fragments: Sequence[NoteFragment]) -> str:
    """
    Render fragments as a plain-text summary for the clipboard.

    Only non-empty categories get a section. Sections follow board order and
    are separated by a blank line.

    Args:
        fragments: Fragments to export

    Returns:
        The summary text; empty string when there is nothing to export
    """
    sections = []
    for category, members in group_by_category(fragments).items():
        if not members:
            continue
        lines = [f"{SECTION_TITLES[category]}:"]
        lines.extend(f"• {fragment.content}" for fragment in members)
        sections.append("\n".join(lines))

    return "\n\n".join(sections)
