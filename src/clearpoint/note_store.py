"""Local note storage: one Markdown file with YAML frontmatter per note."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence
from uuid import uuid4

from .categories import LegacyCategory
from .errors import NoteNotFoundError, NoteValidationError
from .models import LegacyFragment, Note, NoteFragment, to_legacy_fragments
from .utils import calculate_file_hash, generate_frontmatter, parse_frontmatter

NOTE_SUFFIX = ".md"


logger = logging.getLogger(__name__)


class NoteStore:
    """Saves, lists and deletes notes in a local directory.

    Fragments are frozen into the legacy taxonomy on save; the fine-grained
    category is not recoverable from a saved note.
    """

    def __init__(self, notes_dir: str):
        """
        Initialize the note store.

        Args:
            notes_dir: Directory holding note files; created if missing
        """
        self.notes_dir = Path(notes_dir).resolve()
        if self.notes_dir.exists() and not self.notes_dir.is_dir():
            raise ValueError(f"Notes path is not a directory: {notes_dir}")
        self.notes_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Initialized note store in: {self.notes_dir}")

    def save_note(self, title: str, content: str, fragments: Sequence[NoteFragment],
                  usage_type: Optional[str] = None) -> Note:
        """
        Persist a note with its fragments mapped to the legacy taxonomy.

        Args:
            title: Note title, must not be blank
            content: The original notes text
            fragments: Fragments in the current taxonomy, at least one
            usage_type: Optional usage tag stored alongside the note

        Returns:
            The saved Note

        Raises:
            NoteValidationError: If the title is blank or there are no fragments
        """
        if not (title or "").strip():
            raise NoteValidationError("Please enter a title for your note")
        if not fragments:
            raise NoteValidationError("Please process some notes before saving")

        note = Note(
            note_id=uuid4().hex,
            title=title.strip(),
            content=content,
            cards=to_legacy_fragments(fragments),
            usage_type=usage_type,
            saved_at=datetime.now(timezone.utc)
        )

        metadata = {
            'note_id': note.note_id,
            'title': note.title,
            'saved_datetime': note.saved_at.isoformat(),
            'usage_type': note.usage_type,
            'note_hash': calculate_file_hash(content),
            'cards': [card.to_dict() for card in note.cards],
        }
        note.metadata = metadata

        path = self._note_path(note.note_id)
        path.write_text(generate_frontmatter(metadata) + content, encoding='utf-8')
        logger.info(f"Saved note '{note.title}' with {len(note.cards)} cards to {path.name}")
        return note

    def list_notes(self) -> List[Note]:
        """
        Load every readable note, newest first.

        Files that cannot be read or parsed are logged and skipped.

        Returns:
            List of notes
        """
        notes = []
        for path in self.notes_dir.glob(f"*{NOTE_SUFFIX}"):
            try:
                notes.append(self._read_note(path))
            except (OSError, UnicodeDecodeError, ValueError, KeyError, TypeError) as e:
                logger.warning(f"Skipping unreadable note file {path.name}: {e}")

        notes.sort(key=lambda n: n.saved_at or datetime.min.replace(tzinfo=timezone.utc),
                   reverse=True)
        logger.debug(f"Listed {len(notes)} notes from {self.notes_dir}")
        return notes

    def get_note(self, note_id: str) -> Note:
        """Load one note. Raises NoteNotFoundError for unknown ids."""
        path = self._note_path(note_id)
        if not path.exists():
            raise NoteNotFoundError(note_id)
        return self._read_note(path)

    def delete_note(self, note_id: str) -> None:
        """Delete one note. Raises NoteNotFoundError for unknown ids."""
        path = self._note_path(note_id)
        if not path.exists():
            raise NoteNotFoundError(note_id)
        path.unlink()
        logger.info(f"Deleted note {note_id}")

    def _note_path(self, note_id: str) -> Path:
        # Ids are generated hex strings; reject anything that could escape the directory
        if not note_id or Path(note_id).name != note_id:
            raise NoteNotFoundError(note_id)
        return self.notes_dir / f"{note_id}{NOTE_SUFFIX}"

    def _read_note(self, path: Path) -> Note:
        text = path.read_text(encoding='utf-8')
        content, metadata = parse_frontmatter(text)
        if 'note_id' not in metadata:
            raise ValueError("missing note_id in frontmatter")

        saved_at = metadata.get('saved_datetime')
        if isinstance(saved_at, str):
            saved_at = datetime.fromisoformat(saved_at)

        cards = [
            LegacyFragment(
                id=str(card['id']),
                content=str(card.get('content', '')),
                category=LegacyCategory(card['type'])
            )
            for card in metadata.get('cards') or []
        ]

        return Note(
            note_id=str(metadata['note_id']),
            title=str(metadata.get('title', '')),
            content=content,
            cards=cards,
            usage_type=metadata.get('usage_type'),
            saved_at=saved_at,
            metadata=metadata
        )
