"""Tests for the local note store."""

from datetime import datetime, timedelta, timezone

import pytest

from clearpoint.categories import Category, LegacyCategory
from clearpoint.errors import NoteNotFoundError, NoteValidationError
from clearpoint.models import NoteFragment
from clearpoint.note_store import NoteStore
from clearpoint.utils import calculate_file_hash, parse_frontmatter


@pytest.fixture
def store(temp_notes_dir):
    return NoteStore(str(temp_notes_dir))


@pytest.fixture
def fragments():
    return [
        NoteFragment(id="card-0", content="We decided to ship", category=Category.HIGH_IMPORTANCE),
        NoteFragment(id="card-1", content="Mike will draft the plan", category=Category.PEOPLE),
        NoteFragment(id="card-2", content="Follow up with legal", category=Category.FOLLOW_UP),
        NoteFragment(id="card-3", content="Who owns QA?", category=Category.QUESTIONS),
    ]


class TestSaveNote:
    """Test saving notes."""

    def test_save_writes_markdown_file(self, store, fragments, temp_notes_dir):
        """Test that a note file with a frontmatter header is created."""
        note = store.save_note("Kickoff", "raw notes text", fragments, usage_type="meetings")

        path = temp_notes_dir / f"{note.note_id}.md"
        assert path.exists()

        body, metadata = parse_frontmatter(path.read_text(encoding='utf-8'))
        assert body == "raw notes text"
        assert metadata['title'] == "Kickoff"
        assert metadata['usage_type'] == "meetings"
        assert metadata['note_hash'] == calculate_file_hash("raw notes text")

    def test_cards_use_legacy_taxonomy(self, store, fragments):
        """Test that fragments are mapped to the three legacy types on save."""
        note = store.save_note("Kickoff", "text", fragments)

        assert [card.category for card in note.cards] == [
            LegacyCategory.DECISION,
            LegacyCategory.ACTION,
            LegacyCategory.ACTION,
            LegacyCategory.QUESTION,
        ]
        assert note.metadata['cards'][0] == {
            "id": "card-0", "content": "We decided to ship", "type": "decision"
        }

    def test_title_is_trimmed(self, store, fragments):
        """Test surrounding whitespace is removed from the title."""
        assert store.save_note("  Kickoff  ", "text", fragments).title == "Kickoff"

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_blank_title_rejected(self, store, fragments, title):
        """Test that a blank title is rejected."""
        with pytest.raises(NoteValidationError, match="Please enter a title for your note"):
            store.save_note(title, "text", fragments)

    def test_no_fragments_rejected(self, store, temp_notes_dir):
        """Test that a note without fragments is rejected and nothing is written."""
        with pytest.raises(NoteValidationError, match="Please process some notes before saving"):
            store.save_note("Kickoff", "text", [])

        assert list(temp_notes_dir.iterdir()) == []


class TestReadNotes:
    """Test loading and deleting notes."""

    def test_get_note_round_trip(self, store, fragments):
        """Test that a saved note reads back the same."""
        saved = store.save_note("Kickoff", "line one\nline two", fragments, usage_type="school")

        loaded = store.get_note(saved.note_id)

        assert loaded.note_id == saved.note_id
        assert loaded.title == "Kickoff"
        assert loaded.content == "line one\nline two"
        assert loaded.usage_type == "school"
        assert loaded.cards == saved.cards
        assert loaded.saved_at == saved.saved_at

    def test_list_newest_first(self, store, fragments):
        """Test that listing orders notes by save time, newest first."""
        first = store.save_note("First", "a", fragments)
        second = store.save_note("Second", "b", fragments)
        first_path = store.notes_dir / f"{first.note_id}.md"
        text = first_path.read_text(encoding='utf-8')
        older = (first.saved_at - timedelta(days=1)).isoformat()
        first_path.write_text(text.replace(first.saved_at.isoformat(), older), encoding='utf-8')

        notes = store.list_notes()

        assert [n.title for n in notes] == ["Second", "First"]
        assert notes[0].note_id == second.note_id

    def test_list_skips_unreadable_files(self, store, fragments, temp_notes_dir):
        """Test that broken files are skipped instead of failing the listing."""
        store.save_note("Good", "text", fragments)
        (temp_notes_dir / "no_header.md").write_text("just text", encoding='utf-8')
        (temp_notes_dir / "bad_card.md").write_text(
            "---\nnote_id: x\ncards:\n- id: c\n  type: nonsense\n---\nbody", encoding='utf-8'
        )

        notes = store.list_notes()

        assert [n.title for n in notes] == ["Good"]

    def test_list_empty(self, store):
        """Test listing an empty store."""
        assert store.list_notes() == []

    def test_get_unknown_note(self, store):
        """Test that an unknown id raises NoteNotFoundError."""
        with pytest.raises(NoteNotFoundError):
            store.get_note("does-not-exist")

    def test_path_like_id_rejected(self, store):
        """Test that ids cannot point outside the notes directory."""
        with pytest.raises(NoteNotFoundError):
            store.get_note("../secret")

    def test_delete_note(self, store, fragments):
        """Test deleting a note."""
        note = store.save_note("Kickoff", "text", fragments)

        store.delete_note(note.note_id)

        assert store.list_notes() == []
        with pytest.raises(NoteNotFoundError):
            store.delete_note(note.note_id)


class TestNoteStoreInit:
    """Test store construction."""

    def test_creates_directory(self, tmp_path):
        """Test that a missing directory is created."""
        target = tmp_path / "nested" / "notes"

        NoteStore(str(target))

        assert target.is_dir()

    def test_file_path_rejected(self, tmp_path):
        """Test that a file cannot be used as the notes directory."""
        target = tmp_path / "file.txt"
        target.write_text("x")

        with pytest.raises(ValueError, match="not a directory"):
            NoteStore(str(target))


def test_saved_at_is_utc(store, fragments):
    """Test that save times are timezone-aware UTC."""
    note = store.save_note("Kickoff", "text", fragments)

    assert note.saved_at.tzinfo is not None
    assert note.saved_at.utcoffset() == timedelta(0)
    assert note.saved_at <= datetime.now(timezone.utc)
