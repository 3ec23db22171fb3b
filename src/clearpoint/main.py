#!/usr/bin/env python3
"""Command line entry point for ClearPoint."""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .board import export_summary
from .config import Config, USAGE_TYPES
from .errors import NoteNotFoundError, NoteValidationError
from .note_processor import NoteProcessor
from .note_store import NoteStore


def setup_logging(level: int = logging.INFO):
    """
    Configure logging for the application.

    Args:
        level: Root log level

    Returns:
        Logger instance for the main module
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    return logging.getLogger(__name__)


def cmd_extract(args, config: Config) -> int:
    """Classify notes from a file or stdin, optionally saving them."""
    logger = logging.getLogger(__name__)

    if args.file:
        text = Path(args.file).read_text(encoding='utf-8')
    else:
        text = sys.stdin.read()

    processor = NoteProcessor(config)
    result = processor.process(text, usage_type=args.usage_type, use_ai=not args.no_ai)

    if args.json:
        print(json.dumps({
            'mode': result.mode.value,
            'message': result.message,
            'usage_type': result.usage_type,
            'cards': [fragment.to_dict() for fragment in result.fragments],
        }, indent=2, ensure_ascii=False))
    else:
        print(result.message)
        summary = export_summary(result.fragments)
        if summary:
            print()
            print(summary)

    if args.save:
        store = NoteStore(config.notes_dir)
        try:
            note = store.save_note(args.save, text, result.fragments, usage_type=result.usage_type)
        except NoteValidationError as e:
            logger.error(str(e))
            return 1
        print(f"Note saved successfully! ({note.note_id})")

    return 0


def cmd_list(args, config: Config) -> int:
    store = NoteStore(config.notes_dir)
    notes = store.list_notes()
    if not notes:
        print("No saved notes.")
        return 0
    for note in notes:
        saved = note.saved_at.strftime("%b %d, %Y %H:%M") if note.saved_at else "unknown"
        print(f"{note.note_id}  {saved}  {note.title} ({len(note.cards)} cards)")
    return 0


def cmd_show(args, config: Config) -> int:
    store = NoteStore(config.notes_dir)
    try:
        note = store.get_note(args.note_id)
    except NoteNotFoundError:
        logging.getLogger(__name__).error(f"Note not found: {args.note_id}")
        return 1

    print(note.title)
    for card in note.cards:
        print(f"[{card.category.value}] {card.content}")
    return 0


def cmd_delete(args, config: Config) -> int:
    store = NoteStore(config.notes_dir)
    try:
        store.delete_note(args.note_id)
    except NoteNotFoundError:
        logging.getLogger(__name__).error(f"Note not found: {args.note_id}")
        return 1
    print(f"Deleted {args.note_id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classify meeting and study notes")
    parser.add_argument("--settings", help="Path to settings.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    extract_cmd = sub.add_parser("extract", help="Classify notes from a file or stdin")
    extract_cmd.add_argument("file", nargs="?", help="Notes file (defaults to stdin)")
    extract_cmd.add_argument("--no-ai", action="store_true", help="Use the heuristic classifier only")
    extract_cmd.add_argument("--usage-type", choices=USAGE_TYPES, help="Usage tag stored with the result")
    extract_cmd.add_argument("--save", metavar="TITLE", help="Save the note under this title")
    extract_cmd.add_argument("--json", action="store_true", help="Print cards as JSON")
    extract_cmd.set_defaults(func=cmd_extract)

    list_cmd = sub.add_parser("list", help="List saved notes")
    list_cmd.set_defaults(func=cmd_list)

    show_cmd = sub.add_parser("show", help="Show a saved note")
    show_cmd.add_argument("note_id")
    show_cmd.set_defaults(func=cmd_show)

    delete_cmd = sub.add_parser("delete", help="Delete a saved note")
    delete_cmd.add_argument("note_id")
    delete_cmd.set_defaults(func=cmd_delete)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    logger = setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = Config(settings_path=args.settings)
        return args.func(args, config)
    except Exception as e:
        logger.error(f"Fatal error: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
