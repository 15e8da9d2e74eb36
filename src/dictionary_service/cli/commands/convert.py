"""
Convert command: JSON export -> SQLite snapshot.
"""

import asyncio
import sys

from dictionary_service.config import Settings
from dictionary_service.errors import DictionaryError
from dictionary_service.logging_config import configure_logging
from dictionary_service.snapshot import convert_json_to_snapshot


def add_subparser(subparsers):
    parser = subparsers.add_parser("convert", help="Build a snapshot from a JSON export")
    parser.add_argument("source", help="Path to the JSON export")
    parser.add_argument("snapshot", help="Path of the snapshot to write")
    parser.set_defaults(func=convert)


def convert(args):
    configure_logging(Settings().logging)
    try:
        count = asyncio.run(convert_json_to_snapshot(args.source, args.snapshot))
    except DictionaryError as e:
        print(f"✗ {e.code.value}: {e.message}")
        sys.exit(1)
    print(f"✓ Wrote {count} words to {args.snapshot}")
