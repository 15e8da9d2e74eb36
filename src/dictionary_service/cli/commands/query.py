"""
Query commands: lookup, suggest, stats against a local dictionary file.
"""

import asyncio
import sys

from dictionary_service.config import Settings
from dictionary_service.engine import DEFAULT_SUGGEST_LIMIT
from dictionary_service.errors import DictionaryError
from dictionary_service.logging_config import configure_logging
from dictionary_service.snapshot import load_dictionary
from dictionary_service.state import build_engine, load_built_at


def add_subparser(subparsers):
    # lookup
    lookup_p = subparsers.add_parser("lookup", help="Show the meanings of a word")
    lookup_p.add_argument("word", help="Exact word (case-sensitive)")
    _add_dict_option(lookup_p)
    lookup_p.set_defaults(func=lookup)

    # suggest
    suggest_p = subparsers.add_parser("suggest", help="Autocomplete a prefix")
    suggest_p.add_argument("prefix", help="Word prefix (case-insensitive)")
    suggest_p.add_argument("--limit", type=int, default=DEFAULT_SUGGEST_LIMIT)
    _add_dict_option(suggest_p)
    suggest_p.set_defaults(func=suggest)

    # stats
    stats_p = subparsers.add_parser("stats", help="Show dictionary size")
    _add_dict_option(stats_p)
    stats_p.set_defaults(func=stats)


def _add_dict_option(parser):
    parser.add_argument("--dict", dest="dict_path", help="Dictionary snapshot or .json source")


def _dict_path(args):
    settings = Settings()
    configure_logging(settings.logging)
    return args.dict_path or settings.dictionary.path


def _load_engine(path):
    try:
        return build_engine(asyncio.run(load_dictionary(path)))
    except DictionaryError as e:
        print(f"✗ {e.code.value}: {e.message}")
        sys.exit(1)


def lookup(args):
    engine = _load_engine(_dict_path(args))
    meanings, found = engine.lookup(args.word)
    if not found:
        print(f"Word '{args.word}' not found in dictionary")
        sys.exit(1)
    print(f"Word: {args.word}")
    if not meanings:
        print("  (no meanings recorded)")
    for i, meaning in enumerate(meanings, 1):
        print(f"  {i}. {meaning}")


def suggest(args):
    engine = _load_engine(_dict_path(args))
    suggestions = engine.suggest(args.prefix, args.limit)
    if not suggestions:
        print(f"No words start with '{args.prefix}'")
        return
    for word in suggestions:
        print(word)


def stats(args):
    path = _dict_path(args)
    engine = _load_engine(path)
    print(f"Dictionary loaded with {engine.count()} words.")
    built_at = asyncio.run(load_built_at(path))
    if built_at:
        print(f"Snapshot built at {built_at}")
