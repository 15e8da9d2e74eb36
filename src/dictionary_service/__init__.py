"""Word-meaning lookups and prefix autocomplete over an in-memory dictionary."""

__version__ = "0.1.0"
