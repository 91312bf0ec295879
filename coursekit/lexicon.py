"""Loading a set of words from a text file."""

from __future__ import annotations

import os


class LexiconError(Exception):
    """Raised when a lexicon file cannot be read."""


def load_lexicon(filename: str | os.PathLike[str]) -> set[str]:
    """Return the set of whitespace-separated words in ``filename``."""
    try:
        handle = open(filename, encoding="utf-8")
    except OSError as exc:
        raise LexiconError("Failed to open file") from exc
    with handle:
        try:
            text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise LexiconError("I/O error while reading") from exc
    return set(text.split())