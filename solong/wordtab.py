"""Small text helpers used when reading XPM data: word splitting and searches."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs.

    Only spaces and tabs separate words; other characters, newlines
    included, belong to the words they touch.
    """
    return [word for word in _BLANKS.split(text) if word]


def _check_needle(find: str) -> None:
    if not find:
        raise ValueError("search string must not be empty")


def str_str(text: str, find: str) -> int:
    """Return the position of the first ``find`` in ``text``, or -1."""
    _check_needle(find)
    return text.find(find)


def str_str_quoted(text: str, find: str) -> int:
    """Return the position of the first ``find`` lying outside double quotes.

    A double quote opens or closes a quoted section. A match may begin on
    the quote that closes a section but not on one that opens it.
    Returns -1 when there is no such match.
    """
    _check_needle(find)
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1