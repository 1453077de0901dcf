"""Leaf matchers: they read the input directly and never call other matchers."""

import re
from typing import Union

from .cursor import EMPTY, NO_MATCH, Cursor
from .errors import GrammarError


def nothing(cursor: Cursor):
    """Always matches, consumes nothing and yields nothing."""
    return EMPTY


def regex(pattern: Union[str, re.Pattern]):
    """Match ``pattern`` at the cursor and yield the matched text.

    ``Pattern.match`` with a start offset only ever matches at that offset, so
    the pattern is anchored at the cursor and never scans ahead. Note that a
    leading ``^`` still means start of input (or of a line with MULTILINE).
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    def match(cursor: Cursor):
        m = pattern.match(cursor.text, cursor.position)
        if m is None:
            return NO_MATCH
        cursor.position = m.end()
        return m.group(0)

    return match


def punctuation(text: str):
    """Match ``text`` exactly and yield nothing."""
    size = len(text)

    def match(cursor: Cursor):
        if not cursor.text.startswith(text, cursor.position):
            return NO_MATCH
        cursor.position += size
        return EMPTY

    return match


def literal(text: str):
    """Match ``text`` exactly and yield it."""
    size = len(text)

    def match(cursor: Cursor):
        if not cursor.text.startswith(text, cursor.position):
            return NO_MATCH
        cursor.position += size
        return text

    return match


def char(chars: str):
    """Match one character out of ``chars``."""
    allowed = frozenset(chars)

    def match(cursor: Cursor):
        if cursor.at_end:
            return NO_MATCH
        c = cursor.text[cursor.position]
        if c not in allowed:
            return NO_MATCH
        cursor.position += 1
        return c

    return match


def char_range(first: str, last: str):
    """Match one character between ``first`` and ``last``, inclusive."""
    if len(first) != 1 or len(last) != 1:
        raise GrammarError(
            f"range bounds must be single characters, got {first!r} and {last!r}"
        )
    if first > last:
        raise GrammarError(f"range {first!r}-{last!r} is reversed")

    def match(cursor: Cursor):
        if cursor.at_end:
            return NO_MATCH
        c = cursor.text[cursor.position]
        if not first <= c <= last:
            return NO_MATCH
        cursor.position += 1
        return c

    return match


def eof(cursor: Cursor):
    """Match only at the end of the input."""
    if not cursor.at_end:
        return NO_MATCH
    return EMPTY


def cut(cursor: Cursor):
    """Commit the innermost ``options`` to the alternative being tried.

    Once set, a later failure in the same alternative fails the whole
    ``options`` instead of falling through to the next alternative.
    """
    cursor.commit = True
    return EMPTY
