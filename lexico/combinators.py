"""Combinators that wrap, choose between or repeat other specifications."""

import re
from typing import Any, Callable, Optional

from .cursor import EMPTY, NO_MATCH, Cursor, unwrap
from .errors import GrammarError
from .primitives import literal, nothing
from .spec import parser


def ignore(inner):
    """Match ``inner`` but yield nothing."""
    m = parser(inner)

    def match(cursor: Cursor):
        if m(cursor) is NO_MATCH:
            return NO_MATCH
        return EMPTY

    return match


def capture(inner):
    """Match ``inner`` and yield the text it consumed."""
    m = parser(inner)

    def match(cursor: Cursor):
        start = cursor.position
        if m(cursor) is NO_MATCH:
            return NO_MATCH
        return cursor.text[start : cursor.position]

    return match


def convert(inner, fn: Callable[[Any], Any]):
    """Match ``inner`` and yield ``fn`` applied to its value.

    ``fn`` gets None when ``inner`` yielded nothing, and is not called at all
    when ``inner`` fails. Anything ``fn`` raises is a bug in the grammar and
    propagates to the caller.
    """
    m = parser(inner)

    def match(cursor: Cursor):
        value = m(cursor)
        if value is NO_MATCH:
            return NO_MATCH
        return fn(unwrap(value))

    return match


def not_(inner):
    """Negative lookahead: match only where ``inner`` does not.

    Never consumes input, and a ``cut`` inside ``inner`` does not reach the
    enclosing ``options``.
    """
    m = parser(inner)

    def match(cursor: Cursor):
        start = cursor.position
        commit = cursor.commit
        value = m(cursor)
        cursor.position = start
        cursor.commit = commit
        if value is NO_MATCH:
            return EMPTY
        return NO_MATCH

    return match


def _alternative(spec):
    # Inside options, bare strings and patterns yield the text they matched.
    if isinstance(spec, str):
        return literal(spec)
    if isinstance(spec, re.Pattern):
        return capture(spec)
    return parser(spec)


def options(*specs):
    """Ordered choice: yield the value of the first alternative that matches.

    The cursor is moved back before each new alternative. If an alternative
    calls ``cut`` and then fails, the remaining alternatives are skipped and
    the whole choice fails.
    """
    if not specs:
        raise GrammarError("options needs at least one alternative")
    alternatives = [_alternative(spec) for spec in specs]

    def match(cursor: Cursor):
        begin = cursor.position
        inherited = cursor.commit
        cursor.commit = False
        for alternative in alternatives:
            value = alternative(cursor)
            if value is not NO_MATCH:
                cursor.commit = inherited
                return value
            if cursor.commit:
                break
            cursor.position = begin
        cursor.commit = inherited
        return NO_MATCH

    return match


def optional(inner):
    """Yield the value of ``inner``, or nothing where it does not match.

    ``inner`` is resolved as usual, so a bare string stays punctuation.
    """
    return options(parser(inner), nothing)


def repeat(
    inner,
    separator=None,
    max_count: Optional[int] = None,
    min_count: int = 1,
):
    """Match ``inner`` one or more times, with ``separator`` between items.

    Yields the list of item values, skipping items that yielded nothing. The
    first item is required unless ``min_count`` is 0. After that, a failing
    separator or item ends the list and is not an error; the cursor is moved
    back to just after the last complete item. The loop also stops as soon
    as an iteration consumes no input, so items that can match the empty
    string do not loop forever.

    ``max_count`` stops the loop once that many items matched. Fewer than
    ``min_count`` matched items fails the repetition.
    """
    if max_count is not None and max_count < 1:
        raise GrammarError(f"max_count must be at least 1, got {max_count}")
    if min_count < 0 or (max_count is not None and min_count > max_count):
        raise GrammarError(f"invalid bounds: min_count={min_count}, max_count={max_count}")
    m_inner = parser(inner)
    m_separator = parser(separator)

    def match(cursor: Cursor):
        start = cursor.position
        first = m_inner(cursor)
        if first is NO_MATCH:
            if min_count == 0:
                cursor.position = start
                return []
            return NO_MATCH
        items = [] if first is EMPTY else [first]
        count = 1
        while max_count is None or count < max_count:
            begin = cursor.position
            if m_separator(cursor) is NO_MATCH:
                cursor.position = begin
                break
            item = m_inner(cursor)
            if item is NO_MATCH:
                cursor.position = begin
                break
            count += 1
            if item is not EMPTY:
                items.append(item)
            if cursor.position == begin:
                break
        if count < min_count:
            return NO_MATCH
        return items

    return match
