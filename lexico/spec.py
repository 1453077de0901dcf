"""
Specification resolver.

A specification is plain Python data describing a parser:

    str           exact text, yields nothing (EMPTY)
    re.Pattern    anchored regular expression, yields the matched text
    list / tuple  sequence, yields the last non-empty value
    dict          structure, yields a dict of the named fields
    callable      an existing matcher, used as is
    None          consumes nothing, always succeeds

Every combinator accepts specifications and resolves them through ``parser``.
"""

import re

from .cursor import EMPTY, NO_MATCH, Cursor, unwrap
from .errors import GrammarError
from .primitives import nothing, punctuation, regex

# Fields with these names are matched but left out of a structure's result.
PUNCTUATION_KEYS = frozenset(["_", "__", "___", "____", "_____"])


def parser(spec):
    """Convert a specification into a matcher."""
    if spec is None:
        return nothing
    if isinstance(spec, str):
        return punctuation(spec)
    if isinstance(spec, re.Pattern):
        return regex(spec)
    if isinstance(spec, (list, tuple)):
        return sequence(spec)
    if isinstance(spec, dict):
        return structure(spec)
    if callable(spec):
        return spec
    raise GrammarError(f"cannot build a parser from {type(spec).__name__}: {spec!r}")


def sequence(items):
    """Match every item in order.

    Yields the value of the last item that yielded something, or ``EMPTY``.
    Stops at the first failing item and leaves the cursor where the failure
    happened; backing up is the job of the enclosing ``options`` or
    ``repeat``.
    """
    if len(items) == 0:
        raise GrammarError("sequence is empty")
    matchers = [parser(item) for item in items]

    def match(cursor: Cursor):
        result = EMPTY
        for m in matchers:
            value = m(cursor)
            if value is NO_MATCH:
                return NO_MATCH
            if value is not EMPTY:
                result = value
        return result

    return match


def structure(fields: dict):
    """Match each field in declaration order and collect them into a dict.

    Fields named in ``PUNCTUATION_KEYS`` are matched but not collected. A
    field that yielded nothing is collected as None.
    """
    matchers = [(key, parser(spec)) for key, spec in fields.items()]

    def match(cursor: Cursor):
        result = {}
        for key, m in matchers:
            value = m(cursor)
            if value is NO_MATCH:
                return NO_MATCH
            if key not in PUNCTUATION_KEYS:
                result[key] = unwrap(value)
        return result

    return match
