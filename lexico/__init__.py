"""lexico: declarative parser combinators.

Grammars are plain Python data (strings, compiled patterns, lists, dicts)
combined with a handful of functions, and run as a recursive-descent parser
with backtracking::

    import re
    import lexico

    pair = {"key": re.compile(r"\\w+"), "_": "=", "value": lexico.integer}
    p = lexico.compile(lexico.repeat(pair, ","))
    p.parse("a=1,b=2")   # [{'key': 'a', 'value': 1}, {'key': 'b', 'value': 2}]
"""

from .combinators import capture, convert, ignore, not_, optional, options, repeat
from .common import integer, number, whitespace
from .compiler import Parser, compile
from .cursor import EMPTY, NO_MATCH, Cursor, Empty, NoMatch
from .errors import (
    GrammarError,
    LexicoError,
    ParseError,
    RuleAlreadyBoundError,
    UnboundRuleError,
)
from .primitives import char, char_range, cut, eof, literal, nothing, punctuation, regex
from .rule import Rule, rule
from .spec import PUNCTUATION_KEYS, parser, sequence, structure

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "NO_MATCH",
    "EMPTY",
    "Empty",
    "NoMatch",
    "PUNCTUATION_KEYS",
    "parser",
    "sequence",
    "structure",
    "nothing",
    "regex",
    "punctuation",
    "literal",
    "char",
    "char_range",
    "eof",
    "cut",
    "ignore",
    "capture",
    "convert",
    "not_",
    "options",
    "optional",
    "repeat",
    "rule",
    "Rule",
    "whitespace",
    "integer",
    "number",
    "compile",
    "Parser",
    "LexicoError",
    "GrammarError",
    "UnboundRuleError",
    "RuleAlreadyBoundError",
    "ParseError",
    "__version__",
]
