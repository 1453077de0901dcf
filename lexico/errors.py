"""
Error types for grammar construction and top-level parsing.

A failed match inside the engine is never an exception: matchers return
``NO_MATCH``. The classes here cover mistakes in the grammar itself, plus the
``ParseError`` that ``Parser.parse`` raises for callers who prefer one.
"""


class LexicoError(Exception):
    """Base exception for all lexico errors."""


class GrammarError(LexicoError, ValueError):
    """
    Raised when a specification cannot be turned into a matcher.

    Examples:
    - A value that is not a string, pattern, list, dict, callable or None
    - An empty sequence or an empty list of options
    - Range bounds that are not single characters
    """


class UnboundRuleError(GrammarError):
    """Raised when a forward reference is invoked before it was bound."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"rule {name} is used before it was bound")


class RuleAlreadyBoundError(GrammarError):
    """Raised when a forward reference is bound a second time."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"rule {name} is already bound")


class ParseError(LexicoError):
    """
    Raised by ``Parser.parse`` when the input does not match.

    Carries no position or expectation: the engine does not track them.
    """

    def __init__(self, message: str = "input does not match"):
        self.message = message
        super().__init__(message)
