"""Forward references, for grammars that refer to themselves."""

import logging
from typing import Optional

from .cursor import Cursor
from .errors import GrammarError, RuleAlreadyBoundError, UnboundRuleError
from .spec import parser

logger = logging.getLogger(__name__)


class Rule:
    """A matcher whose definition is supplied after it is first referenced.

    Create the rule, use it inside other specifications, then bind it once
    the whole grammar exists::

        value = rule("value")
        array = ["[", repeat(value, ","), "]"]
        value.bind(options(array, integer))

    The bound specification is resolved on first use. A rule can be bound
    only once, and must be bound before any parse runs through it.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or "<anonymous>"
        self._spec = None
        self._bound = False
        self._matcher = None

    @property
    def bound(self) -> bool:
        return self._bound

    def bind(self, spec) -> "Rule":
        if self._bound:
            raise RuleAlreadyBoundError(self.name)
        self._spec = spec
        self._bound = True
        logger.debug("bound rule %s", self.name)
        return self

    def match(self, cursor: Cursor):
        if self._matcher is None:
            if not self._bound:
                raise UnboundRuleError(self.name)
            self._matcher = parser(self._spec)
            logger.debug("resolved rule %s", self.name)
        return self._matcher(cursor)

    def __call__(self, arg):
        # Called with a cursor while parsing; called with a matcher to bind.
        if isinstance(arg, Cursor):
            return self.match(arg)
        if callable(arg):
            self.bind(arg)
            return None
        raise GrammarError(
            f"rule {self.name} expects a Cursor or a matcher, got {type(arg).__name__}"
        )

    def __repr__(self):
        state = "bound" if self._bound else "unbound"
        return f"Rule({self.name!r}, {state})"


def rule(name: Optional[str] = None) -> Rule:
    """Create an unbound forward reference."""
    return Rule(name)
