"""Top-level entry point: resolve a specification once, parse many inputs."""

import logging

from .cursor import NO_MATCH, Cursor, unwrap
from .errors import ParseError
from .spec import parser

logger = logging.getLogger(__name__)


class Parser:
    """A resolved grammar.

    A Parser is itself a matcher, so it can be used inside other
    specifications. It keeps no per-parse state and can be reused freely.
    """

    def __init__(self, spec):
        self.spec = spec
        self._matcher = parser(spec)

    def __call__(self, cursor: Cursor):
        return self._matcher(cursor)

    def match(self, text: str, position: int = 0):
        """Run the grammar on ``text``; return its value or ``NO_MATCH``.

        A grammar that matched but yielded nothing returns None.
        """
        return unwrap(self._matcher(Cursor(text, position)))

    def parse(self, text: str, position: int = 0):
        """Run the grammar on ``text``; return its value or raise ParseError.

        The grammar does not have to consume the whole input; end it with
        ``eof`` to require that.
        """
        value = self.match(text, position)
        if value is NO_MATCH:
            logger.debug("no match for input of length %d at %d", len(text), position)
            raise ParseError()
        return value


def compile(spec) -> Parser:
    """Resolve ``spec`` into a reusable Parser."""
    return Parser(spec)
