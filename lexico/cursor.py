"""Parse state shared by every matcher, and the two special matcher results."""

from dataclasses import dataclass


class NoMatch:
    """The failure outcome of a matcher.

    There is exactly one instance, ``NO_MATCH``. Matchers return it instead of
    raising, so every other value, None included, means the matcher matched.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NO_MATCH"


NO_MATCH = NoMatch()


class Empty:
    """The result of a matcher that matched but yields nothing.

    Punctuation, ``ignore``, ``nothing`` and lookaheads return ``EMPTY``.
    Sequences and repetitions skip it, which is how brackets and separators
    drop out of a result. It is distinct from None, which is an ordinary
    value (a JSON ``null``, say). Users see None wherever ``EMPTY`` would
    leave the engine: in structure fields, ``convert`` arguments and the
    result of ``Parser.match``.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "EMPTY"


EMPTY = Empty()


def unwrap(value):
    """Turn ``EMPTY`` into None; leave every other value alone."""
    return None if value is EMPTY else value


@dataclass
class Cursor:
    """Mutable parse state: the input, the current offset and the commit flag.

    ``commit`` belongs to the innermost running ``options``; ``cut`` sets it.
    """

    text: str
    position: int = 0
    commit: bool = False

    def __post_init__(self):
        if not 0 <= self.position <= len(self.text):
            raise ValueError(
                f"position {self.position} is outside the input (length {len(self.text)})"
            )

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)
