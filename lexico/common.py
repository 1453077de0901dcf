"""Ready-made matchers for tokens most grammars need."""

import re

from .combinators import capture, convert, ignore

whitespace = ignore(re.compile(r"\s*"))


def _to_number(text: str):
    return float(text) if "." in text else int(text)


integer = convert(capture(re.compile(r"\d+")), int)
number = convert(capture(re.compile(r"[+-]?([0-9]*[.])?[0-9]+")), _to_number)
