"""
Arithmetic calculator, powered by lexico.

Evaluates an arithmetic expression while parsing it.

Usage:
    python calculator.py "2 * (3 + 4)"
    python calculator.py   # interactive mode

Supported syntax:
    numbers        42  3.5  .5
    binary         +  -  *  /   (left associative, * and / bind tighter)
    power          ^            (right associative, binds tightest)
    negation       -x
    grouping       ( ... )
"""

import operator
import re
import sys

import lexico
from lexico import convert, cut, eof, ignore, optional, options, repeat, rule, whitespace

# ============================================================================
# Grammar
# ============================================================================

OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def to_number(text):
    return float(text) if "." in text else int(text)


def fold(parts):
    """Apply a left-associative chain of operators, left to right."""
    value = parts["first"]
    for step in parts["rest"]:
        value = OPERATORS[step["op"]](value, step["value"])
    return value


def power(parts):
    if parts["exponent"] is None:
        return parts["base"]
    return parts["base"] ** parts["exponent"]


def binary(operand, *ops):
    """operand (op operand)*, folded left."""
    tail = [whitespace, {"op": options(*ops), "_": whitespace, "value": operand}]
    return convert({"first": operand, "rest": repeat(tail, min_count=0)}, fold)


expression = rule("expression")
factor = rule("factor")

number = convert(re.compile(r"(?:[0-9]*[.])?[0-9]+"), to_number)

# Once "(" has matched nothing else can, so an unbalanced group fails here
# instead of being retried as a number.
group = [ignore(re.compile(r"\(\s*")), cut, expression, ignore(re.compile(r"\s*\)"))]

negation = convert(["-", whitespace, factor], operator.neg)

atom = options(group, number, negation)

factor.bind(
    convert(
        {"base": atom, "exponent": optional([whitespace, "^", whitespace, factor])},
        power,
    )
)

term = binary(factor, "*", "/")

expression.bind(binary(term, "+", "-"))

calculator = lexico.compile([whitespace, expression, whitespace, eof])


def evaluate(text):
    """Evaluate ``text``; raises lexico.ParseError on malformed input."""
    return calculator.parse(text)


# ============================================================================
# CLI
# ============================================================================

EXAMPLES = [
    "1 + 2 * 3",
    "2 * (3 + 4)",
    "2 ^ 3 ^ 2",
    "-2 ^ 2",
    "10 / 4 - 1",
    "((1))",
]


def main():
    if len(sys.argv) > 1:
        text = " ".join(sys.argv[1:])
        try:
            print(evaluate(text))
        except lexico.ParseError:
            print(f"Parse error: {text!r}", file=sys.stderr)
            sys.exit(1)
        except ZeroDivisionError:
            print("Division by zero", file=sys.stderr)
            sys.exit(1)
        return

    print("\n--- Calculator ---")
    print("Type an expression, or 'examples' to see demos, or 'quit' to exit.\n")

    while True:
        try:
            text = input("calc> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not text:
            continue
        if text.lower() == "quit":
            break
        if text.lower() == "examples":
            for ex in EXAMPLES:
                print(f"  {ex} = {evaluate(ex)}")
            print()
            continue

        try:
            print(evaluate(text))
        except lexico.ParseError:
            print("Parse error")
        except ZeroDivisionError:
            print("Division by zero")


if __name__ == "__main__":
    main()
