"""
Declaration language parser, powered by lexico.

Parses a small language of nested declarations and prints the syntax tree
as JSON.

Usage:
    python element.py source.ele
    python element.py < source.ele

Syntax:
    namespace geometry { ... }        namespace, holds declarations
    struct Point { ... }              struct, holds declarations
    x: Num;                           declaration without a body
    origin = Point(0, 0);             declaration with an expression body
    add(a: Point, b: Point): Point = Point(a.x, b.y);
    twice = _(f) => _(v) => f(f(v));  lambda expression

Expressions are an identifier followed by calls ``(...)`` and member
accesses ``.name``, or a lambda ``_(args) => body``.
"""

import json
import re
import sys

import lexico
from lexico import cut, eof, ignore, not_, optional, options, repeat, rule, whitespace

# ============================================================================
# Grammar
# ============================================================================


def token(pattern):
    """Punctuation written as a pattern, so it can swallow whitespace."""
    return ignore(re.compile(pattern))


KEYWORD = re.compile(r"(?:struct|namespace)\b")

identifier = [not_(KEYWORD), re.compile(r"\w+")]

expression = rule("expression")
declaration = rule("declaration")

comma = token(r"\s*,\s*")

call = [token(r"\(\s*"), repeat(expression, comma, min_count=0), token(r"\s*\)")]

member = [token(r"\.\s*"), identifier]

type_hint = optional([token(r"\s*:\s*"), expression])

port_list = repeat({"name": identifier, "hint": type_hint}, comma, min_count=0)

value_expression = {
    "start": identifier,
    "_": whitespace,
    "ops": repeat(options(call, member), whitespace, min_count=0),
}

# "_(x)" is also a valid call of a function named "_", so the lambda only
# commits once the arrow has matched.
lambda_expression = {
    "_": token(r"_\(\s*"),
    "args": port_list,
    "__": token(r"\s*\)\s*=>\s*"),
    "___": cut,
    "body": expression,
}

expression.bind(options(lambda_expression, value_expression))

scope = [token(r"\{\s*"), repeat(declaration, whitespace, min_count=0), token(r"\s*\}")]

container = {
    "type": KEYWORD,
    "_": cut,
    "__": whitespace,
    "name": identifier,
    "___": whitespace,
    "body": scope,
}

function = {
    "name": identifier,
    "_": whitespace,
    "args": optional([token(r"\(\s*"), port_list, token(r"\s*\)")]),
    "hint": type_hint,
    "__": whitespace,
    "body": options([token(r"=\s*"), expression, token(r"\s*;")], scope, token(";")),
}

declaration.bind(options(container, function))

element_file = lexico.compile(
    [whitespace, repeat(declaration, whitespace, min_count=0), whitespace, eof]
)


def parse(source):
    """Parse ``source`` into a list of declaration dicts."""
    return element_file.parse(source)


# ============================================================================
# CLI
# ============================================================================


def main():
    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            source = f.read()
    else:
        source = sys.stdin.read()

    try:
        tree = parse(source)
    except lexico.ParseError:
        print("Parse error", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(tree, indent=2))


if __name__ == "__main__":
    main()
