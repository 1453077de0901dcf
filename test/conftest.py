"""Shared fixtures for lexico tests."""

import json
import re

import pytest
import lexico
from lexico import capture, convert, eof, ignore, options, repeat, rule, whitespace

# ── Common grammars ──

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

ESCAPE_RE = re.compile(r"\\(?:u([0-9a-fA-F]{4})|(.))")


def unescape(text):
    def replace(m):
        if m.group(1):
            return chr(int(m.group(1), 16))
        return ESCAPES[m.group(2)]

    return ESCAPE_RE.sub(replace, text)


def to_json_number(text):
    if any(c in text for c in ".eE"):
        return float(text)
    return int(text)


def build_json_grammar():
    """JSON written with lexico combinators; yields plain Python values."""
    value = rule("value")
    null = convert("null", lambda _: None)
    boolean = convert(options("true", "false"), lambda text: text == "true")
    string = convert(
        ['"', capture(re.compile(r'(?:[^"\\]|\\["\\/bfnrt]|\\u[0-9a-fA-F]{4})*')), '"'],
        unescape,
    )
    number = convert(
        re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"),
        to_json_number,
    )
    comma = re.compile(r"\s*,\s*")
    array = [
        ignore(re.compile(r"\[\s*")),
        repeat(value, comma, min_count=0),
        ignore(re.compile(r"\s*\]")),
    ]
    pair = {"key": string, "_": re.compile(r"\s*:\s*"), "value": value}
    obj = convert(
        [
            ignore(re.compile(r"\{\s*")),
            repeat(pair, comma, min_count=0),
            ignore(re.compile(r"\s*\}")),
        ],
        lambda pairs: {p["key"]: p["value"] for p in pairs},
    )
    value.bind(options(obj, array, string, null, boolean, number))
    return lexico.compile([whitespace, value, whitespace, eof])


LIST_GRAMMAR = ["[", repeat(re.compile(r"[a-z]+"), ","), "]"]


# ── Parsers (session-scoped so grammars resolve only once) ──


@pytest.fixture(scope="session")
def json_parser():
    """Build the JSON grammar once per session."""
    return build_json_grammar()


@pytest.fixture(scope="session")
def list_parser():
    """Build the list grammar once per session."""
    return lexico.compile(LIST_GRAMMAR)


# ── Test data generators ──


def make_small_json():
    return json.dumps({"name": "John", "age": 30, "active": True})


def make_medium_json():
    return json.dumps(
        {
            "users": [
                {"id": i, "name": f"user{i}", "email": f"user{i}@example.com"}
                for i in range(20)
            ]
        }
    )


def make_large_json():
    return json.dumps(
        {
            "users": [
                {
                    "id": i,
                    "name": f"user{i}",
                    "scores": [j * 1.1 for j in range(10)],
                    "active": i % 2 == 0,
                    "manager": None,
                }
                for i in range(100)
            ]
        }
    )
