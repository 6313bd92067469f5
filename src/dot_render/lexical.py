"""Lexical classification of DOT identifiers.

The DOT language accepts an ID in one of four forms:

    * a string of ASCII letters, underscores, digits or characters with
      ``ord(c) >= 128``, not beginning with a digit;
    * a numeral ``[-]?(.[0-9]+ | [0-9]+(.[0-9]*)?)``;
    * a double-quoted string, possibly containing escaped quotes;
    * an HTML string ``<...>``.

Only the first two may appear bare; the predicates here decide which
bucket a piece of text falls into.
"""

from __future__ import annotations

import re
from enum import Enum

# Compared case-insensitively.
KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})

_NUM_PATTERN = re.compile(r"-?(\.[0-9]+|[0-9]+(\.[0-9]*)?)")


class TokenClass(Enum):
    """The lexical bucket a piece of text belongs to."""

    EMPTY = "empty"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMERAL = "numeral"
    OTHER = "other"


def is_first_id_char(c: str) -> bool:
    """Can this character start a bare identifier?"""
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_" or ord(c) >= 128


def is_rest_id_char(c: str) -> bool:
    """Can this character appear after the first one in a bare identifier?"""
    return is_first_id_char(c) or ("0" <= c <= "9")


def is_keyword(text: str) -> bool:
    return text.lower() in KEYWORDS


def is_id_string(text: str) -> bool:
    if not text:
        return False
    return is_first_id_char(text[0]) and all(is_rest_id_char(c) for c in text[1:])


def is_num_string(text: str) -> bool:
    return _NUM_PATTERN.fullmatch(text) is not None


def classify(text: str) -> TokenClass:
    """Place text in exactly one bucket; keywords win over identifiers."""
    if not text:
        return TokenClass.EMPTY
    if is_keyword(text):
        return TokenClass.KEYWORD
    if is_id_string(text):
        return TokenClass.IDENTIFIER
    if is_num_string(text):
        return TokenClass.NUMERAL
    return TokenClass.OTHER
