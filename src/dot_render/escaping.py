"""Backslash escaping and the quoting decision for DOT text."""

from __future__ import annotations

from collections.abc import Iterable

from dot_render.lexical import TokenClass, classify

QUOTE = '"'
SLASH = "\\"

# A slash followed by one of these is a Graphviz escape sequence
# (\N node name, \G graph name, \l left-justified newline, ...).
ESCAPE_LETTERS = frozenset("NGETHLnlr")


def add_escapes(text: str, extra: Iterable[str] = ()) -> str:
    """Escape quotes, slashes, newlines and any ``extra`` characters.

    A slash that starts one of the Graphviz escape sequences is left
    alone. The result is not idempotent: escaping twice doubles any
    slash that the first pass introduced.
    """
    escaped = {QUOTE, SLASH, *extra}
    out: list[str] = []
    # Pair every character with its successor; the trailing space keeps
    # the last character from being dropped.
    for c, nxt in zip(text, text[1:] + " "):
        if c == SLASH and nxt in ESCAPE_LETTERS:
            out.append(c)
        elif c in escaped:
            out.append(SLASH + c)
        elif c == "\n":
            out.append(SLASH + "n")
        else:
            out.append(c)
    return "".join(out)


def needs_quotes(text: str) -> bool:
    """Decide quoting from the original, unescaped text."""
    return classify(text) not in (TokenClass.IDENTIFIER, TokenClass.NUMERAL)
