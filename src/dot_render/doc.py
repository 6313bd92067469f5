"""A small Wadler/Leijen style document tree and its layout.

Documents are immutable trees built from text, possible line breaks,
concatenation, nesting and groups. ``render_pretty`` lays a document out
in one pass: each group is printed flat when its contents (and whatever
follows up to the next line break) fit both the page width and the
ribbon, otherwise its line breaks are taken.

Layout only affects whitespace; it never changes the tokens produced.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

_FLAT = True
_BREAK = False


class Doc:
    """Base class for document nodes."""

    def __add__(self, other: Doc) -> Doc:
        return cat(self, other)


@dataclass(frozen=True)
class Empty(Doc):
    pass


@dataclass(frozen=True)
class Text(Doc):
    text: str


@dataclass(frozen=True)
class Line(Doc):
    """A line break; printed as ``flat`` when its group fits."""

    flat: str = " "


@dataclass(frozen=True)
class Cat(Doc):
    left: Doc
    right: Doc


@dataclass(frozen=True)
class Nest(Doc):
    indent: int
    doc: Doc


@dataclass(frozen=True)
class Group(Doc):
    doc: Doc


@dataclass(frozen=True)
class Column(Doc):
    """Document depending on the current output column."""

    fn: Callable[[int], Doc]


@dataclass(frozen=True)
class Nesting(Doc):
    """Document depending on the current nesting level."""

    fn: Callable[[int], Doc]


EMPTY = Empty()


def text(s: str) -> Doc:
    return Text(s) if s else EMPTY


def line() -> Doc:
    return Line(" ")


def linebreak() -> Doc:
    return Line("")


def cat(left: Doc, right: Doc) -> Doc:
    if isinstance(left, Empty):
        return right
    if isinstance(right, Empty):
        return left
    return Cat(left, right)


def concat(docs: Iterable[Doc]) -> Doc:
    result: Doc = EMPTY
    for d in docs:
        result = cat(result, d)
    return result


def nest(indent: int, doc: Doc) -> Doc:
    return Nest(indent, doc)


def group(doc: Doc) -> Doc:
    return Group(doc)


def align(doc: Doc) -> Doc:
    """Nest ``doc`` at the current column."""
    return Column(lambda k: Nesting(lambda i: Nest(k - i, doc)))


def render_pretty(doc: Doc, ribbon: float = 0.4, width: int = 80) -> str:
    """Lay out ``doc`` for a page ``width`` columns wide.

    ``ribbon`` is the fraction of the width that may be taken by
    non-indentation characters on a single line.
    """
    ribbon_width = max(0, min(width, round(width * ribbon)))
    out: list[str] = []
    # Items are (indent, mode, doc); the top of the stack is the end.
    stack: list[tuple[int, bool, Doc]] = [(0, _BREAK, doc)]
    col = 0
    line_indent = 0

    while stack:
        i, mode, d = stack.pop()
        if isinstance(d, Empty):
            continue
        if isinstance(d, Text):
            out.append(d.text)
            col += len(d.text)
        elif isinstance(d, Line):
            if mode is _FLAT:
                out.append(d.flat)
                col += len(d.flat)
            else:
                out.append("\n" + " " * i)
                col = i
                line_indent = i
        elif isinstance(d, Cat):
            stack.append((i, mode, d.right))
            stack.append((i, mode, d.left))
        elif isinstance(d, Nest):
            stack.append((i + d.indent, mode, d.doc))
        elif isinstance(d, Group):
            if mode is _FLAT:
                stack.append((i, _FLAT, d.doc))
            else:
                room = min(width - col, ribbon_width - col + line_indent)
                flat_mode = _fits(room, col, (i, _FLAT, d.doc), stack)
                stack.append((i, _FLAT if flat_mode else _BREAK, d.doc))
        elif isinstance(d, Column):
            stack.append((i, mode, d.fn(col)))
        elif isinstance(d, Nesting):
            stack.append((i, mode, d.fn(i)))
        else:
            raise TypeError(f"Unknown document node: {type(d).__name__}")

    return "".join(out)


def _fits(
    room: int,
    col: int,
    first: tuple[int, bool, Doc],
    rest: list[tuple[int, bool, Doc]],
) -> bool:
    """Check the rest of the current line fits in ``room`` characters.

    ``first`` is examined, then ``rest`` from its top down. ``rest`` is
    read in place and never modified.
    """
    pending = [first]
    index = len(rest)
    while room >= 0:
        if not pending:
            if index == 0:
                return True
            index -= 1
            pending.append(rest[index])
            continue
        i, mode, d = pending.pop()
        if isinstance(d, Empty):
            continue
        if isinstance(d, Text):
            room -= len(d.text)
            col += len(d.text)
        elif isinstance(d, Line):
            if mode is _BREAK:
                return True
            room -= len(d.flat)
            col += len(d.flat)
        elif isinstance(d, Cat):
            pending.append((i, mode, d.right))
            pending.append((i, mode, d.left))
        elif isinstance(d, Nest):
            pending.append((i + d.indent, mode, d.doc))
        elif isinstance(d, Group):
            pending.append((i, mode, d.doc))
        elif isinstance(d, Column):
            pending.append((i, mode, d.fn(col)))
        elif isinstance(d, Nesting):
            pending.append((i, mode, d.fn(i)))
    return False
