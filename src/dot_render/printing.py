"""The printable contract: how values become DOT code.

Every value that can appear in an attribute prints in two ways:

    * ``unqt_dot`` gives the minimal form, used when composing a larger
      value (no surrounding quotes);
    * ``to_dot`` gives the form used as a complete field value, quoted
      where the DOT grammar requires it.

Lists of values have the matching pair ``unqt_list_to_dot`` and
``list_to_dot``. Value types written for this package subclass
``PrintDot``; builtin types (``int``, ``float``, ``bool``, ``str``,
``Char``, ``list``, ``tuple``) are served by registered ``Printer``
objects, and ``register_printer`` extends that table.

Only use ``code.text`` directly for static text known to need no
quoting; anything else should go through ``to_dot`` / ``qt_string`` so
that escaping and quoting happen exactly once.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import Any

from dot_render.code import (
    DotCode,
    char,
    colon,
    comma,
    dquotes,
    empty,
    equals,
    hcat,
    list_doc,
    punctuate,
    render_dot,
    text,
)
from dot_render.escaping import add_escapes, needs_quotes
from dot_render.lexical import is_rest_id_char
from dot_render.models import RenderConfig


class PrintDot(ABC):
    """Base class for value types that can be printed as DOT.

    Only ``unqt_dot`` has to be implemented.
    """

    @abstractmethod
    def unqt_dot(self) -> DotCode:
        """The unquoted form, for composing into larger values."""

    def to_dot(self) -> DotCode:
        """The form used as a complete field value; defaults to ``unqt_dot``."""
        return self.unqt_dot()

    @classmethod
    def unqt_list_to_dot(cls, values: Sequence[Any]) -> DotCode:
        """Defaults to a bracketed list: ``[a,b,c]``."""
        return list_doc(unqt_dot(v) for v in values)

    @classmethod
    def list_to_dot(cls, values: Sequence[Any]) -> DotCode:
        """Defaults to quoting ``unqt_list_to_dot``, whose brackets need it."""
        return dquotes(cls.unqt_list_to_dot(values))


class Printer(ABC):
    """Printing rules for a builtin type, with the same defaults as ``PrintDot``."""

    @abstractmethod
    def unqt(self, value: Any) -> DotCode:
        """The unquoted form of ``value``."""

    def final(self, value: Any) -> DotCode:
        return self.unqt(value)

    def unqt_list(self, values: Sequence[Any]) -> DotCode:
        return list_doc(self.unqt(v) for v in values)

    def final_list(self, values: Sequence[Any]) -> DotCode:
        return dquotes(self.unqt_list(values))


class _PrintDotPrinter(Printer):
    def __init__(self, cls: type[PrintDot]) -> None:
        self.cls = cls

    def unqt(self, value: PrintDot) -> DotCode:
        return value.unqt_dot()

    def final(self, value: PrintDot) -> DotCode:
        return value.to_dot()

    def unqt_list(self, values: Sequence[PrintDot]) -> DotCode:
        return self.cls.unqt_list_to_dot(values)

    def final_list(self, values: Sequence[PrintDot]) -> DotCode:
        return self.cls.list_to_dot(values)


class _EmptyListPrinter(Printer):
    """Used for an empty list whose element type is unknown."""

    def unqt(self, value: Any) -> DotCode:
        raise TypeError(f"No DOT printer for type: {type(value).__name__}")

    def unqt_list(self, values: Sequence[Any]) -> DotCode:
        return list_doc([])


_PRINTERS: dict[type, Printer] = {}
_EMPTY_LIST_PRINTER = _EmptyListPrinter()


def register_printer(cls: type, printer: Printer) -> None:
    """Make values of ``cls`` (and its subclasses) printable."""
    _PRINTERS[cls] = printer


def printer_for(cls: type) -> Printer:
    """Find the printer for ``cls``, most specific base class first."""
    for base in cls.__mro__:
        if base in _PRINTERS:
            return _PRINTERS[base]
        if base is PrintDot:
            return _PrintDotPrinter(cls)
    raise TypeError(f"No DOT printer for type: {cls.__name__}")


def _list_printer(values: Sequence[Any], item_type: type | None) -> Printer:
    if item_type is None and values:
        item_type = type(values[0])
    if item_type is None:
        return _EMPTY_LIST_PRINTER
    return printer_for(item_type)


def unqt_dot(value: Any) -> DotCode:
    return printer_for(type(value)).unqt(value)


def to_dot(value: Any) -> DotCode:
    return printer_for(type(value)).final(value)


def unqt_list_to_dot(values: Sequence[Any], item_type: type | None = None) -> DotCode:
    """Print a list using its element type's rules.

    The element type is taken from the first value unless given; an
    empty list without ``item_type`` uses the bracketed default.
    """
    return _list_printer(values, item_type).unqt_list(values)


def list_to_dot(values: Sequence[Any], item_type: type | None = None) -> DotCode:
    return _list_printer(values, item_type).final_list(values)


def print_it(value: Any, config: RenderConfig | None = None) -> str:
    """Render the final form of a single value."""
    return render_dot(to_dot(value), config)


# Text helpers

def add_quotes(original: str, code: DotCode) -> DotCode:
    """Quote ``code`` when ``original`` could not appear bare."""
    return dquotes(code) if needs_quotes(original) else code


def unqt_escaped(extra: Sequence[str], s: str) -> DotCode:
    """Escape ``extra`` as well as quotes and slashes."""
    return text(add_escapes(s, extra))


def print_escaped(extra: Sequence[str], s: str) -> DotCode:
    """Escape like ``unqt_escaped`` then quote if the original text needs it.

    ``extra`` is expected to hold punctuation; the quoting decision is
    made on ``s`` before any escape is added.
    """
    return add_quotes(s, text(add_escapes(s, extra)))


def unqt_string(s: str) -> DotCode:
    if not s:
        return empty()
    return unqt_escaped((), s)


def qt_string(s: str) -> DotCode:
    """Escape and quote text that needs it, keywords included."""
    return print_escaped((), s)


def unqt_text(s: str) -> DotCode:
    return unqt_string(s)


def dot_text(s: str) -> DotCode:
    return qt_string(s)


def qt_char(c: str) -> DotCode:
    if is_rest_id_char(c):
        return char(c)
    return dquotes(text(add_escapes(c)))


def comma_del(a: Any, b: Any) -> DotCode:
    return unqt_dot(a) + comma() + unqt_dot(b)


def print_field(name: str, value: Any) -> DotCode:
    """``name=value`` with the value in its final form."""
    return text(name) + equals() + to_dot(value)


def fslash() -> DotCode:
    return char("/")


# Builtin printers

class Char(str):
    """A single character, printed with character rather than text rules."""

    def __new__(cls, value: str) -> Char:
        if len(value) != 1:
            raise ValueError(f"Char needs exactly one character: {value!r}")
        return super().__new__(cls, value)


class IntPrinter(Printer):
    def unqt(self, value: int) -> DotCode:
        return text(str(int(value)))


class BoolPrinter(Printer):
    def unqt(self, value: bool) -> DotCode:
        return text("true" if value else "false")


class FloatPrinter(Printer):
    """Integral floats print as integers; exponent forms must be quoted."""

    def unqt(self, value: float) -> DotCode:
        return text(format_float(value))

    def final(self, value: float) -> DotCode:
        s = format_float(value)
        if not math.isfinite(value):
            # -inf is not a legal bare ID
            return add_quotes(s, text(s))
        return dquotes(text(s)) if "e" in s.lower() else text(s)

    def unqt_list(self, values: Sequence[float]) -> DotCode:
        return hcat(punctuate(colon(), [self.unqt(v) for v in values]))

    def final_list(self, values: Sequence[float]) -> DotCode:
        if len(values) == 1:
            return self.final(values[0])
        return dquotes(self.unqt_list(values))


def format_float(value: float) -> str:
    """Shortest text for ``value``; integral values lose the decimal point."""
    if math.isfinite(value) and value == round(value):
        return str(round(value))
    return repr(float(value))


class TextPrinter(Printer):
    def unqt(self, value: str) -> DotCode:
        return unqt_string(value)

    def final(self, value: str) -> DotCode:
        return qt_string(value)


class CharPrinter(Printer):
    def unqt(self, value: str) -> DotCode:
        return text(add_escapes(value))

    def final(self, value: str) -> DotCode:
        return qt_char(value)

    def unqt_list(self, values: Sequence[str]) -> DotCode:
        return unqt_string("".join(values))

    def final_list(self, values: Sequence[str]) -> DotCode:
        return qt_string("".join(values))


class EnumPrinter(Printer):
    """Enum members print their value as text."""

    def unqt(self, value: Enum) -> DotCode:
        return unqt_string(str(value.value))

    def final(self, value: Enum) -> DotCode:
        return qt_string(str(value.value))


class SequencePrinter(Printer):
    """A nested list prints with its own element type's list rules."""

    def unqt(self, value: Sequence[Any]) -> DotCode:
        return unqt_list_to_dot(value)

    def final(self, value: Sequence[Any]) -> DotCode:
        return list_to_dot(value)


register_printer(int, IntPrinter())
register_printer(bool, BoolPrinter())
register_printer(float, FloatPrinter())
register_printer(str, TextPrinter())
register_printer(Char, CharPrinter())
register_printer(Enum, EnumPrinter())
register_printer(list, SequencePrinter())
register_printer(tuple, SequencePrinter())
