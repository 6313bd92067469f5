"""Attributes and helpers for the most commonly used ones.

Graphviz has close to 150 attributes; this module covers labels,
colors, styles, shapes, arrows and edge ordering. An ``Attribute`` is a
name paired with any printable value, so attributes that are not
covered here can still be written as ``Attribute("rankdir", "LR")``.

Labels may use these escape sequences, which are never escaped when
printed:

    ``\\N``  the name of the node
    ``\\G``  the name of the graph (or cluster)
    ``\\E``  the name of the edge
    ``\\T``  the node the edge comes from
    ``\\H``  the node the edge goes to
    ``\\L``  the object's label
    ``\\n``  centered newline
    ``\\l``  left-justified newline
    ``\\r``  right-justified newline
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import singledispatch
from typing import Any

from dot_render.code import (
    DotCode,
    align,
    angled,
    brackets,
    comma,
    dquotes,
    equals,
    group,
    hcat,
    punctuate,
    text,
    vsep,
)
from dot_render.colors import Color, ColorScheme, X11Color
from dot_render.printing import (
    PrintDot,
    qt_string,
    to_dot,
    unqt_dot,
    unqt_string,
)


@dataclass(frozen=True)
class Attribute(PrintDot):
    """A single ``name=value`` attribute.

    Names may come from user data, so unlike ``print_field`` the name is
    escaped and quoted when it is not a bare identifier.
    """

    name: str
    value: Any

    def unqt_dot(self) -> DotCode:
        return qt_string(self.name) + equals() + to_dot(self.value)


def print_attributes(attributes: Sequence[Attribute]) -> DotCode:
    """``[a=b, c=d]``, wrapped across lines when too long."""
    fields = punctuate(comma(), [unqt_dot(a) for a in attributes])
    return group(brackets(align(vsep(fields))))


# Labels

class Label(PrintDot):
    """Base class for label values."""


@dataclass(frozen=True)
class StrLabel(Label):
    """Plain text label; escape sequences such as ``\\n`` pass through."""

    text: str

    def unqt_dot(self) -> DotCode:
        return unqt_string(self.text)

    def to_dot(self) -> DotCode:
        return qt_string(self.text)


@dataclass(frozen=True)
class HtmlLabel(Label):
    """HTML-like label; the markup is written between ``<`` and ``>`` untouched."""

    html: str

    def unqt_dot(self) -> DotCode:
        return angled(text(self.html))


@singledispatch
def to_label_value(value: Any) -> Label:
    """Turn a value into a ``Label``; register more types to extend it."""
    raise TypeError(f"Cannot make a label from type: {type(value).__name__}")


@to_label_value.register
def _(value: str) -> Label:
    return StrLabel(value)


@to_label_value.register
def _(value: Label) -> Label:
    return value


@to_label_value.register(int)
@to_label_value.register(float)
def _(value: Any) -> Label:
    # bool is covered by int
    return StrLabel(str(value))


def to_label(value: Any) -> Attribute:
    return Attribute("label", to_label_value(value))


def text_label(value: str) -> Attribute:
    return to_label(value)


def text_label_value(value: str) -> Label:
    return to_label_value(value)


def x_label(value: Any) -> Attribute:
    """A label placed outside of the node or edge."""
    return Attribute("xlabel", to_label_value(value))


def x_text_label(value: str) -> Attribute:
    return x_label(value)


def force_labels() -> Attribute:
    """Place every ``x_label`` even when it overlaps."""
    return Attribute("forcelabels", True)


# Colors

def _as_color(c: str | Color) -> Color:
    return X11Color(c) if isinstance(c, str) else c


def bg_color(c: str | Color) -> Attribute:
    """Background of a graph or cluster; needs ``style(filled)``."""
    return Attribute("bgcolor", _as_color(c))


def fill_color(c: str | Color) -> Attribute:
    """Fill of a node; needs ``style(filled)``."""
    return Attribute("fillcolor", _as_color(c))


def font_color(c: str | Color) -> Attribute:
    return Attribute("fontcolor", _as_color(c))


def pen_color(c: str | Color) -> Attribute:
    """Bounding box color of a cluster."""
    return Attribute("pencolor", _as_color(c))


def color(c: str | Color) -> Attribute:
    """Edge color, node outline and, with ``filled``, the fallback fill."""
    return Attribute("color", [_as_color(c)])


def colors(cs: Sequence[str | Color]) -> Attribute:
    """Several colors, e.g. parallel edges drawn as ``red:blue``."""
    return Attribute("color", [_as_color(c) for c in cs])


def color_scheme(scheme: ColorScheme) -> Attribute:
    """Scheme for the named colors printed after this attribute."""
    return Attribute("colorscheme", scheme)


# Styles

class StyleName(Enum):
    DASHED = "dashed"
    DOTTED = "dotted"
    SOLID = "solid"
    BOLD = "bold"
    INVISIBLE = "invis"
    FILLED = "filled"
    DIAGONALS = "diagonals"
    ROUNDED = "rounded"
    TAPERED = "tapered"


@dataclass(frozen=True)
class StyleItem(PrintDot):
    """A style with optional arguments, e.g. ``setlinewidth(2)``."""

    name: StyleName | str
    args: tuple[str, ...] = field(default=())

    def _name(self) -> str:
        return self.name.value if isinstance(self.name, StyleName) else self.name

    def unqt_dot(self) -> DotCode:
        code = unqt_string(self._name())
        if not self.args:
            return code
        args = punctuate(comma(), [unqt_string(a) for a in self.args])
        return code + text("(") + hcat(args) + text(")")

    def to_dot(self) -> DotCode:
        if not self.args:
            return qt_string(self._name())
        return dquotes(self.unqt_dot())

    @classmethod
    def unqt_list_to_dot(cls, values: Sequence[Any]) -> DotCode:
        return hcat(punctuate(comma(), [unqt_dot(v) for v in values]))

    @classmethod
    def list_to_dot(cls, values: Sequence[Any]) -> DotCode:
        if len(values) == 1:
            return to_dot(values[0])
        return dquotes(cls.unqt_list_to_dot(values))


# Edges and nodes only
dashed = StyleItem(StyleName.DASHED)
dotted = StyleItem(StyleName.DOTTED)
solid = StyleItem(StyleName.SOLID)
invis = StyleItem(StyleName.INVISIBLE)
bold = StyleItem(StyleName.BOLD)
# Also clusters
filled = StyleItem(StyleName.FILLED)
rounded = StyleItem(StyleName.ROUNDED)
# Nodes only
diagonals = StyleItem(StyleName.DIAGONALS)
# Edges only
tapered = StyleItem(StyleName.TAPERED)


def style(item: StyleItem) -> Attribute:
    return styles([item])


def styles(items: Sequence[StyleItem]) -> Attribute:
    return Attribute("style", list(items))


def pen_width(width: float) -> Attribute:
    """Line width for clusters, nodes and edges."""
    return Attribute("penwidth", float(width))


# Node shapes

class Shape(Enum):
    BOX = "box"
    POLYGON = "polygon"
    ELLIPSE = "ellipse"
    OVAL = "oval"
    CIRCLE = "circle"
    POINT = "point"
    EGG = "egg"
    TRIANGLE = "triangle"
    PLAIN_TEXT = "plaintext"
    PLAIN = "plain"
    DIAMOND = "diamond"
    TRAPEZIUM = "trapezium"
    PARALLELOGRAM = "parallelogram"
    HOUSE = "house"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    SEPTAGON = "septagon"
    OCTAGON = "octagon"
    DOUBLE_CIRCLE = "doublecircle"
    DOUBLE_OCTAGON = "doubleoctagon"
    TRIPLE_OCTAGON = "tripleoctagon"
    INV_TRIANGLE = "invtriangle"
    INV_TRAPEZIUM = "invtrapezium"
    INV_HOUSE = "invhouse"
    M_DIAMOND = "Mdiamond"
    M_SQUARE = "Msquare"
    M_CIRCLE = "Mcircle"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    STAR = "star"
    NONE = "none"
    UNDERLINE = "underline"
    CYLINDER = "cylinder"
    NOTE = "note"
    TAB = "tab"
    FOLDER = "folder"
    BOX_3D = "box3d"
    COMPONENT = "component"


def shape(s: Shape) -> Attribute:
    return Attribute("shape", s)


# Edge arrows

class ArrowShape(Enum):
    BOX = "box"
    CROW = "crow"
    DIAMOND = "diamond"
    DOT = "dot"
    INV = "inv"
    NONE = "none"
    NORMAL = "normal"
    TEE = "tee"
    VEE = "vee"


class ArrowFill(Enum):
    OPEN = "o"
    FILLED = ""


class ArrowSide(Enum):
    LEFT = "l"
    RIGHT = "r"
    BOTH = ""


@dataclass(frozen=True)
class ArrowModifier:
    fill: ArrowFill = ArrowFill.FILLED
    side: ArrowSide = ArrowSide.BOTH

    def prefix(self) -> str:
        return self.fill.value + self.side.value


NO_MODS = ArrowModifier()
OPEN_MOD = ArrowModifier(fill=ArrowFill.OPEN)


@dataclass(frozen=True)
class ArrowType(PrintDot):
    """An arrowhead built from one or more modified shapes, e.g. ``invodot``."""

    parts: tuple[tuple[ArrowModifier, ArrowShape], ...]

    def arrow_name(self) -> str:
        return "".join(mod.prefix() + s.value for mod, s in self.parts)

    def unqt_dot(self) -> DotCode:
        return unqt_string(self.arrow_name())

    def to_dot(self) -> DotCode:
        return qt_string(self.arrow_name())


def _arrow(*parts: tuple[ArrowModifier, ArrowShape]) -> ArrowType:
    return ArrowType(tuple(parts))


# The 9 primitive arrows
normal = _arrow((NO_MODS, ArrowShape.NORMAL))
inv = _arrow((NO_MODS, ArrowShape.INV))
dot_arrow = _arrow((NO_MODS, ArrowShape.DOT))
no_arrow = _arrow((NO_MODS, ArrowShape.NONE))
tee = _arrow((NO_MODS, ArrowShape.TEE))
diamond = _arrow((NO_MODS, ArrowShape.DIAMOND))
crow = _arrow((NO_MODS, ArrowShape.CROW))
box = _arrow((NO_MODS, ArrowShape.BOX))
vee = _arrow((NO_MODS, ArrowShape.VEE))

# 5 derived arrows
inv_dot = _arrow((NO_MODS, ArrowShape.INV), (NO_MODS, ArrowShape.DOT))
o_dot = _arrow((OPEN_MOD, ArrowShape.DOT))
inv_o_dot = _arrow((NO_MODS, ArrowShape.INV), (OPEN_MOD, ArrowShape.DOT))
o_diamond = _arrow((OPEN_MOD, ArrowShape.DIAMOND))
o_box = _arrow((OPEN_MOD, ArrowShape.BOX))


def arrow_to(arrow: ArrowType) -> Attribute:
    """Arrow at the head; undirected graphs also need ``edge_ends``."""
    return Attribute("arrowhead", arrow)


def arrow_from(arrow: ArrowType) -> Attribute:
    """Arrow at the tail; needs ``edge_ends(DirType.BACK)`` or ``BOTH``."""
    return Attribute("arrowtail", arrow)


class DirType(Enum):
    FORWARD = "forward"
    BACK = "back"
    BOTH = "both"
    NONE = "none"


def edge_ends(direction: DirType) -> Attribute:
    return Attribute("dir", direction)


# Layout

class Order(Enum):
    OUT_EDGES = "out"
    IN_EDGES = "in"


def ordering(order: Order) -> Attribute:
    """Keep a node's outgoing or incoming edges in definition order."""
    return Attribute("ordering", order)

