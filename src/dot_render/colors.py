"""Colors and color schemes.

Printing a color scheme makes it the active palette for the rest of the
render. Named colors are relative to a scheme: a color from the active
scheme prints as its bare name (or palette index), any other prints
fully qualified as ``/scheme/name``.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dot_render.code import (
    DotCode,
    colon,
    comma,
    dquotes,
    hcat,
    punctuate,
    set_color_scheme,
    with_context,
)
from dot_render.printing import (
    PrintDot,
    format_float,
    qt_string,
    to_dot,
    unqt_dot,
    unqt_string,
)
from dot_render.state import RenderContext


class ColorScheme(PrintDot):
    """A named palette that colors may be relative to."""

    @property
    @abstractmethod
    def scheme_name(self) -> str:
        """Name used in qualified colors, e.g. ``blues9``."""

    def unqt_dot(self) -> DotCode:
        return set_color_scheme(self) + self._name_dot()

    def _name_dot(self) -> DotCode:
        return unqt_string(self.scheme_name)


class X11Scheme(ColorScheme):
    """The default Graphviz palette."""

    @property
    def scheme_name(self) -> str:
        return "X11"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, X11Scheme)

    def __hash__(self) -> int:
        return hash("X11")

    def __repr__(self) -> str:
        return "X11"


X11 = X11Scheme()


class BrewerName(Enum):
    """The ColorBrewer palettes known to Graphviz."""

    ACCENT = "accent"
    BLUES = "blues"
    BRBG = "brbg"
    BUGN = "bugn"
    BUPU = "bupu"
    DARK2 = "dark2"
    GNBU = "gnbu"
    GREENS = "greens"
    GREYS = "greys"
    ORANGES = "oranges"
    ORRD = "orrd"
    PAIRED = "paired"
    PASTEL1 = "pastel1"
    PASTEL2 = "pastel2"
    PIYG = "piyg"
    PRGN = "prgn"
    PUBU = "pubu"
    PUBUGN = "pubugn"
    PUOR = "puor"
    PURD = "purd"
    PURPLES = "purples"
    RDBU = "rdbu"
    RDGY = "rdgy"
    RDPU = "rdpu"
    RDYLBU = "rdylbu"
    RDYLGN = "rdylgn"
    REDS = "reds"
    SET1 = "set1"
    SET2 = "set2"
    SET3 = "set3"
    SPECTRAL = "spectral"
    YLGN = "ylgn"
    YLGNBU = "ylgnbu"
    YLORBR = "ylorbr"
    YLORRD = "ylorrd"


@dataclass(frozen=True, eq=True)
class BrewerScheme(ColorScheme):
    """A ColorBrewer palette with a number of levels, e.g. ``blues9``."""

    name: BrewerName
    level: int

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 255:
            raise ValueError(f"Invalid Brewer level: {self.level}")

    @property
    def scheme_name(self) -> str:
        return f"{self.name.value}{self.level}"

    def _name_dot(self) -> DotCode:
        return unqt_dot(self.name) + unqt_dot(self.level)


class Color(PrintDot):
    """Base class for colors; lists of colors are colon separated."""

    @classmethod
    def unqt_list_to_dot(cls, values: Sequence[Any]) -> DotCode:
        return hcat(punctuate(colon(), [unqt_dot(v) for v in values]))

    @classmethod
    def list_to_dot(cls, values: Sequence[Any]) -> DotCode:
        if len(values) == 1:
            return to_dot(values[0])
        return dquotes(cls.unqt_list_to_dot(values))


class NamedColor(Color):
    """A color known by name (or index) within a scheme."""

    scheme: ColorScheme

    @abstractmethod
    def color_name(self) -> str:
        """Name (or index) of the color within its scheme."""

    def text_in(self, ctx: RenderContext) -> str:
        """Bare name if ``scheme`` is active, otherwise ``/scheme/name``."""
        if ctx.scheme_is_active(self.scheme):
            return self.color_name()
        return f"/{self.scheme.scheme_name}/{self.color_name()}"

    def unqt_dot(self) -> DotCode:
        return with_context(lambda ctx: unqt_string(self.text_in(ctx)))

    def to_dot(self) -> DotCode:
        return with_context(lambda ctx: qt_string(self.text_in(ctx)))


@dataclass(frozen=True)
class X11Color(NamedColor):
    """One of the X11 named colors, e.g. ``X11Color("lightblue")``."""

    name: str
    scheme: ColorScheme = X11

    def color_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class BrewerColor(NamedColor):
    """Slot ``index`` (1-based) of a Brewer palette."""

    scheme: BrewerScheme
    index: int

    def __post_init__(self) -> None:
        if not 1 <= self.index <= self.scheme.level:
            raise ValueError(
                f"Invalid index {self.index} for {self.scheme.scheme_name}"
            )

    def color_name(self) -> str:
        return str(self.index)


def _check_component(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"Invalid {name} component: {value}")


@dataclass(frozen=True)
class RGB(Color):
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            _check_component(name, getattr(self, name))

    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def unqt_dot(self) -> DotCode:
        return unqt_string(self.hex())

    def to_dot(self) -> DotCode:
        return qt_string(self.hex())


@dataclass(frozen=True)
class RGBA(RGB):
    alpha: int = 255

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_component("alpha", self.alpha)

    def hex(self) -> str:
        return f"{super().hex()}{self.alpha:02x}"


@dataclass(frozen=True)
class HSV(Color):
    """Hue, saturation and value, each between 0 and 1."""

    hue: float
    saturation: float
    value: float

    def __post_init__(self) -> None:
        for name in ("hue", "saturation", "value"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"Invalid {name}: {getattr(self, name)}")

    def unqt_dot(self) -> DotCode:
        parts = [self.hue, self.saturation, self.value]
        return hcat(punctuate(comma(), [unqt_string(format_float(p)) for p in parts]))

    def to_dot(self) -> DotCode:
        return dquotes(self.unqt_dot())
