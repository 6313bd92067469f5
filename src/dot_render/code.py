"""Deferred, state-aware construction of DOT documents.

A ``DotCode`` is a computation that, given the ``RenderContext`` of the
current render, produces a layout ``Doc``. Codes compose left to right:
when two codes are concatenated the left one runs first, so any color
scheme it prints is visible to the right one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from dot_render import doc as pp
from dot_render.models import RenderConfig
from dot_render.state import RenderContext

if TYPE_CHECKING:
    from dot_render.colors import ColorScheme

logger = logging.getLogger(__name__)


class DotCode:
    """A deferred piece of DOT output."""

    def __init__(self, run: Callable[[RenderContext], pp.Doc]) -> None:
        self._run = run

    def run(self, ctx: RenderContext) -> pp.Doc:
        return self._run(ctx)

    def __add__(self, other: DotCode) -> DotCode:
        return DotCode(lambda ctx: pp.cat(self.run(ctx), other.run(ctx)))

    def __repr__(self) -> str:
        return f"DotCode({render_dot(self)!r})"


def render_dot(code: DotCode, config: RenderConfig | None = None) -> str:
    """Evaluate ``code`` against a fresh context and lay it out."""
    config = config or RenderConfig()
    ctx = RenderContext()
    document = code.run(ctx)
    output = pp.render_pretty(document, ribbon=config.ribbon, width=config.width)
    logger.debug("Rendered %d characters (width=%d)", len(output), config.width)
    return output


# Primitives

def lift(document: pp.Doc) -> DotCode:
    return DotCode(lambda ctx: document)


def with_context(fn: Callable[[RenderContext], DotCode]) -> DotCode:
    """Build a code from the context as it stands when the code runs."""
    return DotCode(lambda ctx: fn(ctx).run(ctx))


def set_color_scheme(scheme: ColorScheme) -> DotCode:
    """Make ``scheme`` the active palette for everything printed after it."""

    def run(ctx: RenderContext) -> pp.Doc:
        if ctx.active_color_scheme != scheme:
            logger.debug("Switching color scheme to %s", scheme.scheme_name)
        ctx.set_color_scheme(scheme)
        return pp.EMPTY

    return DotCode(run)


def empty() -> DotCode:
    return lift(pp.EMPTY)


def text(s: str) -> DotCode:
    """Emit ``s`` verbatim; only safe for text known not to need quoting."""
    return lift(pp.text(s))


def char(c: str) -> DotCode:
    return text(c)


def line() -> DotCode:
    return lift(pp.line())


def linebreak() -> DotCode:
    return lift(pp.linebreak())


def space() -> DotCode:
    return text(" ")


def comma() -> DotCode:
    return text(",")


def colon() -> DotCode:
    return text(":")


def semi() -> DotCode:
    return text(";")


def equals() -> DotCode:
    return text("=")


# Combinators

def hcat(codes: Iterable[DotCode]) -> DotCode:
    codes = list(codes)
    return DotCode(lambda ctx: pp.concat(c.run(ctx) for c in codes))


def _join(codes: Iterable[DotCode], separator: Callable[[], DotCode]) -> DotCode:
    codes = list(codes)
    if not codes:
        return empty()
    # Flat, so long lists never nest deeper than one hcat.
    return hcat([codes[0], *(x for c in codes[1:] for x in (separator(), c))])


def hsep(codes: Iterable[DotCode]) -> DotCode:
    return _join(codes, space)


def vsep(codes: Iterable[DotCode]) -> DotCode:
    return _join(codes, line)


def vcat(codes: Iterable[DotCode]) -> DotCode:
    return _join(codes, linebreak)


def punctuate(separator: DotCode, codes: Iterable[DotCode]) -> list[DotCode]:
    """Append ``separator`` to every code but the last."""
    codes = list(codes)
    return [c + separator for c in codes[:-1]] + codes[-1:]


def group(code: DotCode) -> DotCode:
    return DotCode(lambda ctx: pp.group(code.run(ctx)))


def nest(indent: int, code: DotCode) -> DotCode:
    return DotCode(lambda ctx: pp.nest(indent, code.run(ctx)))


def align(code: DotCode) -> DotCode:
    return DotCode(lambda ctx: pp.align(code.run(ctx)))


def wrap(before: DotCode, after: DotCode, code: DotCode) -> DotCode:
    return before + code + after


def dquotes(code: DotCode) -> DotCode:
    return wrap(text('"'), text('"'), code)


def brackets(code: DotCode) -> DotCode:
    return wrap(text("["), text("]"), code)


def angled(code: DotCode) -> DotCode:
    return wrap(text("<"), text(">"), code)


def enclose_sep(
    left: DotCode, right: DotCode, separator: DotCode, codes: Iterable[DotCode]
) -> DotCode:
    """``left`` codes joined by ``separator`` then ``right``, aligned when broken."""
    codes = list(codes)
    if not codes:
        return left + right
    if len(codes) == 1:
        return left + codes[0] + right
    prefixed = [left + codes[0]] + [separator + c for c in codes[1:]]
    return align(group(vcat(prefixed)) + right)


def list_doc(codes: Iterable[DotCode]) -> DotCode:
    """Bracketed, comma separated list: ``[a,b,c]``."""
    return enclose_sep(text("["), text("]"), comma(), codes)
