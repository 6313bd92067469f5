"""Render-time state carried through a single render."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dot_render.colors import ColorScheme


@dataclass
class RenderContext:
    """State threaded through one evaluation of a ``DotCode``.

    A fresh context is created for every top-level render and dropped
    once the render finishes. Color scheme values overwrite
    ``active_color_scheme`` when they are printed (last write wins);
    scheme-relative colors printed afterwards read it.

    ``None`` means no scheme has been printed yet. Graphviz then falls
    back to X11, so X11 named colors print bare while every other
    scheme-relative color prints fully qualified.
    """

    active_color_scheme: ColorScheme | None = None

    def set_color_scheme(self, scheme: ColorScheme) -> None:
        self.active_color_scheme = scheme

    def scheme_is_active(self, scheme: ColorScheme) -> bool:
        """Would a color from ``scheme`` be read in the right palette?"""
        from dot_render.colors import X11

        if self.active_color_scheme is None:
            return scheme == X11
        return self.active_color_scheme == scheme
