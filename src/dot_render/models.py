"""Core data models for dot-render."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Layout settings for rendered DOT output.

    ``width`` and ``ribbon`` drive line wrapping; ``indent`` is the
    nesting used for statements inside a graph body; ``strict`` makes
    exported graphs ``strict``.
    """

    width: int = 80
    ribbon: float = 0.4
    indent: int = 2
    strict: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Invalid width: {self.width}")
        if not 0.0 <= self.ribbon <= 1.0:
            raise ValueError(f"Invalid ribbon fraction: {self.ribbon}")
        if self.indent < 0:
            raise ValueError(f"Invalid indent: {self.indent}")
