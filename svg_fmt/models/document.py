"""Document framing: root open/close tags and the indentation counter."""

from __future__ import annotations

from dataclasses import dataclass

from svg_fmt.errors import IndentationUnderflowError
from svg_fmt.models.base import F32, SvgModel
from svg_fmt.utils.coerce import format_f32

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
INDENT_UNIT = "    "


class BeginSvg(SvgModel):
    """`<svg xmlns="http://www.w3.org/2000/svg" viewBox="{x} {y} {w} {h}">`"""

    x: F32 = 0.0
    y: F32 = 0.0
    w: F32 = 1.0
    h: F32 = 1.0

    def render(self) -> str:
        viewbox = " ".join(format_f32(v) for v in (self.x, self.y, self.w, self.h))
        return f'<svg xmlns="{SVG_NAMESPACE}" viewBox="{viewbox}">'


class EndSvg(SvgModel):
    """`</svg>`"""

    def render(self) -> str:
        return "</svg>"


@dataclass
class Indentation:
    """Four spaces per level. A mutable counter, not a builder value."""

    n: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise TypeError(f"Indentation level must be an int, got {type(self.n).__name__}")
        if self.n < 0:
            raise ValueError("Indentation level must be >= 0")

    def push(self) -> None:
        self.n += 1

    def pop(self) -> None:
        if self.n == 0:
            raise IndentationUnderflowError("Cannot pop indentation below level 0")
        self.n -= 1

    def render(self) -> str:
        return INDENT_UNIT * self.n

    def __str__(self) -> str:
        return self.render()


def indent(n: int = 0) -> Indentation:
    return Indentation(n)
