"""Stroked line segment."""

from __future__ import annotations

from pydantic import Field

from svg_fmt.models.base import F32, SvgModel
from svg_fmt.models.color import Color, black
from svg_fmt.utils.coerce import format_f32, to_f32


class LineSegment(SvgModel):
    """`<path d="M {x1} {y1} L {x2} {y2}" style="stroke:...;stroke-width:...;stroke-opacity:..."/>`"""

    x1: F32
    y1: F32
    x2: F32
    y2: F32
    color: Color = Field(default_factory=black)
    width: F32 = 1.0
    opacity: F32 = 1.0

    def with_color(self, color: Color) -> LineSegment:
        return self._replace(color=color)

    def with_width(self, width: float) -> LineSegment:
        return self._replace(width=width)

    def with_opacity(self, opacity: float) -> LineSegment:
        return self._replace(opacity=opacity)

    def offset(self, dx: float, dy: float) -> LineSegment:
        dx = to_f32(dx)
        dy = to_f32(dy)
        return self._replace(
            x1=self.x1 + dx, y1=self.y1 + dy,
            x2=self.x2 + dx, y2=self.y2 + dy,
        )

    def flip_to(self, new_x: float, new_y: float) -> LineSegment:
        """Move one endpoint to the candidate coordinate, per axis.

        A candidate above the first coordinate becomes the second endpoint and the
        old second endpoint moves to the first; a candidate below it becomes the
        first endpoint and the old first endpoint moves to the second. Zero means
        "leave this axis alone".
        """
        x1, x2 = _flip_axis(self.x1, self.x2, to_f32(new_x))
        y1, y2 = _flip_axis(self.y1, self.y2, to_f32(new_y))
        return self._replace(x1=x1, y1=y1, x2=x2, y2=y2)

    def render(self) -> str:
        return (
            f'<path d="M {format_f32(self.x1)} {format_f32(self.y1)} '
            f'L {format_f32(self.x2)} {format_f32(self.y2)}" '
            f'style="stroke:{self.color.render()};stroke-width:{format_f32(self.width)};'
            f'stroke-opacity:{format_f32(self.opacity)}"/>'
        )


def _flip_axis(first: float, second: float, candidate: float) -> tuple[float, float]:
    if candidate == 0.0:
        return first, second
    if candidate > first:
        return second, candidate
    if candidate < first:
        return candidate, first
    return first, second


def line_segment(x1: float, y1: float, x2: float, y2: float) -> LineSegment:
    return LineSegment(x1=x1, y1=y1, x2=x2, y2=y2)
