"""Filled shapes: rectangle, circle and polygon."""

from __future__ import annotations

from typing import Iterable, Sequence

from svg_fmt.models.base import F32
from svg_fmt.models.line import LineSegment, line_segment
from svg_fmt.models.style import StyledModel
from svg_fmt.utils.coerce import format_f32, to_f32


class Rectangle(StyledModel):
    """`<rect x="{x}" y="{y}" width="{w}" height="{h}" ry="{border_radius}" style="{style}" />`"""

    x: F32
    y: F32
    w: F32
    h: F32
    border_radius: F32 = 0.0

    def with_border_radius(self, r: float) -> Rectangle:
        return self._replace(border_radius=r)

    def offset(self, dx: float, dy: float) -> Rectangle:
        return self._replace(x=self.x + to_f32(dx), y=self.y + to_f32(dy))

    def inflate(self, dx: float, dy: float) -> Rectangle:
        """Grow by dx/dy on every side, keeping the center fixed."""
        dx = to_f32(dx)
        dy = to_f32(dy)
        return self._replace(
            x=self.x - dx,
            y=self.y - dy,
            w=self.w + 2.0 * dx,
            h=self.h + 2.0 * dy,
        )

    def sides(self) -> tuple[LineSegment, LineSegment, LineSegment, LineSegment]:
        """Top, bottom, left, right."""
        x, y, w, h = self.x, self.y, self.w, self.h
        return (
            line_segment(x, y, x + w, y),
            line_segment(x, y + h, x + w, y + h),
            line_segment(x, y, x, y + h),
            line_segment(x + w, y, x + w, y + h),
        )

    def render(self) -> str:
        return (
            f'<rect x="{format_f32(self.x)}" y="{format_f32(self.y)}" '
            f'width="{format_f32(self.w)}" height="{format_f32(self.h)}" '
            f'ry="{format_f32(self.border_radius)}" style="{self.style.render()}" />'
        )


def rectangle(x: float, y: float, w: float, h: float) -> Rectangle:
    return Rectangle(x=x, y=y, w=w, h=h)


class Circle(StyledModel):
    """`<circle cx="{x}" cy="{y}" r="{radius}" style="{style}" />`"""

    x: F32
    y: F32
    radius: F32

    def offset(self, dx: float, dy: float) -> Circle:
        return self._replace(x=self.x + to_f32(dx), y=self.y + to_f32(dy))

    def inflate(self, by: float) -> Circle:
        return self._replace(radius=self.radius + to_f32(by))

    def render(self) -> str:
        return (
            f'<circle cx="{format_f32(self.x)}" cy="{format_f32(self.y)}" '
            f'r="{format_f32(self.radius)}" style="{self.style.render()}" />'
        )


def circle(x: float, y: float, radius: float) -> Circle:
    return Circle(x=x, y=y, radius=radius)


class Polygon(StyledModel):
    """`<path d="M x0 y0 L x1 y1 ... Z" style="{style}"/>`"""

    points: tuple[tuple[F32, F32], ...] = ()
    closed: bool = True

    def open(self) -> Polygon:
        return self._replace(closed=False)

    def path_data(self) -> str:
        if not self.points:
            return ""
        (x0, y0), *rest = self.points
        parts = [f"M {format_f32(x0)} {format_f32(y0)} "]
        parts.extend(f"L {format_f32(x)} {format_f32(y)} " for x, y in rest)
        if self.closed:
            parts.append("Z")
        return "".join(parts)

    def render(self) -> str:
        return f'<path d="{self.path_data()}" style="{self.style.render()}"/>'


def _as_point(point: Sequence[float]) -> tuple[float, float]:
    x, y = point
    return to_f32(x), to_f32(y)


def polygon(points: Iterable[Sequence[float]]) -> Polygon:
    """Closed polygon from any ordered iterable of (x, y) pairs, numpy rows included."""
    return Polygon(points=tuple(_as_point(p) for p in points))


def triangle(
    x1: float, y1: float,
    x2: float, y2: float,
    x3: float, y3: float,
) -> Polygon:
    return polygon([(x1, y1), (x2, y2), (x3, y3)])
