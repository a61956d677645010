"""RGB color and named constants."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from svg_fmt.models.base import SvgModel

Byte = Annotated[int, Field(ge=0, le=255)]


class Color(SvgModel):
    """`rgb({r},{g},{b})`"""

    r: Byte
    g: Byte
    b: Byte

    def render(self) -> str:
        return f"rgb({self.r},{self.g},{self.b})"


def rgb(r: int, g: int, b: int) -> Color:
    return Color(r=r, g=g, b=b)


def black() -> Color:
    return rgb(0, 0, 0)


def white() -> Color:
    return rgb(255, 255, 255)


def red() -> Color:
    return rgb(255, 0, 0)


def green() -> Color:
    return rgb(0, 255, 0)


def blue() -> Color:
    return rgb(0, 0, 255)
