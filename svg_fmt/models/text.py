"""Text labels, alignment and comments. Text content is written verbatim, unescaped."""

from __future__ import annotations

import enum

from pydantic import Field

from svg_fmt.models.base import F32, OwnedStr, SvgModel
from svg_fmt.models.color import Color, black
from svg_fmt.utils.coerce import format_f32, to_f32


class Align(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    def render(self) -> str:
        return _ALIGN_STYLES[self]

    def __str__(self) -> str:
        return self.render()


_ALIGN_STYLES = {
    Align.LEFT: "text-anchor:start;text-align:left;",
    Align.RIGHT: "text-anchor:end;text-align:right;",
    Align.CENTER: "text-anchor:middle;text-align:center;",
}


class Text(SvgModel):
    """`<text x="{x}" y="{y}" style="font-size:{size}px;fill:{color};{align}"> {text} </text>`"""

    x: F32
    y: F32
    text: OwnedStr
    color: Color = Field(default_factory=black)
    align: Align = Align.LEFT
    size: F32 = 10.0

    def with_color(self, color: Color) -> Text:
        return self._replace(color=color)

    def with_size(self, size: float) -> Text:
        return self._replace(size=size)

    def with_align(self, align: Align) -> Text:
        return self._replace(align=align)

    def offset(self, dx: float, dy: float) -> Text:
        return self._replace(x=self.x + to_f32(dx), y=self.y + to_f32(dy))

    def render(self) -> str:
        return (
            f'<text x="{format_f32(self.x)}" y="{format_f32(self.y)}" '
            f'style="font-size:{format_f32(self.size)}px;fill:{self.color.render()};'
            f'{self.align.render()}"> {self.text} </text>'
        )


def text(x: float, y: float, txt: str | bytes) -> Text:
    return Text(x=x, y=y, text=txt)


class Comment(SvgModel):
    """`<!-- {text} -->`"""

    text: OwnedStr

    def render(self) -> str:
        return f"<!-- {self.text} -->"


def comment(txt: str | bytes) -> Comment:
    return Comment(text=txt)
