"""Fill, stroke and the combined style fragment."""

from __future__ import annotations

from functools import singledispatch
from typing import Annotated, Literal, TypeVar, Union

from pydantic import Field

from svg_fmt.models.base import F32, SvgModel
from svg_fmt.models.color import Color, black
from svg_fmt.utils.coerce import format_f32


class FillColor(SvgModel):
    """`fill:{color}`"""

    kind: Literal["color"] = "color"
    color: Color

    def render(self) -> str:
        return f"fill:{self.color.render()}"


class FillNone(SvgModel):
    """`fill:none`"""

    kind: Literal["none"] = "none"

    def render(self) -> str:
        return "fill:none"


class StrokeColor(SvgModel):
    """`stroke:{color};stroke-width:{width}`"""

    kind: Literal["color"] = "color"
    color: Color
    width: F32 = 1.0

    def render(self) -> str:
        return f"stroke:{self.color.render()};stroke-width:{format_f32(self.width)}"


class StrokeNone(SvgModel):
    """`stroke:none`"""

    kind: Literal["none"] = "none"

    def render(self) -> str:
        return "stroke:none"


Fill = Annotated[Union[FillColor, FillNone], Field(discriminator="kind")]
Stroke = Annotated[Union[StrokeColor, StrokeNone], Field(discriminator="kind")]


@singledispatch
def as_fill(value: object) -> FillColor | FillNone:
    """Convert a Color (or None) into a Fill; Fill values pass through."""
    raise TypeError(f"Expected a Color, Fill or None, got {type(value).__name__}")


@as_fill.register(FillColor)
@as_fill.register(FillNone)
def _(value):
    return value


@as_fill.register
def _(value: Color) -> FillColor:
    return FillColor(color=value)


@as_fill.register(type(None))
def _(value) -> FillNone:
    return FillNone()


@singledispatch
def as_stroke(value: object) -> StrokeColor | StrokeNone:
    """Convert a Color (width 1) or None into a Stroke; Stroke values pass through."""
    raise TypeError(f"Expected a Color, Stroke or None, got {type(value).__name__}")


@as_stroke.register(StrokeColor)
@as_stroke.register(StrokeNone)
def _(value):
    return value


@as_stroke.register
def _(value: Color) -> StrokeColor:
    return StrokeColor(color=value)


@as_stroke.register(type(None))
def _(value) -> StrokeNone:
    return StrokeNone()


class Style(SvgModel):
    """`{fill};{stroke};fill-opacity:{opacity};stroke-opacity:{stroke_opacity};`"""

    fill: Fill = Field(default_factory=lambda: FillColor(color=black()))
    stroke: Stroke = Field(default_factory=StrokeNone)
    opacity: F32 = 1.0
    stroke_opacity: F32 = 1.0

    def render(self) -> str:
        return (
            f"{self.fill.render()};{self.stroke.render()};"
            f"fill-opacity:{format_f32(self.opacity)};"
            f"stroke-opacity:{format_f32(self.stroke_opacity)};"
        )


_S = TypeVar("_S", bound="StyledModel")


class StyledModel(SvgModel):
    """Shapes carrying a full Style share these builder methods."""

    style: Style = Field(default_factory=Style)

    def _restyle(self: _S, style: Style) -> _S:
        # The new Style is already validated; other fields (path ops, points) are untouched.
        return self.model_copy(update={"style": style})

    def with_fill(self: _S, fill: Color | FillColor | FillNone | None) -> _S:
        return self._restyle(self.style._replace(fill=as_fill(fill)))

    def with_stroke(self: _S, stroke: Color | StrokeColor | StrokeNone | None) -> _S:
        return self._restyle(self.style._replace(stroke=as_stroke(stroke)))

    def with_opacity(self: _S, opacity: float) -> _S:
        return self._restyle(self.style._replace(opacity=opacity))

    def with_stroke_opacity(self: _S, opacity: float) -> _S:
        return self._restyle(self.style._replace(stroke_opacity=opacity))

    def with_style(self: _S, style: Style) -> _S:
        return self._replace(style=style)
