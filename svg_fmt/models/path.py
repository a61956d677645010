"""General path built from an ordered list of drawing operations."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from svg_fmt.models.base import F32, SvgModel
from svg_fmt.models.style import StyledModel
from svg_fmt.utils.coerce import format_f32


def _join(letter: str, *values: float) -> str:
    return " ".join([letter, *(format_f32(v) for v in values)]) + " "


class MoveTo(SvgModel):
    """`M {x} {y} `"""

    op: Literal["M"] = "M"
    x: F32
    y: F32

    def render(self) -> str:
        return _join("M", self.x, self.y)


class LineTo(SvgModel):
    """`L {x} {y} `"""

    op: Literal["L"] = "L"
    x: F32
    y: F32

    def render(self) -> str:
        return _join("L", self.x, self.y)


class QuadraticTo(SvgModel):
    """`Q {ctrl_x} {ctrl_y} {x} {y} `"""

    op: Literal["Q"] = "Q"
    ctrl_x: F32
    ctrl_y: F32
    x: F32
    y: F32

    def render(self) -> str:
        return _join("Q", self.ctrl_x, self.ctrl_y, self.x, self.y)


class CubicTo(SvgModel):
    """`C {ctrl1_x} {ctrl1_y} {ctrl2_x} {ctrl2_y} {x} {y} `"""

    op: Literal["C"] = "C"
    ctrl1_x: F32
    ctrl1_y: F32
    ctrl2_x: F32
    ctrl2_y: F32
    x: F32
    y: F32

    def render(self) -> str:
        return _join("C", self.ctrl1_x, self.ctrl1_y, self.ctrl2_x, self.ctrl2_y, self.x, self.y)


class Close(SvgModel):
    """`Z `"""

    op: Literal["Z"] = "Z"

    def render(self) -> str:
        return "Z "


PathOp = Annotated[Union[MoveTo, LineTo, QuadraticTo, CubicTo, Close], Field(discriminator="op")]


class Path(StyledModel):
    """`<path d="{ops}" style="{style}" />`

    Operations render in the order they were appended.
    """

    ops: tuple[PathOp, ...] = ()

    def _push(self, op: MoveTo | LineTo | QuadraticTo | CubicTo | Close) -> Path:
        # Ops are validated on construction; skip revalidating the whole tuple.
        return self.model_copy(update={"ops": (*self.ops, op)})

    def move_to(self, x: float, y: float) -> Path:
        return self._push(MoveTo(x=x, y=y))

    def line_to(self, x: float, y: float) -> Path:
        return self._push(LineTo(x=x, y=y))

    def quadratic_bezier_to(
        self,
        ctrl_x: float, ctrl_y: float,
        x: float, y: float,
    ) -> Path:
        return self._push(QuadraticTo(ctrl_x=ctrl_x, ctrl_y=ctrl_y, x=x, y=y))

    def cubic_bezier_to(
        self,
        ctrl1_x: float, ctrl1_y: float,
        ctrl2_x: float, ctrl2_y: float,
        x: float, y: float,
    ) -> Path:
        return self._push(CubicTo(
            ctrl1_x=ctrl1_x, ctrl1_y=ctrl1_y,
            ctrl2_x=ctrl2_x, ctrl2_y=ctrl2_y,
            x=x, y=y,
        ))

    def close(self) -> Path:
        return self._push(Close())

    def path_data(self) -> str:
        return "".join(op.render() for op in self.ops)

    def render(self) -> str:
        return f'<path d="{self.path_data()}" style="{self.style.render()}" />'


def path() -> Path:
    return Path()
