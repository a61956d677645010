"""svg_fmt: fluent builders that render SVG markup fragments."""

from svg_fmt.errors import IndentationUnderflowError, SvgFmtError
from svg_fmt.models.color import Color, black, blue, green, red, rgb, white
from svg_fmt.models.document import BeginSvg, EndSvg, Indentation, indent
from svg_fmt.models.line import LineSegment, line_segment
from svg_fmt.models.path import Close, CubicTo, LineTo, MoveTo, Path, QuadraticTo, path
from svg_fmt.models.shapes import Circle, Polygon, Rectangle, circle, polygon, rectangle, triangle
from svg_fmt.models.style import FillColor, FillNone, StrokeColor, StrokeNone, Style
from svg_fmt.models.text import Align, Comment, Text, comment, text
from svg_fmt.svg.config import DocumentConfig
from svg_fmt.svg.serializer import serialize_svg
from svg_fmt.utils.coerce import format_f32, to_f32, to_text

__all__ = [
    "Align",
    "BeginSvg",
    "Circle",
    "Close",
    "Color",
    "Comment",
    "CubicTo",
    "DocumentConfig",
    "EndSvg",
    "FillColor",
    "FillNone",
    "Indentation",
    "IndentationUnderflowError",
    "LineSegment",
    "LineTo",
    "MoveTo",
    "Path",
    "Polygon",
    "QuadraticTo",
    "Rectangle",
    "StrokeColor",
    "StrokeNone",
    "Style",
    "SvgFmtError",
    "Text",
    "black",
    "blue",
    "circle",
    "comment",
    "format_f32",
    "green",
    "indent",
    "line_segment",
    "path",
    "polygon",
    "rectangle",
    "red",
    "rgb",
    "serialize_svg",
    "text",
    "to_f32",
    "to_text",
    "triangle",
    "white",
]
