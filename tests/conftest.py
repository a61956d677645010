"""Shared test fixtures and golden fragments."""

from __future__ import annotations

import pytest

from svg_fmt import StrokeColor, black, rectangle, red


# Golden output strings

DEFAULT_STYLE = "fill:rgb(0,0,0);stroke:none;fill-opacity:1;stroke-opacity:1;"

RED_RECT_SVG = (
    '<rect x="20" y="50" width="200" height="100" ry="5" '
    'style="fill:rgb(255,0,0);stroke:rgb(0,0,0);stroke-width:3;fill-opacity:1;stroke-opacity:1;" />'
)

WHITE_LABEL_SVG = (
    '<text x="25" y="100" '
    'style="font-size:42px;fill:rgb(255,255,255);text-anchor:start;text-align:left;"> Foo! </text>'
)

BEGIN_800x600 = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 800 600">'

TRIANGLE_POINTS = [[0, 0], [1, 0], [1, 1]]


@pytest.fixture
def red_rect():
    return (
        rectangle(20.0, 50.0, 200.0, 100.0)
        .with_fill(red())
        .with_stroke(StrokeColor(color=black(), width=3.0))
        .with_border_radius(5.0)
    )


@pytest.fixture
def triangle_points() -> list[list[int]]:
    return [list(p) for p in TRIANGLE_POINTS]
