"""Tests for Color, Fill, Stroke and Style rendering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from svg_fmt import (
    Color,
    FillColor,
    FillNone,
    StrokeColor,
    StrokeNone,
    Style,
    black,
    blue,
    green,
    red,
    rgb,
    white,
)
from svg_fmt.models.style import as_fill, as_stroke
from tests.conftest import DEFAULT_STYLE


def test_color_renders_decimal_bytes():
    assert rgb(12, 0, 255).render() == "rgb(12,0,255)"
    assert str(rgb(1, 2, 3)) == "rgb(1,2,3)"


def test_named_colors():
    assert black() == Color(r=0, g=0, b=0)
    assert white() == Color(r=255, g=255, b=255)
    assert red().render() == "rgb(255,0,0)"
    assert green().render() == "rgb(0,255,0)"
    assert blue().render() == "rgb(0,0,255)"


@pytest.mark.parametrize("components", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
def test_color_components_are_bytes(components):
    with pytest.raises(ValidationError):
        rgb(*components)


def test_fill_variants():
    assert FillColor(color=red()).render() == "fill:rgb(255,0,0)"
    assert FillNone().render() == "fill:none"


def test_stroke_variants():
    assert StrokeColor(color=blue(), width=2.5).render() == "stroke:rgb(0,0,255);stroke-width:2.5"
    assert StrokeNone().render() == "stroke:none"


def test_negative_width_rendered_verbatim():
    assert StrokeColor(color=black(), width=-2).render() == "stroke:rgb(0,0,0);stroke-width:-2"


def test_default_style():
    assert Style().render() == DEFAULT_STYLE


def test_style_all_fields():
    style = Style(
        fill=FillNone(),
        stroke=StrokeColor(color=green(), width=4),
        opacity=0.5,
        stroke_opacity=0.25,
    )
    assert style.render() == (
        "fill:none;stroke:rgb(0,255,0);stroke-width:4;fill-opacity:0.5;stroke-opacity:0.25;"
    )


def test_style_accepts_plain_dicts():
    style = Style.model_validate({
        "fill": {"kind": "none"},
        "stroke": {"kind": "color", "color": {"r": 1, "g": 2, "b": 3}},
    })
    assert style.fill == FillNone()
    assert style.stroke == StrokeColor(color=rgb(1, 2, 3), width=1.0)


class TestConversions:
    def test_color_to_fill(self):
        assert as_fill(red()) == FillColor(color=red())

    def test_color_to_stroke_has_unit_width(self):
        assert as_stroke(red()) == StrokeColor(color=red(), width=1.0)

    def test_none_means_no_paint(self):
        assert as_fill(None) == FillNone()
        assert as_stroke(None) == StrokeNone()

    def test_variants_pass_through(self):
        stroke = StrokeColor(color=red(), width=7)
        assert as_stroke(stroke) is stroke
        assert as_fill(FillNone()) == FillNone()

    def test_wrong_type_rejected(self):
        with pytest.raises(TypeError):
            as_fill("red")
        with pytest.raises(TypeError):
            as_stroke(3)
