"""Tests for whole-document serialization and library configuration."""

from __future__ import annotations

import logging

import pytest

from svg_fmt import BeginSvg, DocumentConfig, comment, serialize_svg, text, white
from svg_fmt.config import Settings, configure_logging
from tests.conftest import BEGIN_800x600, RED_RECT_SVG, WHITE_LABEL_SVG


def test_document_layout(red_rect):
    label = text(25.0, 100.0, "Foo!").with_size(42.0).with_color(white())
    out = serialize_svg([red_rect, label], begin=BeginSvg(w=800, h=600))
    assert out == (
        f"{BEGIN_800x600}\n"
        f"    {RED_RECT_SVG}\n"
        f"    {WHITE_LABEL_SVG}\n"
        "</svg>\n"
    )


def test_default_begin_and_empty_body():
    assert serialize_svg([]) == (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1 1">\n</svg>\n'
    )


def test_raw_fragments_pass_through():
    out = serialize_svg(['<g id="raw"/>', comment("note")], config=DocumentConfig(indent_level=0))
    assert out.splitlines()[1:3] == ['<g id="raw"/>', "<!-- note -->"]


def test_newline_options():
    config = DocumentConfig(indent_level=2, newline="\r\n", trailing_newline=False)
    out = serialize_svg([comment("x")], config=config)
    assert out.endswith("\r\n</svg>")
    assert "\r\n        <!-- x -->\r\n" in out


def test_negative_indent_level_rejected():
    with pytest.raises(ValueError):
        DocumentConfig(indent_level=-1)


@pytest.mark.parametrize("level", [1.5, False])
def test_non_int_indent_level_rejected(level):
    with pytest.raises(TypeError):
        DocumentConfig(indent_level=level)


def test_serialize_logs_element_count(caplog):
    with caplog.at_level(logging.DEBUG, logger="svg_fmt.svg.serializer"):
        serialize_svg([comment("a"), comment("b")])
    assert "2 elements" in caplog.text


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SVG_FMT_LOG_LEVEL", "info")
    assert Settings().svg_fmt_log_level == "info"


def test_configure_logging_levels():
    assert configure_logging("debug") == logging.DEBUG
    assert configure_logging("not-a-level") == logging.WARNING
