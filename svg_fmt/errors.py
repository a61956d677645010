"""Typed errors for svg_fmt."""

from __future__ import annotations


class SvgFmtError(Exception):
    """Base error for the library."""


class IndentationUnderflowError(SvgFmtError, ValueError):
    """Indentation.pop() called with the level already at zero."""
