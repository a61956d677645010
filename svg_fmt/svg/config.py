"""Document layout configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DocumentConfig:
    """Controls how serialize_svg lays out a flat list of fragments."""

    # Indentation level applied to every element between <svg> and </svg>
    indent_level: int = 1
    newline: str = "\n"
    trailing_newline: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent_level, bool) or not isinstance(self.indent_level, int):
            raise TypeError("DocumentConfig indent_level must be an int")
        if self.indent_level < 0:
            raise ValueError("DocumentConfig indent_level must be >= 0")
