"""Write a complete SVG document from a flat sequence of fragments."""

from __future__ import annotations

import logging
from typing import Iterable

from svg_fmt.models.base import SvgModel
from svg_fmt.models.document import BeginSvg, EndSvg, Indentation
from svg_fmt.svg.config import DocumentConfig

logger = logging.getLogger(__name__)


def serialize_svg(
    elements: Iterable[SvgModel | str],
    begin: BeginSvg | None = None,
    config: DocumentConfig | None = None,
) -> str:
    """Render elements one per line between the root open and close tags.

    Plain strings are treated as pre-rendered fragments and passed through.
    """
    config = config or DocumentConfig()
    pad = Indentation(config.indent_level).render()

    lines = [(begin or BeginSvg()).render()]
    for elem in elements:
        fragment = elem if isinstance(elem, str) else elem.render()
        lines.append(pad + fragment)
    lines.append(EndSvg().render())

    logger.debug("Serialized SVG document with %d elements", len(lines) - 2)

    out = config.newline.join(lines)
    if config.trailing_newline:
        out += config.newline
    return out
