"""Base value record shared by every SVG primitive."""

from __future__ import annotations

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict

from svg_fmt.utils.coerce import to_f32, to_text

# Every float field is stored as an exact binary32 value.
F32 = Annotated[float, BeforeValidator(to_f32)]
OwnedStr = Annotated[str, BeforeValidator(to_text)]

_M = TypeVar("_M", bound="SvgModel")


class SvgModel(BaseModel):
    """Frozen record: builder methods return modified copies, never mutate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def _replace(self: _M, **changes: Any) -> _M:
        # Revalidate so arithmetic results are coerced back to f32.
        return type(self).model_validate({**dict(self), **changes})

    def render(self) -> str:
        """Markup for this record; every concrete subclass implements it."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()
