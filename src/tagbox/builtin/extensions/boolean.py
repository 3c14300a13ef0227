from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from tagbox.core.extension import UNDEFINED
from tagbox.core.extension import Extension
from tagbox.core.scalars import parse_bool

if TYPE_CHECKING:
    from tagbox.common.types import TaggedValue
    from tagbox.core.extension import DecodeFunc
    from tagbox.core.extension import EncodeFunc

__all__ = ("BooleanExtension", "boolean_extension")


class BooleanExtension(Extension):
    """Round-trips `bool` values through the `BOOL` tag instead of storing them as numbers."""

    name = "tagbox.boolean@v1"

    def encode_value(self, value: Any, encode: EncodeFunc, /) -> TaggedValue:
        if isinstance(value, bool):
            return {"BOOL": value}
        return UNDEFINED

    def decode_value(self, tagged: TaggedValue, decode: DecodeFunc, /) -> Any:
        if "BOOL" in tagged:
            return parse_bool(tagged["BOOL"])
        return UNDEFINED


boolean_extension = BooleanExtension()
"""BooleanExtension with default settings."""
