from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from tagbox._internal._utils import full_class_name
from tagbox.builtin.extensions.binary import to_bytes
from tagbox.common.exceptions import UnsupportedValueKind
from tagbox.core.extension import UNDEFINED
from tagbox.core.extension import Extension
from tagbox.core.extension import check_sequence
from tagbox.core.scalars import NUMBER_TYPES

if TYPE_CHECKING:
    from tagbox.common.types import TaggedValue
    from tagbox.core.extension import DecodeFunc
    from tagbox.core.extension import EncodeFunc

__all__ = ("SetExtension", "set_extension")


class SetExtension(Extension):
    """Round-trips `set` and `frozenset` values through the `SS`, `NS` and `BS` tags.

    The members of a set must all be strings, all be numbers, or all be bytes.
    Empty sets cannot be stored. Members are sorted so the same set always
    encodes the same way.
    """

    name = "tagbox.set@v1"

    def encode_value(self, value: Any, encode: EncodeFunc, /) -> TaggedValue:
        if not isinstance(value, set | frozenset):
            return UNDEFINED
        if not value:
            msg = "An empty set may not be encoded as an attribute value."
            raise UnsupportedValueKind(msg)
        if all(isinstance(v, str) for v in value):
            return {"SS": sorted(value)}
        if all(isinstance(v, NUMBER_TYPES) and not isinstance(v, bool) for v in value):
            return {"NS": [encode(v)["N"] for v in sorted(value)]}
        if all(isinstance(v, bytes) for v in value):
            return {"BS": sorted(value)}
        kinds = sorted({full_class_name(type(v)) for v in value})
        msg = f"A set's members must all be strings, numbers or bytes, got {', '.join(kinds)}."
        raise UnsupportedValueKind(msg)

    def decode_value(self, tagged: TaggedValue, decode: DecodeFunc, /) -> Any:
        if "SS" in tagged:
            return set(check_sequence("SS", tagged["SS"]))
        if "NS" in tagged:
            return {decode({"N": n}) for n in check_sequence("NS", tagged["NS"])}
        if "BS" in tagged:
            return {to_bytes(b) for b in check_sequence("BS", tagged["BS"])}
        return UNDEFINED


set_extension = SetExtension()
"""SetExtension with default settings."""
