from __future__ import annotations

import binascii
from base64 import b64decode
from typing import TYPE_CHECKING
from typing import Any

from tagbox.common.exceptions import MalformedAttributeValue
from tagbox.core.extension import UNDEFINED
from tagbox.core.extension import Extension
from tagbox.core.extension import check_sequence

if TYPE_CHECKING:
    from tagbox.common.types import TaggedValue
    from tagbox.core.extension import DecodeFunc
    from tagbox.core.extension import EncodeFunc

__all__ = ("BinaryExtension", "binary_extension", "to_bytes")


class BinaryExtension(Extension):
    """Stores `bytes`, `bytearray` and `memoryview` values with the `B` tag.

    Decodes `B` to `bytes` and `BS` to a list of `bytes`. Text payloads are
    treated as base64, which is how binary data appears in JSON documents.
    """

    name = "tagbox.binary@v1"

    def encode_value(self, value: Any, encode: EncodeFunc, /) -> TaggedValue:
        if isinstance(value, bytes | bytearray | memoryview):
            return {"B": bytes(value)}
        return UNDEFINED

    def decode_value(self, tagged: TaggedValue, decode: DecodeFunc, /) -> Any:
        if "B" in tagged:
            return to_bytes(tagged["B"])
        if "BS" in tagged:
            return [to_bytes(b) for b in check_sequence("BS", tagged["BS"])]
        return UNDEFINED


def to_bytes(payload: Any) -> bytes:
    """Convert a `B` payload to bytes, decoding base64 text."""
    match payload:
        case bytes():
            return payload
        case bytearray() | memoryview():
            return bytes(payload)
        case str():
            try:
                return b64decode(payload, validate=True)
            except (binascii.Error, ValueError) as error:
                msg = f"Expected base64 text for a binary value, not {payload!r}."
                raise MalformedAttributeValue(msg) from error
        case _:
            msg = f"Expected bytes or base64 text for a binary value, not {payload!r}."
            raise MalformedAttributeValue(msg)


binary_extension = BinaryExtension()
"""BinaryExtension with default settings."""
