from __future__ import annotations

import json
import logging
from base64 import b64encode
from collections.abc import Mapping
from typing import TYPE_CHECKING
from typing import Any

from tagbox._internal._utils import frozenclass
from tagbox._internal._utils import full_class_name
from tagbox.common.exceptions import MalformedAttributeValue
from tagbox.core.codec import AttributeCodec
from tagbox.core.codec import default_codec
from tagbox.core.serializer import SerializedData
from tagbox.core.serializer import Serializer

if TYPE_CHECKING:
    from tagbox.common.types import PlainItem

__all__ = (
    "ItemJsonOptions",
    "dump_item_json",
    "item_json_serializer",
    "load_item_json",
)

_LOG = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


def _default(value: Any) -> Any:
    if isinstance(value, bytes | bytearray | memoryview):
        return b64encode(value).decode("ascii")
    msg = f"Object of type {full_class_name(type(value))} is not JSON serializable."
    raise TypeError(msg)


@frozenclass
class ItemJsonOptions:
    """Options for reading and writing items as DynamoDB JSON documents."""

    codec: AttributeCodec = default_codec
    """The codec used to tag and untag attribute values."""
    encoder: json.JSONEncoder = json.JSONEncoder(
        separators=(",", ":"),
        allow_nan=False,
        default=_default,
    )
    """Writes the tagged item - binary payloads become base64 text."""
    decoder: json.JSONDecoder = json.JSONDecoder()
    """Reads the tagged item."""


def dump_item_json(item: PlainItem, options: ItemJsonOptions) -> SerializedData:
    """Write a plain item as a `{"Item": {...}}` document."""
    tagged = options.codec.encode_item(item)
    data = options.encoder.encode({"Item": tagged}).encode("utf-8")
    _LOG.debug("wrote item document of %s bytes", len(data))
    return {
        "content_encoding": "utf-8",
        "content_type": CONTENT_TYPE,
        "data": data,
    }


def load_item_json(data: SerializedData, options: ItemJsonOptions) -> dict[str, Any]:
    """Read a plain item from a `{"Item": {...}}` document."""
    _LOG.debug("reading item document of %s bytes", len(data["data"]))
    document = options.decoder.decode(data["data"].decode(data["content_encoding"] or "utf-8"))
    match document:
        case {"Item": Mapping() as tagged}:
            return options.codec.decode_item(tagged)
        case _:
            msg = 'Expected a document of the form {"Item": {...}}.'
            raise MalformedAttributeValue(msg)


item_json_serializer = Serializer(
    name="tagbox.json.item@v1",
    dump_func=dump_item_json,
    load_func=load_item_json,
    options=ItemJsonOptions(),
    content_types=(CONTENT_TYPE,),
)
"""Serializer for DynamoDB JSON item documents, as found in table exports."""
