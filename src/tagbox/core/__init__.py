from tagbox.core.codec import AttributeCodec
from tagbox.core.codec import CodecOptions
from tagbox.core.codec import decode
from tagbox.core.codec import decode_item
from tagbox.core.codec import default_codec
from tagbox.core.codec import encode
from tagbox.core.codec import encode_item
from tagbox.core.extension import UNDEFINED
from tagbox.core.extension import DecodeFunc
from tagbox.core.extension import EncodeFunc
from tagbox.core.extension import Extension
from tagbox.core.extension import check_sequence
from tagbox.core.scalars import NumberValue
from tagbox.core.scalars import StringValue
from tagbox.core.scalars import classify_scalar
from tagbox.core.scalars import parse_number
from tagbox.core.serializer import SerializedData
from tagbox.core.serializer import Serializer

__all__ = (
    "UNDEFINED",
    "AttributeCodec",
    "CodecOptions",
    "DecodeFunc",
    "EncodeFunc",
    "Extension",
    "NumberValue",
    "SerializedData",
    "Serializer",
    "StringValue",
    "check_sequence",
    "classify_scalar",
    "decode",
    "decode_item",
    "default_codec",
    "encode",
    "encode_item",
    "parse_number",
)
