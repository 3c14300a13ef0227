"""Convert plain Python data to and from tagged DynamoDB attribute values.

    >>> from tagbox import encode, decode
    >>> encode({"this": 123})
    {'M': {'this': {'N': '123'}}}
    >>> decode({"M": {"this": {"N": "123"}}})
    {'this': 123}
"""

from tagbox.common.exceptions import CodecError
from tagbox.common.exceptions import MalformedAttributeValue
from tagbox.common.exceptions import MaxDepthExceeded
from tagbox.common.exceptions import UnsupportedAttributeTag
from tagbox.common.exceptions import UnsupportedValueKind
from tagbox.core.codec import AttributeCodec
from tagbox.core.codec import decode
from tagbox.core.codec import decode_item
from tagbox.core.codec import default_codec
from tagbox.core.codec import encode
from tagbox.core.codec import encode_item
from tagbox.core.scalars import NumberValue
from tagbox.core.scalars import StringValue

__version__ = "0.1.0"

__all__ = (
    "AttributeCodec",
    "CodecError",
    "MalformedAttributeValue",
    "MaxDepthExceeded",
    "NumberValue",
    "StringValue",
    "UnsupportedAttributeTag",
    "UnsupportedValueKind",
    "decode",
    "decode_item",
    "default_codec",
    "encode",
    "encode_item",
)
