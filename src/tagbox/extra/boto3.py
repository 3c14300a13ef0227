from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING
from typing import Any

from boto3.dynamodb.types import DYNAMODB_CONTEXT
from boto3.dynamodb.types import Binary

from tagbox.builtin.extensions.binary import to_bytes
from tagbox.builtin.extensions.boolean import boolean_extension
from tagbox.builtin.extensions.sets import set_extension
from tagbox.common.exceptions import MalformedAttributeValue
from tagbox.core.codec import AttributeCodec
from tagbox.core.extension import UNDEFINED
from tagbox.core.extension import Extension
from tagbox.core.extension import check_sequence
from tagbox.core.scalars import parse_decimal_number

if TYPE_CHECKING:
    from tagbox.common.types import TaggedValue
    from tagbox.core.extension import DecodeFunc
    from tagbox.core.extension import EncodeFunc

__all__ = (
    "Boto3Extension",
    "boto3_codec",
    "boto3_extension",
    "parse_decimal",
)


class Boto3Extension(Extension):
    """Stores `boto3` `Binary` values (and sets of them) with the `B` and `BS` tags.

    Payloads of both tags decode to `Binary` values, `BS` as a set.

    Use this with the low-level DynamoDB client, whose `get_item` returns
    binary payloads as `bytes`:

        codec = AttributeCodec([boto3_extension])
        client.put_item(TableName="table", Item=codec.encode_item(item))
    """

    name = "tagbox.boto3.binary@v1"

    def encode_value(self, value: Any, encode: EncodeFunc, /) -> TaggedValue:
        if isinstance(value, Binary):
            return {"B": value.value}
        if isinstance(value, set | frozenset) and value and all(isinstance(v, Binary) for v in value):
            return {"BS": sorted(v.value for v in value)}
        return UNDEFINED

    def decode_value(self, tagged: TaggedValue, decode: DecodeFunc, /) -> Any:
        if "B" in tagged:
            return _to_binary(tagged["B"])
        if "BS" in tagged:
            return {_to_binary(b) for b in check_sequence("BS", tagged["BS"])}
        return UNDEFINED


def _to_binary(payload: Any) -> Binary:
    return payload if isinstance(payload, Binary) else Binary(to_bytes(payload))


def parse_decimal(payload: Any) -> Decimal:
    """Parse an `N` payload into a `Decimal` the way `boto3` does."""
    number = parse_decimal_number(payload)
    try:
        return DYNAMODB_CONTEXT.create_decimal(number)
    except ArithmeticError as error:
        msg = f"The number {payload!r} cannot be represented by DynamoDB."
        raise MalformedAttributeValue(msg) from error


boto3_extension = Boto3Extension()
"""Boto3Extension with default settings."""

boto3_codec = AttributeCodec(
    [boto3_extension, boolean_extension, set_extension],
    number_parser=parse_decimal,
)
"""A codec whose values match what `boto3`'s `TypeSerializer` and `TypeDeserializer` use."""
