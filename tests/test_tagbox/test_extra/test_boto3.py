from decimal import Decimal

import pytest

pytest.importorskip("boto3")

from boto3.dynamodb.types import Binary  # noqa: E402
from boto3.dynamodb.types import TypeDeserializer  # noqa: E402
from boto3.dynamodb.types import TypeSerializer  # noqa: E402

from tagbox import MalformedAttributeValue  # noqa: E402
from tagbox.extra.boto3 import boto3_codec  # noqa: E402
from tagbox.extra.boto3 import parse_decimal  # noqa: E402
from tests.core_codec_utils import make_round_trip_test  # noqa: E402

BOTO3_VALUES = [
    None,
    "text",
    Decimal("12.5"),
    True,
    Binary(b"\x00\x01"),
    {"a", "b"},
    {Decimal(1), Decimal(2)},
    {Binary(b"a"), Binary(b"b")},
    [Decimal(1), "x", {"nested": [False]}],
    {"m": {"n": Decimal("-3")}},
]

test_boto3_round_trip = make_round_trip_test(boto3_codec, *BOTO3_VALUES)


@pytest.mark.parametrize("value", BOTO3_VALUES, ids=repr)
def test_boto3_codec_matches_type_deserializer(value):
    tagged = TypeSerializer().serialize(value)
    assert boto3_codec.decode(tagged) == TypeDeserializer().deserialize(tagged)


def test_boto3_codec_decodes_client_binary():
    assert boto3_codec.decode({"B": b"abc"}) == Binary(b"abc")
    assert boto3_codec.decode({"BS": [b"a"]}) == {Binary(b"a")}


def test_parse_decimal():
    assert parse_decimal("0.1") == Decimal("0.1")
    assert parse_decimal("100") == Decimal(100)
    with pytest.raises(MalformedAttributeValue, match="cannot be represented"):
        parse_decimal("1E+200")


@pytest.mark.parametrize("tagged", [{"BS": "YQ=="}, {"B": "not base64!"}], ids=repr)
def test_boto3_codec_rejects_malformed_binary(tagged):
    with pytest.raises(MalformedAttributeValue):
        boto3_codec.decode(tagged)


def test_boto3_codec_decodes_text_booleans():
    assert boto3_codec.decode({"BOOL": "0"}) is False
    assert boto3_codec.decode({"BOOL": "true"}) is True
