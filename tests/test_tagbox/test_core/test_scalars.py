from decimal import Decimal

import pytest

from tagbox import MalformedAttributeValue
from tagbox import NumberValue
from tagbox import StringValue
from tagbox import decode
from tagbox import encode
from tagbox.core.scalars import classify_scalar
from tagbox.core.scalars import format_number
from tagbox.core.scalars import parse_bool
from tagbox.core.scalars import parse_decimal_number
from tagbox.core.scalars import parse_number


@pytest.mark.parametrize(
    ("value", "tag"),
    [
        (3, "N"),
        (2 + 1, "N"),
        (0.25, "N"),
        (Decimal("7"), "N"),
        (True, "N"),
        ("3", "S"),
        ("3.0", "S"),
        ("abc", "S"),
        (NumberValue("3"), "N"),
        (StringValue(3), "S"),
    ],
    ids=repr,
)
def test_classify_scalar(value, tag):
    assert classify_scalar(value) == tag


def test_numeric_text_is_never_a_number():
    assert encode("3") == {"S": "3"}
    assert encode(str(3)) == {"S": "3"}
    assert encode(int("3")) == {"N": "3"}


def test_number_value_keeps_precision():
    text = "3.14159265358979323846264338327950288"
    assert encode(NumberValue(text)) == {"N": text}
    assert encode({"pi": NumberValue(text)}) == {"M": {"pi": {"N": text}}}


@pytest.mark.parametrize("text", ["", "abc", "1.2.3", " 1", "1e", "--1"])
def test_number_value_rejects_non_decimal_text(text):
    with pytest.raises(ValueError, match="Expected decimal text"):
        NumberValue(text)


def test_string_value_forces_string_tag():
    assert encode(StringValue(42)) == {"S": "42"}
    assert encode([StringValue(1.5), 1.5]) == {"L": [{"S": "1.5"}, {"N": "1.5"}]}
    assert decode(encode(StringValue(42))) == "42"


@pytest.mark.parametrize(
    ("value", "text"),
    [
        (0, "0"),
        (-12, "-12"),
        (10**30, "1" + "0" * 30),
        (True, "1"),
        (0.1, "0.1"),
        (1e-7, "1e-07"),
        (Decimal("1E+3"), "1E+3"),
        (NumberValue("1.000"), "1.000"),
    ],
    ids=repr,
)
def test_format_number(value, text):
    assert format_number(value) == text


@pytest.mark.parametrize(
    ("payload", "number"),
    [
        ("0", 0),
        ("+5", 5),
        ("-5", -5),
        ("12345678901234567890", 12345678901234567890),
        (".5", 0.5),
        ("5.", 5.0),
        ("2.5E2", 250.0),
        (3, 3),
        (2.5, 2.5),
    ],
    ids=repr,
)
def test_parse_number(payload, number):
    result = parse_number(payload)
    assert result == number
    assert type(result) is type(number)


@pytest.mark.parametrize(
    "payload",
    ["", "x", "nan", "inf", "1e400", "-1e400", "0x10", True, None, [1]],
    ids=repr,
)
def test_parse_number_rejects(payload):
    with pytest.raises(MalformedAttributeValue):
        parse_number(payload)


def test_parse_decimal_number():
    assert parse_decimal_number("0.1") == Decimal("0.1")
    assert parse_decimal_number(0.1) == Decimal("0.1")
    assert parse_decimal_number(3) == Decimal(3)
    with pytest.raises(MalformedAttributeValue):
        parse_decimal_number("abc")


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        ("1", True),
        ("true", True),
        ("0", False),
        ("false", False),
        ("False", False),
        (" FALSE ", False),
        ("", False),
    ],
    ids=repr,
)
def test_parse_bool(payload, expected):
    assert parse_bool(payload) is expected
