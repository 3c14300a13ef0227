from __future__ import annotations

import math
import re
from decimal import Decimal
from decimal import InvalidOperation
from typing import Any
from typing import Literal

from tagbox._internal._utils import frozenclass
from tagbox._internal._utils import full_class_name
from tagbox.common.exceptions import MalformedAttributeValue
from tagbox.common.exceptions import UnsupportedValueKind

__all__ = (
    "NUMBER_TYPES",
    "NumberValue",
    "StringValue",
    "classify_scalar",
    "format_number",
    "is_number",
    "parse_bool",
    "parse_decimal_number",
    "parse_number",
)

NUMBER_TYPES = (int, float, Decimal)
"""The types that are encoded as numbers. Note that `bool` is a subclass of `int`."""

_INTEGER = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FALSE_TEXT = frozenset({"", "0", "false"})


@frozenclass(kw_only=False)
class NumberValue:
    """A number given as text, encoded with the `N` tag exactly as written.

    Use this to store numbers whose precision a `float` cannot hold:

        encode(NumberValue("3.14159265358979323846"))
        # {"N": "3.14159265358979323846"}
    """

    text: str
    """The decimal representation of the number."""

    def __post_init__(self) -> None:
        if not _DECIMAL.fullmatch(self.text):
            msg = f"Expected decimal text for a number, not {self.text!r}."
            raise ValueError(msg)


@frozenclass(kw_only=False)
class StringValue:
    """A value that is encoded with the `S` tag even if it is a number."""

    value: Any
    """The value whose string form is stored."""


def is_number(value: Any) -> bool:
    """Check whether the given value is natively a number."""
    return isinstance(value, (*NUMBER_TYPES, NumberValue))


def classify_scalar(value: Any) -> Literal["N", "S"]:
    """Return the tag for a scalar - `N` for native numbers and `S` for everything else.

    Text is never inspected, so `"3"` is a string while `3` and `2 + 1` are numbers.
    """
    if isinstance(value, StringValue):
        return "S"
    return "N" if is_number(value) else "S"


def format_number(value: int | float | Decimal | NumberValue) -> str:
    """Return the decimal string form of a number."""
    match value:
        case NumberValue(text=text):
            return text
        case bool() | int():
            return str(int(value))
        case float():
            if not math.isfinite(value):
                msg = f"Non-finite number {value!r} cannot be stored as an attribute value."
                raise UnsupportedValueKind(msg)
            return repr(value)
        case Decimal():
            if not value.is_finite():
                msg = f"Non-finite number {value!r} cannot be stored as an attribute value."
                raise UnsupportedValueKind(msg)
            return str(value)
        case _:
            msg = f"A {full_class_name(type(value))} is not a number."
            raise UnsupportedValueKind(msg)


def parse_number(payload: Any) -> int | float:
    """Parse an `N` payload into an `int` if it is an integer literal, otherwise a `float`."""
    if isinstance(payload, NUMBER_TYPES) and not isinstance(payload, bool):
        return payload
    text = _number_text(payload)
    if _INTEGER.fullmatch(text):
        return int(text)
    if not math.isfinite(number := float(text)):
        msg = f"The number {payload!r} is too large to be represented as a float."
        raise MalformedAttributeValue(msg)
    return number


def parse_bool(payload: Any) -> bool:
    """Parse a `BOOL` payload.

    Stores may write booleans as `true`/`false` or as `1`/`0`, so the text
    `"0"`, `"false"` (in any case) and the empty string are false.
    """
    if isinstance(payload, str):
        return payload.strip().lower() not in _FALSE_TEXT
    return bool(payload)


def parse_decimal_number(payload: Any) -> Decimal:
    """Parse an `N` payload into a `Decimal` without losing precision."""
    if isinstance(payload, Decimal):
        return payload
    if isinstance(payload, int | float) and not isinstance(payload, bool):
        return Decimal(repr(payload)) if isinstance(payload, float) else Decimal(payload)
    try:
        return Decimal(_number_text(payload))
    except InvalidOperation as error:  # nocov
        msg = f"Expected a number, not {payload!r}."
        raise MalformedAttributeValue(msg) from error


def _number_text(payload: Any) -> str:
    if not isinstance(payload, str):
        msg = f"Expected a number or decimal text, not {payload!r}."
        raise MalformedAttributeValue(msg)
    text = payload.strip()
    if not _DECIMAL.fullmatch(text):
        msg = f"Expected a number, not {payload!r}."
        raise MalformedAttributeValue(msg)
    return text
