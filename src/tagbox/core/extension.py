from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import LiteralString
from typing import Protocol

from tagbox._internal._utils import UNDEFINED
from tagbox._internal._utils import full_class_name
from tagbox._internal._utils import validate_versioned_name
from tagbox.common.exceptions import MalformedAttributeValue

if TYPE_CHECKING:
    from tagbox.common.types import Tag
    from tagbox.common.types import TaggedValue

__all__ = (
    "UNDEFINED",
    "DecodeFunc",
    "EncodeFunc",
    "Extension",
    "check_sequence",
)


class Extension(abc.ABC):
    """A pair of hooks that runs before a codec's built-in encoding and decoding rules.

    Extensions let callers round-trip types the built-in rules normalize away,
    like booleans, sets, and binary data. A hook returns
    [`UNDEFINED`][tagbox.core.extension.UNDEFINED] to leave a value to the next
    extension or to the built-in rules.
    """

    name: ClassVar[LiteralString]
    """The globally unique name of the extension, of the form `<name>@v<version>`."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "name" in cls.__dict__:
            validate_versioned_name(cls, cls.name)

    def encode_value(self, value: Any, encode: EncodeFunc, /) -> TaggedValue:
        """Encode the given value or return `UNDEFINED` to skip it.

        Args:
            value: The plain value to encode.
            encode: Encodes nested values with the owning codec.
        """
        return UNDEFINED

    def decode_value(self, tagged: TaggedValue, decode: DecodeFunc, /) -> Any:
        """Decode the given tagged value or return `UNDEFINED` to skip it.

        Args:
            tagged: A tagged value with exactly one key.
            decode: Decodes nested tagged values with the owning codec.
        """
        return UNDEFINED

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self, 'name', None)!r})"


class EncodeFunc(Protocol):
    """Encode a nested value using the codec an extension belongs to."""

    def __call__(self, value: Any, /) -> TaggedValue: ...


class DecodeFunc(Protocol):
    """Decode a nested tagged value using the codec an extension belongs to."""

    def __call__(self, tagged: TaggedValue, /) -> Any: ...


def check_sequence(tag: Tag, payload: Any) -> Sequence[Any]:
    """Return the payload of a list or set tag or raise if it is not a sequence of members.

    Text and binary payloads are sequences in Python but are rejected here so
    they are not split into characters or bytes.
    """
    if not isinstance(payload, Sequence) or isinstance(
        payload, str | bytes | bytearray | memoryview
    ):
        msg = f"Expected a sequence for the {tag!r} tag, not {full_class_name(type(payload))}."
        raise MalformedAttributeValue(msg)
    return payload
