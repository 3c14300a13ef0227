from __future__ import annotations

import logging
from collections.abc import Mapping
from collections.abc import Sequence
from functools import partial
from typing import TYPE_CHECKING
from typing import Any
from typing import TypedDict
from typing import Unpack

from tagbox._internal._logging import PrefixLogger
from tagbox._internal._utils import UNDEFINED
from tagbox._internal._utils import full_class_name
from tagbox._internal.settings import TAGBOX_MAX_DEPTH
from tagbox.common.exceptions import MalformedAttributeValue
from tagbox.common.exceptions import MaxDepthExceeded
from tagbox.common.exceptions import UnsupportedAttributeTag
from tagbox.common.exceptions import UnsupportedValueKind
from tagbox.core.extension import Extension
from tagbox.core.extension import check_sequence
from tagbox.core.scalars import NUMBER_TYPES
from tagbox.core.scalars import NumberValue
from tagbox.core.scalars import StringValue
from tagbox.core.scalars import classify_scalar
from tagbox.core.scalars import format_number
from tagbox.core.scalars import parse_bool
from tagbox.core.scalars import parse_number

if TYPE_CHECKING:
    from collections.abc import Callable

    from tagbox.common.types import PlainItem
    from tagbox.common.types import Tag
    from tagbox.common.types import TaggedItem
    from tagbox.common.types import TaggedValue

__all__ = (
    "AttributeCodec",
    "CodecOptions",
    "decode",
    "decode_item",
    "default_codec",
    "encode",
    "encode_item",
)

_LOG = logging.getLogger(__name__)

_SCALAR_TYPES = (str, StringValue, NumberValue, *NUMBER_TYPES)
_BINARY_TYPES = (bytes, bytearray, memoryview)


class CodecOptions(TypedDict, total=False):
    """Options for creating an attribute codec."""

    extensions: Sequence[Extension]
    """Extensions consulted, in order, before the built-in rules."""
    number_parser: Callable[[Any], Any]
    """Turns the payload of an `N` tag (or an entry of an `NS` tag) into a number."""
    max_depth: int | None
    """How many levels of nesting are allowed (default: the `TAGBOX_MAX_DEPTH` setting)."""


class AttributeCodec:
    """Converts plain values to and from tagged attribute values.

    Plain values are `None`, strings, numbers, sequences and string-keyed
    mappings. Decoding is lossy by default - binary values, sets and
    booleans come back as strings, lists, and `bool` respectively and will
    not re-encode to their original tags unless an extension handles them.
    """

    __slots__ = ("_extensions", "_log", "_max_depth", "_number_parser")

    def __init__(
        self,
        extensions: Sequence[Extension] = (),
        *,
        number_parser: Callable[[Any], Any] = parse_number,
        max_depth: int | None = None,
    ) -> None:
        for ext in extensions:
            if not isinstance(ext, Extension):
                msg = f"Expected an Extension, not {full_class_name(type(ext))}."
                raise TypeError(msg)
            if not isinstance(getattr(ext, "name", None), str):
                msg = f"Extension {full_class_name(type(ext))} does not define a name."
                raise TypeError(msg)
        if max_depth is not None and max_depth < 1:
            msg = f"Expected a positive max depth, not {max_depth}."
            raise ValueError(msg)
        self._extensions = tuple(extensions)
        self._number_parser = number_parser
        self._max_depth = max_depth
        self._log = PrefixLogger(_LOG, self)
        if self._extensions:
            self._log.debug("using extensions %s", self._extensions)

    @property
    def extensions(self) -> tuple[Extension, ...]:
        """The extensions used by this codec."""
        return self._extensions

    @property
    def max_depth(self) -> int:
        """How many levels of nesting are allowed."""
        return TAGBOX_MAX_DEPTH() if self._max_depth is None else self._max_depth

    def configure(self, **kwargs: Unpack[CodecOptions]) -> AttributeCodec:
        """Create a new codec with the given options replaced."""
        options: CodecOptions = {
            "extensions": self._extensions,
            "number_parser": self._number_parser,
            "max_depth": self._max_depth,
        }
        return AttributeCodec(**{**options, **kwargs})

    def with_extensions(self, *extensions: Extension) -> AttributeCodec:
        """Create a new codec that also uses the given extensions."""
        return self.configure(extensions=(*self._extensions, *extensions))

    def encode(self, value: Any) -> TaggedValue:
        """Encode a plain value as a tagged attribute value.

        Raises:
            UnsupportedValueKind: If the value, or a value nested in it, cannot be encoded.
            MaxDepthExceeded: If the value is nested too deeply.
        """
        return self._encode(value, 1, self.max_depth)

    def decode(self, tagged: TaggedValue) -> Any:
        """Decode a tagged attribute value into a plain value.

        Raises:
            UnsupportedAttributeTag: If the value, or a value nested in it, has an unknown tag.
            MalformedAttributeValue: If a tagged value is not a mapping with exactly one key
                or its payload does not fit its tag.
            MaxDepthExceeded: If the value is nested too deeply.
        """
        return self._decode(tagged, 1, self.max_depth)

    def encode_item(self, item: PlainItem) -> dict[str, TaggedValue]:
        """Encode each attribute of an item."""
        self._log.debug("encoding item with %s attribute(s)", len(item))
        limit = self.max_depth
        return {_check_name(k): self._encode(v, 1, limit) for k, v in item.items()}

    def decode_item(self, item: TaggedItem) -> dict[str, Any]:
        """Decode each attribute of an item."""
        self._log.debug("decoding item with %s attribute(s)", len(item))
        limit = self.max_depth
        return {k: self._decode(v, 1, limit) for k, v in item.items()}

    def _encode(self, value: Any, depth: int, limit: int) -> TaggedValue:
        if depth > limit:
            msg = f"Cannot encode values nested more than {limit} levels deep."
            raise MaxDepthExceeded(msg)

        if self._extensions:
            encode = partial(self._encode, depth=depth + 1, limit=limit)
            for ext in self._extensions:
                if (tagged := ext.encode_value(value, encode)) is not UNDEFINED:
                    return tagged

        match value:
            case None:
                return {"NULL": True}
            case Mapping():
                mapping = {_check_name(k): self._encode(v, depth + 1, limit) for k, v in value.items()}
                return {"M": mapping}
            case _ if isinstance(value, _SCALAR_TYPES):
                if classify_scalar(value) == "N":
                    return {"N": format_number(value)}
                return {"S": _format_string(value)}
            case Sequence() if not isinstance(value, _BINARY_TYPES):
                return {"L": [self._encode(v, depth + 1, limit) for v in value]}

        msg = f"A {full_class_name(type(value))} may not be encoded as an attribute value."
        raise UnsupportedValueKind(msg)

    def _decode(self, tagged: TaggedValue, depth: int, limit: int) -> Any:
        if depth > limit:
            msg = f"Cannot decode values nested more than {limit} levels deep."
            raise MaxDepthExceeded(msg)

        tag, payload = _unwrap(tagged)

        if self._extensions:
            decode = partial(self._decode, depth=depth + 1, limit=limit)
            for ext in self._extensions:
                if (value := ext.decode_value(tagged, decode)) is not UNDEFINED:
                    return value

        match tag:
            case "S" | "B":
                return payload
            case "SS" | "BS":
                return list(check_sequence(tag, payload))
            case "BOOL":
                return parse_bool(payload)
            case "L":
                return [self._decode(v, depth + 1, limit) for v in check_sequence(tag, payload)]
            case "M":
                return {
                    k: self._decode(v, depth + 1, limit)
                    for k, v in _check_mapping(tag, payload).items()
                }
            case "N":
                return self._number_parser(payload)
            case "NS":
                return [self._number_parser(n) for n in check_sequence(tag, payload)]
            case "NULL":
                return None

        msg = f"The {tag!r} attribute value type is not supported."
        raise UnsupportedAttributeTag(msg)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(extensions={list(self._extensions)!r})"


def _unwrap(tagged: Any) -> tuple[Tag, Any]:
    if not isinstance(tagged, Mapping):
        msg = f"Expected a tagged value mapping, not {full_class_name(type(tagged))}."
        raise MalformedAttributeValue(msg)
    if len(tagged) != 1:
        msg = f"Expected a tagged value with exactly one tag, got {sorted(map(str, tagged))}."
        raise MalformedAttributeValue(msg)
    ((tag, payload),) = tagged.items()
    return tag, payload


def _format_string(value: str | StringValue) -> str:
    return str(value.value) if isinstance(value, StringValue) else str(value)


def _check_name(name: Any) -> str:
    if not isinstance(name, str):
        msg = f"Attribute names must be strings, not {full_class_name(type(name))}."
        raise UnsupportedValueKind(msg)
    return name


def _check_mapping(tag: Tag, payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        msg = f"Expected a mapping for the {tag!r} tag, not {full_class_name(type(payload))}."
        raise MalformedAttributeValue(msg)
    return payload


default_codec = AttributeCodec()
"""Codec with default settings, used by the module-level functions."""


def encode(value: Any) -> TaggedValue:
    """Encode a plain value as a tagged attribute value using the default codec."""
    return default_codec.encode(value)


def decode(tagged: TaggedValue) -> Any:
    """Decode a tagged attribute value into a plain value using the default codec."""
    return default_codec.decode(tagged)


def encode_item(item: PlainItem) -> dict[str, TaggedValue]:
    """Encode each attribute of an item using the default codec."""
    return default_codec.encode_item(item)


def decode_item(item: TaggedItem) -> dict[str, Any]:
    """Decode each attribute of an item using the default codec."""
    return default_codec.decode_item(item)
