class CodecError(Exception):
    """Base class for errors raised while encoding or decoding attribute values."""


class UnsupportedValueKind(CodecError, TypeError):
    """Raised when a value cannot be encoded as an attribute value."""


class UnsupportedAttributeTag(CodecError, ValueError):
    """Raised when a tagged value carries a tag that cannot be decoded."""


class MalformedAttributeValue(UnsupportedAttributeTag):
    """Raised when a tagged value does not have the shape its tag requires."""


class MaxDepthExceeded(CodecError, RecursionError):
    """Raised when a value is nested more deeply than a codec allows."""
