from collections.abc import Mapping
from typing import Any
from typing import Literal

Tag = Literal["S", "N", "B", "BOOL", "SS", "NS", "BS", "L", "M", "NULL"]
"""The type code of a tagged attribute value."""

TaggedValue = dict[Tag, Any]
"""A single-entry mapping from a tag to its payload."""

PlainValue = (
    str
    | int
    | float
    | Mapping[str, "PlainValue"]
    | list["PlainValue"]
    | tuple["PlainValue", ...]
    | None
)
"""A type alias for plain, untagged data."""

TaggedItem = Mapping[str, TaggedValue]
"""A flat mapping from attribute names to tagged values."""

PlainItem = Mapping[str, Any]
"""A flat mapping from attribute names to plain values."""
