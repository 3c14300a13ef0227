from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace
from typing import Any
from typing import Generic
from typing import Protocol
from typing import TypedDict

from typing_extensions import TypeVar

from tagbox._internal._component import Component

__all__ = (
    "DumpFunc",
    "LoadFunc",
    "SerializedData",
    "Serializer",
)

T = TypeVar("T", default=Any)
O = TypeVar("O", default=Any)  # noqa: E741
T_co = TypeVar("T_co", covariant=True, default=Any)
T_con = TypeVar("T_con", contravariant=True, default=Any)
O_con = TypeVar("O_con", contravariant=True, default=Any)


@dataclass(frozen=True)
class Serializer(Generic[T, O], Component):
    """Turns plain items into documents of tagged attribute values and back."""

    dump_func: DumpFunc[T, O]
    """Writes a plain item as a document."""
    load_func: LoadFunc[T, O]
    """Reads a plain item from a document."""
    options: O
    """Options passed to both functions."""
    content_types: tuple[str, ...] = ()
    """The MIME types of the documents, the first being the one written."""

    def serialize(self, item: T) -> SerializedData:
        """Write the given item as a document."""
        return self.dump_func(item, self.options)

    def deserialize(self, data: SerializedData) -> T:
        """Read an item from the given document."""
        if self.content_types and data["content_type"] not in self.content_types:
            msg = (
                f"{self.name} cannot read {data['content_type']!r} documents, "
                f"expected one of {list(self.content_types)}."
            )
            raise ValueError(msg)
        return self.load_func(data, self.options)

    def configure(self, options: O) -> Serializer[T, O]:
        """Create a new serializer with the given options."""
        return replace(self, options=options)


class DumpFunc(Protocol[T_con, O_con]):
    """A function that writes an item as a document."""

    def __call__(self, item: T_con, options: O_con, /) -> SerializedData: ...


class LoadFunc(Protocol[T_co, O_con]):
    """A function that reads an item from a document."""

    def __call__(self, data: SerializedData, options: O_con, /) -> T_co: ...


class SerializedData(TypedDict):
    """A serialized document."""

    data: bytes
    """The document's content."""
    content_encoding: str | None
    """The text encoding of the content, if any."""
    content_type: str
    """The MIME type of the content."""
