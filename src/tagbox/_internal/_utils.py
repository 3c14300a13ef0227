from __future__ import annotations

import re
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import Any
from typing import TypeVar
from typing import cast
from typing import dataclass_transform
from typing import overload

T = TypeVar("T")

UNDEFINED = cast("Any", type("UNDEFINED", (), {"__repr__": lambda _: "UNDEFINED"})())
"""A sentinel value representing an undefined value."""


if TYPE_CHECKING:
    from collections.abc import Callable

    @overload
    def frozenclass(cls: type[T]) -> type[T]: ...

    @overload
    def frozenclass(
        cls: None = None,
        /,
        *,
        init: bool = True,
        repr: bool = True,
        eq: bool = True,
        order: bool = False,
        unsafe_hash: bool = False,
        frozen: bool = False,
        match_args: bool = True,
        kw_only: bool = False,
        slots: bool = False,
        weakref_slot: bool = False,
    ) -> Callable[[type[T]], type[T]]: ...

    @dataclass_transform(frozen_default=True, kw_only_default=True, field_specifiers=(field,))
    def frozenclass(*args: Any, **kwargs: Any) -> Any:
        """Create a dataclass that's frozen by default."""
        ...

else:

    def frozenclass(*args, **kwargs):
        """Create a dataclass that's frozen by default."""
        kwargs.setdefault("frozen", True)
        kwargs.setdefault("kw_only", True)
        if args:
            return dataclass(**kwargs)(*args)
        return dataclass(**kwargs)


def full_class_name(cls: type) -> str:
    """Return the fully qualified name of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


_NAME_PATTERN = re.compile(r"^.*\@v\d+.*$")


def validate_versioned_name(cls: type, name: str) -> None:
    if not _NAME_PATTERN.match(name):
        msg = (
            f"Expected a versioned name for {cls.__name__!r}, "
            f"of the form '<name>@v<version>', but got {name!r}."
        )
        raise ValueError(msg)
