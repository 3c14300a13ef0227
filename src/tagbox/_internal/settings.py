from collections.abc import Callable
from os import environ
from typing import TypeVar

T = TypeVar("T")


def make_setting(
    name: str,
    default: T,
    from_string: Callable[[str], T] = lambda x: x,
) -> Callable[[], T]:
    """Create a setting with a name, default value, and optional conversion function."""
    return lambda: from_string(environ[name]) if name in environ else default


TAGBOX_MAX_DEPTH = make_setting("TAGBOX_MAX_DEPTH", 128, from_string=int)
"""How deeply nested a value may be before encoding or decoding gives up."""
