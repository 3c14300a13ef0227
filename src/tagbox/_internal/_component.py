import abc
from dataclasses import KW_ONLY
from typing import LiteralString

from tagbox._internal._utils import frozenclass
from tagbox._internal._utils import validate_versioned_name


@frozenclass(kw_only=False)
class Component(abc.ABC):
    """Base for named and versioned Tagbox components such as serializers.

    The name is checked on creation. A component that changes how it writes
    documents must get a new version so old documents are not misread.
    """

    name: LiteralString
    """The globally unique name of the component, of the form `<name>@v<version>`."""

    _: KW_ONLY

    def __post_init__(self) -> None:
        validate_versioned_name(type(self), self.name)
