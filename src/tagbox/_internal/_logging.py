from collections.abc import MutableMapping
from logging import Logger
from logging import LoggerAdapter
from typing import Any

LoggerLike = Logger | LoggerAdapter


class PrefixLogger(LoggerAdapter):
    """A logger that marks each message with the codec or component it concerns.

    Messages read `[<prefix>] <message>` where the prefix is the owner's
    `name` if it has one and its `repr` otherwise. The prefix is only
    rendered for records that are emitted and is also attached to them as
    the `tagbox_prefix` attribute.
    """

    def __init__(self, logger: LoggerLike, owner: Any) -> None:
        super().__init__(logger)
        self.owner = owner

    @property
    def prefix(self) -> str:
        """The text put before each message."""
        name = getattr(self.owner, "name", None)
        return name if isinstance(name, str) else repr(self.owner)

    def process(
        self,
        msg: str,
        kwargs: MutableMapping[str, Any],
    ) -> tuple[str, MutableMapping[str, Any]]:
        prefix = self.prefix
        kwargs["extra"] = {**(kwargs.get("extra") or {}), "tagbox_prefix": prefix}
        return f"[{prefix}] {msg}", kwargs
