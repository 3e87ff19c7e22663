"""
Core data structure produced by the command parser.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

FlagValue = str | bool


@dataclass(frozen=True)
class ParsedCommand:
    """
    Represents one submitted line split into its parts.

    Attributes:
        command: The lowercased command name, empty only for blank input.
        args: Positional arguments in the order they were typed.
        flags: ``--name`` flags mapped to their value, or ``True`` when the
            flag is not followed by a value.
    """

    command: str
    args: tuple[str, ...] = ()
    flags: Mapping[str, FlagValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))

    @classmethod
    def empty(cls) -> ParsedCommand:
        return cls(command="")

    @property
    def is_empty(self) -> bool:
        return not self.command

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedCommand):
            return NotImplemented
        return (
            self.command == other.command
            and self.args == other.args
            and dict(self.flags) == dict(other.flags)
        )

    def __hash__(self) -> int:
        return hash((self.command, self.args, tuple(sorted(self.flags.items()))))
