"""
Parses submitted lines into commands and answers completion queries.
"""

from __future__ import annotations

from portfolio_terminal.core.commands.registry import CommandRegistry
from portfolio_terminal.core.commands.suggestions import get_similar_commands
from portfolio_terminal.core.commands.tokenizer import tokenize
from portfolio_terminal.core.domain.parsed_command import FlagValue, ParsedCommand

FLAG_PREFIX = "--"


class CommandParser:
    """Parses command lines against the commands known to a registry.

    Flags greedily take the next token as their value unless that token is a
    flag itself, so a flag can never carry an empty-string or false value:
    ``--name value`` gives ``"value"`` and a bare ``--name`` gives ``True``.
    """

    def __init__(self, registry: CommandRegistry | None = None) -> None:
        self._registry = registry if registry is not None else CommandRegistry()

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def parse(self, line: str) -> ParsedCommand:
        """
        Parse a line into command name, arguments, and flags.

        Args:
            line: The raw line as typed.

        Returns:
            A ParsedCommand; its command is empty only for blank input.
        """
        trimmed = line.strip()
        if not trimmed:
            return ParsedCommand.empty()

        tokens = tokenize(trimmed)
        if not tokens:
            return ParsedCommand.empty()

        command_name = tokens[0].lower()
        args: list[str] = []
        flags: dict[str, FlagValue] = {}

        index = 1
        while index < len(tokens):
            token = tokens[index]
            if token.startswith(FLAG_PREFIX):
                flag_name = token[len(FLAG_PREFIX) :]
                next_index = index + 1
                if next_index < len(tokens) and not tokens[next_index].startswith(
                    FLAG_PREFIX
                ):
                    flags[flag_name] = tokens[next_index]
                    index = next_index
                else:
                    flags[flag_name] = True
            else:
                args.append(token)
            index += 1

        return ParsedCommand(command=command_name, args=tuple(args), flags=flags)

    def get_valid_commands(self) -> list[str]:
        """Visible canonical command names in registration order."""
        return self._registry.command_names()

    def autocomplete(self, partial: str) -> list[str]:
        """Return the visible command names starting with ``partial``."""
        prefix = partial.strip().lower()
        if not prefix:
            return []
        return [name for name in self.get_valid_commands() if name.startswith(prefix)]

    def get_unique_autocomplete(self, partial: str) -> str | None:
        """Return the completion only when exactly one command matches."""
        matches = self.autocomplete(partial)
        if len(matches) == 1:
            return matches[0]
        return None

    def is_valid_command(self, name: str) -> bool:
        return self._registry.has_command(name)

    def is_easter_egg(self, name: str) -> bool:
        return name.lower() in self._registry.hidden_names()

    def get_similar_commands(self, name: str) -> list[str]:
        return get_similar_commands(name, self.get_valid_commands())
