from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue


class StubHandler(ICommandHandler):
    """Minimal handler whose name, aliases and visibility are set per instance."""

    def __init__(
        self, name: str, aliases: list[str] | None = None, hidden: bool = False
    ) -> None:
        super().__init__()
        self._name = name
        self._aliases = aliases or []
        self._hidden = hidden

    @property
    def name(self) -> str:
        return self._name

    @property
    def aliases(self) -> list[str]:
        return self._aliases

    @property
    def hidden(self) -> bool:
        return self._hidden

    @property
    def description(self) -> str:
        return f"The {self._name} command"

    @property
    def usage(self) -> str:
        return self._name

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        return CommandOutput.text(self._name)
