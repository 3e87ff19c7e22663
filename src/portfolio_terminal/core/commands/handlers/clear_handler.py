from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue


@command("clear")
class ClearCommandHandler(ICommandHandler):
    """Asks the caller to wipe its output log."""

    @property
    def name(self) -> str:
        return "clear"

    @property
    def aliases(self) -> list[str]:
        return ["cls"]

    @property
    def description(self) -> str:
        return "Clear terminal output"

    @property
    def usage(self) -> str:
        return "clear"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        return CommandOutput.clear()
