from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.constants import SEPARATOR_WIDTH
from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue

EMPTY_HISTORY_MESSAGE = "No command history yet. Start typing commands!"


@command("history")
class HistoryCommandHandler(ICommandHandler):
    """Handler for the history command."""

    @property
    def name(self) -> str:
        return "history"

    @property
    def description(self) -> str:
        return "Show command history"

    @property
    def usage(self) -> str:
        return "history"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        history = context.history
        if not history:
            return CommandOutput.text(EMPTY_HISTORY_MESSAGE)

        lines = ["", "Command History", "=" * SEPARATOR_WIDTH, ""]
        lines.extend(
            f"{str(index).rjust(4)}  {entry}"
            for index, entry in enumerate(history, start=1)
        )
        lines.append("")
        lines.append("=" * SEPARATOR_WIDTH)
        lines.append(f"Total Commands: {len(history)}")
        lines.append("")
        lines.append("Tip: Use Up/Down arrows to navigate through history")
        return CommandOutput.text("\n".join(lines) + "\n")
