"""
Help command handler.

Lists every visible command with its aliases and usage line.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue

logger = logging.getLogger(__name__)

USAGE_COLUMN_WIDTH = 24

TIPS = (
    "Use Tab for command autocomplete",
    "Use Up/Down arrows to navigate command history",
    "Use flags like --frontend to filter results",
)


@command("help")
class HelpCommandHandler(ICommandHandler):
    """Handler for the help command."""

    @property
    def name(self) -> str:
        return "help"

    @property
    def aliases(self) -> list[str]:
        return ["?", "h"]

    @property
    def description(self) -> str:
        return "Display list of available commands"

    @property
    def usage(self) -> str:
        return "help"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        handlers = (
            self._command_service.registry.visible_commands()
            if self._command_service is not None
            else []
        )

        lines = ["", "Available Commands:"]
        examples: list[str] = []
        for handler in handlers:
            names = ", ".join([handler.name, *handler.aliases])
            label = handler.usage.replace(handler.name, names, 1)
            if len(label) < USAGE_COLUMN_WIDTH:
                lines.append(f"  {label.ljust(USAGE_COLUMN_WIDTH)}{handler.description}")
            else:
                lines.append(f"  {label}")
                lines.append(f"  {' ' * USAGE_COLUMN_WIDTH}{handler.description}")
            examples.extend(handler.examples)

        lines.append("")
        lines.append("Tips:")
        lines.extend(f"  - {tip}" for tip in TIPS)

        if examples:
            lines.append("")
            lines.append("Examples:")
            lines.extend(f"  {example}" for example in examples)

        return CommandOutput.text("\n".join(lines) + "\n")
