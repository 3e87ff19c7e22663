from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue


@command("hello")
class HelloCommandHandler(ICommandHandler):
    """Handler for the hello command."""

    @property
    def name(self) -> str:
        return "hello"

    @property
    def description(self) -> str:
        return "Say hello!"

    @property
    def usage(self) -> str:
        return "hello"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        return CommandOutput.text(
            "👋 heyyyy! How can i help\nType 'help' to see available commands!"
        )


@command("bye")
class ByeCommandHandler(ICommandHandler):
    """Handler for the bye command."""

    @property
    def name(self) -> str:
        return "bye"

    @property
    def description(self) -> str:
        return "Say goodbye!"

    @property
    def usage(self) -> str:
        return "bye"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        return CommandOutput.text("👋 byeeee\nThanks for visiting! Come back soon! ✨")
