"""
Defines the interface for command handlers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from portfolio_terminal.core.config.app_config import AppConfig
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue

if TYPE_CHECKING:
    from portfolio_terminal.core.commands.service import CommandService


class ICommandHandler(ABC):
    """
    Interface for a command handler.

    Handlers are instantiated once when the registry is built and must not
    keep per-invocation state on ``self``; everything an invocation needs
    arrives through its arguments and the execution context.
    """

    def __init__(self, command_service: CommandService | None = None) -> None:
        self._command_service = command_service

    @property
    @abstractmethod
    def name(self) -> str:
        """The name of the command."""

    @property
    @abstractmethod
    def description(self) -> str:
        """A short description of the command."""

    @property
    @abstractmethod
    def usage(self) -> str:
        """The usage line of the command."""

    @property
    def aliases(self) -> list[str]:
        """Alternate names resolving to this command."""
        return []

    @property
    def hidden(self) -> bool:
        """Hidden commands are left out of help, autocomplete and suggestions."""
        return False

    @property
    def examples(self) -> list[str]:
        """A list of examples of how to use the command."""
        return []

    @property
    def config(self) -> AppConfig:
        if self._command_service is not None:
            return self._command_service.config
        return AppConfig()

    @abstractmethod
    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        """
        Executes the command. Overrides may also be plain methods returning
        the output directly.

        Args:
            args: Positional arguments.
            flags: Parsed ``--flag`` values.
            context: The execution context of this invocation.

        Returns:
            A CommandOutput with the result of the command.
        """
