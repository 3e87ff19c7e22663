"""
Dispatches parsed commands to their handlers.
"""

from __future__ import annotations

import inspect
import logging

import structlog

from portfolio_terminal.core.commands.parser import CommandParser
from portfolio_terminal.core.commands.registry import (
    CommandRegistry,
    create_default_registry,
)
from portfolio_terminal.core.common.logging_utils import (
    LogContext,
    configure_structlog,
    get_logger,
)
from portfolio_terminal.core.config.app_config import AppConfig
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.contact import ContactSubmitter
from portfolio_terminal.core.domain.parsed_command import ParsedCommand

logger = logging.getLogger(__name__)
structured_logger = get_logger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class CommandService:
    """
    Resolves parsed commands through the registry and runs their handlers.

    The service keeps no state between calls apart from the registry, which
    is fixed once built. ``execute`` always returns a ``CommandOutput``.
    """

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        config: AppConfig | None = None,
        contact_submitter: ContactSubmitter | None = None,
    ) -> None:
        """
        Initializes the command service.

        Args:
            registry: The command registry. Populate it after construction
                when handlers need a reference back to this service.
            config: Application configuration exposed to handlers.
            contact_submitter: Async callable used by contact forms.
        """
        self.registry = registry if registry is not None else CommandRegistry()
        self.config = config if config is not None else AppConfig()
        self.contact_submitter = contact_submitter
        self.parser = CommandParser(self.registry)

    @classmethod
    def create_default(
        cls,
        config: AppConfig | None = None,
        contact_submitter: ContactSubmitter | None = None,
    ) -> CommandService:
        """Build a service with every built-in command registered."""
        if not structlog.is_configured():
            configure_structlog()
        service = cls(config=config, contact_submitter=contact_submitter)
        service.registry = create_default_registry(service)
        service.parser = CommandParser(service.registry)
        logger.info("Command service ready with %d commands", len(service.registry))
        return service

    def parse(self, line: str) -> ParsedCommand:
        return self.parser.parse(line)

    def autocomplete(self, partial: str) -> list[str]:
        return self.parser.autocomplete(partial)

    def get_unique_autocomplete(self, partial: str) -> str | None:
        return self.parser.get_unique_autocomplete(partial)

    def is_easter_egg(self, name: str) -> bool:
        return self.parser.is_easter_egg(name)

    async def execute(
        self, parsed: ParsedCommand, context: ExecutionContext
    ) -> CommandOutput:
        """
        Execute a parsed command.

        Args:
            parsed: The parsed command.
            context: The execution context for this invocation.

        Returns:
            The handler's output, or a failed output for empty input, unknown
            commands and handler exceptions.
        """
        command_name = parsed.command.lower()
        if not command_name:
            return CommandOutput(success=False, error="No command entered")

        canonical_name = self.registry.resolve(command_name)
        handler = self.registry.get(canonical_name)

        with LogContext(
            structured_logger, command=command_name, resolved=canonical_name
        ) as log:
            if handler is None:
                suggestions = self.parser.get_similar_commands(command_name)
                suggestion_text = (
                    f"\n\nDid you mean: {', '.join(suggestions)}?" if suggestions else ""
                )
                log.info("command_not_found", suggestions=suggestions)
                return CommandOutput.failure(
                    f"Command not found: {command_name}{suggestion_text}",
                    error=f"Command not found: {command_name}",
                )

            try:
                output = handler.execute(parsed.args, parsed.flags, context)
                if inspect.isawaitable(output):
                    output = await output
                if not isinstance(output, CommandOutput):
                    raise TypeError(
                        f"Command '{canonical_name}' returned {type(output).__name__}"
                    )
            except Exception as exc:
                error_message = str(exc) or UNKNOWN_ERROR_MESSAGE
                logger.exception("Command '%s' failed", canonical_name)
                return CommandOutput.failure(
                    f"Error executing command: {error_message}", error=error_message
                )

            log.info("command_executed", success=output.success)
            return output
