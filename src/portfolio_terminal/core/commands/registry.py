"""
Command registry.

Handler classes declare themselves with the ``@command`` decorator, which
records them in a module-level catalogue in declaration order. A
``CommandRegistry`` holds handler instances keyed by lowercased name, plus a
lowercased alias table pointing at canonical names. Registries are built once
at startup and are not modified afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.common.exceptions import CommandRegistrationError

if TYPE_CHECKING:
    from portfolio_terminal.core.commands.service import CommandService

logger = logging.getLogger(__name__)

_handler_classes: dict[str, type[ICommandHandler]] = {}


def command(name: str) -> Callable[[type[ICommandHandler]], type[ICommandHandler]]:
    """
    A decorator to add a handler class to the default catalogue.

    Args:
        name: The canonical name of the command.

    Returns:
        A decorator that records the handler class.
    """

    def decorator(cls: type[ICommandHandler]) -> type[ICommandHandler]:
        key = name.lower()
        if key in _handler_classes:
            raise CommandRegistrationError(
                f"Command '{name}' is already declared.", command_name=name
            )
        _handler_classes[key] = cls
        return cls

    return decorator


def get_all_handler_classes() -> dict[str, type[ICommandHandler]]:
    """Return the declared handler classes in declaration order."""
    return _handler_classes.copy()


class CommandRegistry:
    """Maps command names and aliases to handler instances."""

    def __init__(self) -> None:
        self._commands: dict[str, ICommandHandler] = {}
        self._aliases: dict[str, str] = {}

    def register(self, handler: ICommandHandler) -> None:
        """
        Register a handler under its name and aliases.

        Raises:
            CommandRegistrationError: If the name is empty or the name or any
                alias is already taken by another command's name or alias.
        """
        name = handler.name.lower()
        if not name:
            raise CommandRegistrationError("Command name must be a non-empty string.")
        if self._is_taken(name):
            raise CommandRegistrationError(
                f"Command '{name}' is already registered.", command_name=name
            )

        aliases = [alias.lower() for alias in handler.aliases]
        for alias in aliases:
            if alias == name or self._is_taken(alias) or aliases.count(alias) > 1:
                raise CommandRegistrationError(
                    f"Alias '{alias}' of command '{name}' collides with an existing entry.",
                    command_name=name,
                    details={"alias": alias},
                )

        self._commands[name] = handler
        for alias in aliases:
            self._aliases[alias] = name
        logger.debug("Registered command: %s (aliases: %s)", name, aliases)

    def _is_taken(self, key: str) -> bool:
        return key in self._commands or key in self._aliases

    def resolve(self, name: str) -> str:
        """Resolve an alias to its canonical name; other names pass through."""
        key = name.lower()
        return self._aliases.get(key, key)

    def get(self, name: str) -> ICommandHandler | None:
        """Get a handler by name or alias."""
        return self._commands.get(self.resolve(name))

    def has_command(self, name: str) -> bool:
        key = name.lower()
        return key in self._commands or key in self._aliases

    def visible_commands(self) -> list[ICommandHandler]:
        return [handler for handler in self._commands.values() if not handler.hidden]

    def command_names(self, include_hidden: bool = False) -> list[str]:
        """Canonical names in registration order."""
        return [
            name
            for name, handler in self._commands.items()
            if include_hidden or not handler.hidden
        ]

    def hidden_names(self) -> list[str]:
        return [name for name, handler in self._commands.items() if handler.hidden]

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_command(name)


def create_default_registry(
    command_service: CommandService | None = None,
) -> CommandRegistry:
    """Instantiate every declared handler class into a new registry."""
    # Importing the package declares the built-in handlers.
    import portfolio_terminal.core.commands.handlers  # noqa: F401

    registry = CommandRegistry()
    for handler_class in _handler_classes.values():
        registry.register(handler_class(command_service))
    return registry
