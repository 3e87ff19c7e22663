"""
Theme command handler.

Without arguments it lists the themes; with a name it replaces the session's
active theme through ``ExecutionContext.theme_state``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import (
    CommandOutput,
    StructuredContent,
)
from portfolio_terminal.core.domain.parsed_command import FlagValue
from portfolio_terminal.core.domain.theme import get_theme, theme_names

logger = logging.getLogger(__name__)


@command("theme")
class ThemeCommandHandler(ICommandHandler):
    """Handler for the theme command."""

    @property
    def name(self) -> str:
        return "theme"

    @property
    def aliases(self) -> list[str]:
        return ["color", "colors"]

    @property
    def description(self) -> str:
        return "Change terminal theme (" + ", ".join(theme_names()) + ")"

    @property
    def usage(self) -> str:
        return "theme [name]"

    @property
    def examples(self) -> list[str]:
        return ["theme cyberpunk         Switch to cyberpunk theme"]

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        available = theme_names()

        if not args:
            current = context.theme.name
            lines = [f"Current theme: {current}", "Available themes:"]
            for name in available:
                marker = " (current)" if name == current else ""
                lines.append(f"  • {name}{marker}")
            lines.append("")
            lines.append(f"Usage: {self.usage}")
            return CommandOutput.structured(
                "theme_list",
                "\n".join(lines),
                {"current": current, "available": available},
            )

        requested = args[0].lower()
        theme = get_theme(requested)
        if theme is None:
            logger.debug("Unknown theme requested: %s", requested)
            text = (
                f'Theme "{requested}" not found.\n'
                f"Available themes: {', '.join(available)}"
            )
            return CommandOutput.failure(
                StructuredContent(
                    node="theme_error",
                    text=text,
                    data={"requested": requested, "available": available},
                ),
                error=f'Theme "{requested}" not found',
            )

        context.theme_state.set(theme)
        return CommandOutput.text(
            f'✓ Theme changed to "{theme.name}"\nEnjoy your new color scheme!'
        )
