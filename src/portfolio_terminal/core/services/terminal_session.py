"""
A single terminal session: the output log, command history and theme.

The session owns all mutable state that commands see. Each submitted line
gets a fresh ``ExecutionContext`` built from that state.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Literal

from pydantic import Field

from portfolio_terminal.constants import LineType
from portfolio_terminal.core.commands.service import CommandService
from portfolio_terminal.core.domain.command_context import (
    ExecutionContext,
    utc_now,
)
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.model_bases import DomainModel
from portfolio_terminal.core.domain.portfolio import PortfolioData
from portfolio_terminal.core.domain.theme import Theme, ThemeState

logger = logging.getLogger(__name__)

HistoryDirection = Literal["up", "down"]


class TerminalLine(DomainModel):
    """One entry of the output log."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    type: LineType
    content: str
    output: CommandOutput | None = None
    timestamp: datetime = Field(default_factory=utc_now)


class TerminalSession:
    """Drives a ``CommandService`` the way an interactive terminal does."""

    def __init__(
        self,
        service: CommandService,
        portfolio_data: PortfolioData | None = None,
        theme_state: ThemeState | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.service = service
        self.portfolio_data = portfolio_data
        self.theme_state = (
            theme_state
            if theme_state is not None
            else ThemeState(service.config.terminal.default_theme)
        )
        self.clock = clock
        self._lines: list[TerminalLine] = []
        self._history: list[str] = []
        # -1 means "not browsing history".
        self._history_index = -1

    @property
    def lines(self) -> list[TerminalLine]:
        return list(self._lines)

    @property
    def history(self) -> list[str]:
        return list(self._history)

    @property
    def theme(self) -> Theme:
        return self.theme_state.current

    async def submit(self, line: str) -> CommandOutput | None:
        """
        Run one submitted line.

        Returns:
            The command output, or None when the line is blank.
        """
        trimmed = line.strip()
        if not trimmed:
            return None

        self._append(LineType.COMMAND, trimmed)
        self._history.append(trimmed)
        self._history_index = -1

        context = ExecutionContext(
            theme_state=self.theme_state,
            history=list(self._history),
            portfolio_data=self.portfolio_data,
            clock=self.clock,
        )
        output = await self.service.execute(self.service.parse(trimmed), context)

        if output.is_clear:
            self.clear()
        else:
            line_type = LineType.OUTPUT if output.success else LineType.ERROR
            self._append(line_type, output.render_text(), output)
        return output

    def clear(self) -> None:
        self._lines.clear()

    def navigate_history(self, direction: HistoryDirection) -> str | None:
        """
        Step through submitted commands like the Up/Down arrow keys.

        Returns:
            The command to show, "" when stepping down past the newest entry,
            or None when there is nothing to navigate.
        """
        if not self._history:
            return None

        index = self._history_index
        if direction == "up":
            if index == -1:
                index = len(self._history) - 1
            elif index > 0:
                index -= 1
        elif direction == "down":
            if index == -1:
                return None
            if index < len(self._history) - 1:
                index += 1
            else:
                self._history_index = -1
                return ""
        else:
            raise ValueError(f"Unknown history direction: {direction}")

        self._history_index = index
        return self._history[index]

    def complete(self, partial: str) -> str | None:
        """Tab completion: the single matching command name, if any."""
        return self.service.get_unique_autocomplete(partial)

    def _append(
        self, line_type: LineType, content: str, output: CommandOutput | None = None
    ) -> None:
        self._lines.append(TerminalLine(type=line_type, content=content, output=output))
