from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from portfolio_terminal.core.commands.service import CommandService
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput

RunCommand = Callable[..., Awaitable[CommandOutput]]


@pytest.fixture
def run_command(
    command_service: CommandService, make_context: Callable[..., ExecutionContext]
) -> RunCommand:
    """Parse and execute one line; keyword arguments override context fields."""

    async def run(line: str, **context_overrides: Any) -> CommandOutput:
        context = make_context(**context_overrides)
        return await command_service.execute(command_service.parse(line), context)

    return run
