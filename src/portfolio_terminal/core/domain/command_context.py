from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from portfolio_terminal.core.domain.portfolio import PortfolioData
from portfolio_terminal.core.domain.theme import Theme, ThemeState


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class ExecutionContext:
    """State bundle passed to every handler invocation.

    The caller owns all of it. Handlers read ``portfolio_data`` and
    ``history``; the theme handler is the only one that writes, and only
    through ``theme_state``. ``clock`` supplies "now" for date arithmetic.
    """

    theme_state: ThemeState = field(default_factory=ThemeState)
    history: list[str] = field(default_factory=list)
    portfolio_data: PortfolioData | None = None
    clock: Callable[[], datetime] = utc_now

    @property
    def theme(self) -> Theme:
        return self.theme_state.current
