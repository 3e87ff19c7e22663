# Configuration package

from portfolio_terminal.core.config.app_config import (
    AppConfig,
    ContactConfig,
    LoggingConfig,
    LogLevel,
    PortfolioSourceConfig,
    ResumeConfig,
    SocialLinksConfig,
    TerminalConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "ContactConfig",
    "LogLevel",
    "LoggingConfig",
    "PortfolioSourceConfig",
    "ResumeConfig",
    "SocialLinksConfig",
    "TerminalConfig",
    "load_config",
]
