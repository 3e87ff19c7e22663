"""
Built-in command handlers.

Importing this package declares every handler with the ``@command``
decorator. Import order is the registration order, which is the order
commands appear in help and autocomplete.
"""

from portfolio_terminal.core.commands.handlers.help_handler import HelpCommandHandler
from portfolio_terminal.core.commands.handlers.about_handler import AboutCommandHandler
from portfolio_terminal.core.commands.handlers.skills_handler import (
    SkillsCommandHandler,
)
from portfolio_terminal.core.commands.handlers.experience_handler import (
    ExperienceCommandHandler,
)
from portfolio_terminal.core.commands.handlers.projects_handler import (
    ProjectsCommandHandler,
)
from portfolio_terminal.core.commands.handlers.certifications_handler import (
    CertificationsCommandHandler,
)
from portfolio_terminal.core.commands.handlers.contact_handler import (
    ContactCommandHandler,
)
from portfolio_terminal.core.commands.handlers.resume_handler import (
    ResumeCommandHandler,
)
from portfolio_terminal.core.commands.handlers.clear_handler import ClearCommandHandler
from portfolio_terminal.core.commands.handlers.history_handler import (
    HistoryCommandHandler,
)
from portfolio_terminal.core.commands.handlers.stats_handler import StatsCommandHandler
from portfolio_terminal.core.commands.handlers.theme_handler import ThemeCommandHandler
from portfolio_terminal.core.commands.handlers.social_handlers import (
    GithubCommandHandler,
    InstagramCommandHandler,
    LinkedInCommandHandler,
)
from portfolio_terminal.core.commands.handlers.greetings_handler import (
    ByeCommandHandler,
    HelloCommandHandler,
)
from portfolio_terminal.core.commands.handlers.easter_egg_handlers import (
    BankaiCommandHandler,
    Gear5CommandHandler,
    MakiZeninCommandHandler,
    TatakaeCommandHandler,
)

__all__ = [
    "AboutCommandHandler",
    "BankaiCommandHandler",
    "ByeCommandHandler",
    "CertificationsCommandHandler",
    "ClearCommandHandler",
    "ContactCommandHandler",
    "ExperienceCommandHandler",
    "Gear5CommandHandler",
    "GithubCommandHandler",
    "HelloCommandHandler",
    "HelpCommandHandler",
    "HistoryCommandHandler",
    "InstagramCommandHandler",
    "LinkedInCommandHandler",
    "MakiZeninCommandHandler",
    "ProjectsCommandHandler",
    "ResumeCommandHandler",
    "SkillsCommandHandler",
    "StatsCommandHandler",
    "TatakaeCommandHandler",
    "ThemeCommandHandler",
]
