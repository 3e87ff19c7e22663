"""
Handlers that point at the owner's social profiles.

Each returns an ``open_link`` element; the caller decides how to open it.
Links served with the portfolio take precedence over configured ones.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue


class SocialLinkHandler(ICommandHandler):
    """Base for commands that open one social profile."""

    network: str = ""
    label: str = ""
    icon: str = ""
    tagline: str = ""

    @property
    def name(self) -> str:
        return self.network

    @property
    def description(self) -> str:
        return f"Open {self.config.owner_name}'s {self.label} profile"

    @property
    def usage(self) -> str:
        return self.network

    def profile_url(self, context: ExecutionContext) -> str:
        if context.portfolio_data is not None:
            url = context.portfolio_data.contact_info.socials.get(self.network)
            if url:
                return url
        return getattr(self.config.socials, self.network)

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        url = self.profile_url(context)
        display = url.split("://", 1)[-1]
        box_width = len(display) + 6
        text = "\n".join(
            [
                f"{self.icon} Opening {self.label} profile...",
                "",
                f"   ╔{'═' * box_width}╗",
                f"   ║   {display}   ║",
                f"   ╚{'═' * box_width}╝",
                "",
                f"   {self.tagline}",
            ]
        )
        return CommandOutput.structured(
            "open_link", text, {"network": self.network, "url": url}
        )


@command("github")
class GithubCommandHandler(SocialLinkHandler):
    network = "github"
    label = "GitHub"
    icon = "🐙"
    tagline = "Check out my repositories and contributions!"


@command("linkedin")
class LinkedInCommandHandler(SocialLinkHandler):
    network = "linkedin"
    label = "LinkedIn"
    icon = "💼"
    tagline = "Let's connect professionally!"


@command("instagram")
class InstagramCommandHandler(SocialLinkHandler):
    network = "instagram"
    label = "Instagram"
    icon = "📸"
    tagline = "Follow for updates and photos!"

    @property
    def aliases(self) -> list[str]:
        return ["insta"]
