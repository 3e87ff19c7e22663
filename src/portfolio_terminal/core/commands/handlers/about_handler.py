from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue

BANNER_WIDTH = 59

DEFAULT_BIO = """\
I'm a passionate full-stack developer with a love for building elegant,
performant, and user-friendly applications. My journey in software
development has been driven by curiosity and a desire to solve real-world
problems through code.

🎯 What I Do:
   • Design and develop modern web applications
   • Build scalable backend systems and APIs
   • Create intuitive user interfaces
   • Optimize performance and user experience

💡 Philosophy:
   I believe in writing clean, maintainable code and I'm always learning
   new technologies. Collaboration and continuous improvement are at the
   core of my work ethic.

🚀 Current Focus:
   • Exploring cutting-edge web technologies
   • Contributing to open-source projects
   • Building tools that make developers' lives easier"""

FOOTER = """\
📫 Let's Connect:
   Type 'contact' to get in touch or 'resume' to download my CV.
   Type 'skills' to see my technical expertise.
   Type 'experience' to view my work history.
   Type 'projects' to explore what I've built."""


def _banner(title: str) -> str:
    return "\n".join(
        [
            f"╔{'═' * BANNER_WIDTH}╗",
            f"║{title.center(BANNER_WIDTH)}║",
            f"╚{'═' * BANNER_WIDTH}╝",
        ]
    )


@command("about")
class AboutCommandHandler(ICommandHandler):
    """Shows the owner's bio, preferring the text served with the portfolio."""

    @property
    def name(self) -> str:
        return "about"

    @property
    def description(self) -> str:
        return "Display biographical information"

    @property
    def usage(self) -> str:
        return "about"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        owner = self.config.owner_name
        portfolio_about = (
            context.portfolio_data.about.strip() if context.portfolio_data else ""
        )
        body = portfolio_about or DEFAULT_BIO

        text = "\n\n".join(
            [
                _banner(f"ABOUT {owner.upper()}"),
                f"👋 Hello! I'm {owner}",
                body,
                FOOTER,
            ]
        )
        return CommandOutput.text(f"\n{text}\n")
