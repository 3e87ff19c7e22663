from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue


@command("resume")
class ResumeCommandHandler(ICommandHandler):
    """Announces the resume download; the caller performs the transfer."""

    @property
    def name(self) -> str:
        return "resume"

    @property
    def aliases(self) -> list[str]:
        return ["cv"]

    @property
    def description(self) -> str:
        return "Download resume as PDF"

    @property
    def usage(self) -> str:
        return "resume"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        resume = self.config.resume
        text = "\n".join(
            [
                "📄 Generating resume PDF...",
                "Your resume will download shortly.",
                f"If the download doesn't start automatically, get it from {resume.url}",
            ]
        )
        return CommandOutput.structured(
            "download", text, {"url": resume.url, "filename": resume.filename}
        )
