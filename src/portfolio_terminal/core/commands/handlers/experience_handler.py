"""
Experience command handler.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime

from portfolio_terminal.constants import SEPARATOR_WIDTH
from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.durations import (
    format_month_year,
    format_months,
    months_between,
)
from portfolio_terminal.core.domain.parsed_command import FlagValue
from portfolio_terminal.core.domain.portfolio import ExperienceMetadata

DEFAULT_LOCATION = "Remote"


def format_date_range(start: datetime, end: datetime | None) -> str:
    end_text = format_month_year(end) if end is not None else "Present"
    return f"{format_month_year(start)} - {end_text}"


@command("experience")
class ExperienceCommandHandler(ICommandHandler):
    """Lists work history, most recent first, with per-role and total durations."""

    @property
    def name(self) -> str:
        return "experience"

    @property
    def aliases(self) -> list[str]:
        return ["exp", "work"]

    @property
    def description(self) -> str:
        return "Display work history in chronological order"

    @property
    def usage(self) -> str:
        return "experience"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        sections = context.portfolio_data.experiences if context.portfolio_data else []
        if not sections:
            return CommandOutput.text("No experience data available.")

        now = context.clock()
        records = sorted(
            ((section, section.start_date or now) for section in sections),
            key=lambda record: record[1],
            reverse=True,
        )

        lines = ["", "Work Experience", "=" * SEPARATOR_WIDTH, ""]
        total_months = 0
        for index, (section, start) in enumerate(records):
            metadata = section.metadata
            if not isinstance(metadata, ExperienceMetadata):
                metadata = ExperienceMetadata()
            months = months_between(start, section.end_date or now)
            total_months += months

            lines.append(section.title)
            lines.append(f"{metadata.company} • {metadata.location or DEFAULT_LOCATION}")
            lines.append(
                f"{format_date_range(start, section.end_date)} ({format_months(months)})"
            )
            lines.append("")
            lines.append(section.description)
            lines.append("")
            lines.append(f"Technologies: {', '.join(metadata.technologies)}")
            if index < len(records) - 1:
                lines.extend(["", "-" * SEPARATOR_WIDTH, ""])

        lines.append("")
        lines.append("=" * SEPARATOR_WIDTH)
        lines.append(f"Total Experience: {format_months(total_months)}")
        return CommandOutput.text("\n".join(lines) + "\n")
