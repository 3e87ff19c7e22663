from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.constants import SEPARATOR_WIDTH
from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.durations import format_month_year
from portfolio_terminal.core.domain.parsed_command import FlagValue
from portfolio_terminal.core.domain.portfolio import CertificationMetadata


@command("certifications")
class CertificationsCommandHandler(ICommandHandler):
    """Lists certifications, most recent first."""

    @property
    def name(self) -> str:
        return "certifications"

    @property
    def aliases(self) -> list[str]:
        return ["certs", "certificates"]

    @property
    def description(self) -> str:
        return "Display certifications and achievements"

    @property
    def usage(self) -> str:
        return "certifications"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        sections = (
            context.portfolio_data.certifications if context.portfolio_data else []
        )
        if not sections:
            return CommandOutput.text("No certifications data available.")

        now = context.clock()
        records = sorted(
            ((section, section.start_date or now) for section in sections),
            key=lambda record: record[1],
            reverse=True,
        )

        lines = ["", "Certifications & Achievements", "=" * SEPARATOR_WIDTH, ""]
        for index, (section, issued) in enumerate(records):
            metadata = section.metadata
            if not isinstance(metadata, CertificationMetadata):
                metadata = CertificationMetadata()

            lines.append(section.title)
            lines.append(f"Issued by: {metadata.issuer}")
            lines.append(f"Date: {format_month_year(issued, abbreviated=False)}")
            if metadata.credential_id:
                lines.append(f"Credential ID: {metadata.credential_id}")
            if metadata.credential_url:
                lines.append(f"Verify: {metadata.credential_url}")
            if index < len(records) - 1:
                lines.extend(["", "-" * SEPARATOR_WIDTH, ""])

        lines.append("")
        lines.append("=" * SEPARATOR_WIDTH)
        lines.append(f"Total Certifications: {len(records)}")
        return CommandOutput.text("\n".join(lines) + "\n")
