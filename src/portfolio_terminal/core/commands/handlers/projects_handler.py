from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.constants import SEPARATOR_WIDTH
from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue
from portfolio_terminal.core.domain.portfolio import ProjectMetadata, Section

FEATURED_MARK = " ⭐"


@command("projects")
class ProjectsCommandHandler(ICommandHandler):
    """Handler for the projects command."""

    @property
    def name(self) -> str:
        return "projects"

    @property
    def description(self) -> str:
        return "Display projects, optionally show only featured"

    @property
    def usage(self) -> str:
        return "projects [--featured]"

    @property
    def examples(self) -> list[str]:
        return ["projects --featured     Show only featured projects"]

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        projects = context.portfolio_data.projects if context.portfolio_data else []
        if not projects:
            return CommandOutput.text("No projects data available.")

        current_year = context.clock().year
        featured_only = bool(flags.get("featured"))
        shown = [p for p in projects if p.is_featured] if featured_only else projects

        def year_of(project: Section) -> int:
            return project.start_date.year if project.start_date else current_year

        # sorted() is stable, so projects sharing a year keep snapshot order.
        shown = sorted(shown, key=year_of, reverse=True)

        title = "Featured Projects" if featured_only else "All Projects"
        lines = ["", title, "=" * SEPARATOR_WIDTH, ""]
        for index, project in enumerate(shown):
            metadata = project.metadata
            if not isinstance(metadata, ProjectMetadata):
                metadata = ProjectMetadata()
            mark = FEATURED_MARK if project.is_featured else ""
            underline = len(project.title) + (3 if project.is_featured else 0) + 7

            lines.append(f"{project.title}{mark} ({year_of(project)})")
            lines.append("-" * underline)
            lines.append(project.description)
            lines.append("")
            lines.append(f"Tech Stack: {', '.join(metadata.tech_stack)}")
            if metadata.live_url:
                lines.append(f"Live: {metadata.live_url}")
            if metadata.github_url:
                lines.append(f"GitHub: {metadata.github_url}")
            if index < len(shown) - 1:
                lines.append("")

        lines.append("")
        lines.append("=" * SEPARATOR_WIDTH)
        lines.append(f"Showing {len(shown)} of {len(projects)} projects")
        if not featured_only and any(p.is_featured for p in projects):
            lines.append("")
            lines.append("Tip: Use --featured to show only featured projects")
        return CommandOutput.text("\n".join(lines) + "\n")
