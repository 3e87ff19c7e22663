"""
Skills command handler.

Renders skills grouped by category with a proficiency bar per skill.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.constants import (
    PROFICIENCY_BAR_EMPTY,
    PROFICIENCY_BAR_FILLED,
    PROFICIENCY_BAR_WIDTH,
    SkillCategory,
)
from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue
from portfolio_terminal.core.domain.portfolio import Section, SkillMetadata

SKILL_NAME_WIDTH = 20

# Checked in this order; the first flag present wins.
FILTER_FLAGS = (SkillCategory.FRONTEND, SkillCategory.BACKEND, SkillCategory.TOOLS)


def proficiency_bar(proficiency: int) -> str:
    """
    >>> proficiency_bar(50)
    '[██████████░░░░░░░░░░]'
    """
    filled = round(proficiency / 100 * PROFICIENCY_BAR_WIDTH)
    empty = PROFICIENCY_BAR_WIDTH - filled
    return f"[{PROFICIENCY_BAR_FILLED * filled}{PROFICIENCY_BAR_EMPTY * empty}]"


def selected_category(flags: Mapping[str, FlagValue]) -> SkillCategory | None:
    for category in FILTER_FLAGS:
        if flags.get(category.value):
            return category
    return None


def _metadata(section: Section) -> SkillMetadata:
    metadata = section.metadata
    return metadata if isinstance(metadata, SkillMetadata) else SkillMetadata()


@command("skills")
class SkillsCommandHandler(ICommandHandler):
    """Handler for the skills command."""

    @property
    def name(self) -> str:
        return "skills"

    @property
    def description(self) -> str:
        return "Display skills, optionally filtered by category"

    @property
    def usage(self) -> str:
        return "skills [--frontend|--backend|--tools]"

    @property
    def examples(self) -> list[str]:
        return ["skills --frontend       Show only frontend skills"]

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        skills = context.portfolio_data.skills if context.portfolio_data else []
        if not skills:
            return CommandOutput.text("No skills data available.")

        category = selected_category(flags)
        if category is not None:
            skills = [s for s in skills if _metadata(s).category == category.value]

        grouped: dict[str, list[Section]] = {}
        for skill in skills:
            grouped.setdefault(_metadata(skill).category, []).append(skill)

        title = (
            f"Skills - {category.value.capitalize()}"
            if category is not None
            else "Skills - All Categories"
        )
        lines = ["", title, "=" * len(title), ""]
        for group_name, members in grouped.items():
            lines.append(f"{group_name.capitalize()}:")
            for skill in sorted(members, key=lambda s: -_metadata(s).proficiency):
                proficiency = _metadata(skill).proficiency
                lines.append(
                    f"  {skill.title.ljust(SKILL_NAME_WIDTH)} "
                    f"{proficiency_bar(proficiency)} {proficiency}%"
                )
            lines.append("")

        lines.append(f"Total Skills: {len(skills)}")
        if category is None:
            lines.append("")
            lines.append(
                "Tip: Use --frontend, --backend, or --tools to filter by category"
            )
        return CommandOutput.text("\n".join(lines) + "\n")
