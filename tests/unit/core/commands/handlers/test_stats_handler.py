from __future__ import annotations

import pytest

from portfolio_terminal.core.commands.handlers.stats_handler import calculate_stats
from portfolio_terminal.core.domain.portfolio import PortfolioData

from tests.conftest import FIXED_NOW


def test_calculate_stats(portfolio_data: PortfolioData) -> None:
    stats = calculate_stats(portfolio_data, FIXED_NOW)

    assert stats.skills == 4
    assert stats.experiences == 2
    assert stats.projects == 2
    assert stats.featured_projects == 1
    assert stats.certifications == 2
    assert stats.total_years_experience == 4
    assert stats.skill_distribution == {"frontend": 2, "backend": 1, "tools": 1}


def test_roles_without_start_date_are_skipped() -> None:
    data = PortfolioData.from_records(
        [
            {"id": "a", "type": "experience", "title": "Undated", "metadata": {}},
            {
                "id": "b",
                "type": "experience",
                "title": "Dated",
                "metadata": {},
                "start_date": "2020-01-01T00:00:00Z",
                "end_date": "2022-02-01T00:00:00Z",
            },
        ]
    )
    stats = calculate_stats(data, FIXED_NOW)
    assert stats.experiences == 2
    assert stats.total_years_experience == 2


def test_placeholder_stats_without_data() -> None:
    stats = calculate_stats(None, FIXED_NOW)
    assert stats.skills == stats.projects == stats.total_years_experience == 0
    assert stats.lines_of_code == 150_000
    assert stats.coffee_consumed == 2_847


@pytest.mark.asyncio
async def test_stats_output(run_command) -> None:
    text = (await run_command("statistics")).render_text()

    assert "PORTFOLIO STATISTICS" in text
    assert "├─ Skills: 4" in text
    assert "├─ Featured Projects: 1" in text
    assert "└─ Total Experience: 4+ years" in text
    assert "~150,000" in text
    assert "2,847 cups" in text
    assert "├─ Frontend: 2 skills" in text
    assert "└─ Tools & DevOps: 1 skills" in text


@pytest.mark.asyncio
async def test_stats_output_without_data(run_command) -> None:
    output = await run_command("stats", portfolio_data=None)
    assert output.success is True
    assert "├─ Skills: 0" in output.render_text()


def test_overlapping_roles_are_summed() -> None:
    role = {
        "type": "experience",
        "title": "Engineer",
        "metadata": {},
        "start_date": "2020-01-01T00:00:00Z",
        "end_date": "2021-01-02T00:00:00Z",
    }
    data = PortfolioData.from_records([{**role, "id": "a"}, {**role, "id": "b"}])
    stats = calculate_stats(data, FIXED_NOW)
    assert stats.total_years_experience == 2


@pytest.mark.asyncio
async def test_stats_highlights(run_command) -> None:
    text = (await run_command("stats")).render_text()
    assert "   • 1 featured projects showcasing best work" in text
    assert "   • 2 professional certifications" in text
    assert "   • Full-stack expertise across modern tech stack" in text
    assert "   • Focus on performance, scalability, and user experience" in text
