from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from portfolio_terminal.core.commands.service import CommandService
from portfolio_terminal.core.config.app_config import AppConfig
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.contact import (
    ContactFormData,
    ContactSubmitResult,
)
from portfolio_terminal.core.domain.portfolio import PortfolioData
from portfolio_terminal.core.domain.theme import ThemeState

FIXED_NOW = datetime(2024, 6, 15, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


SECTION_ROWS: list[dict[str, Any]] = [
    {
        "id": "skill-react",
        "type": "skill",
        "title": "React",
        "metadata": {"category": "frontend", "proficiency": 90},
        "display_order": 1,
    },
    {
        "id": "skill-ts",
        "type": "skill",
        "title": "TypeScript",
        "metadata": {"category": "frontend", "proficiency": 85},
        "display_order": 2,
    },
    {
        "id": "skill-python",
        "type": "skill",
        "title": "Python",
        "metadata": {"category": "backend", "proficiency": 80},
        "display_order": 3,
    },
    {
        "id": "skill-docker",
        "type": "skill",
        "title": "Docker",
        "metadata": {"category": "tools", "proficiency": 70},
        "display_order": 4,
    },
    {
        "id": "exp-junior",
        "type": "experience",
        "title": "Junior Engineer",
        "description": "Maintained internal tools.",
        "metadata": {"company": "Initech", "technologies": ["Java"]},
        "start_date": "2019-01-01T00:00:00Z",
        "end_date": "2020-01-01T00:00:00Z",
        "display_order": 2,
    },
    {
        "id": "exp-senior",
        "type": "experience",
        "title": "Senior Engineer",
        "description": "Led the platform team.",
        "metadata": {
            "company": "Acme",
            "location": "Berlin",
            "technologies": ["Python", "React"],
        },
        "start_date": "2021-01-01T00:00:00Z",
        "display_order": 1,
    },
    {
        "id": "project-cli",
        "type": "project",
        "title": "CLI Tool",
        "description": "A command line helper.",
        "metadata": {"techStack": ["Python"]},
        "start_date": "2021-05-01T00:00:00Z",
        "display_order": 1,
    },
    {
        "id": "project-portfolio",
        "type": "project",
        "title": "Portfolio",
        "description": "This very site.",
        "metadata": {
            "techStack": ["Next.js", "TypeScript"],
            "liveUrl": "https://example.com",
            "githubUrl": "https://github.com/example/portfolio",
        },
        "start_date": "2023-03-01T00:00:00Z",
        "is_featured": True,
        "display_order": 2,
    },
    {
        "id": "project-draft",
        "type": "project",
        "title": "Draft",
        "metadata": {},
        "is_visible": False,
    },
    {
        "id": "cert-aws",
        "type": "certification",
        "title": "AWS Solutions Architect",
        "metadata": {
            "issuer": "Amazon",
            "credentialId": "ABC-123",
            "credentialUrl": "https://verify.example.com/abc",
        },
        "start_date": "2022-03-10T00:00:00Z",
    },
    {
        "id": "cert-cka",
        "type": "certification",
        "title": "Certified Kubernetes Administrator",
        "metadata": {"issuer": "CNCF"},
        "start_date": "2023-07-01T00:00:00Z",
    },
]

SETTING_ROWS: list[dict[str, Any]] = [
    {"key": "about", "value": {"text": "I build things for the web."}},
    {
        "key": "contact_info",
        "value": {
            "email": "owner@example.com",
            "socials": {"github": "https://github.com/example"},
        },
    },
]


@pytest.fixture
def portfolio_data() -> PortfolioData:
    return PortfolioData.from_records(SECTION_ROWS, SETTING_ROWS)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig()


class RecordingSubmitter:
    """Contact submitter test double that records what it was given."""

    def __init__(self, result: ContactSubmitResult | None = None) -> None:
        self.result = result or ContactSubmitResult(success=True, message="Thanks!")
        self.calls: list[ContactFormData] = []

    async def __call__(self, data: ContactFormData) -> ContactSubmitResult:
        self.calls.append(data)
        return self.result


@pytest.fixture
def submitter() -> RecordingSubmitter:
    return RecordingSubmitter()


@pytest.fixture
def command_service(app_config: AppConfig, submitter: RecordingSubmitter) -> CommandService:
    return CommandService.create_default(app_config, contact_submitter=submitter)


@pytest.fixture
def make_context(
    portfolio_data: PortfolioData,
) -> Callable[..., ExecutionContext]:
    def factory(**overrides: Any) -> ExecutionContext:
        values: dict[str, Any] = {
            "theme_state": ThemeState(),
            "history": [],
            "portfolio_data": portfolio_data,
            "clock": fixed_clock,
        }
        values.update(overrides)
        return ExecutionContext(**values)

    return factory
