"""
Portfolio snapshot models.

The snapshot is supplied by an external data provider and is read-only for
the interpreter. Models accept both the camelCase keys served by the
portfolio API and the snake_case column names of the underlying store.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from portfolio_terminal.constants import SectionType
from portfolio_terminal.core.domain.model_bases import DomainModel


class PortfolioModel(DomainModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SkillMetadata(PortfolioModel):
    category: Literal["frontend", "backend", "tools", "other"] = "other"
    proficiency: int = Field(default=0, ge=0, le=100)
    icon: str | None = None


class ExperienceMetadata(PortfolioModel):
    company: str = ""
    location: str | None = None
    technologies: list[str] = Field(default_factory=list)


class ProjectMetadata(PortfolioModel):
    tech_stack: list[str] = Field(default_factory=list)
    live_url: str | None = None
    github_url: str | None = None
    tags: list[str] = Field(default_factory=list)


class CertificationMetadata(PortfolioModel):
    issuer: str = ""
    credential_id: str | None = None
    credential_url: str | None = None


class AchievementMetadata(PortfolioModel):
    icon: str = ""
    category: str = ""


SectionMetadata = (
    SkillMetadata
    | ExperienceMetadata
    | ProjectMetadata
    | CertificationMetadata
    | AchievementMetadata
)

_METADATA_MODELS: dict[SectionType, type[PortfolioModel]] = {
    SectionType.SKILL: SkillMetadata,
    SectionType.EXPERIENCE: ExperienceMetadata,
    SectionType.PROJECT: ProjectMetadata,
    SectionType.CERTIFICATION: CertificationMetadata,
    SectionType.ACHIEVEMENT: AchievementMetadata,
}


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so that all snapshot dates compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Section(PortfolioModel):
    id: str
    type: SectionType
    title: str
    description: str = ""
    metadata: SectionMetadata
    image_url: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    display_order: int = 0
    is_featured: bool = False
    is_visible: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_metadata(cls, values: Any) -> Any:
        """Validate the metadata payload into the model matching the section type."""
        if not isinstance(values, Mapping):
            return values

        try:
            section_type = SectionType(values.get("type"))
        except ValueError:
            # Let field validation report the bad type.
            return values

        metadata_model = _METADATA_MODELS[section_type]
        metadata = values.get("metadata")
        if metadata is None:
            metadata = {}
        if isinstance(metadata, Mapping):
            values = {**values, "metadata": metadata_model.model_validate(metadata)}
        return values

    @field_validator("start_date", "end_date", "created_at", "updated_at")
    @classmethod
    def _normalize_timezone(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class ContactInfo(PortfolioModel):
    email: str = ""
    socials: dict[str, str] = Field(default_factory=dict)


class PortfolioData(PortfolioModel):
    about: str = ""
    skills: list[Section] = Field(default_factory=list)
    experiences: list[Section] = Field(default_factory=list)
    projects: list[Section] = Field(default_factory=list)
    certifications: list[Section] = Field(default_factory=list)
    achievements: list[Section] = Field(default_factory=list)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)

    @classmethod
    def from_records(
        cls,
        sections: Iterable[Mapping[str, Any]],
        settings: Iterable[Mapping[str, Any]] = (),
    ) -> PortfolioData:
        """Build a snapshot from raw store rows.

        Mirrors what the portfolio API serves: only visible sections, ordered
        by ``display_order`` and grouped by type. ``settings`` rows are
        ``{"key": ..., "value": ...}`` pairs; the ``about`` value carries a
        ``text`` entry and ``contact_info`` is a ``ContactInfo`` document.
        """
        parsed = [Section.model_validate(row) for row in sections]
        visible = sorted(
            (section for section in parsed if section.is_visible),
            key=lambda section: section.display_order,
        )

        settings_by_key = {row.get("key"): row.get("value") for row in settings}
        about_value = settings_by_key.get("about") or {}
        about = about_value.get("text", "") if isinstance(about_value, Mapping) else ""
        contact_value = settings_by_key.get("contact_info") or {}

        def of_type(section_type: SectionType) -> list[Section]:
            return [section for section in visible if section.type is section_type]

        return cls(
            about=about,
            skills=of_type(SectionType.SKILL),
            experiences=of_type(SectionType.EXPERIENCE),
            projects=of_type(SectionType.PROJECT),
            certifications=of_type(SectionType.CERTIFICATION),
            achievements=of_type(SectionType.ACHIEVEMENT),
            contact_info=ContactInfo.model_validate(contact_value),
        )
