"""Read-only access to the portfolio content catalog."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

from portfolio.contracts.content_contract import (
    ContentSummary,
    Experience,
    HomeContext,
    PortfolioContent,
    ProfileInfo,
    Project,
    Skill,
)
from portfolio.services.sample_content import DEFAULT_CONTENT


class ContentUnavailableError(RuntimeError):
    """Raised when a catalog section is missing data it must carry."""

    def __init__(self, section: str, reason: str) -> None:
        """Build a message naming the section and the missing data."""
        self.section = section
        super().__init__(f"Failed to retrieve {section}: {reason}")


def _require(value: str, section: str, reason: str) -> None:
    if not value.strip():
        raise ContentUnavailableError(section, reason)


class ContentCatalog:
    """Serves the profile, about text, skills, experiences, and projects.

    Lookups are async so callers can gather them concurrently and so a
    database-backed catalog could replace this one without changing routes.
    """

    def __init__(self, content: PortfolioContent = DEFAULT_CONTENT) -> None:
        self._content = content

    async def get_profile(self) -> ProfileInfo:
        _require(self._content.profile.name, "profile", "Profile name cannot be empty")
        return self._content.profile

    async def get_about_text(self) -> str:
        _require(self._content.about, "about text", "About text is empty")
        return self._content.about.strip()

    async def get_skills(self) -> list[Skill]:
        for skill in self._content.skills:
            _require(skill.name, "skills", "Skill name cannot be empty")
            _require(skill.description, "skills", "Skill description cannot be empty")
        return list(self._content.skills)

    async def get_experiences(self) -> list[Experience]:
        for experience in self._content.experiences:
            _require(experience.title, "experiences", "Experience job title cannot be empty")
            _require(experience.company, "experiences", "Experience company name cannot be empty")
        return list(self._content.experiences)

    async def get_projects(self) -> list[Project]:
        for project in self._content.projects:
            _require(project.title, "projects", "Project title cannot be empty")
            _require(project.description, "projects", "Project description cannot be empty")
        return list(self._content.projects)

    async def get_home_context(self) -> HomeContext:
        """Assemble the full home page payload from every catalog section."""
        profile, about, skills, experiences, projects = await asyncio.gather(
            self.get_profile(),
            self.get_about_text(),
            self.get_skills(),
            self.get_experiences(),
            self.get_projects(),
        )
        return HomeContext(
            name=profile.name,
            title=profile.title,
            email=profile.email,
            phone=profile.phone,
            location=profile.location,
            about=about,
            skills=skills,
            experiences=experiences,
            projects=projects,
        )

    async def get_summary(self) -> ContentSummary:
        skills, experiences, projects, about = await asyncio.gather(
            self.get_skills(),
            self.get_experiences(),
            self.get_projects(),
            self.get_about_text(),
        )
        return ContentSummary(
            skills_count=len(skills),
            experiences_count=len(experiences),
            projects_count=len(projects),
            about_text_length=len(about),
            last_updated=datetime.now(UTC),
        )
