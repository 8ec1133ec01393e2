"""Data contracts for the read-only portfolio content endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CONTENT_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ProfileInfo(BaseModel):
    """Contact details and headline shown at the top of the site."""

    model_config = _CONTENT_CONFIG

    name: str
    title: str
    email: str
    phone: str
    location: str


class Skill(BaseModel):
    model_config = _CONTENT_CONFIG

    name: str
    description: str


class Experience(BaseModel):
    model_config = _CONTENT_CONFIG

    title: str
    company: str
    date: str
    description: str


class Project(BaseModel):
    model_config = _CONTENT_CONFIG

    title: str
    description: str


class AboutText(BaseModel):
    model_config = _CONTENT_CONFIG

    content: str


class PortfolioContent(BaseModel):
    """Complete catalog backing the content endpoints."""

    model_config = _CONTENT_CONFIG

    profile: ProfileInfo
    about: str
    skills: list[Skill] = Field(default_factory=list)
    experiences: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)


class HomeContext(BaseModel):
    """Everything the home page needs in a single payload.

    Examples:
        HomeContext(
            name="Jane Doe",
            title="Engineer",
            email="jane@example.com",
            phone="+1 555 0100",
            location="Lisbon",
            about="Hi!",
            skills=[],
            experiences=[],
            projects=[],
        )
    """

    model_config = _CONTENT_CONFIG

    name: str
    title: str
    email: str
    phone: str
    location: str
    about: str
    skills: list[Skill]
    experiences: list[Experience]
    projects: list[Project]


class ContentSummary(BaseModel):
    """Counts of each content section, used for overviews."""

    model_config = _CONTENT_CONFIG

    skills_count: int
    experiences_count: int
    projects_count: int
    about_text_length: int
    last_updated: datetime
