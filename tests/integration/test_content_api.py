from __future__ import annotations

from collections.abc import Iterator

import pytest
import pytest_check as check
from fastapi.testclient import TestClient

from portfolio.contracts.content_contract import PortfolioContent, Project
from portfolio.core.factory import create_app
from portfolio.core.settings import Settings
from portfolio.services.content_service import ContentCatalog
from portfolio.services.sample_content import DEFAULT_CONTENT

pytestmark = pytest.mark.integration


@pytest.fixture
def broken_client(test_settings: Settings) -> Iterator[TestClient]:
    content = PortfolioContent.model_validate(
        {
            **DEFAULT_CONTENT.model_dump(),
            "projects": [Project(title="", description="Untitled")],
        }
    )
    app = create_app(test_settings, catalog=ContentCatalog(content))
    with TestClient(app) as c:
        yield c


def test_profile(client: TestClient) -> None:
    response = client.get("/api/v1/profile")

    assert response.status_code == 200
    assert response.json() == {
        "name": "Franco Bellu",
        "title": "Professional • Innovator • Creative Thinker",
        "email": "franco.bellu@email.com",
        "phone": "+1 (555) 123-4567",
        "location": "Your City, Country",
    }


def test_profile_context_includes_every_section(client: TestClient) -> None:
    payload = client.get("/api/v1/profile/context").json()

    check.equal(payload["name"], "Franco Bellu")
    check.is_true(payload["about"].startswith("Welcome to my personal website!"))
    check.equal(len(payload["skills"]), 4)
    check.equal(len(payload["experiences"]), 2)
    check.equal(len(payload["projects"]), 3)


def test_skills_are_listed_in_catalog_order(client: TestClient) -> None:
    response = client.get("/api/v1/skills")

    assert response.status_code == 200
    assert [skill["name"] for skill in response.json()] == [
        "Leadership",
        "Communication",
        "Problem Solving",
        "Innovation",
    ]


def test_experiences_and_projects(client: TestClient) -> None:
    experiences = client.get("/api/v1/experiences").json()
    projects = client.get("/api/v1/projects").json()

    assert experiences[0]["date"] == "2020 - Present"
    assert set(experiences[0]) == {"title", "company", "date", "description"}
    assert [project["title"] for project in projects][0] == "Featured Project"


def test_about_is_trimmed(client: TestClient) -> None:
    content = client.get("/api/v1/about").json()["content"]

    assert content == content.strip()
    assert content.startswith("Welcome")


def test_content_summary_uses_camel_case(client: TestClient) -> None:
    payload = client.get("/api/v1/content/summary").json()

    assert payload["skillsCount"] == 4
    assert payload["experiencesCount"] == 2
    assert payload["projectsCount"] == 3
    assert payload["aboutTextLength"] == len(DEFAULT_CONTENT.about.strip())
    assert "lastUpdated" in payload


def test_missing_content_maps_to_404_envelope(broken_client: TestClient) -> None:
    response = broken_client.get("/api/v1/projects")

    assert response.status_code == 404
    assert response.json() == {
        "error": True,
        "reason": "Failed to retrieve projects: Project title cannot be empty",
        "code": "DATA_NOT_FOUND",
    }


def test_other_sections_survive_broken_projects(broken_client: TestClient) -> None:
    assert broken_client.get("/api/v1/skills").status_code == 200
    assert broken_client.get("/api/v1/profile/context").status_code == 404


def test_unknown_api_path_returns_envelope(client: TestClient) -> None:
    response = client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {
        "error": True,
        "reason": "Endpoint not found",
        "code": "NOT_FOUND",
    }


def test_unknown_path_outside_api_keeps_default_body(client: TestClient) -> None:
    response = client.get("/nowhere")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}
