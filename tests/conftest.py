"""
Test Fixtures Module.

This module is the Composition Root for the test suite. It builds the
application through the same factory used in production, swapping only the
delivery step so that tests never wait on the simulated processing delay.

Two client flavours are provided:
1. `client`: synchronous `TestClient` for straightforward route tests.
2. `async_client`: `httpx.AsyncClient` over `httpx.ASGITransport`, run in-process
   without network overhead.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import TYPE_CHECKING

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient

from portfolio.contracts.contact_contract import ContactSubmission
from portfolio.core.factory import create_app
from portfolio.core.settings import Settings
from portfolio.services.contact_validator import ContactValidator
from tests.fakes import FailingNotifier, RecordingNotifier

if TYPE_CHECKING:
    from portfolio.services.notifier import SubmissionNotifier


@pytest.fixture
def valid_submission() -> ContactSubmission:
    return ContactSubmission(
        sender_name="Jane Doe",
        sender_email="jane@example.com",
        message_content="Hello, I would like to get in touch about a project.",
    )


@pytest.fixture
def validator() -> ContactValidator:
    return ContactValidator()


@pytest.fixture
def recording_notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def test_settings() -> Settings:
    """Provide a Settings instance with the processing delay disabled."""
    return Settings(processing_delay_seconds=0)


def _build_app(settings: Settings, notifier: SubmissionNotifier) -> FastAPI:
    return create_app(settings, notifier=notifier)


@pytest.fixture
def test_app(test_settings: Settings, recording_notifier: RecordingNotifier) -> FastAPI:
    """Create a FastAPI application instance for testing."""
    return _build_app(test_settings, recording_notifier)


@pytest.fixture
def client(test_app: FastAPI) -> Iterator[TestClient]:
    """Yield a synchronous TestClient for basic route testing."""
    with TestClient(test_app) as c:
        yield c


@pytest.fixture
def failing_client(test_settings: Settings) -> Iterator[TestClient]:
    """Yield a TestClient whose delivery step always fails."""
    with TestClient(_build_app(test_settings, FailingNotifier())) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(test_app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Yield an async client for integration tests (in-process)."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac
