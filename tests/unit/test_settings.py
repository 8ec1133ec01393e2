from __future__ import annotations

import pytest
from pydantic import ValidationError

from portfolio.core.settings import (
    DEFAULT_PRIORITY_KEYWORDS,
    DEFAULT_SPAM_KEYWORDS,
    Settings,
)


def test_defaults_match_the_contact_heuristics() -> None:
    settings = Settings()

    assert settings.spam_keywords == list(DEFAULT_SPAM_KEYWORDS)
    assert settings.priority_keywords == list(DEFAULT_PRIORITY_KEYWORDS)
    assert settings.processing_delay_seconds == pytest.approx(0.1)
    assert settings.processing_timeout_seconds is None


def test_keywords_are_normalized() -> None:
    settings = Settings(spam_keywords=["  Crypto Deal ", "", "WIN BIG"])
    assert settings.spam_keywords == ["crypto deal", "win big"]


def test_keyword_lists_load_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRIORITY_KEYWORDS", '["Wedding", "Launch"]')
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.priority_keywords == ["wedding", "launch"]
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"port": 0}, "port must be between 1 and 65535"),
        ({"processing_delay_seconds": -1}, "processing_delay_seconds must be zero or positive"),
        ({"processing_timeout_seconds": 0}, "processing_timeout_seconds must be positive"),
        ({"priority_keywords": ["  "]}, "priority_keywords must contain at least one"),
        ({"suspicious_name_patterns": ["(unclosed"]}, "is not a valid regex"),
        ({"log_level": "chatty"}, "log_level must be a standard logging level"),
    ],
)
def test_invalid_values_are_rejected(overrides: dict[str, object], message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        Settings(**overrides)  # type: ignore[arg-type]
