"""Application settings and validation helpers."""

import logging
import re

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SPAM_KEYWORDS: tuple[str, ...] = (
    "buy now",
    "click here",
    "free money",
    "urgent",
    "act now",
    "limited time",
    "earn money",
    "work from home",
    "guaranteed",
)
DEFAULT_PRIORITY_KEYWORDS: tuple[str, ...] = (
    "urgent",
    "emergency",
    "asap",
    "immediately",
    "critical",
    "important",
    "priority",
    "deadline",
)
DEFAULT_SUSPICIOUS_NAME_PATTERNS: tuple[str, ...] = (
    r"\b(script|javascript|onclick|onerror)\b",
    r"<[^>]*>",
    r"\b(http|https|www\.)\b",
)


class InvalidLogLevelError(ValueError):
    """Raised when log_level is not a standard logging level name."""

    def __init__(self, value: str) -> None:
        """Embed the rejected level name in the message."""
        super().__init__(f"log_level must be a standard logging level, got {value!r}")


class InvalidPortError(ValueError):
    """Raised when the port is outside the TCP range usable for binding."""

    def __init__(self) -> None:
        """Set a descriptive validation message."""
        super().__init__("port must be between 1 and 65535")


class NegativeDelayError(ValueError):
    """Raised when the simulated processing delay is negative."""

    def __init__(self) -> None:
        """Set a descriptive validation message."""
        super().__init__("processing_delay_seconds must be zero or positive")


class NonPositiveTimeoutError(ValueError):
    """Raised when a processing timeout is set but not positive."""

    def __init__(self) -> None:
        """Set a descriptive validation message."""
        super().__init__("processing_timeout_seconds must be positive when set")


class EmptyKeywordListError(ValueError):
    """Raised when a keyword list is empty or holds only blank entries."""

    def __init__(self, field_name: str) -> None:
        """Embed the offending field name in the message."""
        super().__init__(f"{field_name} must contain at least one non-blank keyword")


class InvalidSuspiciousPatternError(ValueError):
    """Raised when a suspicious name pattern is not a valid regular expression."""

    def __init__(self, pattern: str) -> None:
        """Embed the offending pattern in the message."""
        super().__init__(f"suspicious_name_patterns entry {pattern!r} is not a valid regex")


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    Keyword lists accept JSON arrays, e.g.
    ``SPAM_KEYWORDS='["buy now", "act now"]'``.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Portfolio Site API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 8000

    processing_delay_seconds: float = 0.1
    processing_timeout_seconds: float | None = None

    spam_keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_SPAM_KEYWORDS))
    priority_keywords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PRIORITY_KEYWORDS)
    )
    suspicious_name_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUSPICIOUS_NAME_PATTERNS)
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise InvalidLogLevelError(value)
        return normalized

    @field_validator("port")
    @classmethod
    def _validate_port(cls, value: int) -> int:
        if not (1 <= value <= 65535):
            raise InvalidPortError()
        return value

    @field_validator("processing_delay_seconds")
    @classmethod
    def _validate_delay(cls, value: float) -> float:
        if value < 0:
            raise NegativeDelayError()
        return value

    @field_validator("processing_timeout_seconds")
    @classmethod
    def _validate_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise NonPositiveTimeoutError()
        return value

    @field_validator("spam_keywords", "priority_keywords")
    @classmethod
    def _normalize_keywords(cls, value: list[str], info: ValidationInfo) -> list[str]:
        keywords = [keyword.strip().lower() for keyword in value if keyword.strip()]
        if not keywords:
            raise EmptyKeywordListError(info.field_name or "keywords")
        return keywords

    @field_validator("suspicious_name_patterns")
    @classmethod
    def _validate_patterns(cls, value: list[str]) -> list[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise InvalidSuspiciousPatternError(pattern) from exc
        return value
