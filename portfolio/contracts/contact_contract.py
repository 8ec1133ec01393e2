"""Data contracts for the contact form.

These models define the wire schema of the contact endpoints. Python attributes
use snake_case while the JSON representation uses the camelCase keys the
browser form posts (``senderName``, ``isSuccessful``, ...).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Validation constants
MIN_NAME_LENGTH: Final[int] = 2
MAX_NAME_LENGTH: Final[int] = 100
MAX_EMAIL_LENGTH: Final[int] = 254
MIN_MESSAGE_LENGTH: Final[int] = 10
MAX_MESSAGE_LENGTH: Final[int] = 2000

SENDER_NAME_FIELD: Final[str] = "senderName"
SENDER_EMAIL_FIELD: Final[str] = "senderEmail"
MESSAGE_CONTENT_FIELD: Final[str] = "messageContent"
FORM_FIELD: Final[str] = "form"

MALFORMED_FORM_MESSAGE: Final[str] = "Invalid form data. Please check your input and try again."
MALFORMED_FORMAT_MESSAGE: Final[str] = "Invalid form data format"
PROCESSING_FAILED_MESSAGE: Final[str] = (
    "Sorry, there was an error processing your message. Please try again."
)

_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorCode(StrEnum):
    """Machine-readable codes attached to field errors."""

    FIELD_REQUIRED = "FIELD_REQUIRED"
    INVALID_EMAIL = "INVALID_EMAIL"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    # Only emitted by the HTTP boundary for undecodable bodies.
    INVALID_FORMAT = "INVALID_FORMAT"


def _display_name(field: str) -> str:
    return field[:1].upper() + field[1:]


class InconsistentOutcomeError(ValueError):
    """Raised when ValidationOutcome.is_valid disagrees with its error list."""

    _MESSAGE = "ValidationOutcome.is_valid must be true exactly when errors is empty"

    def __init__(self) -> None:
        """Initialize with the fixed validation message."""
        super().__init__(self._MESSAGE)


class ContactSubmission(BaseModel):
    """A single contact form submission.

    Attributes:
        sender_name: Name typed by the visitor.
        sender_email: Reply address typed by the visitor.
        message_content: Free-form message body.

    Examples:
        ContactSubmission(
            sender_name="Jane Doe",
            sender_email="jane@example.com",
            message_content="Hello, I would like to get in touch.",
        )
    """

    model_config = ConfigDict(**_WIRE_CONFIG, extra="ignore")

    sender_name: str
    sender_email: str
    message_content: str


class FieldError(BaseModel):
    """One failed validation rule for one form field."""

    model_config = ConfigDict(**_WIRE_CONFIG, frozen=True)

    field: str
    message: str
    code: ErrorCode

    @classmethod
    def required(cls, field: str) -> FieldError:
        return cls(
            field=field,
            message=f"{_display_name(field)} is required",
            code=ErrorCode.FIELD_REQUIRED,
        )

    @classmethod
    def invalid_email(cls, field: str) -> FieldError:
        return cls(
            field=field,
            message="Please enter a valid email address",
            code=ErrorCode.INVALID_EMAIL,
        )

    @classmethod
    def too_short(cls, field: str, min_length: int) -> FieldError:
        return cls(
            field=field,
            message=f"{_display_name(field)} must be at least {min_length} characters long",
            code=ErrorCode.TOO_SHORT,
        )

    @classmethod
    def too_long(cls, field: str, max_length: int) -> FieldError:
        return cls(
            field=field,
            message=f"{_display_name(field)} must be no more than {max_length} characters long",
            code=ErrorCode.TOO_LONG,
        )


class ValidationOutcome(BaseModel):
    """Structured result of validating a submission.

    Warnings are advisory and only ever present on a valid outcome.

    Examples:
        ValidationOutcome.failure([FieldError.required("senderName")])
    """

    model_config = ConfigDict(**_WIRE_CONFIG, frozen=True)

    is_valid: bool
    errors: list[FieldError] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_consistency(self) -> ValidationOutcome:
        """Keep is_valid in lockstep with the error list."""
        if self.is_valid == bool(self.errors):
            raise InconsistentOutcomeError()
        return self

    @classmethod
    def success(cls) -> ValidationOutcome:
        return cls(is_valid=True)

    @classmethod
    def success_with_warnings(cls, warnings: list[str]) -> ValidationOutcome:
        return cls(is_valid=True, warnings=list(warnings))

    @classmethod
    def failure(cls, errors: list[FieldError]) -> ValidationOutcome:
        return cls(is_valid=False, errors=list(errors))

    @classmethod
    def for_malformed_input(cls) -> ValidationOutcome:
        """Outcome returned when the request body cannot be decoded."""
        return cls.failure(
            [
                FieldError(
                    field=FORM_FIELD,
                    message=MALFORMED_FORMAT_MESSAGE,
                    code=ErrorCode.INVALID_FORMAT,
                )
            ]
        )


class SubmissionResult(BaseModel):
    """User-facing response to a contact submission.

    Attributes:
        is_successful: True only when validation passed and delivery succeeded.
        response_message: Text shown to the visitor.
        high_priority: Set when the message matched the priority keywords.
            Internal only; never serialized.
    """

    model_config = ConfigDict(**_WIRE_CONFIG)

    is_successful: bool
    response_message: str
    high_priority: bool = Field(default=False, exclude=True)

    @classmethod
    def thank_you(cls, sender_name: str, *, high_priority: bool = False) -> SubmissionResult:
        return cls(
            is_successful=True,
            response_message=(
                f"Thank you for your message, {sender_name}! I'll get back to you soon."
            ),
            high_priority=high_priority,
        )

    @classmethod
    def processing_failed(cls) -> SubmissionResult:
        return cls(is_successful=False, response_message=PROCESSING_FAILED_MESSAGE)

    @classmethod
    def for_malformed_input(cls) -> SubmissionResult:
        """Result returned when the request body cannot be decoded."""
        return cls(is_successful=False, response_message=MALFORMED_FORM_MESSAGE)
