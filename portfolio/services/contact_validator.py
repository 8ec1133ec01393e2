"""Validation rules for contact form submissions.

Every field is checked independently so a single pass can report one error per
field. Heuristic scans (suspicious names, spam keywords) only produce warnings
and never block a submission.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from portfolio.contracts.contact_contract import (
    MAX_EMAIL_LENGTH,
    MAX_MESSAGE_LENGTH,
    MAX_NAME_LENGTH,
    MESSAGE_CONTENT_FIELD,
    MIN_MESSAGE_LENGTH,
    MIN_NAME_LENGTH,
    SENDER_EMAIL_FIELD,
    SENDER_NAME_FIELD,
    ContactSubmission,
    FieldError,
    ValidationOutcome,
)
from portfolio.core.settings import DEFAULT_SPAM_KEYWORDS, DEFAULT_SUSPICIOUS_NAME_PATTERNS

if TYPE_CHECKING:
    from collections.abc import Iterable

EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)
SUSPICIOUS_NAME_WARNING: Final[str] = "Name contains unusual characters"
SPAM_MESSAGE_WARNING: Final[str] = "Message may contain spam indicators"


def contains_any_keyword(text: str, keywords: Iterable[str]) -> bool:
    """Return True when the lowercased text contains any keyword as a substring."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


class ContactValidator:
    """Stateless validator for contact submissions.

    Args:
        spam_keywords: Lowercase phrases that flag a message as possible spam.
        suspicious_name_patterns: Regular expressions matched case-insensitively
            against the sender name.
    """

    def __init__(
        self,
        spam_keywords: Iterable[str] = DEFAULT_SPAM_KEYWORDS,
        suspicious_name_patterns: Iterable[str] = DEFAULT_SUSPICIOUS_NAME_PATTERNS,
    ) -> None:
        self._spam_keywords = tuple(keyword.lower() for keyword in spam_keywords)
        self._suspicious_patterns = tuple(
            re.compile(pattern, re.IGNORECASE) for pattern in suspicious_name_patterns
        )

    def validate(self, submission: ContactSubmission) -> ValidationOutcome:
        """Check every field of the submission and collect errors and warnings.

        Args:
            submission: The decoded form data.

        Returns:
            ValidationOutcome: Failure with itemized errors, or success carrying any
            heuristic warnings.
        """
        errors: list[FieldError] = []
        warnings: list[str] = []

        # Lengths count code points of the stripped value, not grapheme clusters.
        name = submission.sender_name.strip()
        if not name:
            errors.append(FieldError.required(SENDER_NAME_FIELD))
        else:
            if len(name) < MIN_NAME_LENGTH:
                errors.append(FieldError.too_short(SENDER_NAME_FIELD, MIN_NAME_LENGTH))
            elif len(name) > MAX_NAME_LENGTH:
                errors.append(FieldError.too_long(SENDER_NAME_FIELD, MAX_NAME_LENGTH))
            if self.is_suspicious_name(submission.sender_name):
                warnings.append(SUSPICIOUS_NAME_WARNING)

        email = submission.sender_email.strip()
        if not email:
            errors.append(FieldError.required(SENDER_EMAIL_FIELD))
        elif len(email) > MAX_EMAIL_LENGTH:
            errors.append(FieldError.too_long(SENDER_EMAIL_FIELD, MAX_EMAIL_LENGTH))
        elif not EMAIL_PATTERN.match(email):
            errors.append(FieldError.invalid_email(SENDER_EMAIL_FIELD))

        message = submission.message_content.strip()
        if not message:
            errors.append(FieldError.required(MESSAGE_CONTENT_FIELD))
        else:
            if len(message) < MIN_MESSAGE_LENGTH:
                errors.append(FieldError.too_short(MESSAGE_CONTENT_FIELD, MIN_MESSAGE_LENGTH))
            elif len(message) > MAX_MESSAGE_LENGTH:
                errors.append(FieldError.too_long(MESSAGE_CONTENT_FIELD, MAX_MESSAGE_LENGTH))
            if self.has_spam_indicators(submission.message_content):
                warnings.append(SPAM_MESSAGE_WARNING)

        if errors:
            return ValidationOutcome.failure(errors)
        if warnings:
            return ValidationOutcome.success_with_warnings(warnings)
        return ValidationOutcome.success()

    def is_suspicious_name(self, name: str) -> bool:
        """Return True if the name looks like markup, script, or a URL."""
        return any(pattern.search(name) for pattern in self._suspicious_patterns)

    def has_spam_indicators(self, message: str) -> bool:
        return contains_any_keyword(message, self._spam_keywords)
