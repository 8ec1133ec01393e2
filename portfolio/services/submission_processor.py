"""Service layer orchestrating contact form submissions.

The processor validates a submission, turns validation failures into a
user-facing message, and otherwise runs the delivery step. Failures inside
delivery never escape: they are logged and reported with a generic message.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from portfolio.contracts.contact_contract import SubmissionResult
from portfolio.core.settings import DEFAULT_PRIORITY_KEYWORDS
from portfolio.services.contact_validator import contains_any_keyword

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from portfolio.contracts.contact_contract import ContactSubmission, FieldError
    from portfolio.services.contact_validator import ContactValidator
    from portfolio.services.notifier import SubmissionNotifier

logger = logging.getLogger(__name__)

CORRECTION_HEADER = "Please correct the following issues:"
FALLBACK_CORRECTION_MESSAGE = "Please check your input and try again."


def format_validation_errors(errors: Sequence[FieldError]) -> str:
    """Render validation errors as a single message for the visitor.

    One error is returned verbatim; several become a bulleted list under a
    header line.
    """
    if not errors:
        return FALLBACK_CORRECTION_MESSAGE
    if len(errors) == 1:
        return errors[0].message
    bullets = "\n".join(f"• {error.message}" for error in errors)
    return f"{CORRECTION_HEADER}\n{bullets}"


class SubmissionProcessor:
    """Runs the validate -> deliver -> respond flow for one submission at a time.

    Holds no per-request state, so a single instance serves concurrent requests.
    """

    def __init__(
        self,
        validator: ContactValidator,
        notifier: SubmissionNotifier,
        priority_keywords: Iterable[str] = DEFAULT_PRIORITY_KEYWORDS,
        timeout_seconds: float | None = None,
    ) -> None:
        """Wire the processor to its collaborators.

        Args:
            validator: Validates submissions before delivery.
            notifier: Delivery step run for valid submissions.
            priority_keywords: Phrases marking a message as high priority.
            timeout_seconds: Upper bound on delivery; None waits indefinitely.
        """
        self._validator = validator
        self._notifier = notifier
        self._priority_keywords = tuple(keyword.lower() for keyword in priority_keywords)
        self._timeout_seconds = timeout_seconds

    async def process(self, submission: ContactSubmission) -> SubmissionResult:
        """Validate and deliver a submission.

        Args:
            submission: The decoded form data.

        Returns:
            SubmissionResult: Thank-you result on success; otherwise a failure
            carrying either the validation messages or a generic error text.
        """
        outcome = self._validator.validate(submission)
        if not outcome.is_valid:
            logger.warning(
                "Contact form validation failed for %s: %s",
                submission.sender_name,
                [error.message for error in outcome.errors],
            )
            return SubmissionResult(
                is_successful=False,
                response_message=format_validation_errors(outcome.errors),
            )

        try:
            await self._deliver(submission)
        except Exception:
            logger.exception("Contact form processing failed for %s", submission.sender_name)
            return SubmissionResult.processing_failed()

        high_priority = self.is_high_priority(submission.message_content)
        if high_priority:
            logger.info("High priority contact form from %s", submission.sender_name)

        logger.info("Contact form processed successfully for %s", submission.sender_name)
        return SubmissionResult.thank_you(submission.sender_name, high_priority=high_priority)

    def is_high_priority(self, message: str) -> bool:
        return contains_any_keyword(message, self._priority_keywords)

    async def _deliver(self, submission: ContactSubmission) -> None:
        if self._timeout_seconds is None:
            await self._notifier.deliver(submission)
            return
        await asyncio.wait_for(self._notifier.deliver(submission), timeout=self._timeout_seconds)
