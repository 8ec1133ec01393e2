from __future__ import annotations

import asyncio
import logging

import pytest

from portfolio.contracts.contact_contract import (
    PROCESSING_FAILED_MESSAGE,
    ContactSubmission,
)
from portfolio.services.contact_validator import ContactValidator
from portfolio.services.notifier import DelayedNotifier
from portfolio.services.submission_processor import (
    CORRECTION_HEADER,
    SubmissionProcessor,
)
from tests.fakes import FailingNotifier, RecordingNotifier

pytestmark = pytest.mark.asyncio


class SlowNotifier:
    async def deliver(self, submission: ContactSubmission) -> None:
        await asyncio.sleep(5)


def _processor(notifier: object, **kwargs: object) -> SubmissionProcessor:
    return SubmissionProcessor(ContactValidator(), notifier, **kwargs)  # type: ignore[arg-type]


async def test_valid_submission_is_thanked_and_delivered(
    valid_submission: ContactSubmission, recording_notifier: RecordingNotifier
) -> None:
    result = await _processor(recording_notifier).process(valid_submission)

    assert result.is_successful
    assert result.response_message == (
        "Thank you for your message, Jane Doe! I'll get back to you soon."
    )
    assert recording_notifier.delivered == [valid_submission]


async def test_single_error_message_is_used_verbatim(
    recording_notifier: RecordingNotifier,
) -> None:
    submission = ContactSubmission(
        sender_name="Jane Doe",
        sender_email="not-an-email",
        message_content="Hello there, friend.",
    )

    result = await _processor(recording_notifier).process(submission)

    assert not result.is_successful
    assert result.response_message == "Please enter a valid email address"
    assert recording_notifier.delivered == []


async def test_multiple_errors_become_a_bulleted_list(
    recording_notifier: RecordingNotifier,
) -> None:
    submission = ContactSubmission(sender_name="", sender_email="bad", message_content="")

    result = await _processor(recording_notifier).process(submission)

    assert not result.is_successful
    lines = result.response_message.split("\n")
    assert lines[0] == CORRECTION_HEADER
    assert lines[1:] == [
        "• SenderName is required",
        "• Please enter a valid email address",
        "• MessageContent is required",
    ]


async def test_delivery_failure_returns_generic_message(
    valid_submission: ContactSubmission, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR, logger="portfolio.services.submission_processor"):
        result = await _processor(FailingNotifier()).process(valid_submission)

    assert not result.is_successful
    assert result.response_message == PROCESSING_FAILED_MESSAGE
    assert "SMTP relay unavailable" not in result.response_message
    assert any(record.exc_info for record in caplog.records)


async def test_delivery_timeout_is_a_processing_failure(
    valid_submission: ContactSubmission,
) -> None:
    processor = _processor(SlowNotifier(), timeout_seconds=0.01)

    result = await processor.process(valid_submission)

    assert not result.is_successful
    assert result.response_message == PROCESSING_FAILED_MESSAGE


async def test_priority_is_flagged_without_changing_the_response(
    recording_notifier: RecordingNotifier,
) -> None:
    submission = ContactSubmission(
        sender_name="Jane Doe",
        sender_email="jane@example.com",
        message_content="This is IMPORTANT, we have a deadline on Friday.",
    )

    result = await _processor(recording_notifier).process(submission)

    assert result.is_successful
    assert result.high_priority
    assert result.response_message.startswith("Thank you for your message, Jane Doe!")
    assert "high_priority" not in result.model_dump(by_alias=True)
    assert "highPriority" not in result.model_dump(by_alias=True)


async def test_regular_message_is_not_high_priority(
    valid_submission: ContactSubmission, recording_notifier: RecordingNotifier
) -> None:
    result = await _processor(recording_notifier).process(valid_submission)
    assert not result.high_priority


async def test_custom_priority_keywords(recording_notifier: RecordingNotifier) -> None:
    processor = _processor(recording_notifier, priority_keywords=["Wedding"])

    assert processor.is_high_priority("Could you shoot our wedding photos?")
    assert not processor.is_high_priority("This is urgent")


async def test_delayed_notifier_completes(valid_submission: ContactSubmission) -> None:
    result = await _processor(DelayedNotifier(delay_seconds=0)).process(valid_submission)
    assert result.is_successful


async def test_concurrent_submissions_are_independent(
    recording_notifier: RecordingNotifier,
) -> None:
    processor = _processor(recording_notifier)
    submissions = [
        ContactSubmission(
            sender_name=f"Sender {index}",
            sender_email=f"sender{index}@example.com",
            message_content="Hello, I would like to get in touch.",
        )
        for index in range(5)
    ]

    results = await asyncio.gather(*(processor.process(item) for item in submissions))

    assert [result.response_message for result in results] == [
        f"Thank you for your message, Sender {index}! I'll get back to you soon."
        for index in range(5)
    ]
    assert len(recording_notifier.delivered) == 5
