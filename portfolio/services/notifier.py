"""Delivery step run after a submission passes validation."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from portfolio.contracts.contact_contract import ContactSubmission

logger = logging.getLogger(__name__)


class SubmissionNotifier(Protocol):
    """Hands a validated submission to whatever stores or forwards it."""

    async def deliver(self, submission: ContactSubmission) -> None: ...


class DelayedNotifier:
    """Stand-in delivery that only waits for a fixed interval.

    No message is stored or sent; the delay marks where an email or database
    call belongs.
    """

    def __init__(self, delay_seconds: float = 0.1) -> None:
        """Initialize the notifier.

        Args:
            delay_seconds: Non-blocking pause applied to every delivery.
        """
        self._delay_seconds = delay_seconds

    async def deliver(self, submission: ContactSubmission) -> None:
        logger.debug(
            "Delivering contact submission from %s (%d characters)",
            submission.sender_name,
            len(submission.message_content),
        )
        await asyncio.sleep(self._delay_seconds)
