"""Contact form routes: submission, validate-only feedback, and health."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio.contracts.contact_contract import (
    ContactSubmission,
    SubmissionResult,
    ValidationOutcome,
)
from portfolio.contracts.health_contract import ServiceHealth
from portfolio.core.dependencies import (
    get_contact_validator,
    get_health_monitor,
    get_submission_processor,
)
from portfolio.core.routing import FormRoute
from portfolio.services.contact_validator import ContactValidator
from portfolio.services.health_service import HealthMonitor
from portfolio.services.submission_processor import SubmissionProcessor

logger = logging.getLogger(__name__)

router = APIRouter(route_class=FormRoute)
health_router = APIRouter()


@router.post(
    "/contact",
    response_model=SubmissionResult,
    summary="Submit the contact form",
    description=(
        "Validates the submission and, when it passes, hands it to the delivery step. "
        "Always answers HTTP 200; failures are reported through isSuccessful."
    ),
)
async def submit_contact(
    submission: ContactSubmission,
    processor: Annotated[SubmissionProcessor, Depends(get_submission_processor)],
) -> SubmissionResult:
    """Process a contact submission end to end."""
    logger.info(
        "Contact form received from %s (%d characters)",
        submission.sender_name,
        len(submission.message_content),
    )
    return await processor.process(submission)


@router.post(
    "/contact/validate",
    response_model=ValidationOutcome,
    summary="Validate the contact form without submitting",
    description="Returns itemized errors and warnings for client-side feedback.",
)
def validate_contact(
    submission: ContactSubmission,
    validator: Annotated[ContactValidator, Depends(get_contact_validator)],
) -> ValidationOutcome:
    """Run validation only; nothing is delivered."""
    outcome = validator.validate(submission)
    logger.info(
        "Contact form validation completed: valid=%s errors=%d warnings=%d",
        outcome.is_valid,
        len(outcome.errors),
        len(outcome.warnings),
    )
    return outcome


@health_router.get(
    "/contact/health", response_model=ServiceHealth, response_model_exclude_none=True
)
async def contact_health(
    monitor: Annotated[HealthMonitor, Depends(get_health_monitor)],
) -> ServiceHealth:
    """Probe the contact validator with a fixed sample submission."""
    return await monitor.check_contact()
