from portfolio.contracts.contact_contract import (
    ContactSubmission,
    ErrorCode,
    FieldError,
    SubmissionResult,
    ValidationOutcome,
)
from portfolio.contracts.content_contract import (
    AboutText,
    ContentSummary,
    Experience,
    HomeContext,
    PortfolioContent,
    ProfileInfo,
    Project,
    Skill,
)
from portfolio.contracts.errors import NOT_FOUND_RESPONSE, ErrorEnvelope
from portfolio.contracts.health_contract import ApplicationHealth, HealthResponse, ServiceHealth

__all__ = [
    "NOT_FOUND_RESPONSE",
    "AboutText",
    "ApplicationHealth",
    "ContactSubmission",
    "ContentSummary",
    "ErrorCode",
    "ErrorEnvelope",
    "Experience",
    "FieldError",
    "HealthResponse",
    "HomeContext",
    "PortfolioContent",
    "ProfileInfo",
    "Project",
    "ServiceHealth",
    "Skill",
    "SubmissionResult",
    "ValidationOutcome",
]
