"""Error taxonomy for a single submission.

Every failure ends up as exactly one visible message, so each error carries the
user-facing text it should be displayed with.
"""

from constants import (
    MISSING_DESCRIPTION_MESSAGE,
    MISSING_VERIFICATION_MESSAGE,
    SERVICE_UNAVAILABLE_MESSAGE,
    SERVICE_TIMEOUT_MESSAGE,
)


class BuilderError(Exception):
    """Base class for errors surfaced to the user."""

    kind = "error"
    default_message = SERVICE_UNAVAILABLE_MESSAGE

    def __init__(self, message: str | None = None, detail: str | None = None):
        self.message = message or self.default_message
        # Diagnostic text for logs; never shown in the UI
        self.detail = detail
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Validation (never sent to the network)
# ---------------------------------------------------------------------------


class ValidationError(BuilderError):
    kind = "validation"


class MissingDescriptionError(ValidationError):
    default_message = MISSING_DESCRIPTION_MESSAGE


class MissingVerificationError(ValidationError):
    default_message = MISSING_VERIFICATION_MESSAGE


# ---------------------------------------------------------------------------
# Remote call failures
# ---------------------------------------------------------------------------


class ExtractionTimeoutError(BuilderError):
    """The extraction call exceeded its transport timeout."""

    kind = "timeout"
    default_message = SERVICE_TIMEOUT_MESSAGE


class ServiceError(BuilderError):
    """Non-200 status, transport failure or an unusable response body."""

    kind = "service"
    default_message = SERVICE_UNAVAILABLE_MESSAGE


class BlueprintParseError(ServiceError):
    pass


class ConfigurationError(ValueError):
    """Raised by settings when an environment value cannot be used."""
