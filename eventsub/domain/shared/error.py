"""Error hierarchy for eventsub.

Error layers:
- EventSubError: Base class for all eventsub errors
- InvariantViolation: Programmer/integration errors (precondition violations)
- ConfigurationError: System misconfiguration

Invariant violations are raised synchronously, before any state is mutated,
and are never retried.
"""


class EventSubError(Exception):
    """Base class for all eventsub errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Invariant Violations (programmer errors)
# =============================================================================


class InvariantViolation(EventSubError):
    """Base class for broken registry preconditions."""


class OwnershipMismatchError(InvariantViolation):
    """Subscription registered into a registry it was not constructed against."""

    def __init__(self, message: str, event_type: str | None = None) -> None:
        super().__init__(message, code="OWNERSHIP_MISMATCH")
        self.event_type = event_type


class AlreadyRegisteredError(InvariantViolation):
    """Subscription already carries an event type and key."""


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(EventSubError):
    """System misconfiguration detected."""
