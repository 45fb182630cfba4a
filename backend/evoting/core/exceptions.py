"""
Domain errors raised by the services.

Each error carries a machine-readable ``code`` and the HTTP status it maps to,
so the API layer can render every failure through a single handler.
"""
from fastapi import status


class VotingError(Exception):
    """Base class for all domain errors."""

    code = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Request failed"):
        self.message = message
        super().__init__(self.message)


class ValidationError(VotingError):
    """A required field is missing or malformed."""

    code = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidInputError(ValidationError):
    """Input is well-formed but does not reference anything usable."""

    code = "invalid_input"


class NotFoundError(VotingError):
    """Referenced election, voter, party or candidate does not exist."""

    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(VotingError):
    """Action not permitted for this caller or in this state."""

    code = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class InvalidStateError(VotingError):
    """Action not valid for the election's current status."""

    code = "invalid_state"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(VotingError):
    """Uniqueness violation or deletion blocked by existing votes."""

    code = "conflict"
    status_code = status.HTTP_409_CONFLICT


class UnauthorizedError(VotingError):
    """Missing or bad admin credentials."""

    code = "unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED
