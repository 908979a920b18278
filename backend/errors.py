"""
Domain errors raised by the service layer and the identity client.

Routers never build HTTP errors for these themselves; main.py maps each
kind to a status code through exception handlers.
"""
from typing import Optional


class TrackerError(Exception):
    """Base class. `status_code` is what the API answers with."""
    status_code = 500

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"detail": self.message}


class ValidationError(TrackerError):
    # empty company/position, bad email, weak password...
    status_code = 422


class NotFound(TrackerError):
    # missing record or record owned by someone else; the two are not told apart
    status_code = 404


class UnknownStatus(TrackerError):
    status_code = 422

    def __init__(self, value):
        super().__init__(f"Unknown job status: {value!r}")
        self.value = value


class AuthError(TrackerError):
    status_code = 401


class StoreError(TrackerError):
    status_code = 500
