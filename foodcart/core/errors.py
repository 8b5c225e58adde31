"""Error taxonomy shared by repositories, services and routers."""

from __future__ import annotations


class AppError(Exception):
    """Base class for failures that map to a JSON error response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(AppError):
    status_code = 401
    default_message = "Invalid credentials"


class ConflictError(AppError):
    status_code = 400
    default_message = "Already exists"


class StorageError(AppError):
    """Read, write or parse failure of the persisted state."""

    default_message = "Server error"


class StartupError(Exception):
    """The data directory or store files cannot be prepared; the process must not serve."""
