# liftlog/errors.py
from pydantic import ValidationError  # noqa: F401  # input shape failures, raised before any store access


class LiftlogError(Exception):
    """Base for failures a single procedure call can surface to its caller."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConstraintViolation(LiftlogError):
    """The store rejected a write (unique or foreign-key constraint)."""
    status_code = 409


class NotFound(LiftlogError):
    status_code = 404


class InvalidCredentials(LiftlogError):
    # Same message for unknown email and bad password so emails can't be probed
    status_code = 401

    def __init__(self, message: str = "invalid credentials"):
        super().__init__(message)
