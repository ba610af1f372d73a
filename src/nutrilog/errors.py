"""Application errors raised by services and translated by the API."""


class NutrilogError(Exception):
    """Base error carrying a suggested HTTP status code."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(NutrilogError):
    """Raised when a referenced product, log item, user or workout is missing."""

    status_code = 404


class InvalidInputError(NutrilogError):
    """Raised when required fields are missing or values are out of range."""

    status_code = 400


class ConflictError(NutrilogError):
    """Raised when a create or rename collides with an existing record."""

    status_code = 409


class ForbiddenError(NutrilogError):
    """Raised when a user modifies a record they do not own."""

    status_code = 403
