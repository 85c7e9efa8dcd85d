class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RosterFormatError(ValidationError):
    """Raised when an uploaded roster file cannot be read as a workbook."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
