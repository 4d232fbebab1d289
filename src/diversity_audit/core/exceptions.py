class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateKeyError(DomainError):
    """Raised when an employee identifier is already on the roster."""


class NotFoundError(DomainError):
    """Raised when the referenced employee is not on the roster."""
