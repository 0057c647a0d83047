class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class ConflictError(DomainError):
    """Raised when a write collides with existing data (duplicate email, open attendance)."""


class ReferentialIntegrityError(DomainError):
    """Raised when a write would orphan child rows or reference a missing employee."""


class DataIntegrityError(DomainError):
    """Raised when stored data violates an invariant the store should have kept."""
