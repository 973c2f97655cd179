class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRate(ValidationError):
    """Raised when an hourly rate is negative or not a number."""


class DuplicateUsername(ValidationError):
    """Raised when adding a user over an existing username."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class RecordNotFound(DomainError):
    """Raised when updating a document that does not exist."""


class PunchError(DomainError):
    """Base for invalid punch state transitions."""


class AlreadyPunchedIn(PunchError):
    pass


class AlreadyPunchedOut(PunchError):
    pass


class NotPunchedIn(PunchError):
    pass


class StorageError(Exception):
    """Raised when the storage backend fails (network, driver, server)."""
