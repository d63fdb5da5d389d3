class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a service operation targets an unknown identifier."""


class DuplicateEmailError(DomainError):
    """Raised when an account is created with an email already in use."""


class DuplicateRecordError(DomainError):
    """Raised when a record is added with an id that already exists in its kind."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class RemoteServiceError(DomainError):
    """Raised when the remote backend fails; wraps the driver error."""


class UnknownCapabilityError(DomainError):
    """Raised when no implementation is registered for a capability."""


class StorageError(Exception):
    """Raised by a storage medium when a read or write fails."""


class StorageQuotaExceeded(StorageError):
    """Raised when a write would exceed the medium's quota."""
