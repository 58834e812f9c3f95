from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = ErrorKind.VALIDATION


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a PIN or login credential is invalid."""

    kind = ErrorKind.NOT_FOUND


class AuthorizationError(DomainError):
    """Raised when a worker lacks permission for an action."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class CodeNotFoundError(AuthenticationError):
    """No unused verification code exists for the worker."""


class CodeMismatchError(AuthenticationError):
    """The submitted code does not match the most recent one."""


class CodeExpiredError(AuthenticationError):
    """The most recent code is past its expiry."""


class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT


class PinInUseError(ConflictError):
    """Raised when a worker is created with a PIN that already exists."""


class StoreError(DomainError):
    """Backing store failure (connection, query, constraint other than PIN)."""

    kind = ErrorKind.TRANSIENT
