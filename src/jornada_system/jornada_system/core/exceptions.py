class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or an action is not allowed right now."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a jornada or colaborador does not exist."""


class BackendError(DomainError):
    """Raised when the record store fails; carries the driver's message."""
