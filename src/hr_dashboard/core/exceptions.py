class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTransitionError(ValidationError):
    """Raised when a record status cannot move to the requested status."""


class AuthenticationError(DomainError):
    """Raised when sign-in fails or no one is signed in."""


class UserNotFoundError(AuthenticationError):
    """Raised when signing in with an unknown email."""


class WeakCredentialError(AuthenticationError):
    """Raised when the password is too short."""


class UserExistsError(DomainError):
    """Raised when signing up with an email that is already known."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class RecordNotFoundError(DomainError):
    """Raised when a record id does not exist in its collection."""


class StorageReadError(DomainError):
    """Raised internally when a stored value cannot be decoded.

    Record stores recover from it locally; callers never see it.
    """
