"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class DuplicateEmailError(AccountsServiceError):
    """Raised when another user already uses the email address."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class SelfDeactivationError(AccountsServiceError):
    """Raised when an admin tries to deactivate or demote their own account."""
    pass
