"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DuplicateEmailError,
    UserNotFoundError,
    SelfDeactivationError,
)
from .user_management import (
    normalize_email,
    get_user,
    create_user,
    update_user,
    deactivate_user,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DuplicateEmailError',
    'UserNotFoundError',
    'SelfDeactivationError',
    # User Management
    'normalize_email',
    'get_user',
    'create_user',
    'update_user',
    'deactivate_user',
]
