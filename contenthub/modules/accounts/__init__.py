"""Account domain exports."""

from .exceptions import AccountAlreadyExistsError, AccountError, AccountNotFoundError
from .models import ADMIN_ROLE, USER_ROLE, Account, AccountCreateInput
from .service import AccountService

__all__ = [
    "ADMIN_ROLE",
    "USER_ROLE",
    "Account",
    "AccountAlreadyExistsError",
    "AccountCreateInput",
    "AccountError",
    "AccountNotFoundError",
    "AccountService",
]
