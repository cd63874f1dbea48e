"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class AccountAlreadyExistsError(AccountError):
    """Raised when the username or email is already registered."""


class AccountNotFoundError(AccountError):
    pass
