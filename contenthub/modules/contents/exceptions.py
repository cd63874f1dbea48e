"""Content domain exceptions."""


class ContentError(Exception):
    """Base class for content errors."""


class ContentNotFoundError(ContentError):
    pass


class ContentPermissionError(ContentError):
    """Raised when an account edits content it neither owns nor administers."""


class ContentValidationError(ContentError):
    pass
