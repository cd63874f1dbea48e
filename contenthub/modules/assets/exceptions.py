"""Asset domain exceptions."""


class AssetError(Exception):
    """Base class for asset errors."""


class AssetNotFoundError(AssetError):
    pass


class AssetPermissionError(AssetError):
    """Raised when an account touches an asset it does not own."""
