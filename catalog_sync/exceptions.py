"""Error types raised by catalog_sync."""


class CatalogSyncError(Exception):
    """Base class for all catalog_sync errors"""


class UnsupportedPlatformError(CatalogSyncError, ValueError):
    """Raised when a platform tag has no adapter or client registered."""

    def __init__(self, platform):
        self.platform = platform
        super().__init__(f"Unsupported platform: {platform}")


class PlatformConfigurationError(CatalogSyncError):
    """Raised when a platform client is missing its credentials"""


class PlatformFetchError(CatalogSyncError):
    """Raised when a platform API request fails"""


class StorageError(CatalogSyncError):
    """Raised when a store lookup or insert fails"""


class DuplicateRecordError(StorageError):
    """Insert rejected by the per-scope external_id uniqueness constraint"""
