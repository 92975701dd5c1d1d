"""
Custom exceptions for the foldertree package.
"""


class FolderTreeError(Exception):
    """Base exception for all foldertree errors."""
    pass


class StorageError(FolderTreeError):
    """Raised when reading or writing a snapshot file fails."""
    pass


class ConfigurationError(FolderTreeError):
    """Raised when config.json is unreadable or a setting is invalid."""
    pass
