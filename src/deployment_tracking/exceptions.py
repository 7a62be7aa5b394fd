"""Custom exception classes for deployment-tracking library."""


class DeploymentTrackingError(Exception):
    """Base exception for deployment tracking errors."""

    pass


class DatabaseNotFoundError(DeploymentTrackingError, FileNotFoundError):
    """Raised when the tracking database file does not exist yet."""

    pass


class DatabaseIOError(DeploymentTrackingError, OSError):
    """Raised when the tracking database cannot be read or written."""

    pass


class FormatError(DeploymentTrackingError, ValueError):
    """Raised when the tracking database document is malformed."""

    pass


class SerializationError(DeploymentTrackingError, ValueError):
    """Raised when a stored value does not have the expected record shape."""

    pass


class InsertionError(DeploymentTrackingError, ValueError):
    """Raised when a store path conflicts with the existing document structure."""

    pass


class CompilerError(Exception):
    """Base exception for compiler strategy failures."""

    pass


class UnsupportedStrategyError(CompilerError):
    """Raised when no built-in support exists for the requested compiler."""

    pass
