"""Domain exceptions for logsync.

All library errors inherit from LogsyncError, allowing callers to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations


class LogsyncError(Exception):
    """Base class for all logsync exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(LogsyncError):
    """Raised for configuration problems (missing required settings).

    Attributes:
        setting: Name of the offending setting, if known.
    """

    def __init__(self, message: str, setting: str | None = None) -> None:
        self.setting = setting
        super().__init__(message)

    @property
    def recovery_hint(self) -> str | None:
        """Suggest setting the missing environment variable."""
        if self.setting:
            return f"Set the {self.setting} environment variable or pass it on the command line"
        return None


class StorageError(LogsyncError):
    """Base class for storage-related errors.

    Raised when remote storage operations (S3, filesystem) fail.

    Attributes:
        source: The bucket key or URI that caused the error.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        source: str,
        cause: Exception | None = None,
    ) -> None:
        self.source = source
        self.cause = cause
        super().__init__(message)


class StorageNotFoundError(StorageError):
    """Raised when the requested object or bucket doesn't exist in storage."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the key or bucket name."""
        return f"Verify the bucket and key exist: {self.source}"


class StorageAccessError(StorageError):
    """Raised when access is denied to storage (permissions, credentials)."""

    @property
    def recovery_hint(self) -> str:
        """Suggest checking permissions."""
        return "Check credentials and bucket permissions"
