"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from logsync.core.models import ObjectMetadata, RemoteObject


@runtime_checkable
class StoragePort(Protocol):
    """Remote object storage holding log files (S3, local directory)."""

    def list_objects(self) -> list[RemoteObject]:
        """List every object in the bucket.

        Pagination is handled by the adapter; the result is the complete
        listing.

        Returns:
            RemoteObject entries with key, size and creation timestamp.

        Raises:
            StorageNotFoundError: If the bucket does not exist.
            StorageAccessError: If access is denied.
        """
        ...

    def download_content(self, key: str) -> bytes:
        """Download the full content of an object.

        Args:
            key: Object key within the bucket.

        Returns:
            The raw bytes of the object.

        Raises:
            StorageNotFoundError: If the object does not exist.
        """
        ...

    def head(self, key: str) -> ObjectMetadata:
        """Get object metadata (size, creation time) without downloading.

        Args:
            key: Object key within the bucket.

        Raises:
            StorageNotFoundError: If the object does not exist.
        """
        ...
