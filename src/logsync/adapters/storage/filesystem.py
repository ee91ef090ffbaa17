"""Filesystem storage adapter treating a local directory as a bucket."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from logsync.core.exceptions import StorageNotFoundError
from logsync.core.models import ObjectMetadata, RemoteObject


class FilesystemStorage:
    """Storage adapter for a local directory.

    Implements StoragePort protocol for local files. Keys are POSIX paths
    relative to the root directory; the file modification time stands in
    for the creation timestamp. Useful for local development and testing
    without S3.
    """

    def __init__(self, root: Path) -> None:
        """Initialize with the directory acting as the bucket.

        Args:
            root: Directory whose files are exposed as objects.
        """
        self.root = root

    def list_objects(self) -> list[RemoteObject]:
        """List every file below the root directory, sorted by key.

        Raises:
            StorageNotFoundError: If the root directory does not exist.
        """
        if not self.root.is_dir():
            raise StorageNotFoundError(
                f"Directory not found: {self.root}",
                source=str(self.root),
            )

        results: list[RemoteObject] = []
        for path in sorted(self.root.rglob("*")):
            if not path.is_file():
                continue
            stat = path.stat()
            results.append(
                RemoteObject(
                    key=path.relative_to(self.root).as_posix(),
                    size=stat.st_size,
                    created_at=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
                )
            )
        return results

    def download_content(self, key: str) -> bytes:
        """Read a file's full content.

        Raises:
            StorageNotFoundError: If the file does not exist.
        """
        path = self._resolve(key)
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as e:
            raise StorageNotFoundError(
                f"File not found: {key}",
                source=str(path),
                cause=e,
            ) from e

    def head(self, key: str) -> ObjectMetadata:
        """Get file size and modification time.

        Raises:
            StorageNotFoundError: If the file does not exist.
        """
        path = self._resolve(key)
        try:
            stat = path.stat()
        except FileNotFoundError as e:
            raise StorageNotFoundError(
                f"File not found: {key}",
                source=str(path),
                cause=e,
            ) from e

        return ObjectMetadata(
            size=stat.st_size,
            created_at=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
        )

    def _resolve(self, key: str) -> Path:
        return self.root / key
