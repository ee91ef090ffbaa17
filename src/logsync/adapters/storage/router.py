"""Storage factory choosing a backend from the configured bucket string."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from logsync.core.ports import StoragePort


def parse_uri_scheme(uri: str) -> str | None:
    """Extract the URI scheme from a bucket string.

    Args:
        uri: Bucket URI, bucket name or directory path.

    Returns:
        The scheme (e.g., 's3', 'file') or None when there is none.
    """
    if "://" in uri:
        scheme = uri.split("://", 1)[0]
        # Avoid confusing Windows drive letters (C:) with schemes
        if len(scheme) > 1:
            return scheme.lower()
    return None


def strip_file_scheme(uri: str) -> str:
    """Strip file:// prefix from URI, returning plain path."""
    if uri.startswith("file://"):
        return uri[7:]  # len("file://") == 7
    return uri


def is_local_bucket(bucket: str) -> bool:
    """Whether a bucket string names a local directory rather than S3.

    file:// URIs and paths starting with "/", "." or "~" are local; S3
    bucket names can contain none of those leading characters.
    """
    scheme = parse_uri_scheme(bucket)
    if scheme is not None:
        return scheme == "file"
    return bucket.startswith(("/", ".", "~"))


def create_storage(bucket: str, s3_client: Any | None = None) -> StoragePort:
    """Create the storage adapter for a bucket string.

    Args:
        bucket: "s3://bucket[/prefix]", a bare S3 bucket name, a
            "file://" URI, or a local directory path.
        s3_client: Optional boto3 S3 client. If not provided, creates default.

    Returns:
        S3Storage or FilesystemStorage.

    Raises:
        ValueError: If the URI scheme is not supported.
    """
    from logsync.adapters.storage.filesystem import FilesystemStorage
    from logsync.adapters.storage.s3 import S3Storage, parse_bucket_uri

    if is_local_bucket(bucket):
        return FilesystemStorage(Path(strip_file_scheme(bucket)).expanduser())

    scheme = parse_uri_scheme(bucket)
    if scheme not in (None, "s3"):
        raise ValueError(f"No storage backend registered for scheme '{scheme}'")

    name, prefix = parse_bucket_uri(bucket)
    return S3Storage(name, client=s3_client, prefix=prefix)
