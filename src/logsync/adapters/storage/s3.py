"""S3 storage adapter using boto3."""

from __future__ import annotations

from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from logsync.core.exceptions import (
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
)
from logsync.core.models import ObjectMetadata, RemoteObject


if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client


# Chunk size for streaming downloads (64KB)
_CHUNK_SIZE = 64 * 1024


def parse_bucket_uri(uri: str) -> tuple[str, str]:
    """Split "s3://bucket/prefix" (or a bare bucket name) into bucket and prefix.

    Raises:
        ValueError: If no bucket name is present.
    """
    path = uri[5:] if uri.startswith("s3://") else uri
    bucket, _, prefix = path.partition("/")
    if not bucket:
        raise ValueError(f"Invalid S3 bucket URI: {uri}")
    return bucket, prefix


class S3Storage:
    """Storage adapter for one S3 bucket.

    Implements StoragePort protocol for AWS S3. Keys passed to and
    returned from this adapter are full object keys within the bucket.
    """

    def __init__(
        self, bucket: str, client: S3Client | None = None, prefix: str = ""
    ) -> None:
        """Initialize S3 storage.

        Args:
            bucket: Bucket name.
            client: Optional boto3 S3 client. If not provided, creates a default client.
            prefix: Only list objects under this key prefix.
        """
        self.bucket = bucket
        self.prefix = prefix
        self._client = client or boto3.client("s3")

    def list_objects(self) -> list[RemoteObject]:
        """List all objects in the bucket, following pagination.

        S3 exposes LastModified rather than a creation time; for log
        objects written once it is the creation timestamp.

        Raises:
            StorageNotFoundError: If the bucket does not exist.
            StorageAccessError: If access is denied.
            StorageError: For other S3 errors.
        """
        paginator = self._client.get_paginator("list_objects_v2")
        results: list[RemoteObject] = []

        try:
            for page in paginator.paginate(Bucket=self.bucket, Prefix=self.prefix):
                for obj in page.get("Contents", []):
                    results.append(
                        RemoteObject(
                            key=obj["Key"],
                            size=obj["Size"],
                            created_at=obj["LastModified"],
                        )
                    )
        except (ClientError, BotoCoreError) as e:
            raise self._translate_error(e, f"s3://{self.bucket}/{self.prefix}") from e

        return results

    def download_content(self, key: str) -> bytes:
        """Download an object's full content.

        Args:
            key: Object key within the bucket.

        Raises:
            StorageNotFoundError: If object does not exist.
            StorageAccessError: If access is denied.
            StorageError: For other S3 errors.
        """
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=key)
            body = response["Body"]
            chunks = list(iter(lambda: body.read(_CHUNK_SIZE), b""))
        except (ClientError, BotoCoreError) as e:
            raise self._translate_error(e, self._uri(key)) from e

        return b"".join(chunks)

    def head(self, key: str) -> ObjectMetadata:
        """Get object metadata without downloading.

        Args:
            key: Object key within the bucket.

        Returns:
            ObjectMetadata with size and creation timestamp.

        Raises:
            StorageNotFoundError: If object does not exist.
            StorageAccessError: If access is denied.
            StorageError: For other S3 errors.
        """
        try:
            response = self._client.head_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise self._translate_error(e, self._uri(key)) from e

        return ObjectMetadata(
            size=response["ContentLength"],
            created_at=response["LastModified"],
        )

    def _uri(self, key: str) -> str:
        return f"s3://{self.bucket}/{key}"

    def _translate_error(
        self, error: ClientError | BotoCoreError, source: str
    ) -> StorageError:
        """Translate botocore errors to domain exceptions.

        Args:
            error: The botocore exception.
            source: The source URI for context.

        Returns:
            Appropriate StorageError subclass.
        """
        if not isinstance(error, ClientError):
            return StorageError(f"S3 error: {error}", source=source, cause=error)

        code = error.response.get("Error", {}).get("Code", "")

        # Not found errors
        if code in ("404", "NoSuchKey", "NoSuchBucket"):
            return StorageNotFoundError(
                f"Object not found: {source}",
                source=source,
                cause=error,
            )

        # Access denied errors
        if code in ("403", "AccessDenied"):
            return StorageAccessError(
                f"Access denied: {source}",
                source=source,
                cause=error,
            )

        # Generic S3 error
        return StorageError(
            f"S3 error ({code}): {error}",
            source=source,
            cause=error,
        )
