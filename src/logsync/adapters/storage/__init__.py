"""Storage backend adapters."""

from logsync.adapters.storage.filesystem import FilesystemStorage
from logsync.adapters.storage.router import create_storage
from logsync.adapters.storage.s3 import S3Storage


__all__ = ["FilesystemStorage", "S3Storage", "create_storage"]
