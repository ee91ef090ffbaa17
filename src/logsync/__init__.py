"""logsync - Incremental sync and daily aggregation of JSON logs from a bucket.

This library lists JSON log objects in remote storage and either saves
new ones as per-date sequence files or combines today's objects into a
single line-delimited JSON file.

Example:
    >>> from pathlib import Path
    >>> from logsync import LogSync, S3Storage
    >>> service = LogSync(S3Storage("my-log-bucket"), output_dir=Path("./data"))
    >>> report = service.sync()  # Writes DD-MM-YYYY-S<n>.json files
    >>> service.aggregate_today()  # Rewrites data/today.json
"""

from logsync.adapters.storage import FilesystemStorage, S3Storage, create_storage
from logsync.config import Settings, find_project_root
from logsync.core.exceptions import (
    ConfigurationError,
    LogsyncError,
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
)
from logsync.core.models import (
    AggregationReport,
    JsonValue,
    ObjectMetadata,
    RemoteObject,
    SyncReport,
    Watermark,
)
from logsync.core.normalize import normalize
from logsync.core.ports import StoragePort
from logsync.core.services import LogSync
from logsync.core.watermark import resolve_watermark
from logsync.log_config import configure_logging


__version__ = "0.1.0"

__all__ = [
    "AggregationReport",
    "ConfigurationError",
    "FilesystemStorage",
    "JsonValue",
    "LogSync",
    "LogsyncError",
    "ObjectMetadata",
    "RemoteObject",
    "S3Storage",
    "Settings",
    "StorageAccessError",
    "StorageError",
    "StorageNotFoundError",
    "StoragePort",
    "SyncReport",
    "Watermark",
    "__version__",
    "configure_logging",
    "create_storage",
    "find_project_root",
    "normalize",
    "resolve_watermark",
]
