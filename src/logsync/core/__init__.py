"""Core domain module for logsync.

This module contains pure Python domain models, port definitions and the
sync and aggregation pipelines. It depends only on the StoragePort
protocol and can be tested with an in-memory fake.
"""

from logsync.core.models import (
    AggregationReport,
    JsonValue,
    ObjectMetadata,
    RemoteObject,
    SyncReport,
    Watermark,
)
from logsync.core.ports import StoragePort


__all__ = [
    "AggregationReport",
    "JsonValue",
    "ObjectMetadata",
    "RemoteObject",
    "StoragePort",
    "SyncReport",
    "Watermark",
]
