"""Core domain models for logsync.

These models are pure Python dataclasses with no I/O dependencies.
They represent remote log objects, the local watermark and the
per-run reports returned by the pipelines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path, PurePosixPath
from typing import TypeAlias


JsonValue: TypeAlias = (
    None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]
)
"""A parsed JSON value: null, boolean, number, string, array or object."""

JSON_SUFFIX = ".json"


@dataclass(frozen=True, slots=True)
class RemoteObject:
    """An object listed from remote storage.

    Content is not held here; it is fetched on demand through the
    storage port using the key.

    Attributes:
        key: Full object key within the bucket (e.g., "logs/2024/03/07/a.json").
        size: Object size in bytes.
        created_at: Creation timestamp (timezone-aware, UTC).

    Example:
        >>> from datetime import UTC, datetime
        >>> obj = RemoteObject("logs/2024/03/07/a.json", 12, datetime(2024, 3, 7, tzinfo=UTC))
        >>> obj.name
        'a.json'
    """

    key: str
    size: int
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate object fields after initialization."""
        if not self.key:
            raise ValueError("RemoteObject key cannot be empty")
        if self.created_at.tzinfo is None:
            raise ValueError("RemoteObject created_at must be timezone-aware")

    @property
    def name(self) -> str:
        """Last path segment of the key."""
        return PurePosixPath(self.key).name

    @property
    def directory(self) -> str:
        """Parent path of the key ("." for top-level objects)."""
        return str(PurePosixPath(self.key).parent)

    @property
    def is_json(self) -> bool:
        """Whether the key carries a JSON extension."""
        return self.key.endswith(JSON_SUFFIX)

    @property
    def sort_key(self) -> tuple[datetime, str]:
        """Creation order with the key as a deterministic tie-break."""
        return (self.created_at, self.key)


@dataclass(frozen=True, slots=True)
class ObjectMetadata:
    """Metadata about a remote object, returned by storage head() operations.

    Attributes:
        size: Object size in bytes.
        created_at: Creation timestamp (timezone-aware, UTC).
    """

    size: int
    created_at: datetime


@dataclass(frozen=True, slots=True, order=True)
class Watermark:
    """The most recently persisted (date, sequence) pair.

    Ordering is lexicographic: a later date always wins regardless of
    sequence; equal dates compare by sequence.

    Attributes:
        date: Calendar date encoded in the sequence file name.
        sequence: Zero-based per-date sequence number.
    """

    date: date
    sequence: int

    def __post_init__(self) -> None:
        """Validate watermark fields after initialization."""
        if self.sequence < 0:
            raise ValueError("Watermark sequence cannot be negative")


@dataclass(frozen=True, slots=True)
class SyncReport:
    """Outcome of one incremental sync run.

    Attributes:
        watermark: Watermark resolved before the run, or None.
        candidates: Number of remote objects newer than the watermark.
        written: Sequence files created, in creation order.
        skipped: Keys of objects skipped (empty content, existing file).
        failed: Keys of objects whose download or write failed.
    """

    watermark: Watermark | None
    candidates: int = 0
    written: list[Path] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class AggregationReport:
    """Outcome of one daily aggregation run.

    Attributes:
        date_fragment: The "YYYY/MM/DD" fragment matched against keys.
        output_path: Location of the combined output file.
        objects: Number of remote objects matched for the date.
        entries: Number of JSON lines written.
        written: Whether the combined file was (re)written.
        skipped: Keys of objects that contributed no entries.
        failed: Keys of objects whose processing failed.
    """

    date_fragment: str
    output_path: Path
    objects: int = 0
    entries: int = 0
    written: bool = False
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
