"""Core domain services for logsync."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, tzinfo
from pathlib import Path
from typing import TYPE_CHECKING

from logsync.core.aggregate_operations import aggregate_for_date
from logsync.core.sync_operations import sync_new_objects
from logsync.core.watermark import scan_watermark


if TYPE_CHECKING:
    from logsync.config import Settings
    from logsync.core.models import AggregationReport, SyncReport, Watermark
    from logsync.core.ports import StoragePort


DEFAULT_COMBINED_NAME = "today.json"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current moment in UTC."""
    return datetime.now(UTC)


class LogSync:
    """Orchestrates incremental sync and daily aggregation for one bucket."""

    def __init__(
        self,
        storage: StoragePort,
        output_dir: Path,
        *,
        combined_name: str = DEFAULT_COMBINED_NAME,
        tz: tzinfo | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._storage = storage
        self._output_dir = output_dir
        self._combined_name = combined_name
        self._tz = tz
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, s3_client: object | None = None) -> LogSync:
        """Create LogSync wired to the storage backend named by settings.

        Args:
            settings: Resolved configuration.
            s3_client: Optional boto3 S3 client, used for S3 buckets.

        Returns:
            LogSync writing into settings.output_dir.
        """
        from logsync.adapters.storage import create_storage

        return cls(
            storage=create_storage(settings.bucket, s3_client=s3_client),
            output_dir=settings.output_dir,
            combined_name=settings.combined_name,
            tz=settings.timezone,
        )

    @property
    def output_dir(self) -> Path:
        """Directory receiving sequence files and the combined file."""
        return self._output_dir

    @property
    def combined_path(self) -> Path:
        """Location of the combined daily output file."""
        return self._output_dir / self._combined_name

    def watermark(self) -> Watermark | None:
        """Most recent (date, sequence) already present locally."""
        return scan_watermark(self._output_dir)

    def sync(self) -> SyncReport:
        """Download objects newer than the watermark into sequence files."""
        return sync_new_objects(self._storage, self._output_dir, tz=self._tz)

    def aggregate_today(self) -> AggregationReport:
        """Rewrite the combined file from today's objects.

        Today is taken from the clock in UTC, matching the date layout of
        bucket keys.
        """
        return aggregate_for_date(self._storage, self.combined_path, now=self._clock())

    def bucket_tree(self) -> dict[str, list[str]]:
        """Group object names by their parent directory.

        Returns:
            Mapping of directory to sorted object names, directories in
            sorted order.
        """
        tree: dict[str, list[str]] = {}
        for obj in self._storage.list_objects():
            tree.setdefault(obj.directory, []).append(obj.name)
        return {directory: sorted(names) for directory, names in sorted(tree.items())}
