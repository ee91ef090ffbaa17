"""Local development example using FilesystemStorage.

This example shows how to exercise the sync pipeline without S3
access. A local directory mirroring the bucket layout stands in for
the bucket; file modification times stand in for creation times.
"""

from datetime import UTC, datetime
from pathlib import Path

from logsync import FilesystemStorage, LogSync
from logsync.core.date_paths import format_path_fragment


MOCK_BUCKET = Path("./test_fixtures/mock_bucket")


def setup_mock_data() -> None:
    """Create mock log objects under today's date directory."""
    day_dir = MOCK_BUCKET / "logs" / format_path_fragment(datetime.now(UTC))
    day_dir.mkdir(parents=True, exist_ok=True)

    # One JSON document and one line-delimited file with a bad line
    (day_dir / "batch.json").write_text('[{"level": "info"}, {"level": "warn"}]')
    (day_dir / "stream.json").write_text('{"level": "error"}\nnot json\n')


def create_dev_service() -> LogSync:
    """Create a service reading the local mock bucket."""
    return LogSync(
        FilesystemStorage(MOCK_BUCKET),
        output_dir=Path("./data/dev"),
        tz=UTC,
    )


def create_prod_service() -> LogSync:
    """Create a service reading the real bucket.

    create_storage() picks S3Storage for bucket names and s3:// URIs,
    and FilesystemStorage for local paths.
    """
    from logsync import create_storage

    return LogSync(create_storage("s3://my-log-bucket/logs/"), output_dir=Path("./data"))


if __name__ == "__main__":
    setup_mock_data()
    service = create_dev_service()
    service.sync()
    report = service.aggregate_today()
    print(f"{report.entries} entries in {report.output_path}")
