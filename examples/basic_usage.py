"""Basic sync and aggregation example.

This example shows the simplest usage pattern: point LogSync at a
bucket, pull new log objects into sequence files, then rebuild the
combined file for today.
"""

from pathlib import Path

from logsync import LogSync, S3Storage, configure_logging


configure_logging()

# Option 1: Manual wiring (full control over the storage adapter)
service = LogSync(
    S3Storage("my-log-bucket", prefix="app/"),
    output_dir=Path("./data"),
)

# Option 2: Settings from the environment (BUCKET_NAME, LOGSYNC_OUTPUT_DIR, ...)
# from logsync import Settings
# service = LogSync.from_settings(Settings.from_env())

# Only objects created after the newest local DD-MM-YYYY-S<n>.json are fetched
report = service.sync()
print(f"Wrote {len(report.written)} new files, {len(report.failed)} failed")

# Rewrites data/today.json from objects whose key contains today's YYYY/MM/DD
summary = service.aggregate_today()
if summary.written:
    print(f"{summary.entries} entries saved to {summary.output_path}")
