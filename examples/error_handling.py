"""Error handling patterns with recovery hints.

This example demonstrates how to handle common errors and use
the recovery_hint property to provide actionable guidance.
"""

from logsync import (
    ConfigurationError,
    LogsyncError,
    LogSync,
    Settings,
    StorageAccessError,
    StorageNotFoundError,
    SyncReport,
)


# Pattern 1: Handle missing configuration
def load_settings() -> Settings | None:
    """Read settings, reporting which variable is missing."""
    try:
        return Settings.from_env()
    except ConfigurationError as e:
        print(f"Configuration problem with {e.setting}: {e}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 2: Handle a missing bucket or denied access
def sync_or_report(service: LogSync) -> SyncReport | None:
    """Run a sync, turning storage errors into messages."""
    try:
        return service.sync()
    except StorageNotFoundError as e:
        print(f"Bucket not found: {e.source}")
        print(f"Hint: {e.recovery_hint}")
    except StorageAccessError as e:
        print(f"Access denied: {e.source}")
        print(f"Hint: {e.recovery_hint}")
    return None


# Pattern 3: Per-object failures do not raise; inspect the report
def report_failures(report: SyncReport) -> None:
    """Print keys that could not be downloaded or written."""
    for key in report.failed:
        print(f"Failed: {key}")
    for key in report.skipped:
        print(f"Skipped: {key}")


# Pattern 4: Catch all library errors
def run() -> None:
    try:
        settings = Settings.from_env()
        report = LogSync.from_settings(settings).sync()
    except LogsyncError as e:
        print(f"Error: {e}")
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}")
        return
    report_failures(report)
