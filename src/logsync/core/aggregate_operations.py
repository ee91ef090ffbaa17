"""Daily aggregation of today's log objects into one combined file.

This module contains the aggregation logic that LogSync delegates to.
Objects whose key contains today's "YYYY/MM/DD" fragment are downloaded,
normalized and written as line-delimited JSON to a single file that is
rewritten on every run.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from logsync.core.date_paths import format_path_fragment, is_from_date
from logsync.core.exceptions import StorageError
from logsync.core.models import AggregationReport, RemoteObject
from logsync.core.normalize import normalize, to_json_line


if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path
    from typing import TextIO

    from logsync.core.ports import StoragePort


logger = logging.getLogger(__name__)


def select_objects_for_date(
    storage: StoragePort, objects: list[RemoteObject], fragment: str
) -> tuple[list[RemoteObject], list[str]]:
    """Pick JSON objects whose key contains the date fragment.

    Metadata for each match is fetched from storage so the creation time
    used for ordering comes from the object itself.

    Returns:
        Tuple of (matched objects sorted by (created_at, key), keys whose
        metadata lookup failed).
    """
    selected: list[RemoteObject] = []
    failed: list[str] = []
    for obj in objects:
        if not obj.is_json or not is_from_date(obj.key, fragment):
            continue
        try:
            meta = storage.head(obj.key)
        except StorageError as e:
            logger.error("✗ Error reading metadata for %s: %s", obj.key, e)
            failed.append(obj.key)
            continue
        logger.debug(
            "Found %s (%d bytes, created %s)",
            obj.key,
            meta.size,
            meta.created_at.isoformat(),
        )
        selected.append(RemoteObject(obj.key, meta.size, meta.created_at))

    selected.sort(key=lambda obj: obj.sort_key)
    return selected, failed


def aggregate_for_date(
    storage: StoragePort,
    output_path: Path,
    *,
    now: datetime,
) -> AggregationReport:
    """Combine the JSON entries of all objects from ``now``'s date.

    If no object matches, the output file is left untouched. Otherwise it
    is truncated and rewritten with one JSON value per line, objects in
    creation order. Per-object failures are logged and skipped.

    Args:
        storage: Storage capability to list and download from.
        output_path: Combined output file location.
        now: The moment whose UTC date selects the objects.

    Returns:
        AggregationReport with counts of objects and entries written.
    """
    fragment = format_path_fragment(now)
    logger.info("Processing files for today's date: %s", fragment)

    objects, failed = select_objects_for_date(storage, storage.list_objects(), fragment)
    report = AggregationReport(
        date_fragment=fragment,
        output_path=output_path,
        objects=len(objects),
        failed=failed,
    )

    if not objects:
        logger.info("No JSON files found for today (%s)", fragment)
        return report

    logger.info("Processing %d JSON files from today...", len(objects))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    entries = 0
    # Lone surrogates in parsed strings are written as \uXXXX escapes
    with output_path.open("w", encoding="utf-8", errors="backslashreplace") as out:
        for obj in objects:
            try:
                entries += _append_object(storage, obj, out, report)
            except (StorageError, OSError, ValueError, RecursionError) as e:
                logger.error("✗ Error processing file %s: %s", obj.key, e)
                report.failed.append(obj.key)

    report = AggregationReport(
        date_fragment=fragment,
        output_path=output_path,
        objects=len(objects),
        entries=entries,
        written=True,
        skipped=report.skipped,
        failed=report.failed,
    )
    logger.info(
        "Processing completed: %d files, %d entries", report.objects, report.entries
    )
    logger.info("Output saved to: %s", output_path)
    return report


def _append_object(
    storage: StoragePort, obj: RemoteObject, out: TextIO, report: AggregationReport
) -> int:
    """Write one object's normalized entries to the combined file.

    Returns:
        Number of lines written.
    """
    raw_text = storage.download_content(obj.key).decode("utf-8", errors="replace")
    if not raw_text.strip():
        logger.warning("Empty file skipped: %s", obj.key)
        report.skipped.append(obj.key)
        return 0

    values = normalize(raw_text)
    if not values:
        logger.warning("! No valid JSON entries found in %s", obj.key)
        report.skipped.append(obj.key)
        return 0

    # One write per object so a failing object leaves no partial lines
    out.write("".join(to_json_line(value) + "\n" for value in values))
    logger.info("✓ Processed %s (%d entries)", obj.key, len(values))
    return len(values)
