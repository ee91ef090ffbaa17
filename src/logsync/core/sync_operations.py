"""Incremental sync of new remote objects into per-date sequence files.

This module contains the sync logic that LogSync delegates to. Objects
newer than the local watermark are downloaded and stored byte-for-byte
as ``DD-MM-YYYY-S<n>.json`` files, numbered per date in creation order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from logsync.core.date_paths import format_compact_date
from logsync.core.exceptions import StorageError
from logsync.core.models import RemoteObject, SyncReport
from logsync.core.watermark import scan_watermark, sequence_filename


if TYPE_CHECKING:
    from datetime import tzinfo
    from pathlib import Path

    from logsync.core.models import Watermark
    from logsync.core.ports import StoragePort


logger = logging.getLogger(__name__)


def select_new_objects(
    objects: list[RemoteObject],
    watermark: Watermark | None,
    tz: tzinfo | None = None,
) -> list[RemoteObject]:
    """Filter to JSON objects dated strictly after the watermark date.

    Objects are compared by their compact calendar date in ``tz``, the
    same basis used to name sequence files. Without a watermark every
    JSON object is new.

    Returns:
        Selected objects sorted by (created_at, key).
    """
    selected = [obj for obj in objects if obj.is_json]
    if watermark is not None:
        selected = [
            obj
            for obj in selected
            if obj.created_at.astimezone(tz).date() > watermark.date
        ]
    return sorted(selected, key=lambda obj: obj.sort_key)


def group_by_date(
    objects: list[RemoteObject], tz: tzinfo | None = None
) -> dict[str, list[RemoteObject]]:
    """Group objects by compact date, preserving their input order.

    Args:
        objects: Objects already sorted by creation time.
        tz: Timezone for the compact date. None means local time.

    Returns:
        Mapping of "DD-MM-YYYY" to the objects created on that date.
    """
    groups: dict[str, list[RemoteObject]] = {}
    for obj in objects:
        groups.setdefault(format_compact_date(obj.created_at, tz), []).append(obj)
    return groups


def sync_new_objects(
    storage: StoragePort,
    output_dir: Path,
    *,
    tz: tzinfo | None = None,
) -> SyncReport:
    """Download objects newer than the local watermark into sequence files.

    Per-object failures (download, write, empty content) are logged and
    skipped. Listing failures propagate to the caller.

    Args:
        storage: Storage capability to list and download from.
        output_dir: Directory holding the sequence files.
        tz: Timezone for compact dates. None means local time.

    Returns:
        SyncReport describing what was written, skipped and failed.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    watermark = scan_watermark(output_dir)
    if watermark is None:
        logger.info("No existing sequence files, syncing all objects")
    else:
        logger.info(
            "Latest local file: %s",
            sequence_filename(format_compact_date(watermark.date), watermark.sequence),
        )

    candidates = select_new_objects(storage.list_objects(), watermark, tz)
    report = SyncReport(watermark=watermark, candidates=len(candidates))

    if not candidates:
        logger.info("No new JSON files to sync")
        return report

    logger.info("Syncing %d new JSON files...", len(candidates))

    for compact_date, group in group_by_date(candidates, tz).items():
        sequence = 0
        for obj in group:
            dest = output_dir / sequence_filename(compact_date, sequence)
            if _write_sequence_file(storage, obj, dest, report):
                sequence += 1

    logger.info(
        "Sync completed: %d written, %d skipped, %d failed",
        len(report.written),
        len(report.skipped),
        len(report.failed),
    )
    return report


def _write_sequence_file(
    storage: StoragePort, obj: RemoteObject, dest: Path, report: SyncReport
) -> bool:
    """Store one object's trimmed content at dest.

    Returns:
        True if the sequence slot at dest is now taken (written or
        already present), False if the object was skipped or failed.
    """
    try:
        content = storage.download_content(obj.key).strip()
    except StorageError as e:
        logger.error("✗ Error downloading %s: %s", obj.key, e)
        report.failed.append(obj.key)
        return False

    if not content:
        logger.warning("Empty file skipped: %s", obj.key)
        report.skipped.append(obj.key)
        return False

    try:
        # Exclusive create: sequence files are never overwritten
        with dest.open("xb") as f:
            f.write(content)
    except FileExistsError:
        logger.warning("File %s already exists, skipped: %s", dest.name, obj.key)
        report.skipped.append(obj.key)
        return True
    except OSError as e:
        logger.error("✗ Error writing %s for %s: %s", dest, obj.key, e)
        report.failed.append(obj.key)
        return False

    logger.info("✓ Saved %s as %s", obj.key, dest.name)
    report.written.append(dest)
    return True
