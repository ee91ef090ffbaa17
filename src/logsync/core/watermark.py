"""Watermark resolution from sequence file names.

The output directory is the only record of what has already been
synced. Each sequence file is named ``DD-MM-YYYY-S<n>.json``; the
highest (date, sequence) among those names is the watermark. Files that
do not follow the grammar are ignored, so the directory can be edited
by hand without confusing the resolver.
"""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING

from logsync.core.models import Watermark


if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


SEQUENCE_FILE_PATTERN = re.compile(r"^(\d{2})-(\d{2})-(\d{4})-S(\d+)\.json$")


def sequence_filename(compact_date: str, sequence: int) -> str:
    """Build the file name for a sequence file.

    Example:
        >>> sequence_filename("07-03-2024", 0)
        '07-03-2024-S0.json'
    """
    return f"{compact_date}-S{sequence}.json"


def parse_sequence_filename(name: str) -> Watermark | None:
    """Parse a sequence file name into its (date, sequence) pair.

    Returns:
        The parsed Watermark, or None if the name doesn't follow the
        grammar or encodes an impossible date (e.g. "31-02-2024").
    """
    match = SEQUENCE_FILE_PATTERN.match(name)
    if match is None:
        return None

    day, month, year, sequence = (int(group) for group in match.groups())
    try:
        parsed = date(year, month, day)
    except ValueError:
        return None
    return Watermark(date=parsed, sequence=sequence)


def resolve_watermark(entries: Iterable[str]) -> Watermark | None:
    """Find the most recent (date, sequence) among directory entries.

    Args:
        entries: File names (not paths) found in the output directory.

    Returns:
        The lexicographically greatest Watermark, or None if no entry
        matches the sequence file grammar.
    """
    latest: Watermark | None = None
    for entry in entries:
        parsed = parse_sequence_filename(entry)
        if parsed is None:
            continue
        if latest is None or parsed > latest:
            latest = parsed
    return latest


def scan_watermark(directory: Path) -> Watermark | None:
    """Resolve the watermark from the files present in a directory.

    A missing directory has no watermark.
    """
    if not directory.is_dir():
        return None
    return resolve_watermark(p.name for p in directory.iterdir() if p.is_file())
