"""Date formatting for storage path matching and sequence file names.

Two calendar bases are in play: path fragments are rendered in UTC
(matching how producers lay out bucket keys), while compact dates used
for local file names are rendered in local time unless a timezone is
given.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, tzinfo


def format_path_fragment(moment: datetime) -> str:
    """Render a moment as a "YYYY/MM/DD" storage path fragment (UTC).

    Naive datetimes are taken to already be in UTC.

    Example:
        >>> format_path_fragment(datetime(2024, 3, 7, 23, 30, tzinfo=UTC))
        '2024/03/07'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    else:
        moment = moment.astimezone(UTC)
    return f"{moment.year:04d}/{moment.month:02d}/{moment.day:02d}"


def is_from_date(key: str, fragment: str) -> bool:
    """Check whether an object key contains a date fragment.

    This is a plain substring test: a key that happens to contain the
    same digits elsewhere in its path also matches.
    """
    return fragment in key


def format_compact_date(moment: datetime | date, tz: tzinfo | None = None) -> str:
    """Render a date as "DD-MM-YYYY" for sequence file names.

    Args:
        moment: A datetime (converted to ``tz``) or a plain date.
        tz: Target timezone. None means the system local timezone.

    Returns:
        Zero-padded compact date string.
    """
    if isinstance(moment, datetime):
        moment = moment.astimezone(tz).date()
    return f"{moment.day:02d}-{moment.month:02d}-{moment.year:04d}"


def parse_compact_date(text: str) -> date:
    """Parse a "DD-MM-YYYY" string back into a date.

    Raises:
        ValueError: If the text is malformed or names an impossible date.
    """
    return datetime.strptime(text, "%d-%m-%Y").date()
