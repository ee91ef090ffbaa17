"""Unit tests for core domain models.

These tests verify the behavior of RemoteObject, Watermark and the run
reports. They are pure unit tests with no I/O dependencies.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from pathlib import Path

import pytest

from logsync.core.models import (
    AggregationReport,
    ObjectMetadata,
    RemoteObject,
    SyncReport,
    Watermark,
)


class TestRemoteObject:
    """Tests for the RemoteObject model."""

    @pytest.mark.core
    def test_name_and_directory(self) -> None:
        obj = RemoteObject("logs/2024/03/07/app.json", 10, datetime(2024, 3, 7, tzinfo=UTC))

        assert obj.name == "app.json"
        assert obj.directory == "logs/2024/03/07"

    @pytest.mark.core
    def test_top_level_directory(self) -> None:
        obj = RemoteObject("app.json", 10, datetime(2024, 3, 7, tzinfo=UTC))

        assert obj.directory == "."

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("a/b.json", True),
            ("a/b.JSON", False),
            ("a/b.jsonl", False),
            ("a/b.json.gz", False),
            ("a/b.txt", False),
        ],
    )
    def test_is_json(self, key: str, expected: bool) -> None:
        obj = RemoteObject(key, 1, datetime(2024, 3, 7, tzinfo=UTC))

        assert obj.is_json is expected

    @pytest.mark.core
    def test_sort_key_breaks_ties_by_key(self) -> None:
        created = datetime(2024, 3, 7, 12, tzinfo=UTC)
        a = RemoteObject("b.json", 1, created)
        b = RemoteObject("a.json", 1, created)

        assert sorted([a, b], key=lambda o: o.sort_key) == [b, a]

    @pytest.mark.core
    def test_empty_key_raises(self) -> None:
        with pytest.raises(ValueError, match="key cannot be empty"):
            RemoteObject("", 1, datetime(2024, 3, 7, tzinfo=UTC))

    @pytest.mark.core
    def test_naive_timestamp_raises(self) -> None:
        with pytest.raises(ValueError, match="timezone-aware"):
            RemoteObject("a.json", 1, datetime(2024, 3, 7))

    @pytest.mark.core
    def test_immutable(self) -> None:
        obj = RemoteObject("a.json", 1, datetime(2024, 3, 7, tzinfo=UTC))

        with pytest.raises(AttributeError):
            obj.key = "b.json"  # type: ignore[misc]


class TestWatermark:
    """Tests for the Watermark model."""

    @pytest.mark.core
    def test_later_date_wins_over_higher_sequence(self) -> None:
        assert Watermark(date(2024, 3, 7), 0) > Watermark(date(2024, 3, 6), 99)

    @pytest.mark.core
    def test_equal_dates_compare_by_sequence(self) -> None:
        assert Watermark(date(2024, 3, 6), 2) > Watermark(date(2024, 3, 6), 1)

    @pytest.mark.core
    def test_negative_sequence_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            Watermark(date(2024, 3, 6), -1)


class TestReports:
    """Tests for the run report models."""

    @pytest.mark.core
    def test_sync_report_defaults(self) -> None:
        report = SyncReport(watermark=None)

        assert report.candidates == 0
        assert report.written == []
        assert report.skipped == []
        assert report.failed == []

    @pytest.mark.core
    def test_aggregation_report_defaults(self) -> None:
        report = AggregationReport(date_fragment="2024/03/07", output_path=Path("t.json"))

        assert report.written is False
        assert report.entries == 0

    @pytest.mark.core
    def test_object_metadata_fields(self) -> None:
        created = datetime(2024, 3, 7, tzinfo=UTC)
        meta = ObjectMetadata(size=5, created_at=created)

        assert meta.size == 5
        assert meta.created_at == created
