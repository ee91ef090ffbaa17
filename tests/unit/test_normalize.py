"""Unit tests for JSON content normalization."""

from __future__ import annotations

import json
import logging

import pytest

from logsync.core.normalize import normalize, parse_json, to_json_line


@pytest.mark.core
@pytest.mark.tra("Domain.Normalize")
@pytest.mark.tier(0)
class TestNormalize:
    """Tests for normalize()."""

    def test_array_yields_elements(self) -> None:
        assert normalize('[{"a":1},{"a":2}]') == [{"a": 1}, {"a": 2}]

    def test_single_object_yields_one_value(self) -> None:
        assert normalize('{"a":1}') == [{"a": 1}]

    def test_scalar_document_yields_one_value(self) -> None:
        assert normalize("42") == [42]

    def test_line_delimited_yields_each_line(self) -> None:
        assert normalize('{"a":1}\n{"a":2}') == [{"a": 1}, {"a": 2}]

    def test_malformed_line_is_skipped(self) -> None:
        assert normalize('{"a":1}\nnot-json\n{"a":2}') == [{"a": 1}, {"a": 2}]

    def test_empty_input_yields_nothing(self) -> None:
        assert normalize("") == []

    def test_whitespace_input_yields_nothing(self) -> None:
        assert normalize("  \n\t \n") == []

    def test_blank_lines_and_crlf_are_tolerated(self) -> None:
        text = '\r\n{"a":1}\r\n\r\n   \n{"b":2}\r\n'

        assert normalize(text) == [{"a": 1}, {"b": 2}]

    def test_line_arrays_are_not_flattened(self) -> None:
        """Only a whole-document array is unpacked; per-line arrays stay values."""
        assert normalize('[1,2]\n{"a":1}') == [[1, 2], {"a": 1}]

    def test_pretty_printed_document_parses_whole(self) -> None:
        text = json.dumps([{"a": 1}, {"b": [1, 2]}], indent=2)

        assert normalize(text) == [{"a": 1}, {"b": [1, 2]}]

    def test_all_lines_malformed_yields_nothing(self) -> None:
        assert normalize("nope\nstill nope") == []

    def test_malformed_line_logs_warning_with_excerpt(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        bad_line = "x" * 150

        with caplog.at_level(logging.WARNING, logger="logsync"):
            normalize(f'{{"a":1}}\n{bad_line}')

        messages = [r.getMessage() for r in caplog.records]
        assert any("Failed to parse JSON line" in m for m in messages)
        assert any(("x" * 100) + "..." in m for m in messages)
        assert not any(("x" * 101) in m for m in messages)

    def test_deeply_nested_document_yields_nothing(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        depth = 100_000
        text = "[" * depth + "]" * depth

        with caplog.at_level(logging.WARNING, logger="logsync"):
            assert normalize(text) == []

        assert "Failed to parse JSON line" in caplog.text

    def test_deeply_nested_line_is_skipped(self) -> None:
        depth = 100_000
        text = '{"a":1}\n' + "[" * depth + "]" * depth + '\n{"a":2}'

        assert normalize(text) == [{"a": 1}, {"a": 2}]

    def test_non_finite_numbers_are_rejected(self) -> None:
        """NaN is not JSON; such lines are dropped."""
        assert normalize('{"a":NaN}\n{"a":1}') == [{"a": 1}]

    def test_preserves_key_order(self) -> None:
        (value,) = normalize('{"z":1,"a":2,"m":3}')

        assert list(value) == ["z", "a", "m"]

    def test_line_delimited_values_survive(self) -> None:
        """Property: any list of JSON objects written one per line is recovered."""
        from hypothesis import given, settings
        from hypothesis.strategies import (
            booleans,
            dictionaries,
            integers,
            lists,
            none,
            text,
        )

        scalars = none() | booleans() | integers() | text(max_size=10)

        @settings(database=None)
        @given(
            values=lists(
                dictionaries(text(max_size=5), scalars, min_size=1, max_size=4),
                min_size=2,
                max_size=10,
            )
        )
        def _test_recovers(values: list[dict[str, object]]) -> None:
            raw = "\n".join(json.dumps(v) for v in values)

            assert normalize(raw) == values

        _test_recovers()


@pytest.mark.core
@pytest.mark.tier(0)
class TestParseJson:
    """Tests for parse_json()."""

    def test_rejects_infinity(self) -> None:
        with pytest.raises(ValueError):
            parse_json("Infinity")

    def test_parses_nested_values(self) -> None:
        assert parse_json('{"a":[1,null,true,"s",1.5]}') == {
            "a": [1, None, True, "s", 1.5]
        }


@pytest.mark.core
@pytest.mark.tier(0)
class TestToJsonLine:
    """Tests for to_json_line()."""

    def test_compact_separators(self) -> None:
        assert to_json_line({"x": 1, "y": [1, 2]}) == '{"x":1,"y":[1,2]}'

    def test_keeps_unicode(self) -> None:
        assert to_json_line({"msg": "héllo"}) == '{"msg":"héllo"}'

    def test_escapes_newlines_in_strings(self) -> None:
        """Each value stays on a single line."""
        line = to_json_line({"msg": "a\nb"})

        assert "\n" not in line
        assert json.loads(line) == {"msg": "a\nb"}
