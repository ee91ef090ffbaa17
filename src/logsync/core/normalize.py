"""JSON content normalization.

Producers write log objects either as one JSON document (an object or an
array of objects) or as line-delimited JSON. normalize() accepts both and
returns a flat list of values.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from logsync.core.models import JsonValue


logger = logging.getLogger(__name__)

# Length of the line excerpt included in parse warnings
_SNIPPET_LENGTH = 100


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-finite number not allowed: {name}")


def parse_json(text: str) -> JsonValue:
    """Parse strict JSON text, rejecting NaN and Infinity.

    Raises:
        ValueError: If the text is not valid JSON (json.JSONDecodeError
            is a ValueError subclass).
    """
    return json.loads(text, parse_constant=_reject_constant)


def normalize(raw_text: str) -> list[JsonValue]:
    """Parse text holding a JSON document or line-delimited JSON.

    A whole-document parse is tried first: an array yields its elements,
    any other value yields a single-element list. If that fails, each
    non-blank line is parsed on its own and malformed lines are skipped
    with a warning. Input nested too deeply to parse counts as malformed.

    Args:
        raw_text: Decoded object content.

    Returns:
        Parsed JSON values in document order (empty for blank input).

    Example:
        >>> normalize('{"a": 1}\\nnot-json\\n{"a": 2}')
        [{'a': 1}, {'a': 2}]
    """
    text = raw_text.strip()
    if not text:
        return []

    try:
        document = parse_json(text)
    except (ValueError, RecursionError):
        return _normalize_lines(text)

    if isinstance(document, list):
        return document
    return [document]


def _normalize_lines(text: str) -> list[JsonValue]:
    """Parse line-delimited JSON, skipping malformed lines."""
    values: list[JsonValue] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            values.append(parse_json(stripped))
        except (ValueError, RecursionError):
            logger.warning(
                "Failed to parse JSON line: %s...", stripped[:_SNIPPET_LENGTH]
            )
    return values


def to_json_line(value: JsonValue) -> str:
    """Serialize a value as compact single-line JSON (no trailing newline)."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
