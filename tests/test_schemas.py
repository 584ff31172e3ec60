"""Tests for structured-output schemas."""

from __future__ import annotations

from manuscript_pilot.models import VERDICTS
from manuscript_pilot.schemas import (
    EVALUATION_SCHEMA,
    GUIDELINES_SCHEMA,
    SUGGESTIONS_SCHEMA,
    to_json_schema,
)


def test_to_json_schema_lowercases_types_recursively():
    converted = to_json_schema(SUGGESTIONS_SCHEMA)

    assert converted["type"] == "array"
    assert converted["items"]["type"] == "object"
    assert converted["items"]["properties"]["matchScore"]["type"] == "integer"
    assert converted["items"]["required"] == SUGGESTIONS_SCHEMA["items"]["required"]


def test_to_json_schema_drops_enum_format_but_keeps_values():
    verdict = to_json_schema(EVALUATION_SCHEMA)["properties"]["verdict"]

    assert "format" not in verdict
    assert verdict["enum"] == list(VERDICTS)
    assert verdict["type"] == "string"


def test_to_json_schema_leaves_source_untouched():
    to_json_schema(GUIDELINES_SCHEMA)

    assert GUIDELINES_SCHEMA["type"] == "OBJECT"
    assert GUIDELINES_SCHEMA["properties"]["wordCounts"]["properties"]["article"]["type"] == "STRING"
