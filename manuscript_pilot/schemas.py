# Copyright 2026 Chisom Ubabukoh
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from typing import Any, Dict

from manuscript_pilot.models import VERDICTS

# Gemini structured-output dialect (OpenAPI subset, upper-case type names)

GUIDELINES_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "journalName": {"type": "STRING"},
        "wordCounts": {
            "type": "OBJECT",
            "properties": {
                "article": {"type": "STRING"},
                "abstract": {"type": "STRING"},
                "methods": {"type": "STRING"},
            },
        },
        "formatting": {
            "type": "OBJECT",
            "properties": {
                "figures": {"type": "STRING"},
                "references": {"type": "STRING"},
                "fonts": {"type": "STRING"},
            },
        },
        "editorialCriteria": {
            "type": "OBJECT",
            "properties": {
                "scope": {"type": "STRING"},
                "novelty": {"type": "STRING"},
                "dataRigor": {"type": "STRING"},
            },
        },
    },
    "required": ["journalName", "wordCounts", "formatting", "editorialCriteria"],
}

SUGGESTIONS_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "name": {"type": "STRING", "description": "Name of the journal"},
            "matchScore": {
                "type": "INTEGER",
                "description": "0-100. Weighted heavily by quality fit, not just topic fit.",
            },
            "tier": {"type": "STRING", "description": "e.g. Top Tier, High Impact, Solid Mid-Tier, Specialized"},
            "rationale": {
                "type": "STRING",
                "description": "Why does this topic fit the journal's scope? (Subject matter only)",
            },
            "qualityAnalysis": {
                "type": "STRING",
                "description": "Critical assessment of why the paper's QUALITY fits this tier. Be specific about data depth/novelty.",
            },
            "advice": {"type": "STRING", "description": "Specific advice to improve acceptance odds."},
        },
        "required": ["name", "matchScore", "tier", "rationale", "qualityAnalysis", "advice"],
    },
}

EVALUATION_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "journalName": {"type": "STRING"},
        "matchScore": {
            "type": "INTEGER",
            "description": "0-100. If quality is too low for this journal, score must be low (<50).",
        },
        "verdict": {"type": "STRING", "format": "enum", "enum": list(VERDICTS)},
        "strengths": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "List of 3 key strengths",
        },
        "weaknesses": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "List of 3 key weaknesses (e.g. lack of mechanism, limited novelty)",
        },
        "editorComments": {
            "type": "STRING",
            "description": "Internal decision note focusing on whether the bar for impact/novelty is met.",
        },
    },
    "required": ["journalName", "matchScore", "verdict", "strengths", "weaknesses", "editorComments"],
}


def to_json_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a Gemini schema to plain JSON Schema (used for Ollama's format=)."""
    converted: Dict[str, Any] = {}
    for key, value in schema.items():
        if key == "type":
            converted["type"] = str(value).lower()
        elif key == "format" and value == "enum":
            continue
        elif key == "properties":
            converted["properties"] = {name: to_json_schema(sub) for name, sub in value.items()}
        elif key == "items":
            converted["items"] = to_json_schema(value)
        else:
            converted[key] = value
    return converted
