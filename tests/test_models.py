"""Tests for view-state models and response parsing."""

from __future__ import annotations

import pytest

from manuscript_pilot.models import (
    AnalysisType,
    FigureImage,
    JournalEvaluation,
    JournalGuidelines,
    JournalSuggestion,
)


def test_analysis_type_labels():
    assert AnalysisType.IMPACT_POLISH.label == "Impact Polish"
    assert AnalysisType.CONCISENESS.button_label == "Shorten"
    assert AnalysisType("REBUTTAL") is AnalysisType.REBUTTAL


def test_figure_image_data_url_round_trip():
    image = FigureImage(data=b"\x89PNG-bytes", mime_type="image/jpeg")

    restored = FigureImage.from_data_url(image.to_data_url())

    assert restored == image
    assert image.extension == "jpg"


def test_figure_image_rejects_plain_urls():
    with pytest.raises(ValueError):
        FigureImage.from_data_url("https://example.org/figure.png")


def test_guidelines_from_nested_payload():
    guidelines = JournalGuidelines.from_dict(
        {
            "journalName": "eLife",
            "wordCounts": {"article": "No limit", "abstract": "150 words"},
            "formatting": {"figures": "TIFF", "references": "Author-year", "fonts": "Arial"},
            "editorialCriteria": {"scope": "Life sciences", "novelty": "High", "dataRigor": "Strict"},
        }
    )

    assert guidelines.journal_name == "eLife"
    assert guidelines.abstract_words == "150 words"
    assert guidelines.methods_words == ""
    assert guidelines.data_rigor == "Strict"


def test_guidelines_tolerate_missing_sections():
    guidelines = JournalGuidelines.from_dict({"wordCounts": "n/a"}, fallback_name="Cell")

    assert guidelines.journal_name == "Cell"
    assert guidelines.article_words == ""


def test_suggestion_score_is_clamped():
    assert JournalSuggestion.from_dict({"name": "Cell", "matchScore": 140}).match_score == 100
    assert JournalSuggestion.from_dict({"name": "Cell", "matchScore": "72.6"}).match_score == 73
    assert JournalSuggestion.from_dict({"name": "Cell", "matchScore": None}).match_score == 0


def test_evaluation_from_dict():
    evaluation = JournalEvaluation.from_dict(
        {
            "matchScore": 55,
            "verdict": "High Risk",
            "strengths": ["Clear data", None],
            "weaknesses": "not a list",
            "editorComments": "Incremental.",
        },
        fallback_name="Nature",
    )

    assert evaluation.journal_name == "Nature"
    assert evaluation.strengths == ["Clear data"]
    assert evaluation.weaknesses == []
    assert evaluation.editor_comments == "Incremental."
