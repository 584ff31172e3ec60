"""Tests for prompt construction."""

from __future__ import annotations

import pytest

from manuscript_pilot import prompts
from manuscript_pilot.models import AnalysisType, CoverLetterParams


def test_editor_system_instruction_uses_journal_style():
    text = prompts.editor_system_instruction("Nature")

    assert "Senior Editor at Nature" in text
    assert "Broad conceptual advance" in text
    assert "Authoritative, high-impact" in text


@pytest.mark.parametrize(
    "analysis_type, marker",
    [
        (AnalysisType.IMPACT_POLISH, "Text to Polish:"),
        (AnalysisType.LOGIC_CHECK, "Text to Analyze:"),
        (AnalysisType.CONCISENESS, "Text to Shorten:"),
        (AnalysisType.REBUTTAL, "Draft Response/Comment:"),
    ],
)
def test_analysis_prompt_per_type(analysis_type, marker):
    text = prompts.analysis_prompt("Cells divide.", analysis_type, "eLife")

    assert marker in text
    assert '"Cells divide."' in text
    assert "eLife" in text


def test_analysis_prompt_rejects_unknown_type():
    with pytest.raises(ValueError):
        prompts.analysis_prompt("x", "SOMETHING_ELSE", "Cell")


def test_cover_letter_prompt_defaults_editor_and_truncates():
    params = CoverLetterParams(
        title="Spindle checkpoints",
        author_name="A. Author",
        affiliation="Institute",
        abstract="We show...",
        manuscript_text="x" * (prompts.COVER_LETTER_TEXT_LIMIT + 100),
    )

    text = prompts.cover_letter_prompt(params, "Cell")

    assert "Editor Name: the Editor" in text
    assert "Author's Own Novelty Statement" not in text
    assert "x" * prompts.COVER_LETTER_TEXT_LIMIT in text
    assert "x" * (prompts.COVER_LETTER_TEXT_LIMIT + 1) not in text


def test_cover_letter_prompt_includes_novelty_statement():
    params = CoverLetterParams(manuscript_text="body", editor_name="Dr. Smith",
                               novelty_statement="  First in vivo rescue.  ")

    text = prompts.cover_letter_prompt(params, "Cell")

    assert "Editor Name: Dr. Smith" in text
    assert '"First in vivo rescue."' in text


def test_figure_prompt_pro_path():
    text = prompts.figure_prompt("mTOR pathway", "Cell", "16:9", "2K", has_input_image=False, use_pro=True)

    assert "high-resolution (2K)" in text
    assert "Output Format" not in text


def test_figure_prompt_generation_bakes_in_aspect_ratio():
    text = prompts.figure_prompt("mTOR pathway", "Cell", "4:3", "1K", has_input_image=False, use_pro=False)

    assert 'GENERATE a scientific figure: "mTOR pathway"' in text
    assert "standard landscape (4:3 aspect ratio)" in text


def test_figure_prompt_unknown_ratio_falls_back_to_square():
    text = prompts.figure_prompt("x", "Cell", "3:2", "1K", has_input_image=False, use_pro=False)

    assert "Please generate a square image." in text


def test_figure_prompt_edit_mentions_high_resolution_for_2k():
    text = prompts.figure_prompt("bigger fonts", "Cell", "1:1", "2K", has_input_image=True, use_pro=False)

    assert 'EDIT/MODIFY this image: "bigger fonts"' in text
    assert "High Resolution" in text
    assert "Output Format" not in text


def test_guidelines_prompt_live_text_is_limited():
    live = "y" * (prompts.LIVE_GUIDELINES_LIMIT + 10)

    with_live = prompts.guidelines_prompt("eLife", live)
    without_live = prompts.guidelines_prompt("eLife")

    assert "PRIORITIZE IT" in with_live
    assert "y" * (prompts.LIVE_GUIDELINES_LIMIT + 1) not in with_live
    assert "OFFICIAL AUTHOR GUIDELINES" not in without_live


def test_refinement_instruction_carries_context():
    text = prompts.refinement_system_instruction("orig", "revised", AnalysisType.CONCISENESS, "Science")

    assert "Analysis Type: CONCISENESS" in text
    assert '"orig"' in text and '"revised"' in text
    assert "style of Science" in text


def test_suggestion_and_evaluation_prompts_truncate_full_text():
    full = "z" * 70000

    suggestion = prompts.suggestion_prompt("T", "A", full)
    evaluation = prompts.evaluation_prompt("T", "A", full, "Molecular Cell")

    assert "z" * prompts.SUGGESTION_TEXT_LIMIT in suggestion
    assert "z" * (prompts.SUGGESTION_TEXT_LIMIT + 1) not in suggestion
    assert "z" * (prompts.EVALUATION_TEXT_LIMIT + 1) not in evaluation
    assert 'Senior Editor at the journal: "Molecular Cell"' in evaluation
