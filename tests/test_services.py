"""Tests for feature operations: fallbacks, temperatures and figure routing."""

from __future__ import annotations

import pytest

from manuscript_pilot import llm, services
from manuscript_pilot.config import get_settings
from manuscript_pilot.models import AnalysisType, CoverLetterParams, FigureImage


def _raise(*args, **kwargs):
    raise llm.LLMError("backend down")


def test_analyze_uses_editor_instruction_and_low_temperature(monkeypatch):
    calls = []

    def fake_generate_text(prompt, system_instruction=None, temperature=0.7):
        calls.append((prompt, system_instruction, temperature))
        return "Polished."

    monkeypatch.setattr(services.llm, "generate_text", fake_generate_text)

    result = services.analyze_manuscript_text("Raw text.", AnalysisType.IMPACT_POLISH, "Nature")

    assert result == "Polished."
    prompt, system_instruction, temperature = calls[0]
    assert '"Raw text."' in prompt
    assert "Senior Editor at Nature" in system_instruction
    assert temperature == 0.3


def test_analyze_empty_and_failure_fallbacks(monkeypatch):
    monkeypatch.setattr(services.llm, "generate_text", lambda *a, **k: "")
    assert services.analyze_manuscript_text("x", AnalysisType.LOGIC_CHECK, "Cell") == services.ANALYSIS_EMPTY

    monkeypatch.setattr(services.llm, "generate_text", _raise)
    assert services.analyze_manuscript_text("x", AnalysisType.LOGIC_CHECK, "Cell") == (
        "Error: Unable to analyze text at this time. Please check your input and try again."
    )


def test_cover_letter_temperature_and_fallbacks(monkeypatch):
    temperatures = []

    def fake_generate_text(prompt, system_instruction=None, temperature=0.7):
        temperatures.append(temperature)
        return ""

    monkeypatch.setattr(services.llm, "generate_text", fake_generate_text)
    params = CoverLetterParams(manuscript_text="body")

    assert services.generate_cover_letter(params, "Cell") == "Could not generate cover letter."
    assert temperatures == [0.6]

    monkeypatch.setattr(services.llm, "generate_text", _raise)
    assert services.generate_cover_letter(params, "Cell") == "Error generating cover letter."


@pytest.fixture
def image_calls(monkeypatch):
    calls = []

    def fake_generate_image(prompt, model, image=None, aspect_ratio=None, image_size=None):
        calls.append({"prompt": prompt, "model": model, "image": image,
                      "aspect_ratio": aspect_ratio, "image_size": image_size})
        return "", FigureImage(b"new")

    monkeypatch.setattr(services.llm, "generate_image", fake_generate_image)
    return calls


def test_figure_2k_generation_uses_pro_model_with_image_config(image_calls):
    result = services.generate_or_edit_figure("pathway", "Cell", aspect_ratio="16:9", image_size="2K")

    call = image_calls[0]
    assert call["model"] == "gemini-3-pro-image-preview"
    assert call["aspect_ratio"] == "16:9" and call["image_size"] == "2K"
    assert result.text == "Processed figure for Cell."
    assert result.image == FigureImage(b"new")


def test_figure_edit_always_uses_flash_model(image_calls):
    source = FigureImage(b"old")

    services.generate_or_edit_figure("bigger fonts", "Cell", image_size="2K", image=source)

    call = image_calls[0]
    assert call["model"] == "gemini-2.5-flash-image"
    assert call["image"] is source
    assert call["aspect_ratio"] is None and call["image_size"] is None


def test_figure_1k_generation_bakes_ratio_into_prompt(image_calls):
    services.generate_or_edit_figure("pathway", "Cell", aspect_ratio="4:3", image_size="1K")

    call = image_calls[0]
    assert call["model"] == "gemini-2.5-flash-image"
    assert "4:3 aspect ratio" in call["prompt"]
    assert call["aspect_ratio"] is None


def test_figure_edit_without_image_back_explains(monkeypatch):
    monkeypatch.setattr(services.llm, "generate_image", lambda *a, **k: ("", None))

    result = services.generate_or_edit_figure("audit", "Cell", image=FigureImage(b"old"))

    assert result.text == "I analyzed the image but did not generate a modification."
    assert result.image is None


def test_figure_failure_fallback(monkeypatch):
    monkeypatch.setattr(services.llm, "generate_image", _raise)

    result = services.generate_or_edit_figure("draw", "Cell")

    assert result.text == "Error processing figure request. Please ensure you have selected a valid API key."
    assert result.image is None


def test_guidelines_success_and_fallback(monkeypatch):
    prompts_seen = []

    def fake_generate_json(prompt, schema, temperature=None):
        prompts_seen.append(prompt)
        return {"journalName": "eLife", "wordCounts": {"abstract": "150"}}

    monkeypatch.setattr(services.llm, "generate_json", fake_generate_json)
    guidelines = services.get_journal_guidelines("eLife", live_text="Official page text")

    assert guidelines.abstract_words == "150"
    assert "Official page text" in prompts_seen[0]

    monkeypatch.setattr(services.llm, "generate_json", lambda *a, **k: ["wrong shape"])
    assert services.get_journal_guidelines("eLife") is None

    monkeypatch.setattr(services.llm, "generate_json", _raise)
    assert services.get_journal_guidelines("eLife") is None


def test_suggestions_parse_list_and_unwrap_object(monkeypatch):
    payload = [{"name": "Cell", "matchScore": 90}, "junk", {"name": "eLife", "matchScore": 70}]
    monkeypatch.setattr(services.llm, "generate_json", lambda *a, **k: payload)

    names = [s.name for s in services.suggest_target_journals("T", "A", "")]
    assert names == ["Cell", "eLife"]

    monkeypatch.setattr(services.llm, "generate_json", lambda *a, **k: {"journals": payload[:1]})
    assert [s.name for s in services.suggest_target_journals("T", "A")] == ["Cell"]

    monkeypatch.setattr(services.llm, "generate_json", _raise)
    assert services.suggest_target_journals("T", "A") == []


def test_evaluation_success_and_fallback(monkeypatch):
    monkeypatch.setattr(services.llm, "generate_json",
                        lambda *a, **k: {"matchScore": 64, "verdict": "Worth Trying"})

    evaluation = services.evaluate_journal_fit("T", "A", "", "Molecular Cell")
    assert evaluation.journal_name == "Molecular Cell"
    assert evaluation.verdict == "Worth Trying"

    monkeypatch.setattr(services.llm, "generate_json", _raise)
    assert services.evaluate_journal_fit("T", "A", "", "Molecular Cell") is None


def test_chat_factories_pass_instructions(monkeypatch):
    instructions = []
    monkeypatch.setattr(services.llm, "create_chat", lambda text: instructions.append(text) or object())

    services.create_chat_session()
    services.create_refinement_chat("orig", "out", AnalysisType.REBUTTAL, "Science")

    assert "research assistant" in instructions[0]
    assert "Analysis Type: REBUTTAL" in instructions[1]


def test_service_calls_are_logged_to_analytics(monkeypatch):
    monkeypatch.setattr(services.llm, "generate_text", lambda *a, **k: "ok")

    services.analyze_manuscript_text("text", AnalysisType.CONCISENESS, "Cell")

    rows = get_settings().analytics_file.read_text(encoding="utf-8").splitlines()
    assert rows[0] == "timestamp,event_type,details"
    assert ",ANALYZE," in rows[1]
