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

"""Feature operations behind each panel.

Every operation builds its prompt, makes one model call and turns any
failure into the fixed fallback the panels display.
"""

from __future__ import annotations

from typing import List, Optional

from manuscript_pilot import llm, prompts
from manuscript_pilot.config import get_settings
from manuscript_pilot.logging_utils import get_logger, log_event
from manuscript_pilot.models import (
    AnalysisType,
    CoverLetterParams,
    FigureImage,
    FigureResult,
    JournalEvaluation,
    JournalGuidelines,
    JournalSuggestion,
)
from manuscript_pilot.schemas import EVALUATION_SCHEMA, GUIDELINES_SCHEMA, SUGGESTIONS_SCHEMA

LOGGER = get_logger("manuscript_pilot.services")

ANALYSIS_EMPTY = "No response generated."
ANALYSIS_ERROR = "Error: Unable to analyze text at this time. Please check your input and try again."
COVER_LETTER_EMPTY = "Could not generate cover letter."
COVER_LETTER_ERROR = "Error generating cover letter."
FIGURE_ERROR = "Error processing figure request. Please ensure you have selected a valid API key."
FIGURE_NO_EDIT = "I analyzed the image but did not generate a modification."


def analyze_manuscript_text(text: str, analysis_type: AnalysisType, journal: str) -> str:
    log_event("ANALYZE", f"Type: {analysis_type.value} | Journal: {journal} | Chars: {len(text)}")
    try:
        result = llm.generate_text(
            prompts.analysis_prompt(text, analysis_type, journal),
            system_instruction=prompts.editor_system_instruction(journal),
            temperature=0.3,
        )
    except Exception:
        LOGGER.exception("Analysis failed (%s, %s)", analysis_type.value, journal)
        return ANALYSIS_ERROR
    return result or ANALYSIS_EMPTY


def generate_cover_letter(params: CoverLetterParams, journal: str) -> str:
    log_event("COVER_LETTER", f"Title: {params.title} | Journal: {journal}")
    try:
        letter = llm.generate_text(prompts.cover_letter_prompt(params, journal), temperature=0.6)
    except Exception:
        LOGGER.exception("Cover letter generation failed for %s", journal)
        return COVER_LETTER_ERROR
    return letter or COVER_LETTER_EMPTY


def select_image_model(image_size: str, has_input_image: bool) -> str:
    """Pro image model only for 2K text-to-image; every edit goes to Flash."""
    settings = get_settings()
    if image_size == "2K" and not has_input_image:
        return settings.pro_image_model
    return settings.flash_image_model


def generate_or_edit_figure(
    prompt: str,
    journal: str,
    aspect_ratio: str = "1:1",
    image_size: str = "1K",
    image: Optional[FigureImage] = None,
) -> FigureResult:
    has_input = image is not None
    use_pro = image_size == "2K" and not has_input
    model = select_image_model(image_size, has_input)
    log_event("FIGURE", f"Mode: {'edit' if has_input else 'generate'} | Model: {model} | Journal: {journal}")

    full_prompt = prompts.figure_prompt(prompt, journal, aspect_ratio, image_size, has_input, use_pro)
    try:
        if use_pro:
            text, result_image = llm.generate_image(
                full_prompt, model, aspect_ratio=aspect_ratio, image_size=image_size
            )
        else:
            text, result_image = llm.generate_image(full_prompt, model, image=image)
    except Exception:
        LOGGER.exception("Figure request failed on %s", model)
        return FigureResult(text=FIGURE_ERROR)

    if not text:
        if has_input and result_image is None:
            text = FIGURE_NO_EDIT
        else:
            text = f"Processed figure for {journal}."
    return FigureResult(text=text, image=result_image)


def get_journal_guidelines(journal: str, live_text: Optional[str] = None) -> Optional[JournalGuidelines]:
    log_event("GUIDELINES", f"Journal: {journal} | Live: {bool(live_text)}")
    try:
        data = llm.generate_json(prompts.guidelines_prompt(journal, live_text or ""), GUIDELINES_SCHEMA)
        if not isinstance(data, dict):
            raise llm.LLMError(f"Expected an object, got {type(data).__name__}")
    except Exception:
        LOGGER.exception("Guidelines fetch failed for %s", journal)
        return None
    return JournalGuidelines.from_dict(data, fallback_name=journal)


def create_chat_session() -> llm.ChatSession:
    return llm.create_chat(prompts.assistant_system_instruction())


def create_refinement_chat(
    original: str, result: str, analysis_type: AnalysisType, journal: str
) -> llm.ChatSession:
    return llm.create_chat(prompts.refinement_system_instruction(original, result, analysis_type, journal))


def suggest_target_journals(title: str, abstract: str, full_text: str = "") -> List[JournalSuggestion]:
    log_event("JOURNAL_DISCOVER", f"Title: {title}")
    try:
        data = llm.generate_json(prompts.suggestion_prompt(title, abstract, full_text), SUGGESTIONS_SCHEMA)
    except Exception:
        LOGGER.exception("Journal suggestion failed for %r", title)
        return []
    if isinstance(data, dict):
        # Some backends wrap the array in an object
        data = next((v for v in data.values() if isinstance(v, list)), [])
    if not isinstance(data, list):
        LOGGER.warning("Journal suggestions were not a list: %s", type(data).__name__)
        return []
    return [JournalSuggestion.from_dict(item) for item in data if isinstance(item, dict)]


def evaluate_journal_fit(
    title: str, abstract: str, full_text: str, journal: str
) -> Optional[JournalEvaluation]:
    log_event("JOURNAL_CHECK", f"Title: {title} | Journal: {journal}")
    try:
        data = llm.generate_json(
            prompts.evaluation_prompt(title, abstract, full_text, journal), EVALUATION_SCHEMA
        )
        if not isinstance(data, dict):
            raise llm.LLMError(f"Expected an object, got {type(data).__name__}")
    except Exception:
        LOGGER.exception("Journal evaluation failed for %s", journal)
        return None
    return JournalEvaluation.from_dict(data, fallback_name=journal)
