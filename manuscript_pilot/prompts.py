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

"""Prompt templates for every panel.

Each builder only interpolates user content into text. Nothing here talks to
a model, so the exact wording sent for a request can be asserted in tests.
"""

from __future__ import annotations

from manuscript_pilot.journals import journal_style
from manuscript_pilot.models import AnalysisType, CoverLetterParams

COVER_LETTER_TEXT_LIMIT = 50000
SUGGESTION_TEXT_LIMIT = 60000
EVALUATION_TEXT_LIMIT = 50000
LIVE_GUIDELINES_LIMIT = 8000

ASPECT_RATIO_PHRASES = {
    "1:1": "square (1:1 aspect ratio)",
    "4:3": "standard landscape (4:3 aspect ratio)",
    "16:9": "wide landscape (16:9 aspect ratio)",
}


def editor_system_instruction(journal: str) -> str:
    style = journal_style(journal)
    return f"""You are a Senior Editor at {journal}.
Your role is to assist researchers in refining their manuscripts to meet the specific standards of {journal}.

Journal Style Priorities:
1. {style['focus']}
2. Tone: {style['tone']}

When providing output:
- If asking for a rewrite, provide the rewritten text clearly.
- Provide a bulleted list of "Editor's Notes" explaining *why* changes were made to fit {journal}.
"""


def analysis_prompt(text: str, analysis_type: AnalysisType, journal: str) -> str:
    if analysis_type == AnalysisType.IMPACT_POLISH:
        return f"""Please polish the following text specifically for submission to **{journal}**.

Goals:
- Enhance the flow and readability.
- Ensure the significance is communicated in a way that suits {journal}'s audience.
- Use active voice.

Text to Polish:
"{text}"
"""
    if analysis_type == AnalysisType.LOGIC_CHECK:
        return f"""Analyze the scientific logic of the following text as a reviewer for **{journal}**.
Identify potential gaps in reasoning, over-interpretation of data, or places where more experimental evidence might be requested by {journal} reviewers.

Text to Analyze:
"{text}"
"""
    if analysis_type == AnalysisType.CONCISENESS:
        return f"""Significantly shorten the following text while retaining all key scientific meaning.
Aim for a word count reduction suitable for **{journal}**'s strict formatting limits.

Text to Shorten:
"{text}"
"""
    if analysis_type == AnalysisType.REBUTTAL:
        return f"""The user has provided a draft response to a reviewer or a specific reviewer comment for a manuscript submitted to **{journal}**.
Refine this response to be polite, professional, firm yet conciliatory, adhering to standard conventions.

Draft Response/Comment:
"{text}"
"""
    raise ValueError(f"Unknown analysis type: {analysis_type}")


def cover_letter_prompt(params: CoverLetterParams, journal: str) -> str:
    style = journal_style(journal)
    novelty = ""
    if params.novelty_statement.strip():
        novelty = f"""
Author's Own Novelty Statement:
"{params.novelty_statement.strip()}"
"""
    return f"""Act as a Senior Editor helping to draft a high-impact Cover Letter for submission to **{journal}**.

Manuscript Details:
- Title: {params.title}
- Corresponding Author: {params.author_name}
- Affiliation: {params.affiliation}
- Editor Name: {params.editor_name.strip() or "the Editor"}

Abstract:
"{params.abstract}"
{novelty}
Manuscript Content (Intro/Results/Discussion):
"{params.manuscript_text[:COVER_LETTER_TEXT_LIMIT]}"

Task:
1. Analyze the provided Abstract and Manuscript Content to extract the core novelty and conceptual advance.
2. Write a compelling cover letter that pitches this specific advance to **{journal}**.

Style Guide for {journal}:
- Focus: {style['focus']}
- Tone: {style['tone']}

Structure:
- Standard professional opening.
- A strong "Hook" paragraph stating the major discovery immediately.
- A concise summary of the key findings and why they matter.
- A closing statement on why this fits {journal}'s scope.
- Standard sign-off.
"""


def figure_prompt(
    request: str,
    journal: str,
    aspect_ratio: str,
    image_size: str,
    has_input_image: bool,
    use_pro: bool,
) -> str:
    if use_pro:
        return f"""You are an expert scientific illustrator for **{journal}**.
You specialize in creating figures that meet strict academic publication standards.

Task: Generate a high-resolution (2K), publication-quality scientific figure.
User Request: "{request}"

ACADEMIC STANDARDS for {journal}:
- **Visual Style**: Flat, vector-graphic aesthetic (like Adobe Illustrator/BioRender).
- **Background**: Pure WHITE background. No gradients or textures.
- **Typography**: Clean, sans-serif fonts (Arial/Helvetica style). High contrast and legible.
- **Color Palette**: Professional, colorblind-safe palettes (e.g., Viridis, Okabe-Ito, or muted journal colors).
- **Rigor**: Scientific accuracy is paramount. Diagrams should be schematic and logical.
"""

    prompt = f"You are an expert scientific illustrator for **{journal}**."
    if has_input_image:
        prompt += f"""
User Request to EDIT/MODIFY this image: "{request}"

Instructions:
- Modify the provided image to satisfy the user's request.
- Maintain strict scientific accuracy and academic style.
- Ensure the background remains clean (preferably white).
- Provide a brief text summary of changes."""
        if image_size == "2K":
            prompt += "\nNote: The user requested High Resolution. Please generate the highest quality output possible with clear details."
        return prompt

    # The flash image model takes no image_config, so the shape goes in the text
    prompt += f"""
User Request to GENERATE a scientific figure: "{request}"

ACADEMIC REQUIREMENTS:
- Style: Professional scientific illustration.
- Background: Pure WHITE.
- Content: accurate schematic or clear data visualization.
- Font: Sans-serif, legible.
- No artistic distortions."""
    prompt += f"\nOutput Format: Please generate a {ASPECT_RATIO_PHRASES.get(aspect_ratio, 'square')} image."
    return prompt


def guidelines_prompt(journal: str, live_text: str = "") -> str:
    live = ""
    if live_text:
        live = f"""
OFFICIAL AUTHOR GUIDELINES PAGE (fetched live):
---
{live_text[:LIVE_GUIDELINES_LIMIT]}
---
NOTE: The text above is from the journal's official website. PRIORITIZE IT over internal knowledge.
"""
    return f"""Provide a structured summary of the submission guidelines for the academic journal: **{journal}**.

Focus on:
1. Typical Word Counts (Abstract, Article).
2. Figure/Formatting rules (Fonts, Panels).
3. Editorial Criteria (Scope, Novelty).
{live}
Return a JSON object adhering to the schema.
"""


def assistant_system_instruction() -> str:
    return """You are an intelligent research assistant for scientists submitting to top-tier biological journals.
You can answer questions about:
- Statistical analysis methods suitable for cell biology.
- Experimental design and controls (e.g., rescue experiments, validation).
- Clarifications on standard reviewer comments.
- General scientific writing advice.

Maintain a helpful, scholarly, and precise tone."""


def refinement_system_instruction(original: str, result: str, analysis_type: AnalysisType, journal: str) -> str:
    return f"""You are discussing a specific text revision for a manuscript targeted at **{journal}**.

Context:
- Analysis Type: {analysis_type.value}
- Original User Text: "{original}"
- Your Previous Output/Revision: "{result}"

The user will ask questions about your revision or ask for further adjustments.
Answer specifically about this text snippet and how it fits the style of {journal}. Be concise and helpful."""


def suggestion_prompt(title: str, abstract: str, full_text: str) -> str:
    return f"""You are a Senior Editor and Strategic Publication Consultant.

Task: Recommend 3-5 academic journals for the following manuscript.

CRITICAL INSTRUCTION:
You must perform a ruthless, objective assessment of the "Scientific Level" of the text.
Do NOT suggest top-tier journals (Nature, Cell, NCB) just because the topic (Scope) matches.
Only suggest them if the data quality, depth of mechanism, and conceptual novelty actually meet that bar.

Tiers to consider:
- **Top Tier (Nature, Cell, Science)**: Paradigm-shifting, massive in vivo data, broad interest.
- **High Impact (NCB, Mol Cell, Dev Cell)**: Deep mechanism, complete story, strong novelty.
- **Solid Mid-Tier (J Cell Sci, J Biol Chem, MBoC, J Cell Biol)**: Solid execution, incremental advance, or descriptive mechanism.
- **Specialized/Reports**: Preliminary data or very niche focus.

Manuscript Information:
Title: "{title}"
Abstract: "{abstract}"
Full Manuscript Text (Intro/Results/Discussion):
"{full_text[:SUGGESTION_TEXT_LIMIT]}"

If the paper appears to be a "Solid Mid-Tier" quality, primarily suggest those, perhaps with one "Reach" option, but explicitly state in the qualityAnalysis why it might fall short of top tier (e.g. "Lacks in vivo rescue", "Mechanism is correlative").

Return a JSON array.
"""


def evaluation_prompt(title: str, abstract: str, full_text: str, journal: str) -> str:
    return f"""Act as a Senior Editor at the journal: "{journal}".

Your Task: Evaluate the suitability of the following manuscript for *your* specific journal.

CRITICAL: You must distinguish between SCOPE (topic) and LEVEL (quality/impact).
- A paper can be perfectly in scope (e.g., cell biology) but rejected because it is "incremental" or "lacks mechanism".
- Be honest. If the text provided is not up to the standard of "{journal}", say so.

Manuscript:
Title: "{title}"
Abstract: "{abstract}"
Partial Full Text: "{full_text[:EVALUATION_TEXT_LIMIT]}"

Analyze:
1. Scope Match.
2. Novelty/Impact sufficiency for this tier.
3. Rigor/Quality of data presented.

Return a JSON object.
"""
