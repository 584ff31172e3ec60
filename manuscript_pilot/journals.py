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

from typing import Dict, Optional

PRESET_JOURNALS = [
    "Nature Cell Biology",
    "Nature",
    "Science",
    "Cell",
    "Molecular Cell",
    "Nature Communications",
    "Journal of Cell Biology",
    "Current Biology",
    "eLife",
]

DEFAULT_JOURNAL = "Nature Cell Biology"
CUSTOM_JOURNAL_OPTION = "Custom / Other..."

# Used by the live guidelines lookup
JOURNAL_HOMEPAGES = {
    "Nature Cell Biology": "https://www.nature.com/ncb/",
    "Nature": "https://www.nature.com/nature/",
    "Science": "https://www.science.org/journal/science",
    "Cell": "https://www.cell.com/cell/home",
    "Molecular Cell": "https://www.cell.com/molecular-cell/home",
    "Nature Communications": "https://www.nature.com/ncomms/",
    "Journal of Cell Biology": "https://rupress.org/jcb",
    "Current Biology": "https://www.cell.com/current-biology/home",
    "eLife": "https://elifesciences.org/",
}


def journal_style(journal: str) -> Dict[str, str]:
    """Return the editorial focus and tone a journal expects."""
    j = (journal or "").lower()
    if "nature" in j or "science" in j:
        return {
            "focus": "Broad conceptual advance, accessibility to non-specialists, and 'punchy' concise writing.",
            "tone": "Authoritative, high-impact, and devoid of unnecessary jargon.",
        }
    if "cell" in j or "molecular cell" in j:
        return {
            "focus": "Deep mechanistic insight, logical completeness, and a structured, comprehensive narrative.",
            "tone": "Scholarly, detailed, and logically rigorous.",
        }
    if "journal of cell biology" in j or "jcb" in j or "current biology" in j:
        return {
            "focus": "Solid experimental data, clear cell biological mechanisms, and avoiding over-interpretation.",
            "tone": "Measured, precise, and data-driven.",
        }
    return {
        "focus": "Clarity, novelty within the specific field, and methodological soundness.",
        "tone": "Professional and constructive.",
    }


def find_homepage(journal: str) -> Optional[str]:
    """Case-insensitive homepage lookup for the preset journals."""
    if not journal:
        return None
    if journal in JOURNAL_HOMEPAGES:
        return JOURNAL_HOMEPAGES[journal]
    target = " ".join(journal.lower().split())
    for name, url in JOURNAL_HOMEPAGES.items():
        if name.lower() == target:
            return url
    return None


def score_band(score: int) -> str:
    if score >= 85:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "moderate"
    return "weak"


SCORE_BAND_COLORS = {
    "excellent": "green",
    "good": "blue",
    "moderate": "orange",
    "weak": "red",
}


def evaluation_is_favourable(score: int) -> bool:
    return score > 70
