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

# ────────────────────────────────────────────────
# Download helpers: cover letters and journal reports
# ────────────────────────────────────────────────
from __future__ import annotations

import datetime
from typing import Iterable, List

import pandas as pd
from fpdf import FPDF

from manuscript_pilot.models import JournalEvaluation, JournalSuggestion

FOOTER = "Generated by Manuscript Pilot. AI output must be checked by the authors."


def _latin1(text: str) -> str:
    """Core PDF fonts are Latin-1 only."""
    return str(text).encode("latin-1", "replace").decode("latin-1")


def _new_pdf() -> FPDF:
    pdf = FPDF()
    pdf.add_page()
    pdf.set_auto_page_break(auto=True, margin=15)
    return pdf


def _line(pdf: FPDF, text: str, height: float = 6, style: str = "", size: int = 10, align: str = "L") -> None:
    pdf.set_font("Helvetica", style=style, size=size)
    pdf.multi_cell(0, height, _latin1(text), align=align, new_x="LMARGIN", new_y="NEXT")


def _header(pdf: FPDF, title: str) -> None:
    _line(pdf, title, height=10, style="B", size=16, align="C")
    _line(pdf, f"Generated on: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M')}", height=10, align="C")
    pdf.ln(5)


def _footer(pdf: FPDF) -> None:
    pdf.ln(5)
    _line(pdf, FOOTER, height=10, size=8, align="C")


def cover_letter_filename(journal: str) -> str:
    slug = "_".join(journal.split()) or "journal"
    return f"cover_letter_{slug}.txt"


def cover_letter_text(letter: str) -> bytes:
    return letter.encode("utf-8")


def cover_letter_pdf(letter: str, journal: str) -> bytes:
    pdf = _new_pdf()
    _line(pdf, f"Cover Letter - {journal}", height=10, style="B", size=12)
    pdf.ln(3)
    for paragraph in letter.split("\n"):
        if paragraph.strip():
            _line(pdf, paragraph, size=11)
        else:
            pdf.ln(4)
    return bytes(pdf.output())


def suggestions_dataframe(suggestions: Iterable[JournalSuggestion]) -> pd.DataFrame:
    rows = [
        {
            "Journal": s.name,
            "Match Score": s.match_score,
            "Tier": s.tier,
            "Scope Fit": s.rationale,
            "Quality Analysis": s.quality_analysis,
            "Advice": s.advice,
        }
        for s in suggestions
    ]
    columns = ["Journal", "Match Score", "Tier", "Scope Fit", "Quality Analysis", "Advice"]
    return pd.DataFrame(rows, columns=columns)


def suggestions_csv(suggestions: Iterable[JournalSuggestion]) -> bytes:
    return suggestions_dataframe(suggestions).to_csv(index=False).encode("utf-8")


def suggestions_pdf(suggestions: List[JournalSuggestion], title: str = "") -> bytes:
    pdf = _new_pdf()
    _header(pdf, "Manuscript Pilot - Journal Recommendations")
    if title:
        _line(pdf, f"Manuscript: {title}", style="I")
        pdf.ln(3)

    for rank, item in enumerate(suggestions, 1):
        _line(pdf, f"{rank}. {item.name}", height=8, style="B", size=12)
        _line(pdf, f"Match: {item.match_score}%  |  Tier: {item.tier}")
        _line(pdf, f"Scope Fit: {item.rationale}")
        _line(pdf, f"Quality Analysis: {item.quality_analysis}")
        _line(pdf, f"Advice: {item.advice}", style="I")
        pdf.ln(5)

    _footer(pdf)
    return bytes(pdf.output())


def evaluation_pdf(evaluation: JournalEvaluation, title: str = "") -> bytes:
    pdf = _new_pdf()
    _header(pdf, "Journal Fit Evaluation")
    if title:
        _line(pdf, f"Manuscript: {title}", style="I")
    _line(pdf, f"Target Journal: {evaluation.journal_name}", height=8, style="B", size=12)
    _line(pdf, f"Match Score: {evaluation.match_score}/100", height=8, style="B", size=14)
    _line(pdf, f"Verdict: {evaluation.verdict}", height=8, size=12)
    pdf.ln(5)

    for heading, points in (("Strengths", evaluation.strengths), ("Weaknesses", evaluation.weaknesses)):
        _line(pdf, heading, height=10, style="B", size=12)
        for point in points:
            _line(pdf, f"- {point}")
        pdf.ln(3)

    _line(pdf, "Editor's Internal Note", height=10, style="B", size=12)
    _line(pdf, evaluation.editor_comments, style="I")

    _footer(pdf)
    return bytes(pdf.output())
