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

import streamlit as st

from manuscript_pilot import reports
from manuscript_pilot.journals import SCORE_BAND_COLORS, evaluation_is_favourable, score_band
from manuscript_pilot.models import JournalEvaluation, JournalSuggestion
from manuscript_pilot.state import FinderMode, JournalFinderState, journal_finder_state
from manuscript_pilot.state.journal_finder import NO_RESULTS, READY_TEXT, READY_TITLE
from manuscript_pilot.ui.common import document_uploader

FULL_TEXT_KEY = "finder_full_text"


def _render_suggestion(rank: int, item: JournalSuggestion) -> None:
    color = SCORE_BAND_COLORS[score_band(item.match_score)]
    with st.expander(f"{rank}. {item.name}  ·  {item.match_score}% match", expanded=rank == 1):
        st.markdown(f"**Match:** :{color}[{item.match_score}%]  |  **Tier:** {item.tier}")
        st.markdown(f"**Scope fit:** {item.rationale}")
        st.markdown(f"**Quality analysis:** {item.quality_analysis}")
        st.info(f"💡 {item.advice}")


def _render_evaluation(evaluation: JournalEvaluation) -> None:
    color = "green" if evaluation_is_favourable(evaluation.match_score) else "orange"
    st.markdown(f"#### {evaluation.journal_name}")
    col_score, col_verdict = st.columns(2)
    col_score.metric("Match score", f"{evaluation.match_score}/100")
    col_verdict.markdown(f"**Verdict**\n\n:{color}[{evaluation.verdict}]")

    col_s, col_w = st.columns(2)
    with col_s:
        st.markdown("**✅ Strengths**")
        for point in evaluation.strengths:
            st.markdown(f"- {point}")
    with col_w:
        st.markdown("**⚠️ Weaknesses**")
        for point in evaluation.weaknesses:
            st.markdown(f"- {point}")
    st.markdown("**Editor's internal note**")
    st.markdown(f"> {evaluation.editor_comments}")


def _render_results(state: JournalFinderState) -> None:
    if state.suggestions:
        st.markdown("#### 📚 Recommended journals")
        for rank, item in enumerate(state.suggestions, 1):
            _render_suggestion(rank, item)
        col_csv, col_pdf = st.columns(2)
        col_csv.download_button(
            "📥 Download CSV",
            data=reports.suggestions_csv(state.suggestions),
            file_name="journal_recommendations.csv",
            mime="text/csv",
            use_container_width=True,
        )
        col_pdf.download_button(
            "📄 Download PDF report",
            data=reports.suggestions_pdf(state.suggestions, state.title),
            file_name="journal_recommendations.pdf",
            mime="application/pdf",
            use_container_width=True,
        )
    elif state.evaluation is not None:
        _render_evaluation(state.evaluation)
        st.download_button(
            "📄 Download evaluation PDF",
            data=reports.evaluation_pdf(state.evaluation, state.title),
            file_name="journal_evaluation.pdf",
            mime="application/pdf",
            use_container_width=True,
        )

    placeholder = state.empty_state()
    if placeholder == "no_results":
        st.error(NO_RESULTS)
    elif placeholder == "ready":
        st.markdown(f"#### {READY_TITLE}")
        st.caption(READY_TEXT)


def render(journal: str) -> None:
    state = journal_finder_state(st.session_state)

    st.markdown("### 🔍 Journal Matcher")
    mode = st.radio(
        "Mode",
        list(FinderMode),
        index=list(FinderMode).index(state.mode),
        format_func=lambda m: "Discover journals" if m == FinderMode.DISCOVER else "Check a specific journal",
        horizontal=True,
    )
    if mode != state.mode:
        state.mode = mode

    col_form, col_results = st.columns([2, 3])
    with col_form:
        state.title = st.text_input("**Title**", value=state.title, placeholder="Enter the full title...")
        state.abstract = st.text_area("**Abstract**", value=state.abstract, height=160,
                                      placeholder="Paste your abstract here...")

        extracted = document_uploader("Load full text from a manuscript", key="finder_upload")
        if extracted:
            state.full_text = extracted
            st.session_state[FULL_TEXT_KEY] = extracted
        if FULL_TEXT_KEY not in st.session_state:
            st.session_state[FULL_TEXT_KEY] = state.full_text
        state.full_text = st.text_area(
            "Full text (optional, recommended)",
            height=160,
            placeholder="Paste Introduction, Results, and Discussion here for accurate quality assessment.",
            key=FULL_TEXT_KEY,
        )

        if state.mode == FinderMode.CHECK:
            if not state.target_journal and journal:
                state.target_journal = journal
            state.target_journal = st.text_input(
                "Target journal", value=state.target_journal,
                placeholder="e.g., Nature Cell Biology, Molecular Cell...",
            )

        label = "🔍 Find Journals" if state.mode == FinderMode.DISCOVER else "⚖️ Evaluate Fit"
        if st.button(label, type="primary", use_container_width=True, disabled=not state.can_run()):
            with st.spinner("Assessing scope and scientific level..."):
                state.run()
            st.rerun()

    with col_results:
        if state.is_loading:
            st.info("Analysis in progress...")
        else:
            _render_results(state)
