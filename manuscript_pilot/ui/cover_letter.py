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
from manuscript_pilot.state import cover_letter_state
from manuscript_pilot.ui.common import document_uploader

TEXT_KEY = "cover_letter_manuscript"


def render(journal: str) -> None:
    state = cover_letter_state(st.session_state)
    params = state.params

    st.markdown("### ✉️ Cover Letter")
    st.caption(f"Drafting a pitch to **{journal or 'the journal'}**")

    col_form, col_letter = st.columns(2)
    with col_form:
        params.title = st.text_input("**Manuscript title**", value=params.title)
        col_author, col_affil = st.columns(2)
        params.author_name = col_author.text_input("Corresponding author", value=params.author_name)
        params.affiliation = col_affil.text_input("Affiliation", value=params.affiliation)
        params.editor_name = st.text_input("Editor name (optional)", value=params.editor_name,
                                           placeholder="the Editor")
        params.abstract = st.text_area("Abstract", value=params.abstract, height=120)
        params.novelty_statement = st.text_area(
            "Novelty statement (optional)", value=params.novelty_statement, height=80,
            placeholder="In one or two sentences, what is the key advance?",
        )

        extracted = document_uploader("Load manuscript text", key="cover_letter_upload")
        if extracted:
            params.manuscript_text = extracted
            st.session_state[TEXT_KEY] = extracted
        if TEXT_KEY not in st.session_state:
            st.session_state[TEXT_KEY] = params.manuscript_text
        params.manuscript_text = st.text_area(
            "**Manuscript content** (Intro/Results/Discussion)", height=200, key=TEXT_KEY,
        )

        disabled = state.is_loading or not params.manuscript_text.strip()
        if st.button("✨ Generate Cover Letter", type="primary", use_container_width=True, disabled=disabled):
            with st.spinner("Drafting your cover letter..."):
                state.generate(journal)
            st.rerun()

    with col_letter:
        if not state.letter:
            st.info("Your draft will appear here.")
            return
        st.text_area("Draft", value=state.letter, height=520)
        col_txt, col_pdf = st.columns(2)
        col_txt.download_button(
            "📥 Download .txt",
            data=reports.cover_letter_text(state.letter),
            file_name=reports.cover_letter_filename(journal),
            mime="text/plain",
            use_container_width=True,
        )
        col_pdf.download_button(
            "📄 Download PDF",
            data=reports.cover_letter_pdf(state.letter, journal),
            file_name=reports.cover_letter_filename(journal).replace(".txt", ".pdf"),
            mime="application/pdf",
            use_container_width=True,
        )
