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

from manuscript_pilot.models import JournalGuidelines
from manuscript_pilot.state import guidelines_state


def _render_guidelines(guidelines: JournalGuidelines) -> None:
    st.markdown("#### 📏 Word Counts")
    col_article, col_abstract, col_methods = st.columns(3)
    col_article.markdown(f"**Article**\n\n{guidelines.article_words or 'N/A'}")
    col_abstract.markdown(f"**Abstract**\n\n{guidelines.abstract_words or 'N/A'}")
    col_methods.markdown(f"**Methods**\n\n{guidelines.methods_words or 'N/A'}")

    st.markdown("#### 🖋️ Formatting")
    st.markdown(f"- **Figures:** {guidelines.figures or 'N/A'}")
    st.markdown(f"- **References:** {guidelines.references or 'N/A'}")
    st.markdown(f"- **Fonts:** {guidelines.fonts or 'N/A'}")

    st.markdown("#### 🧭 Editorial Criteria")
    st.markdown(f"**Scope.** {guidelines.scope or 'N/A'}")
    st.markdown(f"**Novelty.** {guidelines.novelty or 'N/A'}")
    st.markdown(f"**Data rigor.** {guidelines.data_rigor or 'N/A'}")


def render(journal: str) -> None:
    state = guidelines_state(st.session_state)

    st.markdown(f"### 📘 {journal or 'Guidelines'}")
    st.caption("Submission Guidelines Reference")
    if not journal:
        st.info("Select a target journal in the sidebar.")
        return

    col_live, col_refresh = st.columns([3, 1])
    state.use_live = col_live.checkbox(
        "🌐 Read the official author guidelines page", value=state.use_live,
        help="Scans the journal homepage for its submission guidelines and feeds them to the model.",
    )
    refresh = col_refresh.button("🔄 Refresh", use_container_width=True)

    if refresh or state.needs_fetch(journal):
        with st.spinner(f"Loading guidelines for {journal}..."):
            state.load(journal, force=refresh)

    if state.warning:
        st.warning(state.warning)
    if state.error:
        st.error(state.error)
        return
    if state.guidelines is not None:
        if state.live_source:
            st.success("✅ Based on the journal's official guidelines page.")
        _render_guidelines(state.guidelines)
