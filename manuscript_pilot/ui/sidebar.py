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

from typing import Sequence

import streamlit as st

from manuscript_pilot.journals import CUSTOM_JOURNAL_OPTION, DEFAULT_JOURNAL, PRESET_JOURNALS

JOURNAL_CHOICE_KEY = "journal_choice"
CUSTOM_JOURNAL_KEY = "custom_journal"
CURRENT_PAGE_KEY = "current_page"


def resolve_target_journal(choice: str, custom: str) -> str:
    """Selected preset, or the free-text journal when custom is chosen."""
    if choice == CUSTOM_JOURNAL_OPTION:
        return (custom or "").strip()
    return choice


def _reset_journal() -> None:
    st.session_state[JOURNAL_CHOICE_KEY] = DEFAULT_JOURNAL
    st.session_state[CUSTOM_JOURNAL_KEY] = ""


def render_sidebar(pages: Sequence[str]) -> tuple[str, str]:
    """Draw the sidebar; return (current page, target journal)."""
    st.session_state.setdefault(JOURNAL_CHOICE_KEY, DEFAULT_JOURNAL)
    st.session_state.setdefault(CUSTOM_JOURNAL_KEY, "")
    st.session_state.setdefault(CURRENT_PAGE_KEY, pages[0])

    with st.sidebar:
        st.markdown("## 🧪 Manuscript Pilot")
        st.caption("Submission assistant for academic manuscripts")
        st.markdown("---")

        st.markdown("#### 🎯 Target Journal")
        choice = st.selectbox(
            "Target journal",
            PRESET_JOURNALS + [CUSTOM_JOURNAL_OPTION],
            key=JOURNAL_CHOICE_KEY,
            label_visibility="collapsed",
        )
        if choice == CUSTOM_JOURNAL_OPTION:
            st.text_input(
                "Journal name",
                key=CUSTOM_JOURNAL_KEY,
                placeholder="e.g., Developmental Cell",
            )
            st.button("↩️ Reset to default", on_click=_reset_journal, use_container_width=True)
        journal = resolve_target_journal(choice, st.session_state.get(CUSTOM_JOURNAL_KEY, ""))

        st.markdown("---")
        for page in pages:
            is_current = st.session_state[CURRENT_PAGE_KEY] == page
            if st.button(page, key=f"nav_{page}", use_container_width=True,
                         type="primary" if is_current else "secondary"):
                st.session_state[CURRENT_PAGE_KEY] = page
                st.rerun()

        st.markdown("---")
        st.caption("Active Target")
        st.markdown(f"**{journal or 'None Selected'}**")

    return st.session_state[CURRENT_PAGE_KEY], journal
