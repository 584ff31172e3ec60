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

from manuscript_pilot.models import AnalysisType, HistoryItem
from manuscript_pilot.state import EditorState, editor_state
from manuscript_pilot.ui.common import confirm, document_uploader, render_messages, streaming_writer

INPUT_KEY = "editor_input"
SYNC_KEY = "editor_input_sync"


def _restore(state: EditorState, item_id: str) -> None:
    if state.restore_input(item_id):
        st.session_state[SYNC_KEY] = True
    st.rerun()


def _render_item(state: EditorState, item: HistoryItem) -> None:
    with st.container(border=True):
        head, when = st.columns([4, 1])
        head.markdown(f"**{item.type.icon} {item.type.label}** · _{item.target_journal}_")
        when.caption(item.timestamp.strftime("%H:%M"))

        st.markdown(item.output)

        col_input, col_restore, col_chat = st.columns(3)
        expanded = item.id in state.expanded_inputs
        if col_input.button("Hide original" if expanded else "Show original", key=f"toggle_input_{item.id}"):
            state.toggle_input(item.id)
            st.rerun()
        if col_restore.button("↩️ Restore input", key=f"restore_{item.id}"):
            state.request_restore(item.id)
            st.rerun()
        chat_label = "Close discussion" if item.is_chat_open else "💬 Discuss this revision"
        if col_chat.button(chat_label, key=f"toggle_chat_{item.id}"):
            state.toggle_chat(item.id)
            st.rerun()

        if expanded:
            st.text_area("Original text", item.input, disabled=True, key=f"original_{item.id}")

        if state.pending_restore == item.id:
            answer = confirm("Replace the current editor text with this input?", key=f"confirm_restore_{item.id}")
            if answer:
                _restore(state, item.id)
            elif answer is False:
                state.cancel_restore()
                st.rerun()

        if item.is_chat_open:
            render_messages(item.chat_messages)
            with st.form(key=f"chat_form_{item.id}", clear_on_submit=True):
                draft = st.text_input("Ask about this revision", key=f"chat_draft_{item.id}")
                submitted = st.form_submit_button("Send", disabled=item.id in state.chat_loading)
            if submitted:
                state.chat_inputs[item.id] = draft
                with st.chat_message("assistant"):
                    placeholder = st.empty()
                    state.send_chat(item.id, on_update=streaming_writer(placeholder))
                st.rerun()


def render(journal: str) -> None:
    state = editor_state(st.session_state)

    st.markdown("### ✍️ Manuscript Editor")
    st.caption(f"Refining text for **{journal or 'no journal selected'}**")

    extracted = document_uploader("Load text from a manuscript (PDF, Word or text)", key="editor_upload")
    if extracted:
        state.input_text = extracted
        st.session_state[SYNC_KEY] = True
    if st.session_state.pop(SYNC_KEY, False) or INPUT_KEY not in st.session_state:
        st.session_state[INPUT_KEY] = state.input_text

    state.input_text = st.text_area(
        "**Manuscript text**",
        height=260,
        placeholder="Paste a paragraph, section or reviewer response…",
        key=INPUT_KEY,
    )
    st.caption(f"{state.word_count:,} words")

    state.analysis_type = st.radio(
        "Analysis",
        list(AnalysisType),
        index=list(AnalysisType).index(state.analysis_type),
        format_func=lambda t: f"{t.icon} {t.button_label}",
        horizontal=True,
    )

    run_disabled = state.is_loading or not state.input_text.strip() or not journal
    if st.button("🚀 Run Analysis", type="primary", use_container_width=True, disabled=run_disabled):
        with st.spinner(f"Consulting the {journal} editor..."):
            state.analyze(journal)
        st.rerun()

    if not state.history:
        st.info("Results of each analysis appear here, newest first.")
        return

    st.markdown("---")
    col_title, col_clear = st.columns([4, 1])
    col_title.markdown("#### 🗂️ History")
    if col_clear.button("🗑️ Clear history", use_container_width=True):
        state.pending_clear = True
    if state.pending_clear:
        answer = confirm("Clear every analysis and its discussion?", key="confirm_clear_history")
        if answer:
            state.clear_history()
            st.rerun()
        elif answer is False:
            state.pending_clear = False
            st.rerun()

    for item in state.history:
        _render_item(state, item)
