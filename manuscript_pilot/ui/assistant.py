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

from manuscript_pilot.state import assistant_state
from manuscript_pilot.ui.common import confirm, render_messages, streaming_writer


def render(journal: str) -> None:
    state = assistant_state(st.session_state)
    state.ensure_session()

    col_title, col_clear = st.columns([4, 1])
    col_title.markdown("### 🤖 Research Assistant")
    if col_clear.button("🧹 Clear chat", use_container_width=True):
        state.pending_clear = True
    if state.pending_clear:
        answer = confirm("Start a new conversation?", key="confirm_clear_assistant")
        if answer:
            state.clear()
            st.rerun()
        elif answer is False:
            state.pending_clear = False
            st.rerun()

    render_messages(state.messages)

    prompt = st.chat_input("Ask about experimental design, statistics, reviewer comments…",
                           disabled=state.is_loading)
    if prompt and prompt.strip():
        with st.chat_message("user"):
            st.markdown(prompt)
        with st.chat_message("assistant"):
            placeholder = st.empty()
            state.send(prompt, on_update=streaming_writer(placeholder))
        st.rerun()
