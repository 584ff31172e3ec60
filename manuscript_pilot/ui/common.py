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

from typing import Iterable, Optional

import streamlit as st

from manuscript_pilot.documents import DocumentError, extract_text
from manuscript_pilot.logging_utils import get_logger
from manuscript_pilot.models import ChatMessage

LOGGER = get_logger("manuscript_pilot.ui")

DOCUMENT_TYPES = ["pdf", "docx", "txt"]
CURSOR = "▌"


def confirm(prompt: str, key: str) -> Optional[bool]:
    """Two-button confirmation. True/False once answered, None while pending."""
    st.warning(prompt)
    col_yes, col_no = st.columns(2)
    if col_yes.button("Confirm", key=f"{key}_yes", type="primary", use_container_width=True):
        return True
    if col_no.button("Cancel", key=f"{key}_no", use_container_width=True):
        return False
    return None


def document_uploader(label: str, key: str) -> Optional[str]:
    """Return extracted text the first time a given file is uploaded under ``key``."""
    uploaded_file = st.file_uploader(label, type=DOCUMENT_TYPES, key=key)
    if uploaded_file is None:
        return None

    # Only re-extract if we haven't already processed this file
    seen_key = f"{key}_last_file_name"
    if st.session_state.get(seen_key) == uploaded_file.name:
        return None

    with st.spinner("📖 Extracting text from your document..."):
        try:
            text = extract_text(uploaded_file, uploaded_file.name)
        except DocumentError as exc:
            LOGGER.warning("Extraction failed for %s: %s", uploaded_file.name, exc)
            st.error(str(exc))
            return None
    st.session_state[seen_key] = uploaded_file.name
    if not text:
        st.warning("Could not extract text from the uploaded file. Please paste it manually.")
        return None
    return text


def chat_role(message: ChatMessage) -> str:
    return "user" if message.is_user else "assistant"


def render_messages(messages: Iterable[ChatMessage]) -> None:
    for message in messages:
        with st.chat_message(chat_role(message)):
            st.markdown(message.text + (CURSOR if message.is_streaming else ""))


def streaming_writer(container):
    """on_update callback that re-renders the streaming message into ``container``."""
    def _update(message: ChatMessage) -> None:
        container.markdown(message.text + CURSOR)

    return _update
