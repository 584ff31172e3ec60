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

from manuscript_pilot.config import get_settings
from manuscript_pilot.documents import DocumentError, image_from_upload
from manuscript_pilot.state import figures_state
from manuscript_pilot.state.figures import ASPECT_RATIOS, IMAGE_SIZES
from manuscript_pilot.ui.common import LOGGER, confirm, render_messages

FIGURE_TYPES = ["png", "jpg", "jpeg", "webp", "pdf"]


def render(journal: str) -> None:
    state = figures_state(st.session_state)

    st.markdown("### 🖼️ Figure Audit")
    st.caption(f"Audit, edit or generate figures to **{journal or 'journal'}** standards")
    if not get_settings().can_generate_images:
        st.warning("Figure generation needs a GEMINI_API_KEY in secrets or the environment.")

    col_image, col_chat = st.columns([3, 2])

    with col_image:
        uploaded = st.file_uploader("Upload a figure (PNG, JPEG, WebP or PDF)", type=FIGURE_TYPES,
                                    key="figure_upload")
        if uploaded is not None and state.last_upload != uploaded.name:
            try:
                state.load_image(image_from_upload(uploaded.getvalue(), uploaded.name), journal)
                state.last_upload = uploaded.name
            except DocumentError as exc:
                LOGGER.warning("Figure upload failed for %s: %s", uploaded.name, exc)
                st.error(str(exc))

        col_ratio, col_size = st.columns(2)
        state.aspect_ratio = col_ratio.selectbox("Aspect ratio", ASPECT_RATIOS,
                                                 index=ASPECT_RATIOS.index(state.aspect_ratio))
        state.image_size = col_size.selectbox("Resolution", IMAGE_SIZES,
                                              index=IMAGE_SIZES.index(state.image_size),
                                              help="2K generation uses the Pro image model (new figures only).")

        active = state.active_image
        if active is None:
            st.info("Upload a figure to audit it, or describe one to generate it.")
        else:
            caption = "Original" if state.is_viewing_original else "Latest version"
            st.image(active.data, caption=caption, use_container_width=True)

            if state.has_edits:
                view = st.radio("View", ["Latest", "Original"], horizontal=True,
                                index=1 if state.is_viewing_original else 0)
                viewing_original = view == "Original"
                if viewing_original != state.is_viewing_original:
                    state.is_viewing_original = viewing_original
                    st.rerun()

            col_dl, col_reset = st.columns(2)
            col_dl.download_button(
                "📥 Download",
                data=active.data,
                file_name=state.download_name(),
                mime=active.mime_type,
                use_container_width=True,
            )
            if state.has_edits and col_reset.button("↩️ Reset to original", use_container_width=True):
                state.pending_reset = True
            if state.pending_reset:
                answer = confirm("Discard all edits and revert to the original version?", key="confirm_reset_figure")
                if answer:
                    state.reset()
                    st.rerun()
                elif answer is False:
                    state.pending_reset = False
                    st.rerun()

    with col_chat:
        render_messages(state.messages)
        with st.form(key="figure_form", clear_on_submit=True):
            request = st.text_area(
                "Request",
                placeholder='e.g., "Check font sizes" or "Schematic of the mTOR pathway"',
                height=100,
            )
            submitted = st.form_submit_button("Send", disabled=state.is_loading, use_container_width=True)
        if submitted:
            label = "Editing figure..." if state.active_image is not None else "Generating figure..."
            with st.spinner(label):
                state.send(request, journal)
            st.rerun()
