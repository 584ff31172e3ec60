# app_streamlit.py - Manuscript Pilot • AI submission assistant
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

import streamlit as st

# ────────────────────────────────────────────────
# App Configuration (MUST be first Streamlit command)
# ────────────────────────────────────────────────
st.set_page_config(
    page_title="Manuscript Pilot • Editor, Figures & Journal Matching",
    page_icon="🧪",
    layout="wide",
    initial_sidebar_state="expanded",
    menu_items={
        'About': "Manuscript Pilot polishes manuscript text, audits figures, drafts cover letters "
                 "and matches papers to journals with generative AI."
    }
)

from manuscript_pilot.config import get_settings  # noqa: E402
from manuscript_pilot.logging_utils import get_logger, set_level  # noqa: E402
from manuscript_pilot.ui import PANELS  # noqa: E402
from manuscript_pilot.ui.sidebar import render_sidebar  # noqa: E402

settings = get_settings()
set_level(settings.log_level)
LOGGER = get_logger("manuscript_pilot.app", settings.log_level)

if "backend_logged" not in st.session_state:
    LOGGER.info("Text backend: %s | image generation: %s",
                settings.text_backend, "enabled" if settings.can_generate_images else "disabled")
    st.session_state.backend_logged = True

# ────────────────────────────────────────────────
# Sidebar & Panel Dispatch
# ────────────────────────────────────────────────
current_page, target_journal = render_sidebar(list(PANELS))
PANELS[current_page](target_journal)
