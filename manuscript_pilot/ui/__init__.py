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

"""Streamlit rendering for each panel."""

from __future__ import annotations

from manuscript_pilot.ui import assistant, cover_letter, editor, figures, guidelines, journal_finder

PANELS = {
    "Manuscript Editor": editor.render,
    "AI Assistant": assistant.render,
    "Journal Matcher": journal_finder.render,
    "Figure Audit": figures.render,
    "Cover Letter": cover_letter.render,
    "Guidelines": guidelines.render,
}

__all__ = ["PANELS"]
