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

"""Per-panel view state kept in ``st.session_state``.

Each panel owns one dataclass under its own key. The store is any mutable
mapping, so the panels can be driven from tests with a plain dict.
"""

from __future__ import annotations

from typing import Callable, MutableMapping, TypeVar

from manuscript_pilot.state.assistant import ASSISTANT_KEY, AssistantState
from manuscript_pilot.state.cover_letter import COVER_LETTER_KEY, CoverLetterState
from manuscript_pilot.state.editor import EDITOR_KEY, EditorState
from manuscript_pilot.state.figures import FIGURES_KEY, FiguresState
from manuscript_pilot.state.guidelines import GUIDELINES_KEY, GuidelinesState
from manuscript_pilot.state.journal_finder import JOURNAL_FINDER_KEY, FinderMode, JournalFinderState

T = TypeVar("T")


def get_state(store: MutableMapping, key: str, factory: Callable[[], T]) -> T:
    if key not in store:
        store[key] = factory()
    return store[key]


def editor_state(store: MutableMapping) -> EditorState:
    return get_state(store, EDITOR_KEY, EditorState)


def assistant_state(store: MutableMapping) -> AssistantState:
    return get_state(store, ASSISTANT_KEY, AssistantState)


def figures_state(store: MutableMapping) -> FiguresState:
    return get_state(store, FIGURES_KEY, FiguresState)


def journal_finder_state(store: MutableMapping) -> JournalFinderState:
    return get_state(store, JOURNAL_FINDER_KEY, JournalFinderState)


def cover_letter_state(store: MutableMapping) -> CoverLetterState:
    return get_state(store, COVER_LETTER_KEY, CoverLetterState)


def guidelines_state(store: MutableMapping) -> GuidelinesState:
    return get_state(store, GUIDELINES_KEY, GuidelinesState)


__all__ = [
    "AssistantState",
    "CoverLetterState",
    "EditorState",
    "FiguresState",
    "FinderMode",
    "GuidelinesState",
    "JournalFinderState",
    "assistant_state",
    "cover_letter_state",
    "editor_state",
    "figures_state",
    "get_state",
    "guidelines_state",
    "journal_finder_state",
]
