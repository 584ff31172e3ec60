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

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set

from manuscript_pilot import services
from manuscript_pilot.llm import ChatSession
from manuscript_pilot.models import AnalysisType, ChatMessage, HistoryItem
from manuscript_pilot.state.streaming import UpdateCallback, stream_reply

EDITOR_KEY = "editor_state"
CHAT_ERROR = "Error generating response."

AnalyzeFn = Callable[[str, AnalysisType, str], str]
RefinementFactory = Callable[[str, str, AnalysisType, str], ChatSession]


@dataclass
class EditorState:
    """Manuscript editor: analysis runs plus a discussion thread per run."""

    input_text: str = ""
    analysis_type: AnalysisType = AnalysisType.IMPACT_POLISH
    history: List[HistoryItem] = field(default_factory=list)
    is_loading: bool = False
    expanded_inputs: Set[str] = field(default_factory=set)
    chat_sessions: Dict[str, ChatSession] = field(default_factory=dict)
    chat_inputs: Dict[str, str] = field(default_factory=dict)
    chat_loading: Set[str] = field(default_factory=set)
    pending_restore: Optional[str] = None
    pending_clear: bool = False

    @property
    def word_count(self) -> int:
        return len(self.input_text.split())

    def find_item(self, item_id: str) -> Optional[HistoryItem]:
        return next((item for item in self.history if item.id == item_id), None)

    def analyze(self, journal: str, analyze_fn: Optional[AnalyzeFn] = None) -> Optional[HistoryItem]:
        if not self.input_text.strip() or self.is_loading:
            return None
        analyze_fn = analyze_fn or services.analyze_manuscript_text

        self.is_loading = True
        try:
            output = analyze_fn(self.input_text, self.analysis_type, journal)
            item = HistoryItem(
                type=self.analysis_type,
                input=self.input_text,
                output=output,
                target_journal=journal,
            )
            self.history.insert(0, item)
            return item
        finally:
            self.is_loading = False

    def toggle_input(self, item_id: str) -> None:
        if item_id in self.expanded_inputs:
            self.expanded_inputs.discard(item_id)
        else:
            self.expanded_inputs.add(item_id)

    def request_restore(self, item_id: str) -> None:
        self.pending_restore = item_id

    def cancel_restore(self) -> None:
        self.pending_restore = None

    def restore_input(self, item_id: str) -> bool:
        item = self.find_item(item_id)
        self.pending_restore = None
        if item is None:
            return False
        self.input_text = item.input
        return True

    def clear_history(self) -> None:
        self.history = []
        self.chat_sessions.clear()
        self.chat_inputs.clear()
        self.chat_loading.clear()
        self.expanded_inputs.clear()
        self.pending_restore = None
        self.pending_clear = False

    def toggle_chat(self, item_id: str, factory: Optional[RefinementFactory] = None) -> None:
        item = self.find_item(item_id)
        if item is None:
            return
        if not item.is_chat_open and item_id not in self.chat_sessions:
            factory = factory or services.create_refinement_chat
            # Each item discusses against the journal it was analysed for
            self.chat_sessions[item_id] = factory(item.input, item.output, item.type, item.target_journal)
        item.is_chat_open = not item.is_chat_open

    def send_chat(self, item_id: str, on_update: Optional[UpdateCallback] = None) -> bool:
        text = self.chat_inputs.get(item_id, "")
        session = self.chat_sessions.get(item_id)
        item = self.find_item(item_id)
        if not text.strip() or session is None or item is None or item_id in self.chat_loading:
            return False

        item.chat_messages.append(ChatMessage(role="user", text=text))
        self.chat_inputs[item_id] = ""
        self.chat_loading.add(item_id)
        try:
            return stream_reply(item.chat_messages, session, text, CHAT_ERROR, on_update)
        finally:
            self.chat_loading.discard(item_id)
