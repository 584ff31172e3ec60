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
from typing import Callable, List, Optional

from manuscript_pilot import services
from manuscript_pilot.llm import ChatSession
from manuscript_pilot.models import ChatMessage
from manuscript_pilot.state.streaming import UpdateCallback, stream_reply

ASSISTANT_KEY = "assistant_state"

GREETING = (
    "Hello! I am your research assistant. Ask me about experimental design, "
    "statistics, or clarifications on submission requirements."
)
CLEARED = "Conversation cleared. How can I help you now?"
CHAT_ERROR = "I apologize, but I encountered an error processing your request. Please try again."

ChatFactory = Callable[[], ChatSession]


@dataclass
class AssistantState:
    messages: List[ChatMessage] = field(default_factory=list)
    session: Optional[ChatSession] = None
    is_loading: bool = False
    pending_clear: bool = False

    def ensure_session(self, factory: Optional[ChatFactory] = None) -> ChatSession:
        if self.session is None:
            self.session = (factory or services.create_chat_session)()
            if not self.messages:
                self.messages.append(ChatMessage(role="model", text=GREETING))
        return self.session

    def send(self, text: str, on_update: Optional[UpdateCallback] = None,
             factory: Optional[ChatFactory] = None) -> bool:
        if not text.strip() or self.is_loading:
            return False
        session = self.ensure_session(factory)

        self.messages.append(ChatMessage(role="user", text=text))
        self.is_loading = True
        try:
            return stream_reply(self.messages, session, text, CHAT_ERROR, on_update)
        finally:
            self.is_loading = False

    def clear(self, factory: Optional[ChatFactory] = None) -> None:
        self.session = (factory or services.create_chat_session)()
        self.messages = [ChatMessage(role="model", text=CLEARED)]
        self.pending_clear = False
