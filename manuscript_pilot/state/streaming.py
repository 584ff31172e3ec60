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

from typing import Callable, List, Optional

from manuscript_pilot.llm import ChatSession
from manuscript_pilot.logging_utils import get_logger, log_event
from manuscript_pilot.models import ChatMessage

LOGGER = get_logger("manuscript_pilot.state")

UpdateCallback = Callable[[ChatMessage], None]


def stream_reply(
    messages: List[ChatMessage],
    session: ChatSession,
    text: str,
    error_text: str,
    on_update: Optional[UpdateCallback] = None,
) -> bool:
    """Stream the session's reply to ``text`` into a new model message.

    Chunks are appended in arrival order. On failure an empty placeholder is
    removed and ``error_text`` is appended instead. Returns True on success.
    """
    log_event("CHAT", f"Chars: {len(text)}")
    placeholder = ChatMessage(role="model", text="", is_streaming=True)
    messages.append(placeholder)
    stream = session.send_message_stream(text)
    try:
        for chunk in stream:
            placeholder.text += chunk
            if on_update is not None:
                on_update(placeholder)
    except Exception:
        LOGGER.exception("Chat stream failed")
        if not placeholder.text:
            messages.remove(placeholder)
        messages.append(ChatMessage(role="model", text=error_text))
        return False
    finally:
        # Also runs when Streamlit interrupts the script mid-stream
        placeholder.is_streaming = False
        close = getattr(stream, "close", None)
        if close is not None:
            close()
    return True
