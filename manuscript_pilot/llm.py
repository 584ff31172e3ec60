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

"""Generative-AI client layer.

Text, chat and structured output go through Gemini (``google-generativeai``)
when a ``GEMINI_API_KEY`` is configured and fall back to an Ollama server
otherwise. Image generation and editing need the ``google-genai`` SDK, which
exposes image output and ``image_config``; it is Gemini only.

Every failure surfaces as :class:`LLMError`.
"""

from __future__ import annotations

import base64
import json
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, Tuple

import google.generativeai as genai
import ollama
from google import genai as google_genai
from google.genai import types as genai_types

from manuscript_pilot.config import Settings, get_settings
from manuscript_pilot.logging_utils import get_logger
from manuscript_pilot.models import FigureImage
from manuscript_pilot.schemas import to_json_schema

LOGGER = get_logger("manuscript_pilot.llm")

_FENCED_JSON = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


class LLMError(RuntimeError):
    """Raised when the model backend cannot produce a usable answer."""


# ────────────────────────────────────────────────
# Backend helpers
# ────────────────────────────────────────────────
def _gemini_model(settings: Settings, system_instruction: Optional[str] = None):
    genai.configure(api_key=settings.gemini_api_key)
    return genai.GenerativeModel(settings.text_model, system_instruction=system_instruction)


def _ollama_client(settings: Settings) -> ollama.Client:
    if settings.ollama_host:
        return ollama.Client(host=settings.ollama_host)
    return ollama.Client()


def _ollama_messages(prompt: str, system_instruction: Optional[str]) -> List[Dict[str, str]]:
    messages = []
    if system_instruction:
        messages.append({"role": "system", "content": system_instruction})
    messages.append({"role": "user", "content": prompt})
    return messages


def _ollama_content(response: Any) -> str:
    message = response["message"]
    return message["content"] or ""


def _gemini_text(response: Any) -> str:
    """Text of a Gemini response or chunk; empty when it carries no text part."""
    try:
        return response.text or ""
    except ValueError:
        # Raised by the SDK when the candidate was blocked or has no parts
        return ""


def parse_json_payload(raw: Optional[str]) -> Any:
    """Parse a structured reply, tolerating a fenced ```json block."""
    if not raw or not raw.strip():
        raise LLMError("Empty structured response")
    text = raw.strip()
    fenced = _FENCED_JSON.search(text)
    if fenced:
        text = fenced.group(1).strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise LLMError(f"Model returned invalid JSON: {exc}") from exc


# ────────────────────────────────────────────────
# Single-shot generation
# ────────────────────────────────────────────────
def generate_text(
    prompt: str,
    system_instruction: Optional[str] = None,
    temperature: float = 0.7,
    settings: Optional[Settings] = None,
) -> str:
    settings = settings or get_settings()
    LOGGER.debug("generate_text via %s (%d prompt chars)", settings.text_backend, len(prompt))
    try:
        if settings.text_backend == "gemini":
            model = _gemini_model(settings, system_instruction)
            response = model.generate_content(
                prompt,
                generation_config=genai.types.GenerationConfig(temperature=temperature),
            )
            return _gemini_text(response).strip()

        response = _ollama_client(settings).chat(
            model=settings.ollama_model,
            messages=_ollama_messages(prompt, system_instruction),
            options={"temperature": temperature},
        )
        return _ollama_content(response).strip()
    except Exception as exc:
        raise LLMError(f"{settings.text_backend} text generation failed: {exc}") from exc


def generate_json(
    prompt: str,
    schema: Dict[str, Any],
    temperature: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> Any:
    """Structured-output call constrained to ``schema``; returns parsed JSON."""
    settings = settings or get_settings()
    LOGGER.debug("generate_json via %s", settings.text_backend)
    try:
        if settings.text_backend == "gemini":
            model = _gemini_model(settings)
            response = model.generate_content(
                prompt,
                generation_config=genai.types.GenerationConfig(
                    temperature=temperature,
                    response_mime_type="application/json",
                    response_schema=schema,
                ),
            )
            raw = _gemini_text(response)
        else:
            options = {} if temperature is None else {"temperature": temperature}
            response = _ollama_client(settings).chat(
                model=settings.ollama_model,
                messages=_ollama_messages(prompt, None),
                format=to_json_schema(schema),
                options=options,
            )
            raw = _ollama_content(response)
    except Exception as exc:
        raise LLMError(f"{settings.text_backend} structured generation failed: {exc}") from exc
    return parse_json_payload(raw)


# ────────────────────────────────────────────────
# Chat sessions
# ────────────────────────────────────────────────
class ChatSession(ABC):
    """A persistent conversation that streams its replies."""

    @abstractmethod
    def send_message_stream(self, text: str) -> Iterator[str]:
        """Send ``text`` and yield the reply chunk by chunk."""


class GeminiChatSession(ChatSession):
    def __init__(self, model: Any):
        self._chat = model.start_chat(history=[])

    def send_message_stream(self, text: str) -> Iterator[str]:
        try:
            response = self._chat.send_message(text, stream=True)
            for chunk in response:
                piece = _gemini_text(chunk)
                if piece:
                    yield piece
        except Exception as exc:
            raise LLMError(f"Gemini chat failed: {exc}") from exc


class OllamaChatSession(ChatSession):
    """Keeps the history locally since Ollama's chat endpoint is stateless."""

    def __init__(self, client: ollama.Client, model: str, system_instruction: Optional[str] = None):
        self._client = client
        self._model = model
        self.messages: List[Dict[str, str]] = []
        if system_instruction:
            self.messages.append({"role": "system", "content": system_instruction})

    def send_message_stream(self, text: str) -> Iterator[str]:
        self.messages.append({"role": "user", "content": text})
        reply = ""
        try:
            for chunk in self._client.chat(model=self._model, messages=list(self.messages), stream=True):
                piece = _ollama_content(chunk)
                if piece:
                    reply += piece
                    yield piece
        except Exception as exc:
            self.messages.pop()
            raise LLMError(f"Ollama chat failed: {exc}") from exc
        except GeneratorExit:
            # Closed early by the consumer; keep the partial reply so turns alternate
            self.messages.append({"role": "assistant", "content": reply})
            raise
        self.messages.append({"role": "assistant", "content": reply})


def create_chat(system_instruction: str, settings: Optional[Settings] = None) -> ChatSession:
    settings = settings or get_settings()
    if settings.text_backend == "gemini":
        return GeminiChatSession(_gemini_model(settings, system_instruction))
    return OllamaChatSession(_ollama_client(settings), settings.ollama_model, system_instruction)


# ────────────────────────────────────────────────
# Image generation / editing
# ────────────────────────────────────────────────
def extract_figure_parts(response: Any) -> Tuple[str, Optional[FigureImage]]:
    """Collect the text and the last inline image from a google-genai response."""
    text = ""
    image = None
    candidates = getattr(response, "candidates", None) or []
    content = getattr(candidates[0], "content", None) if candidates else None
    for part in getattr(content, "parts", None) or []:
        if getattr(part, "thought", False):
            continue
        if getattr(part, "text", None):
            text += part.text
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            data = inline.data
            if isinstance(data, str):
                data = base64.b64decode(data)
            image = FigureImage(data=data, mime_type=getattr(inline, "mime_type", None) or "image/png")
    return text, image


def generate_image(
    prompt: str,
    model: str,
    image: Optional[FigureImage] = None,
    aspect_ratio: Optional[str] = None,
    image_size: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Tuple[str, Optional[FigureImage]]:
    """Run one image request; ``aspect_ratio``/``image_size`` become image_config."""
    settings = settings or get_settings()
    if not settings.can_generate_images:
        raise LLMError("Figure generation requires GEMINI_API_KEY")

    contents = []
    if image is not None:
        contents.append(genai_types.Part.from_bytes(data=image.data, mime_type=image.mime_type))
    contents.append(genai_types.Part.from_text(text=prompt))

    config_params: Dict[str, Any] = {"response_modalities": ["TEXT", "IMAGE"]}
    if aspect_ratio or image_size:
        config_params["image_config"] = genai_types.ImageConfig(
            aspect_ratio=aspect_ratio,
            image_size=image_size,
        )

    LOGGER.debug("generate_image model=%s edit=%s", model, image is not None)
    try:
        client = google_genai.Client(api_key=settings.gemini_api_key)
        response = client.models.generate_content(
            model=model,
            contents=contents,
            config=genai_types.GenerateContentConfig(**config_params),
        )
    except Exception as exc:
        raise LLMError(f"Image request to {model} failed: {exc}") from exc
    return extract_figure_parts(response)
