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

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

import streamlit as st

ANALYTICS_FILENAME = "analytics.csv"

# Use Preview Pro for complex scientific text analysis
DEFAULT_TEXT_MODEL = "gemini-3-pro-preview"
# Flash Image handles every edit (input image) and standard 1K generation
DEFAULT_FLASH_IMAGE_MODEL = "gemini-2.5-flash-image"
# Pro Image is text-to-image only (2K generation)
DEFAULT_PRO_IMAGE_MODEL = "gemini-3-pro-image-preview"
DEFAULT_OLLAMA_MODEL = "llama3"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from Streamlit secrets and the environment."""

    gemini_api_key: Optional[str] = None
    ollama_host: Optional[str] = None
    ollama_model: str = DEFAULT_OLLAMA_MODEL
    text_model: str = DEFAULT_TEXT_MODEL
    flash_image_model: str = DEFAULT_FLASH_IMAGE_MODEL
    pro_image_model: str = DEFAULT_PRO_IMAGE_MODEL
    log_level: int = logging.INFO
    # Relative to the directory the app is launched from
    analytics_file: Path = field(default_factory=lambda: Path.cwd() / ANALYTICS_FILENAME)

    @property
    def text_backend(self) -> str:
        """Gemini when a key is configured, otherwise the Ollama fallback."""
        return "gemini" if self.gemini_api_key else "ollama"

    @property
    def can_generate_images(self) -> bool:
        return bool(self.gemini_api_key)


def _secret(name: str) -> Optional[str]:
    """Look a value up in st.secrets first, then in the environment."""
    try:
        if name in st.secrets:
            value = str(st.secrets[name]).strip()
            if value:
                return value
    except (FileNotFoundError, KeyError):
        # No secrets.toml is a normal local setup
        pass
    value = os.getenv(name, "").strip()
    return value or None


def _log_level(raw: Optional[str]) -> int:
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached application settings."""
    analytics = _secret("MANUSCRIPT_PILOT_ANALYTICS_FILE")
    return Settings(
        gemini_api_key=_secret("GEMINI_API_KEY"),
        ollama_host=_secret("OLLAMA_HOST"),
        ollama_model=_secret("OLLAMA_MODEL") or DEFAULT_OLLAMA_MODEL,
        text_model=_secret("MANUSCRIPT_PILOT_TEXT_MODEL") or DEFAULT_TEXT_MODEL,
        flash_image_model=_secret("MANUSCRIPT_PILOT_FLASH_IMAGE_MODEL") or DEFAULT_FLASH_IMAGE_MODEL,
        pro_image_model=_secret("MANUSCRIPT_PILOT_PRO_IMAGE_MODEL") or DEFAULT_PRO_IMAGE_MODEL,
        log_level=_log_level(_secret("MANUSCRIPT_PILOT_LOG_LEVEL")),
        analytics_file=Path(analytics) if analytics else Path.cwd() / ANALYTICS_FILENAME,
    )
