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
from manuscript_pilot.models import ChatMessage, FigureImage, FigureResult

FIGURES_KEY = "figures_state"

ASPECT_RATIOS = ("1:1", "4:3", "16:9")
IMAGE_SIZES = ("1K", "2K")

FigureFn = Callable[..., FigureResult]


@dataclass
class FiguresState:
    """Figure audit / editing workspace with an original and a latest version."""

    original_image: Optional[FigureImage] = None
    latest_image: Optional[FigureImage] = None
    is_viewing_original: bool = False
    messages: List[ChatMessage] = field(default_factory=list)
    is_loading: bool = False
    aspect_ratio: str = "1:1"
    image_size: str = "1K"
    pending_reset: bool = False
    last_upload: Optional[str] = None

    @property
    def active_image(self) -> Optional[FigureImage]:
        return self.original_image if self.is_viewing_original else self.latest_image

    @property
    def has_edits(self) -> bool:
        return (
            self.original_image is not None
            and self.latest_image is not None
            and self.original_image != self.latest_image
        )

    def load_image(self, image: FigureImage, journal: str) -> None:
        self.original_image = image
        self.latest_image = image
        self.is_viewing_original = False
        self.messages.append(ChatMessage(
            role="model",
            text=(
                f"I've loaded your figure. I can audit it for **{journal}** standards or help you "
                'modify it (e.g., "Remove background", "Fix font size").'
            ),
        ))

    def send(self, text: str, journal: str, figure_fn: Optional[FigureFn] = None) -> bool:
        active = self.active_image
        user_text = text.strip()
        if self.is_loading or (not user_text and active is None):
            return False
        figure_fn = figure_fn or services.generate_or_edit_figure

        self.messages.append(ChatMessage(role="user", text=user_text or "(Requesting analysis)"))
        self.is_loading = True
        try:
            # Edit the visible image when there is one, otherwise generate
            result = figure_fn(
                user_text,
                journal,
                aspect_ratio=self.aspect_ratio,
                image_size=self.image_size,
                image=active,
            )
            self.messages.append(ChatMessage(role="model", text=result.text))

            if result.image is not None:
                self.latest_image = result.image
                if self.original_image is None:
                    self.original_image = result.image
                self.is_viewing_original = False
                self.messages.append(ChatMessage(
                    role="model",
                    text="I've updated the figure based on your request." if active is not None
                    else "Here is the generated figure.",
                ))
        finally:
            self.is_loading = False
        return True

    def reset(self) -> bool:
        self.pending_reset = False
        if self.original_image is None:
            return False
        self.latest_image = self.original_image
        self.is_viewing_original = False
        self.messages.append(ChatMessage(role="model", text="Discarded edits. Back to original."))
        return True

    def download_name(self) -> str:
        image = self.active_image
        ext = image.extension if image is not None else "png"
        stem = "figure_original" if self.is_viewing_original else "figure_edited"
        return f"{stem}.{ext}"
