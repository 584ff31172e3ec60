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
from typing import Callable, Optional

from manuscript_pilot import services
from manuscript_pilot.models import CoverLetterParams

COVER_LETTER_KEY = "cover_letter_state"


@dataclass
class CoverLetterState:
    params: CoverLetterParams = field(default_factory=CoverLetterParams)
    letter: str = ""
    is_loading: bool = False

    def generate(
        self, journal: str, generate_fn: Optional[Callable[[CoverLetterParams, str], str]] = None
    ) -> bool:
        if not self.params.manuscript_text.strip() or self.is_loading:
            return False
        generate_fn = generate_fn or services.generate_cover_letter

        self.is_loading = True
        try:
            self.letter = generate_fn(self.params, journal)
        finally:
            self.is_loading = False
        return True
