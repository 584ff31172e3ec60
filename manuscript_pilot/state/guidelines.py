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

from dataclasses import dataclass
from typing import Callable, Optional

from manuscript_pilot import scraper, services
from manuscript_pilot.journals import find_homepage
from manuscript_pilot.logging_utils import get_logger
from manuscript_pilot.models import JournalGuidelines

LOGGER = get_logger("manuscript_pilot.state.guidelines")

GUIDELINES_KEY = "guidelines_state"
LOAD_ERROR = "Unable to load guidelines. Please check your connection."

GuidelinesFn = Callable[..., Optional[JournalGuidelines]]
LiveTextFn = Callable[[str], str]


def fetch_live_guidelines(journal: str) -> str:
    """Locate the journal's author guidelines page and return its text."""
    url = scraper.find_guidelines_url(journal, find_homepage(journal))
    if not url:
        raise scraper.ScraperError(f"No homepage known for {journal}")
    return scraper.fetch_page_text(url)


@dataclass
class GuidelinesState:
    journal: str = ""
    guidelines: Optional[JournalGuidelines] = None
    is_loading: bool = False
    has_loaded: bool = False
    use_live: bool = False
    live_source: bool = False
    warning: str = ""

    def needs_fetch(self, journal: str) -> bool:
        return bool(journal.strip()) and (journal != self.journal or not self.has_loaded)

    def load(
        self,
        journal: str,
        force: bool = False,
        guidelines_fn: Optional[GuidelinesFn] = None,
        live_text_fn: Optional[LiveTextFn] = None,
    ) -> bool:
        """Fetch guidelines for ``journal`` unless they are already cached."""
        if self.is_loading or not journal.strip():
            return False
        if not force and not self.needs_fetch(journal):
            return False
        guidelines_fn = guidelines_fn or services.get_journal_guidelines
        live_text_fn = live_text_fn or fetch_live_guidelines

        self.is_loading = True
        self.warning = ""
        self.live_source = False
        try:
            live_text = ""
            if self.use_live:
                try:
                    live_text = live_text_fn(journal)
                    self.live_source = bool(live_text)
                except scraper.ScraperError as exc:
                    LOGGER.warning("Live guidelines unavailable for %s: %s", journal, exc)
                    self.warning = f"Could not fetch the official guidelines page ({exc}). Using model knowledge."
            self.guidelines = guidelines_fn(journal, live_text or None)
            self.journal = journal
            self.has_loaded = True
        finally:
            self.is_loading = False
        return True

    @property
    def error(self) -> Optional[str]:
        if self.has_loaded and not self.is_loading and self.guidelines is None:
            return LOAD_ERROR
        return None
