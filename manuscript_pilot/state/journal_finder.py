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
from enum import Enum
from typing import Callable, List, Optional

from manuscript_pilot import services
from manuscript_pilot.models import JournalEvaluation, JournalSuggestion

JOURNAL_FINDER_KEY = "journal_finder_state"

NO_RESULTS = "No results found. Please verify your input."
READY_TITLE = "Ready to Analyze"
READY_TEXT = "Provide your abstract and full text to begin the journal assessment process."


class FinderMode(str, Enum):
    DISCOVER = "DISCOVER"
    CHECK = "CHECK"


@dataclass
class JournalFinderState:
    mode: FinderMode = FinderMode.DISCOVER
    title: str = ""
    abstract: str = ""
    full_text: str = ""
    target_journal: str = ""
    suggestions: List[JournalSuggestion] = field(default_factory=list)
    evaluation: Optional[JournalEvaluation] = None
    is_loading: bool = False
    has_searched: bool = False

    def can_run(self) -> bool:
        if self.is_loading or not self.title.strip() or not self.abstract.strip():
            return False
        return self.mode == FinderMode.DISCOVER or bool(self.target_journal.strip())

    def run(
        self,
        suggest_fn: Optional[Callable[[str, str, str], List[JournalSuggestion]]] = None,
        evaluate_fn: Optional[Callable[[str, str, str, str], Optional[JournalEvaluation]]] = None,
    ) -> bool:
        if not self.can_run():
            return False

        self.is_loading = True
        self.has_searched = True
        try:
            if self.mode == FinderMode.DISCOVER:
                suggest_fn = suggest_fn or services.suggest_target_journals
                self.suggestions = suggest_fn(self.title, self.abstract, self.full_text)
                self.evaluation = None
            else:
                evaluate_fn = evaluate_fn or services.evaluate_journal_fit
                self.evaluation = evaluate_fn(
                    self.title, self.abstract, self.full_text, self.target_journal.strip()
                )
                self.suggestions = []
        finally:
            self.is_loading = False
        return True

    @property
    def has_results(self) -> bool:
        return bool(self.suggestions) or self.evaluation is not None

    def empty_state(self) -> Optional[str]:
        """Which placeholder to show when there are no results: None, "no_results" or "ready"."""
        if self.is_loading or self.has_results:
            return None
        return "no_results" if self.has_searched else "ready"
