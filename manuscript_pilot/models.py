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

import base64
import datetime
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


def new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime.datetime:
    return datetime.datetime.now()


class AnalysisType(str, Enum):
    IMPACT_POLISH = "IMPACT_POLISH"
    LOGIC_CHECK = "LOGIC_CHECK"
    CONCISENESS = "CONCISENESS"
    REBUTTAL = "REBUTTAL"

    @property
    def label(self) -> str:
        return _ANALYSIS_LABELS[self][0]

    @property
    def button_label(self) -> str:
        return _ANALYSIS_LABELS[self][1]

    @property
    def icon(self) -> str:
        return _ANALYSIS_LABELS[self][2]


_ANALYSIS_LABELS = {
    AnalysisType.IMPACT_POLISH: ("Impact Polish", "Polish", "⚡"),
    AnalysisType.LOGIC_CHECK: ("Logic Check", "Logic", "✅"),
    AnalysisType.CONCISENESS: ("Conciseness", "Shorten", "✂️"),
    AnalysisType.REBUTTAL: ("Rebuttal", "Rebuttal", "💬"),
}


@dataclass
class ChatMessage:
    role: str  # "user" | "model"
    text: str
    id: str = field(default_factory=new_id)
    is_streaming: bool = False
    timestamp: datetime.datetime = field(default_factory=_now)

    @property
    def is_user(self) -> bool:
        return self.role == "user"


@dataclass
class HistoryItem:
    """One analysis run in the editor, with its own discussion thread."""

    type: AnalysisType
    input: str
    output: str
    target_journal: str
    id: str = field(default_factory=new_id)
    timestamp: datetime.datetime = field(default_factory=_now)
    chat_messages: List[ChatMessage] = field(default_factory=list)
    is_chat_open: bool = False


@dataclass
class CoverLetterParams:
    title: str = ""
    author_name: str = ""
    affiliation: str = ""
    abstract: str = ""
    manuscript_text: str = ""
    editor_name: str = ""
    novelty_statement: str = ""


@dataclass(frozen=True)
class FigureImage:
    data: bytes
    mime_type: str = "image/png"

    @property
    def extension(self) -> str:
        subtype = self.mime_type.split("/")[-1].lower()
        return "jpg" if subtype == "jpeg" else subtype

    def to_data_url(self) -> str:
        payload = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{payload}"

    @classmethod
    def from_data_url(cls, url: str) -> "FigureImage":
        header, sep, payload = url.partition(";base64,")
        if not sep or not header.startswith("data:"):
            raise ValueError("Not a base64 data URL")
        return cls(data=base64.b64decode(payload), mime_type=header[len("data:"):])


@dataclass
class FigureResult:
    text: str
    image: Optional[FigureImage] = None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _texts(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _score(value: Any) -> int:
    try:
        return max(0, min(100, int(round(float(value)))))
    except (TypeError, ValueError):
        return 0


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


@dataclass
class JournalGuidelines:
    journal_name: str
    article_words: str = ""
    abstract_words: str = ""
    methods_words: str = ""
    figures: str = ""
    references: str = ""
    fonts: str = ""
    scope: str = ""
    novelty: str = ""
    data_rigor: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any], fallback_name: str = "") -> "JournalGuidelines":
        words = _section(data, "wordCounts")
        formatting = _section(data, "formatting")
        criteria = _section(data, "editorialCriteria")
        return cls(
            journal_name=_text(data.get("journalName")) or fallback_name,
            article_words=_text(words.get("article")),
            abstract_words=_text(words.get("abstract")),
            methods_words=_text(words.get("methods")),
            figures=_text(formatting.get("figures")),
            references=_text(formatting.get("references")),
            fonts=_text(formatting.get("fonts")),
            scope=_text(criteria.get("scope")),
            novelty=_text(criteria.get("novelty")),
            data_rigor=_text(criteria.get("dataRigor")),
        )


@dataclass
class JournalSuggestion:
    name: str
    match_score: int = 0
    tier: str = ""
    rationale: str = ""
    quality_analysis: str = ""
    advice: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JournalSuggestion":
        return cls(
            name=_text(data.get("name")),
            match_score=_score(data.get("matchScore")),
            tier=_text(data.get("tier")),
            rationale=_text(data.get("rationale")),
            quality_analysis=_text(data.get("qualityAnalysis")),
            advice=_text(data.get("advice")),
        )


VERDICTS = (
    "Strong Candidate",
    "Worth Trying",
    "High Risk",
    "Out of Scope",
    "Insufficient Quality/Novelty",
)


@dataclass
class JournalEvaluation:
    journal_name: str
    match_score: int = 0
    verdict: str = ""
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    editor_comments: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any], fallback_name: str = "") -> "JournalEvaluation":
        return cls(
            journal_name=_text(data.get("journalName")) or fallback_name,
            match_score=_score(data.get("matchScore")),
            verdict=_text(data.get("verdict")),
            strengths=_texts(data.get("strengths")),
            weaknesses=_texts(data.get("weaknesses")),
            editor_comments=_text(data.get("editorComments")),
        )
