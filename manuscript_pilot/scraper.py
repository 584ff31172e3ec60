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

from typing import Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from manuscript_pilot.logging_utils import get_logger

LOGGER = get_logger("manuscript_pilot.scraper")

# Priority keywords for guidelines
GUIDELINE_KEYWORDS = ["submission", "author", "guideline", "instruct", "prepare", "manuscript", "policy"]

HOMEPAGE_TIMEOUT = 10
PAGE_TIMEOUT = 12


class ScraperError(RuntimeError):
    """Raised when a journal page cannot be downloaded."""


def _get(url: str, timeout: int) -> requests.Response:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise ScraperError(f"Error fetching {url}: {exc}") from exc
    if response.status_code != 200:
        raise ScraperError(f"Could not access {url} (Status {response.status_code})")
    return response


def find_guidelines_url(journal_name: str, homepage: Optional[str] = None) -> Optional[str]:
    """
    Find the direct 'Information for Authors' or 'Submission Guidelines' URL
    for a journal by scanning the links on its homepage.

    Returns the homepage itself when no guideline link is found.
    """
    if not homepage or not homepage.startswith("http"):
        return homepage

    response = _get(homepage, HOMEPAGE_TIMEOUT)
    soup = BeautifulSoup(response.text, "html.parser")
    for link in soup.find_all("a", href=True):
        text = link.get_text().lower()
        href = link["href"].lower()
        if any(kw in text for kw in GUIDELINE_KEYWORDS) or any(kw in href for kw in GUIDELINE_KEYWORDS):
            target = link["href"]
            if not target.startswith("http"):
                target = urljoin(homepage, target)
            LOGGER.info("Guidelines link for %s: %s", journal_name, target)
            return target

    LOGGER.info("No guidelines link on %s; using the homepage", homepage)
    return homepage


def fetch_page_text(url: str) -> str:
    """Download a page and return its visible text, whitespace-normalised."""
    response = _get(url, PAGE_TIMEOUT)
    soup = BeautifulSoup(response.text, "html.parser")
    # Remove scripts/styles
    for s in soup(["script", "style"]):
        s.decompose()
    return " ".join(soup.get_text().split())
