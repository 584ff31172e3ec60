"""Tests for the live guidelines lookup with a patched HTTP layer."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
import requests

from manuscript_pilot import scraper
from manuscript_pilot.state.guidelines import fetch_live_guidelines

HOMEPAGE = """
<html><body>
  <a href="/news">Latest news</a>
  <a href="/authors/submission-guidelines">For Authors</a>
</body></html>
"""

GUIDELINES_PAGE = """
<html><head><style>.x { color: red; }</style><script>var tracking = 1;</script></head>
<body><h1>Submission   guidelines</h1>
<p>Abstracts must not exceed
150 words.</p></body></html>
"""


@pytest.fixture
def fake_get(monkeypatch):
    pages = {}
    requested = []

    def _get(url, timeout=None):
        requested.append(url)
        if url not in pages:
            raise requests.ConnectionError(f"no route to {url}")
        status, body = pages[url]
        return SimpleNamespace(status_code=status, text=body)

    monkeypatch.setattr(scraper.requests, "get", _get)
    return SimpleNamespace(pages=pages, requested=requested)


def test_find_guidelines_url_resolves_relative_link(fake_get):
    fake_get.pages["https://journal.example/"] = (200, HOMEPAGE)

    url = scraper.find_guidelines_url("Example", "https://journal.example/")

    assert url == "https://journal.example/authors/submission-guidelines"


def test_find_guidelines_url_falls_back_to_homepage(fake_get):
    fake_get.pages["https://journal.example/"] = (200, '<a href="/news">News</a>')

    assert scraper.find_guidelines_url("Example", "https://journal.example/") == "https://journal.example/"


def test_find_guidelines_url_without_homepage_makes_no_request(fake_get):
    assert scraper.find_guidelines_url("Example", None) is None
    assert fake_get.requested == []


def test_http_errors_raise_scraper_error(fake_get):
    fake_get.pages["https://journal.example/"] = (503, "")

    with pytest.raises(scraper.ScraperError, match="503"):
        scraper.find_guidelines_url("Example", "https://journal.example/")
    with pytest.raises(scraper.ScraperError):
        scraper.fetch_page_text("https://unreachable.example/")


def test_fetch_page_text_strips_scripts_and_whitespace(fake_get):
    fake_get.pages["https://journal.example/guide"] = (200, GUIDELINES_PAGE)

    text = scraper.fetch_page_text("https://journal.example/guide")

    assert text == "Submission guidelines Abstracts must not exceed 150 words."


def test_fetch_live_guidelines_uses_known_homepage(fake_get):
    fake_get.pages["https://elifesciences.org/"] = (200, '<a href="/inside-elife/author-guide">Author guide</a>')
    fake_get.pages["https://elifesciences.org/inside-elife/author-guide"] = (200, "<p>Word limit: none</p>")

    assert fetch_live_guidelines("eLife") == "Word limit: none"


def test_fetch_live_guidelines_unknown_journal():
    with pytest.raises(scraper.ScraperError):
        fetch_live_guidelines("Journal of Nowhere")
