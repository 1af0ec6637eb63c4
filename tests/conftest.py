"""Shared pytest fixtures for citation tests."""

import pytest


@pytest.fixture
def web_search_message() -> dict:
    """A message as returned by a web-search enabled answer service."""
    return {
        "content": (
            "Paris, the capital of France, is known for its art, history, and culture."
            "\n\n**Sources**\n"
            "- [Paris - Wikipedia](https://en.wikipedia.org/wiki/Paris)\n"
            "- [Paris Tourism](https://www.parisinfo.com)"
        ),
        "annotations": [
            {
                "url_citations": [
                    {
                        "url": "https://en.wikipedia.org/wiki/Paris",
                        "title": "Paris - Wikipedia",
                        "snippet": "Paris is the capital and largest city of France",
                    }
                ]
            }
        ],
    }


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch):
    for name in ("MAX_DISPLAY_CITATIONS", "FALLBACK_TITLE", "INCLUDE_SNIPPETS"):
        monkeypatch.delenv(name, raising=False)
