# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Citation formatter for preparing citations for display.
"""

import logging
from typing import Iterable, List, Optional

from config.configuration import Configuration

from .models import Citation
from .parser import SOURCES_MARKER, split_content_and_sources

logger = logging.getLogger(__name__)


class CitationFormatter:
    """
    Formats normalized citations for display.

    The formatter owns the display rules that consumers of the citation
    list apply: citations without a url are dropped, the list is capped at
    max_citations, and citations without a title get a fallback label.
    """

    def __init__(
        self,
        max_citations: int = 10,
        fallback_title: str = "Source",
        include_snippets: bool = True,
    ):
        """
        Initialize the formatter.

        Args:
            max_citations: Maximum number of citations to display
            fallback_title: Label used when a citation has no title
            include_snippets: Whether to render snippet lines
        """
        self.max_citations = max_citations
        self.fallback_title = fallback_title
        self.include_snippets = include_snippets

    @classmethod
    def from_configuration(
        cls, configuration: Optional[Configuration] = None
    ) -> "CitationFormatter":
        configuration = configuration or Configuration()
        return cls(
            max_citations=configuration.max_display_citations,
            fallback_title=configuration.fallback_title,
            include_snippets=configuration.include_snippets,
        )

    def select_for_display(self, citations: Iterable[Citation]) -> List[Citation]:
        """
        Pick the citations to display, in order.

        Args:
            citations: Normalized citations

        Returns:
            At most max_citations citations that have a url
        """
        if not citations:
            return []
        valid = [c for c in citations if isinstance(c, Citation) and c.url]
        if len(valid) > self.max_citations:
            logger.debug(
                f"[Citations] Showing {self.max_citations} of {len(valid)} citations"
            )
        return valid[: max(self.max_citations, 0)]

    def display_title(self, citation: Citation) -> str:
        """Return the citation title, or the fallback label."""
        return citation.title or self.fallback_title

    def format_reference(self, citation: Citation) -> str:
        """
        Format a single reference line with an optional snippet line.

        Args:
            citation: The citation to format

        Returns:
            Markdown list item
        """
        lines = [f"- [{self.display_title(citation)}]({citation.url})"]
        if self.include_snippets and citation.snippet:
            lines.append(f"  {citation.snippet}")
        return "\n".join(lines)

    def format_sources_section(self, citations: Iterable[Citation]) -> str:
        """
        Format the sources section appended to an answer.

        Args:
            citations: Normalized citations

        Returns:
            Markdown sources block, or an empty string when there is nothing
            to display
        """
        selected = self.select_for_display(citations)
        if not selected:
            return ""

        lines = [SOURCES_MARKER]
        lines.extend(self.format_reference(citation) for citation in selected)
        return "\n".join(lines)

    @staticmethod
    def strip_sources(content: str) -> str:
        """Return the message content without its sources section."""
        return split_content_and_sources(content).content
