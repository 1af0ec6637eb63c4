# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Citation collector for merging citations from every place a message keeps them.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional

from langchain_core.messages import BaseMessage

from .extractor import extract_url_citations
from .models import Citation, get_field
from .parser import parse_markdown_sources, split_content_and_sources

logger = logging.getLogger(__name__)


class CitationCollector:
    """
    Collects citations in order, keeping the first citation seen for each url.

    Later citations for a url that is already collected are dropped whole;
    their title and snippet never replace the collected ones.
    """

    def __init__(self):
        self._citations: List[Citation] = []
        self._seen_urls: set[str] = set()

    def add(self, citation: Citation) -> bool:
        """
        Add a citation unless its url is already collected.

        Args:
            citation: The citation to add

        Returns:
            True if the citation was added
        """
        if not citation.url or citation.url in self._seen_urls:
            return False
        self._seen_urls.add(citation.url)
        self._citations.append(citation)
        return True

    def add_all(self, citations: Iterable[Citation]) -> int:
        """Add citations in order and return how many were new."""
        return sum(1 for citation in citations if self.add(citation))

    @property
    def citations(self) -> List[Citation]:
        """Collected citations in insertion order."""
        return list(self._citations)

    @property
    def seen_urls(self) -> frozenset[str]:
        return frozenset(self._seen_urls)

    @property
    def count(self) -> int:
        """Return the total number of citations."""
        return len(self._citations)

    def __contains__(self, url: object) -> bool:
        return url in self._seen_urls

    def clear(self) -> None:
        """Clear all citations."""
        self._citations.clear()
        self._seen_urls.clear()


def _message_annotations(message: Any) -> Any:
    """
    Collect the raw annotations of a message.

    LangChain messages keep annotations in additional_kwargs, or on the
    individual content blocks when the content is a list of blocks.
    """
    annotations = get_field(message, "annotations")
    if not isinstance(message, BaseMessage):
        return annotations

    collected = list(annotations) if isinstance(annotations, (list, tuple)) else []
    extra = message.additional_kwargs.get("annotations")
    if isinstance(extra, (list, tuple)):
        collected.extend(extra)
    if isinstance(message.content, list):
        for block in message.content:
            if isinstance(block, Mapping) and isinstance(
                block.get("annotations"), list
            ):
                collected.extend(block["annotations"])
    return collected


def collect_message_citations(message: Any, collector: CitationCollector) -> int:
    """
    Add a message's citations to a collector.

    Annotation citations are added first, then links from the sources block
    at the end of the message content.

    Args:
        message: Mapping, object or LangChain message with optional
            annotations and content
        collector: Collector that holds the citations seen so far

    Returns:
        Number of citations added
    """
    if message is None:
        return 0

    added = 0
    annotations = _message_annotations(message)
    if annotations:
        added += collector.add_all(extract_url_citations(annotations))

    content = get_field(message, "content")
    if isinstance(content, str):
        sources = split_content_and_sources(content).sources
        if sources:
            added += collector.add_all(parse_markdown_sources(sources))

    return added


def extract_all_url_citations(message: Any) -> List[Citation]:
    """
    Extract every url citation of a message, without duplicates.

    Args:
        message: The message, or None

    Returns:
        Annotation citations followed by sources block citations
    """
    collector = CitationCollector()
    collect_message_citations(message, collector)
    logger.debug(f"[Citations] Collected {collector.count} citations from message")
    return collector.citations


def extract_citations_from_messages(messages: Optional[Iterable[Any]]) -> List[Citation]:
    """
    Extract citations from a conversation, deduplicating across messages.

    Args:
        messages: Messages in conversation order

    Returns:
        List of unique citations, first occurrence wins
    """
    if not isinstance(messages, Iterable) or isinstance(
        messages, (str, bytes, Mapping)
    ):
        return []

    collector = CitationCollector()
    total = 0
    for message in messages:
        collect_message_citations(message, collector)
        total += 1

    logger.info(
        f"[Citations] Extracted {collector.count} unique citations from {total} messages"
    )
    return collector.citations


def merge_citations(
    existing: Iterable[Citation], new: Iterable[Citation]
) -> List[Citation]:
    """
    Merge new citations into existing list, avoiding duplicates.

    Existing citations are kept as they are, even when a new citation for
    the same url has a title or snippet.

    Args:
        existing: Existing citations list
        new: New citations to add

    Returns:
        Merged list of citations
    """
    collector = CitationCollector()
    collector.add_all(existing)
    collector.add_all(new)
    return collector.citations
