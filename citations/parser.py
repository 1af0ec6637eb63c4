# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Parsing of the markdown "Sources" block that answers may end with.
"""

import logging
import re
from typing import Any, List

from utils.log_sanitizer import sanitize_log_input

from .models import Citation, SplitContent

logger = logging.getLogger(__name__)

SOURCES_MARKER = "**Sources**"

# A blank line, then the bold marker alone on its line
_SOURCES_BLOCK_PATTERN = re.compile(r"\n\n(?=" + re.escape(SOURCES_MARKER) + r"\n)")

# [label](destination); the label may be empty, the destination may not.
# Neither part crosses an opening bracket; destinations may hold one level
# of balanced parens, as in wikipedia urls.
_MARKDOWN_LINK_PATTERN = re.compile(
    r"\[([^\[\]]*)\]\(((?:[^()]|\([^()]*\))+)\)"
)


def split_content_and_sources(content: Any) -> SplitContent:
    """
    Split message content from its trailing sources section.

    The sources section starts at the last blank-line-separated
    ``**Sources**`` line and runs to the end of the text.

    Args:
        content: The message text

    Returns:
        SplitContent with the prose and the sources block. When there is no
        sources block the content is returned unchanged and sources is empty.
    """
    if not isinstance(content, str):
        return SplitContent(content="", sources="")

    last_match = None
    for last_match in _SOURCES_BLOCK_PATTERN.finditer(content):
        pass

    if last_match is None:
        return SplitContent(content=content, sources="")

    start = last_match.start()
    return SplitContent(
        content=content[:start].strip(),
        sources=content[start:].strip(),
    )


def parse_markdown_sources(text: Any) -> List[Citation]:
    """
    Parse markdown links [title](url) into citations.

    Only http(s) destinations are kept. Duplicates are not removed here.

    Args:
        text: Markdown text, usually a sources block

    Returns:
        List of citations in order of appearance
    """
    if not isinstance(text, str) or not text:
        return []

    citations = []
    for match in _MARKDOWN_LINK_PATTERN.finditer(text):
        title, url = match.groups()
        if not url.startswith("http"):
            logger.debug(
                f"[Citations] Skipping non-http link: {sanitize_log_input(url)}"
            )
            continue
        citations.append(Citation(url=url, title=title or url))

    return citations
