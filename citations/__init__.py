# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Citation normalization module.

This module turns the citation data attached to generated messages
(annotations in several producer shapes, and markdown links in a trailing
sources section) into one deduplicated, ordered list of citations.
"""

from .collector import (
    CitationCollector,
    collect_message_citations,
    extract_all_url_citations,
    extract_citations_from_messages,
    merge_citations,
)
from .extractor import (
    detect_annotation_shapes,
    extract_citations_from_annotation,
    extract_url_citations,
)
from .formatter import CitationFormatter
from .models import AnnotationShape, Citation, SplitContent
from .parser import parse_markdown_sources, split_content_and_sources

__all__ = [
    "AnnotationShape",
    "Citation",
    "SplitContent",
    "CitationCollector",
    "CitationFormatter",
    "collect_message_citations",
    "detect_annotation_shapes",
    "extract_all_url_citations",
    "extract_citations_from_annotation",
    "extract_citations_from_messages",
    "extract_url_citations",
    "merge_citations",
    "parse_markdown_sources",
    "split_content_and_sources",
]
