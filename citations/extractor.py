# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Citation extraction utilities for pulling url citations out of annotations.

Different producers attach citations to a message in different shapes:

- OpenAI style ``url_citations`` lists
- a single embedded ``url_citation`` object
- flat ``url``/``title``/``snippet`` fields on the annotation itself
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Set

from utils.log_sanitizer import sanitize_log_input

from .models import AnnotationShape, Citation, get_field, is_record

logger = logging.getLogger(__name__)


def detect_annotation_shapes(annotation: Any) -> List[AnnotationShape]:
    """
    Detect which citation shapes an annotation carries.

    An annotation may carry more than one shape at once. Shapes are returned
    in the order they are applied; an empty list means no shape matched.

    Args:
        annotation: Raw annotation, a mapping or an object with attributes

    Returns:
        List of AnnotationShape members
    """
    if not is_record(annotation):
        return []

    shapes = []
    if isinstance(get_field(annotation, "url_citations"), (list, tuple)):
        shapes.append(AnnotationShape.URL_CITATIONS)
    if is_record(get_field(annotation, "url_citation")):
        shapes.append(AnnotationShape.URL_CITATION)
    if get_field(annotation, "url"):
        shapes.append(AnnotationShape.DIRECT_URL)
    return shapes


def _accept(
    record: Any, seen_urls: Set[str], citations: List[Citation]
) -> None:
    citation = Citation.from_raw(record)
    if citation is None:
        return
    if citation.url in seen_urls:
        logger.debug(
            f"[Citations] Skipping duplicate url: {sanitize_log_input(citation.url)}"
        )
        return
    seen_urls.add(citation.url)
    citations.append(citation)


def _from_citation_list(
    annotation: Any, seen_urls: Set[str]
) -> List[Citation]:
    citations: List[Citation] = []
    for record in get_field(annotation, "url_citations"):
        _accept(record, seen_urls, citations)
    return citations


def _from_embedded_citation(
    annotation: Any, seen_urls: Set[str]
) -> List[Citation]:
    citations: List[Citation] = []
    _accept(get_field(annotation, "url_citation"), seen_urls, citations)
    return citations


def _from_direct_fields(
    annotation: Any, seen_urls: Set[str]
) -> List[Citation]:
    citations: List[Citation] = []
    _accept(annotation, seen_urls, citations)
    return citations


_SHAPE_EXTRACTORS: Dict[
    AnnotationShape, Callable[[Any, Set[str]], List[Citation]]
] = {
    AnnotationShape.URL_CITATIONS: _from_citation_list,
    AnnotationShape.URL_CITATION: _from_embedded_citation,
    AnnotationShape.DIRECT_URL: _from_direct_fields,
}


def extract_citations_from_annotation(
    annotation: Any, seen_urls: Optional[Set[str]] = None
) -> List[Citation]:
    """
    Extract citations from a single annotation.

    Args:
        annotation: Raw annotation record
        seen_urls: Urls already emitted; updated in place with new urls

    Returns:
        Citations whose url was not in seen_urls, in shape order
    """
    if seen_urls is None:
        seen_urls = set()

    citations: List[Citation] = []
    for shape in detect_annotation_shapes(annotation):
        citations.extend(_SHAPE_EXTRACTORS[shape](annotation, seen_urls))
    return citations


def extract_url_citations(annotations: Any) -> List[Citation]:
    """
    Extract url citations from a list of annotations.

    Annotations are processed in order and duplicate urls are dropped,
    keeping the first occurrence. Anything that is not a list of
    annotation records yields an empty list.

    Args:
        annotations: Raw annotations attached to a message

    Returns:
        List of unique citations
    """
    if not isinstance(annotations, (list, tuple)):
        if annotations is not None:
            logger.debug(
                f"[Citations] Ignoring annotations of type {type(annotations).__name__}"
            )
        return []

    citations: List[Citation] = []
    seen_urls: Set[str] = set()

    for annotation in annotations:
        if not is_record(annotation):
            continue
        citations.extend(extract_citations_from_annotation(annotation, seen_urls))

    logger.debug(
        f"[Citations] Extracted {len(citations)} citations from {len(annotations)} annotations"
    )
    return citations
