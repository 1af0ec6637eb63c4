# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Citation data models for normalized url citations.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class AnnotationShape(enum.Enum):
    """Recognized shapes of a raw annotation record."""

    # {"url_citations": [{"url": ..., "title": ..., "snippet": ...}, ...]}
    URL_CITATIONS = "url_citations"
    # {"url_citation": {"url": ..., "title": ..., "snippet": ...}}
    URL_CITATION = "url_citation"
    # {"url": ..., "title": ..., "snippet": ...}
    DIRECT_URL = "url"


def is_record(value: Any) -> bool:
    """Whether a value is a mapping or an object exposing fields as attributes."""
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, Mapping) or hasattr(value, "__dict__")


def get_field(record: Any, name: str) -> Any:
    """Read a field by key from mappings and by attribute from other objects."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class Citation(BaseModel):
    """
    A reference to an external source cited by a generated message.

    The url is the identity of a citation: two citations with the same url
    are the same source, whatever their title or snippet.
    """

    url: str
    title: Optional[str] = None
    snippet: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out absent fields."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_raw(cls, record: Any) -> Optional["Citation"]:
        """
        Build a citation from an untrusted citation-like record.

        Args:
            record: Mapping or object that may carry url, title and snippet

        Returns:
            Citation, or None if the record has no usable url
        """
        if not is_record(record):
            return None

        url = get_field(record, "url")
        if not isinstance(url, str) or not url:
            return None

        return cls(
            url=url,
            title=_optional_str(get_field(record, "title")),
            snippet=_optional_str(get_field(record, "snippet")),
        )


@dataclass(frozen=True)
class SplitContent:
    """Message prose separated from its trailing sources block."""

    content: str
    sources: str
