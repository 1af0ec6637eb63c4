# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Log sanitization for values taken from untrusted message payloads.

Citation urls and titles come straight from upstream producers, so they
are escaped before being written to logs to keep one value on one line.
"""

import re
from typing import Any

_ESCAPES = {
    "\\": "\\\\",  # must be first
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\x00": "\\0",
    "\x1b": "\\x1b",
}

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x0c\x0e-\x1f]")


def sanitize_log_input(value: Any, max_length: int = 200) -> str:
    """
    Escape line breaks and control characters and cap the length.

    Args:
        value: The value to sanitize (any type)
        max_length: Maximum length of the returned string

    Returns:
        str: Single-line string safe for logging

    Examples:
        >>> sanitize_log_input("https://example.com")
        'https://example.com'

        >>> sanitize_log_input("title\\n[INFO] fake entry")
        'title\\\\n[INFO] fake entry'

        >>> sanitize_log_input(None)
        'None'
    """
    if value is None:
        return "None"

    text = str(value)
    for char, replacement in _ESCAPES.items():
        text = text.replace(char, replacement)
    text = _CONTROL_CHARS.sub("", text)

    if len(text) > max_length:
        text = text[: max_length - 3] + "..."
    return text
