"""Unit tests for utils.log_sanitizer."""

from utils.log_sanitizer import sanitize_log_input


def test_plain_url_unchanged():
    assert sanitize_log_input("https://example.com/a?b=c") == "https://example.com/a?b=c"


def test_newlines_escaped():
    assert sanitize_log_input("title\n[INFO] fake entry") == "title\\n[INFO] fake entry"


def test_control_characters_removed():
    assert sanitize_log_input("a\x07b\x1bc") == "ab\\x1bc"


def test_none():
    assert sanitize_log_input(None) == "None"


def test_truncated():
    result = sanitize_log_input("a" * 1000, max_length=50)
    assert len(result) == 50
    assert result.endswith("...")
