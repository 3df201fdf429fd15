"""
Tests for input sanitization utilities
"""

import pytest

from app.utils.sanitize import absint, sanitize_url


class TestAbsint:
    """Test absint()"""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("7", 7),
            (" 12 ", 12),
            ("7abc", 7),
            ("3.9", 3),
            ("+4", 4),
            (42, 42),
            (2.7, 2),
        ],
    )
    def test_numeric_input(self, value, expected):
        assert absint(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", None, "-5", -5, -0.5, float("nan"), [], "  "])
    def test_invalid_or_negative_input_is_zero(self, value):
        assert absint(value) == 0

    def test_booleans(self):
        assert absint(True) == 1
        assert absint(False) == 0


class TestSanitizeUrl:
    """Test sanitize_url()"""

    def test_keeps_http_urls(self):
        assert sanitize_url("https://example.com/a.jpg") == "https://example.com/a.jpg"

    def test_blocks_javascript(self):
        assert sanitize_url("javascript:alert(1)") is None

    def test_blocks_data_urls(self):
        assert sanitize_url("data:image/png;base64,AAAA") is None

    def test_keeps_relative_paths(self):
        assert sanitize_url("/uploads/gob.jpg") == "/uploads/gob.jpg"

    def test_adds_scheme_to_bare_host(self):
        assert sanitize_url("example.com/x.png") == "https://example.com/x.png"

    def test_empty(self):
        assert sanitize_url("") is None
        assert sanitize_url(None) is None
