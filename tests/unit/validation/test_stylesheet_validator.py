# tests/unit/validation/test_stylesheet_validator.py - v1
"""Tests for validation/stylesheet_validator.py - brace balance and emptiness."""

from __future__ import annotations

from stylemorph.validation.stylesheet_validator import (
    EMPTY_OUTPUT,
    UNMATCHED_CLOSING_BRACE,
    missing_closing_braces,
    validate_stylesheet,
)


class TestValidateStylesheet:
    def test_balanced_is_clean(self):
        assert validate_stylesheet("body { color: red; } a { color: blue; }") == []

    def test_nested_blocks_are_clean(self):
        css = "@media (max-width: 600px) { body { margin: 0; } }"
        assert validate_stylesheet(css) == []

    def test_missing_closing_brace(self):
        assert validate_stylesheet("a { color: red;") == [missing_closing_braces(1)]

    def test_missing_several_closing_braces(self):
        findings = validate_stylesheet("@media print { a { b { ")
        assert findings == [missing_closing_braces(3)]

    def test_unmatched_closing_brace(self):
        assert validate_stylesheet("a { } }") == [UNMATCHED_CLOSING_BRACE]

    def test_stray_brace_does_not_cascade(self):
        # Depth restarts at zero: the trailing block is balanced again.
        assert validate_stylesheet("} a { color: red; }") == [UNMATCHED_CLOSING_BRACE]

    def test_each_stray_brace_reported(self):
        assert validate_stylesheet("}}") == [
            UNMATCHED_CLOSING_BRACE,
            UNMATCHED_CLOSING_BRACE,
        ]

    def test_unmatched_then_missing_in_scan_order(self):
        findings = validate_stylesheet("} a {")
        assert findings == [UNMATCHED_CLOSING_BRACE, missing_closing_braces(1)]

    def test_empty(self):
        assert validate_stylesheet("") == [EMPTY_OUTPUT]

    def test_whitespace_only(self):
        assert validate_stylesheet("  \n\t ") == [EMPTY_OUTPUT]

    def test_blank_check_is_independent_of_braces(self):
        assert validate_stylesheet("{") == [missing_closing_braces(1)]


class TestMessages:
    def test_singular(self):
        assert missing_closing_braces(1) == "missing 1 closing brace '}'"

    def test_plural(self):
        assert missing_closing_braces(2) == "missing 2 closing braces '}'"
