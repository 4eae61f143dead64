# src/validation/stylesheet_validator.py - v1
"""Structural validation of generated stylesheet text.

Checks brace balance and emptiness. Findings are advisory: the caller
decides whether to warn or reject. Never raises.
"""

from __future__ import annotations

UNMATCHED_CLOSING_BRACE = "unmatched closing brace '}'"
EMPTY_OUTPUT = "empty output: generated stylesheet is blank"


def missing_closing_braces(count: int) -> str:
    """Finding text for ``count`` unclosed blocks."""
    noun = "brace" if count == 1 else "braces"
    return f"missing {count} closing {noun} '}}'"


def validate_stylesheet(text: str) -> list[str]:
    """Validate stylesheet text and return findings in scan order.

    Args:
        text: Generated stylesheet.

    Returns:
        Ordered list of findings; empty means clean.
    """
    findings: list[str] = []

    depth = 0
    for ch in text:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth < 0:
                findings.append(UNMATCHED_CLOSING_BRACE)
                # Restart from zero so one stray brace does not cascade.
                depth = 0

    if depth > 0:
        findings.append(missing_closing_braces(depth))

    if not text.strip():
        findings.append(EMPTY_OUTPUT)

    return findings
