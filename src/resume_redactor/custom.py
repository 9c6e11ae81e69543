"""User-supplied regex rules.

Each rule is compiled on its own inside the call.  A pattern that does not
compile is logged and skipped so the remaining rules and the built-in
detectors still run.
"""

from __future__ import annotations
import logging
import re
from typing import Iterable

from .patterns import REPLACEMENTS
from .types import Category, CustomRule, Finding

logger = logging.getLogger(__name__)


def validate_pattern(pattern: str) -> str | None:
    """Return the compile error message for pattern, or None if it is valid."""
    if not pattern or not pattern.strip():
        return "pattern is required"
    try:
        re.compile(pattern)
    except re.error as e:
        return str(e)
    return None


def scan_custom_rules(
    text: str,
    rules: Iterable[CustomRule],
) -> tuple[list[Finding], list[tuple[str, str]]]:
    """Apply enabled rules to text.

    Returns ``(findings, skipped)`` where skipped lists ``(rule name, error)``
    for every rule whose pattern failed to compile.
    """
    findings: list[Finding] = []
    skipped: list[tuple[str, str]] = []
    if not text or not text.strip():
        return findings, skipped

    for rule in rules:
        if not rule.enabled:
            continue
        try:
            regex = re.compile(rule.pattern)
        except re.error as e:
            logger.warning("Invalid custom rule pattern %r (%s): %s", rule.name, rule.pattern, e)
            skipped.append((rule.name, str(e)))
            continue

        replacement = rule.replacement or REPLACEMENTS[Category.CUSTOM]
        for m in regex.finditer(text):
            if m.start() == m.end():
                continue
            findings.append(Finding(
                id="",
                category=Category.CUSTOM,
                start=m.start(),
                end=m.end(),
                value=m.group(),
                replacement=replacement,
                confidence=1.0,
                custom_label=rule.name,
            ))
    return findings, skipped
