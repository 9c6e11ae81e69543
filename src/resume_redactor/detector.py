"""Detector: the main API.  Layered: patterns, name heuristics, custom rules.

Usage:
    from resume_redactor import detect_pii, redact, CustomRule

    findings = detect_pii("Email me at jane@x.com today")
    print(redact("Email me at jane@x.com today", findings))
    # "Email me at [email redacted] today"

    rules = [CustomRule(name="Employee ID", pattern=r"EMP-\\d+")]
    findings = detect_pii("Badge EMP-123", rules)

Detection is a pure function of ``(text, rules)``: a Detector holds only
immutable configuration and compiled patterns, so one instance can be
shared between threads.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from .custom import scan_custom_rules
from .errors import InputError
from .merge import merge
from .names import NameDetector, NameLexicon
from .patterns import replacement_for, scan_patterns
from .types import Category, CustomRule, DetectionResult, Finding

logger = logging.getLogger(__name__)


@dataclass
class DetectorConfig:
    """Configuration for the Detector."""
    lexicon: NameLexicon = field(default_factory=NameLexicon)
    # Placeholder overrides per category
    replacements: dict[Category, str] = field(default_factory=dict)
    # Categories to always skip (e.g. don't flag ages)
    skip_categories: set[Category] = field(default_factory=set)
    # Allow-list: values that should NEVER be flagged
    allow_list: set[str] = field(default_factory=set)


class Detector:
    """Layered PII detector.

    Layer 1: Pattern registry (emails, phones, SSNs, addresses, ...)
    Layer 2: Name heuristics (header position, gazetteers, initials)
    Layer 3: Custom rules (user-supplied regexes, isolated per rule)
    """

    def __init__(self, config: DetectorConfig | None = None) -> None:
        self.config = config or DetectorConfig()
        self._names = NameDetector(
            self.config.lexicon,
            replacement=replacement_for(Category.NAME, self.config.replacements),
        )

    def detect(self, text: str, rules: Iterable[CustomRule] = ()) -> DetectionResult:
        """Find PII candidates in text.

        Raises InputError for non-string text.  Invalid custom rules are
        reported in ``skipped_rules`` and never raise.
        """
        if not isinstance(text, str):
            raise InputError(f"text must be str, not {type(text).__name__}")
        if not text.strip():
            return DetectionResult()

        # --- Layer 1: Patterns ---
        categorical = scan_patterns(text, replacements=self.config.replacements)

        # --- Layer 2: Names ---
        names = self._names.detect(text)

        # --- Layer 3: Custom rules ---
        custom, skipped = scan_custom_rules(text, rules)

        findings = merge(
            self._filter(categorical),
            self._filter(names),
            self._filter(custom),
        )
        logger.debug(
            "Detected %d findings (%d pattern, %d name, %d custom, %d rules skipped)",
            len(findings), len(categorical), len(names), len(custom), len(skipped),
        )
        return DetectionResult(findings=findings, skipped_rules=skipped)

    def _filter(self, findings: list[Finding]) -> list[Finding]:
        skip = self.config.skip_categories
        allow = self.config.allow_list
        return [f for f in findings if f.category not in skip and f.value not in allow]


_default: Detector | None = None


def _default_detector() -> Detector:
    global _default
    if _default is None:
        _default = Detector()
    return _default


def detect_pii(
    text: str,
    custom_rules: Iterable[CustomRule] = (),
    *,
    detector: Detector | None = None,
) -> list[Finding]:
    """Detect PII with the default configuration; returns the finding list."""
    return (detector or _default_detector()).detect(text, custom_rules).findings


def replacements_from_names(data: Mapping[str, str]) -> dict[Category, str]:
    """Turn ``{"email": "..."}`` into a Category-keyed override map."""
    return {Category(key): value for key, value in data.items()}
