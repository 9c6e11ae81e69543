"""Review session: one document, its findings, and the user's choices.

Usage:

    session = ReviewSession.start(text, rules=rules)

    # Reviewer un-ticks a false positive
    session.set_redact("pii-3", False)

    preview = session.highlighted()     # HTML for the review pane
    final = session.redacted_text()     # plain text to export

Findings belong to the exact text they were computed from.  Changing the
text or the rule set re-runs detection and discards earlier choices.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .detector import Detector, DetectorConfig
from .render import get_stats, highlight, redact
from .types import Category, CustomRule, Finding, Stats


@dataclass
class ReviewSession:
    """Holds the finding list for one document under review."""

    detector: Detector
    text: str = ""
    rules: tuple[CustomRule, ...] = ()
    findings: list[Finding] = field(default_factory=list)
    skipped_rules: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def start(
        cls,
        text: str,
        *,
        rules: list[CustomRule] | tuple[CustomRule, ...] = (),
        detector: Detector | None = None,
        config: DetectorConfig | None = None,
    ) -> "ReviewSession":
        """Factory: runs detection once and returns the session."""
        session = cls(detector=detector or Detector(config), text=text, rules=tuple(rules))
        session._run()
        return session

    def _run(self) -> None:
        result = self.detector.detect(self.text, self.rules)
        self.findings = result.findings
        self.skipped_rules = result.skipped_rules

    def update_text(self, text: str) -> None:
        """Replace the document text; findings are recomputed."""
        self.text = text
        self._run()

    def update_rules(self, rules: list[CustomRule] | tuple[CustomRule, ...]) -> None:
        """Replace the custom rule set; findings are recomputed."""
        self.rules = tuple(rules)
        self._run()

    def get(self, finding_id: str) -> Finding:
        for f in self.findings:
            if f.id == finding_id:
                return f
        raise KeyError(finding_id)

    def set_redact(self, finding_id: str, value: bool) -> Finding:
        """Accept (True) or ignore (False) one finding."""
        finding = self.get(finding_id)
        finding.set_redact(value)
        return finding

    def toggle(self, finding_id: str) -> Finding:
        finding = self.get(finding_id)
        finding.set_redact(not finding.redact)
        return finding

    def toggle_category(self, category: Category, value: bool) -> int:
        """Set every finding of a category; returns how many were touched."""
        hits = [f for f in self.findings if f.category is category]
        for f in hits:
            f.set_redact(value)
        return len(hits)

    def accept_all(self) -> None:
        for f in self.findings:
            f.set_redact(True)

    def ignore_all(self) -> None:
        for f in self.findings:
            f.set_redact(False)

    def redacted_text(self, *, strict: bool = False) -> str:
        return redact(self.text, self.findings, strict=strict)

    def highlighted(self) -> str:
        return highlight(self.text, self.findings)

    @property
    def stats(self) -> Stats:
        return get_stats(self.findings)
