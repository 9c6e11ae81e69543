"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Category(str, Enum):
    """Taxonomy tag for a finding."""
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"
    NAME = "name"
    ADDRESS = "address"
    SSN = "ssn"
    CREDIT_CARD = "credit_card"
    DATE_OF_BIRTH = "date_of_birth"
    PASSPORT = "passport"
    IP_ADDRESS = "ip_address"
    BANK_ACCOUNT = "bank_account"
    TAX_ID = "tax_id"
    AGE = "age"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Finding:
    """A single detected PII candidate.

    Everything except ``redact`` is fixed at creation.  ``redact`` is flipped
    through :meth:`set_redact` only.
    """
    id: str
    category: Category
    start: int
    end: int
    value: str
    replacement: str
    confidence: float              # 1.0 for patterns, 0.70–0.98 for names
    custom_label: str | None = None
    redact: bool = field(default=True, compare=False)

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)

    def overlaps(self, other: Finding) -> bool:
        return self.start < other.end and self.end > other.start

    def set_redact(self, value: bool) -> None:
        """Mark the finding accepted (True) or ignored (False)."""
        object.__setattr__(self, "redact", bool(value))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "category": self.category.value,
            "start": self.start,
            "end": self.end,
            "value": self.value,
            "replacement": self.replacement,
            "confidence": self.confidence,
            "redact": self.redact,
        }
        if self.custom_label is not None:
            out["custom_label"] = self.custom_label
        return out


@dataclass(frozen=True, slots=True)
class CustomRule:
    """User-defined regex rule.  Owned by a rule store, read-only here."""
    name: str
    pattern: str
    replacement: str = "[REDACTED]"
    enabled: bool = True
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CustomRule:
        return cls(
            name=str(data["name"]),
            pattern=str(data["pattern"]),
            replacement=data.get("replacement") or "[REDACTED]",
            enabled=bool(data.get("enabled", True)),
            description=data.get("description", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "pattern": self.pattern,
            "replacement": self.replacement,
            "enabled": self.enabled,
            "description": self.description,
        }


@dataclass(slots=True)
class Stats:
    """Aggregate counts over a finding list."""
    total: int
    active_count: int
    by_category: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "active_count": self.active_count,
            "by_category": dict(self.by_category),
        }


@dataclass(slots=True)
class DetectionResult:
    """Result of one detection run."""
    findings: list[Finding] = field(default_factory=list)
    skipped_rules: list[tuple[str, str]] = field(default_factory=list)  # (rule name, error)
