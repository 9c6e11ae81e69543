"""RuleStore: in-memory home for a user's custom rules.

Design goals:
  - Patterns are validated before they are stored, so the rules manager can
    refuse a bad regex up front
  - Detection still tolerates bad rules (they are skipped), since a store
    is not the only possible source of rules
  - ``enabled()`` is what gets handed to a detection call
"""

from __future__ import annotations
import itertools
from dataclasses import replace
from typing import Any

from .custom import validate_pattern
from .errors import RuleValidationError
from .types import CustomRule

_EDITABLE = frozenset({"name", "pattern", "replacement", "enabled", "description"})


def check_rule(rule: CustomRule) -> CustomRule:
    """Validate a rule, filling in the default replacement."""
    if not rule.name.strip():
        raise RuleValidationError("rule name is required")
    error = validate_pattern(rule.pattern)
    if error is not None:
        raise RuleValidationError(f"invalid regex pattern for {rule.name!r}: {error}")
    if not rule.replacement:
        rule = replace(rule, replacement="[REDACTED]")
    return rule


def apply_changes(rule: CustomRule, changes: dict[str, Any]) -> CustomRule:
    unknown = set(changes) - _EDITABLE
    if unknown:
        raise RuleValidationError(f"unknown rule fields: {', '.join(sorted(unknown))}")
    return check_rule(replace(rule, **changes))


class RuleStore:
    """Custom rules keyed by an auto-incrementing id."""

    __slots__ = ("_rules", "_ids")

    def __init__(self, rules: list[CustomRule] | None = None) -> None:
        self._rules: dict[int, CustomRule] = {}
        self._ids = itertools.count(1)
        for rule in rules or ():
            self.add(rule)

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def add(self, rule: CustomRule) -> int:
        rule = check_rule(rule)
        rule_id = next(self._ids)
        self._rules[rule_id] = rule
        return rule_id

    def get(self, rule_id: int) -> CustomRule:
        try:
            return self._rules[rule_id]
        except KeyError:
            raise KeyError(f"rule {rule_id} not found") from None

    def update(self, rule_id: int, **changes: Any) -> CustomRule:
        rule = apply_changes(self.get(rule_id), changes)
        self._rules[rule_id] = rule
        return rule

    def delete(self, rule_id: int) -> None:
        self.get(rule_id)
        del self._rules[rule_id]

    def items(self) -> list[tuple[int, CustomRule]]:
        return sorted(self._rules.items())

    def all(self) -> list[CustomRule]:
        return [rule for _, rule in self.items()]

    def enabled(self) -> list[CustomRule]:
        return [rule for rule in self.all() if rule.enabled]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._rules)

    def clear(self) -> None:
        self._rules.clear()
