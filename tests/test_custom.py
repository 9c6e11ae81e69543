"""Tests for custom rule detection."""

import logging

from resume_redactor.custom import scan_custom_rules, validate_pattern
from resume_redactor.types import Category, CustomRule


def test_rule_matches():
    rules = [CustomRule(name="Employee ID", pattern=r"EMP-\d+", replacement="[employee id]")]
    findings, skipped = scan_custom_rules("Badge EMP-123 and EMP-456", rules)
    assert skipped == []
    assert [f.value for f in findings] == ["EMP-123", "EMP-456"]
    f = findings[0]
    assert f.category is Category.CUSTOM
    assert f.custom_label == "Employee ID"
    assert f.replacement == "[employee id]"
    assert f.confidence == 1.0


def test_invalid_rule_is_skipped_and_others_still_run(caplog):
    rules = [
        CustomRule(name="Broken", pattern="("),
        CustomRule(name="Employee ID", pattern=r"EMP-\d+"),
    ]
    with caplog.at_level(logging.WARNING, logger="resume_redactor.custom"):
        findings, skipped = scan_custom_rules("Badge EMP-123", rules)
    assert [f.value for f in findings] == ["EMP-123"]
    assert [name for name, _ in skipped] == ["Broken"]
    assert "Broken" in caplog.text


def test_disabled_rule_is_ignored():
    rules = [CustomRule(name="Employee ID", pattern=r"EMP-\d+", enabled=False)]
    assert scan_custom_rules("Badge EMP-123", rules) == ([], [])


def test_empty_replacement_falls_back_to_default():
    rules = [CustomRule(name="Code", pattern=r"X\d", replacement="")]
    findings, _ = scan_custom_rules("X1", rules)
    assert findings[0].replacement == "[REDACTED]"


def test_empty_matches_are_skipped():
    rules = [CustomRule(name="Stars", pattern=r"\**")]
    findings, _ = scan_custom_rules("abc", rules)
    assert findings == []


def test_rule_from_dict_defaults():
    rule = CustomRule.from_dict({"name": "Code", "pattern": r"X\d"})
    assert rule.replacement == "[REDACTED]"
    assert rule.enabled is True
    assert CustomRule.from_dict(rule.to_dict()) == rule


def test_validate_pattern():
    assert validate_pattern(r"EMP-\d+") is None
    assert validate_pattern("(") is not None
    assert validate_pattern("   ") == "pattern is required"
