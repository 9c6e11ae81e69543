"""YAML/dict config loader for resume-redactor.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    resume_redactor:
      skip_categories:
        - age
      allow_list:
        - jobs@example.com
      replacements:
        name: "[name redacted]"
      lexicon:
        extra_first_names: [Priya]
        extra_last_names: [Sharma]
        extra_section_headers: [Side Projects]
        extra_partial_words: [SALESFORCE]
      offload:
        threshold: 5000          # chars
        timeout: 10              # seconds
      rules:
        - name: Employee ID
          pattern: "EMP-\\d+"
          replacement: "[employee id]"
      rule_store:
        backend: sqlite          # "memory" or "sqlite"
        path: ~/.resume-redactor/rules.db
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .detector import Detector, DetectorConfig, replacements_from_names
from .names import NameLexicon
from .offload import DEFAULT_TIMEOUT, LARGE_DOCUMENT_THRESHOLD, OffloadedDetector
from .rules import RuleStore
from .rules_sqlite import SqliteRuleStore
from .types import Category, CustomRule

DEFAULT_RULES_DB = "~/.resume-redactor/rules.db"


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "resume_redactor" key or flat
    if "resume_redactor" in data:
        data = data["resume_redactor"] or {}

    lexicon = data.get("lexicon") or {}
    offload = data.get("offload") or {}
    store = data.get("rule_store") or {}
    return {
        "skip_categories": {Category(c) for c in data.get("skip_categories") or []},
        "allow_list": set(data.get("allow_list") or []),
        "replacements": replacements_from_names(data.get("replacements") or {}),
        "extra_first_names": list(lexicon.get("extra_first_names") or []),
        "extra_last_names": list(lexicon.get("extra_last_names") or []),
        "extra_section_headers": list(lexicon.get("extra_section_headers") or []),
        "extra_partial_words": list(lexicon.get("extra_partial_words") or []),
        "offload_threshold": int(offload.get("threshold", LARGE_DOCUMENT_THRESHOLD)),
        "offload_timeout": float(offload.get("timeout", DEFAULT_TIMEOUT)),
        "rules": [CustomRule.from_dict(r) for r in data.get("rules") or []],
        "rule_store_backend": store.get("backend", "memory"),
        "rule_store_path": store.get("path", DEFAULT_RULES_DB),
    }


def load_yaml(path: str | Path) -> Any:
    """Parse a YAML (or JSON) file."""
    import yaml
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    return load_config(load_yaml(path))


def load_rules(path: str | Path) -> list[CustomRule]:
    """Load a YAML/JSON list of rules, or a mapping with a ``rules`` key."""
    data = load_yaml(path) or []
    if isinstance(data, dict):
        data = data.get("rules") or []
    return [CustomRule.from_dict(r) for r in data]


def normalize_config(config: dict[str, Any]) -> dict[str, Any]:
    return config if "rule_store_backend" in config else load_config(config)


def create_detector(config: dict[str, Any] | None = None) -> Detector:
    """Create a configured Detector from a config dict."""
    cfg = normalize_config(config or {})
    lexicon = NameLexicon().extended(
        first_names=cfg["extra_first_names"],
        last_names=cfg["extra_last_names"],
        section_headers=cfg["extra_section_headers"],
        partial_words=cfg["extra_partial_words"],
    )
    return Detector(DetectorConfig(
        lexicon=lexicon,
        replacements=cfg["replacements"],
        skip_categories=cfg["skip_categories"],
        allow_list=cfg["allow_list"],
    ))


def create_offloaded(config: dict[str, Any] | None = None) -> OffloadedDetector:
    cfg = normalize_config(config or {})
    return OffloadedDetector(
        create_detector(cfg),
        threshold=cfg["offload_threshold"],
        timeout=cfg["offload_timeout"],
    )


def create_rule_store(config: dict[str, Any] | None = None) -> RuleStore | SqliteRuleStore:
    """Create the configured rule store.

    The in-memory store is seeded with the inline rules; a sqlite store
    already holds whatever was saved to it.
    """
    cfg = normalize_config(config or {})
    if cfg["rule_store_backend"] == "sqlite":
        return SqliteRuleStore(db_path=cfg["rule_store_path"])
    return RuleStore(cfg["rules"])
