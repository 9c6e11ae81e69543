"""Persistent rule store backed by SQLite: survives process restarts.

Drop-in replacement for RuleStore when rules must outlive the process.

Usage:
    store = SqliteRuleStore(db_path="~/.resume-redactor/rules.db")
    store.add(CustomRule(name="Employee ID", pattern=r"EMP-\\d+"))
    findings = detect_pii(text, store.enabled())
"""

from __future__ import annotations
import sqlite3
from pathlib import Path
from typing import Any

from .rules import apply_changes, check_rule
from .types import CustomRule

_SCHEMA = """
CREATE TABLE IF NOT EXISTS custom_rules (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    pattern TEXT NOT NULL,
    replacement TEXT NOT NULL DEFAULT '[REDACTED]',
    description TEXT NOT NULL DEFAULT '',
    enabled INTEGER NOT NULL DEFAULT 1,
    created_at REAL NOT NULL DEFAULT (julianday('now'))
);
CREATE INDEX IF NOT EXISTS idx_custom_rules_enabled
    ON custom_rules(enabled);
"""

_COLUMNS = "id, name, pattern, replacement, enabled, description"


def _row_to_rule(row: tuple) -> tuple[int, CustomRule]:
    rule_id, name, pattern, replacement, enabled, description = row
    return rule_id, CustomRule(
        name=name,
        pattern=pattern,
        replacement=replacement,
        enabled=bool(enabled),
        description=description,
    )


class SqliteRuleStore:
    """Persistent custom rule store."""

    __slots__ = ("_db",)

    def __init__(self, *, db_path: str | Path = "rules.db") -> None:
        db_path = Path(db_path).expanduser()
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self._db = sqlite3.connect(str(db_path), check_same_thread=False)
        self._db.executescript(_SCHEMA)

    def add(self, rule: CustomRule) -> int:
        rule = check_rule(rule)
        cur = self._db.execute(
            "INSERT INTO custom_rules (name, pattern, replacement, enabled, description) "
            "VALUES (?, ?, ?, ?, ?)",
            (rule.name, rule.pattern, rule.replacement, int(rule.enabled), rule.description),
        )
        self._db.commit()
        return cur.lastrowid

    def get(self, rule_id: int) -> CustomRule:
        row = self._db.execute(
            f"SELECT {_COLUMNS} FROM custom_rules WHERE id = ?", (rule_id,),
        ).fetchone()
        if row is None:
            raise KeyError(f"rule {rule_id} not found")
        return _row_to_rule(row)[1]

    def update(self, rule_id: int, **changes: Any) -> CustomRule:
        rule = apply_changes(self.get(rule_id), changes)
        self._db.execute(
            "UPDATE custom_rules SET name = ?, pattern = ?, replacement = ?, enabled = ?, "
            "description = ? WHERE id = ?",
            (rule.name, rule.pattern, rule.replacement, int(rule.enabled), rule.description, rule_id),
        )
        self._db.commit()
        return rule

    def delete(self, rule_id: int) -> None:
        cur = self._db.execute("DELETE FROM custom_rules WHERE id = ?", (rule_id,))
        self._db.commit()
        if cur.rowcount == 0:
            raise KeyError(f"rule {rule_id} not found")

    def items(self) -> list[tuple[int, CustomRule]]:
        rows = self._db.execute(f"SELECT {_COLUMNS} FROM custom_rules ORDER BY id").fetchall()
        return [_row_to_rule(r) for r in rows]

    def all(self) -> list[CustomRule]:
        return [rule for _, rule in self.items()]

    def enabled(self) -> list[CustomRule]:
        rows = self._db.execute(
            f"SELECT {_COLUMNS} FROM custom_rules WHERE enabled = 1 ORDER BY id"
        ).fetchall()
        return [_row_to_rule(r)[1] for r in rows]

    @property
    def size(self) -> int:
        return self._db.execute("SELECT COUNT(*) FROM custom_rules").fetchone()[0]

    def clear(self) -> None:
        self._db.execute("DELETE FROM custom_rules")
        self._db.commit()

    def close(self) -> None:
        self._db.close()
