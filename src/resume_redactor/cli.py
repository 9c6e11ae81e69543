"""CLI interface for resume-redactor.

Usage:
    # List findings (stdout: JSON)
    python -m resume_redactor.cli detect --file resume.txt

    # Redact, leaving two findings the reviewer rejected untouched
    python -m resume_redactor.cli --ignore pii-3,pii-7 redact < resume.txt

    # Review HTML with every finding marked
    python -m resume_redactor.cli highlight --file resume.txt > review.html

    # Manage saved custom rules
    python -m resume_redactor.cli rules-add --name "Employee ID" --pattern 'EMP-\\d+'
    python -m resume_redactor.cli rules-list

Saved rules live in SQLite and apply to every detection run.
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .config import create_detector, load_config, load_from_yaml, load_rules
from .errors import ExtractionError, RedactorError
from .extract import PlainTextExtractor
from .render import get_stats, highlight, redact
from .rules_sqlite import SqliteRuleStore
from .types import CustomRule, DetectionResult

DEFAULT_DB = os.environ.get(
    "RESUME_REDACTOR_RULES_DB",
    str(Path.home() / ".resume-redactor" / "rules.db"),
)


def _read_text(args: argparse.Namespace) -> str:
    if args.file:
        return PlainTextExtractor().extract(args.file)
    return sys.stdin.read()


def _collect_rules(args: argparse.Namespace, cfg: dict) -> list[CustomRule]:
    rules = list(cfg["rules"])
    if args.rules:
        rules.extend(load_rules(args.rules))
    if Path(args.db).expanduser().exists():
        store = SqliteRuleStore(db_path=args.db)
        rules.extend(store.enabled())
        store.close()
    return rules


def _detect(args: argparse.Namespace) -> tuple[str, DetectionResult]:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    detector = create_detector(cfg)
    text = _read_text(args)
    result = detector.detect(text, _collect_rules(args, cfg))

    ignored = {i for i in args.ignore.split(",") if i}
    for f in result.findings:
        if f.id in ignored:
            f.set_redact(False)
    return text, result


def cmd_detect(args: argparse.Namespace) -> None:
    """Print findings for a document as JSON."""
    _, result = _detect(args)
    output = {
        "findings": [f.to_dict() for f in result.findings],
        "skipped_rules": [{"name": n, "error": e} for n, e in result.skipped_rules],
    }
    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_redact(args: argparse.Namespace) -> None:
    """Print the redacted document."""
    text, result = _detect(args)
    sys.stdout.write(redact(text, result.findings))


def cmd_highlight(args: argparse.Namespace) -> None:
    """Print the document as HTML with findings marked."""
    text, result = _detect(args)
    sys.stdout.write(highlight(text, result.findings))
    sys.stdout.write("\n")


def cmd_stats(args: argparse.Namespace) -> None:
    """Print finding counts as JSON."""
    _, result = _detect(args)
    json.dump(get_stats(result.findings).to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")


def cmd_rules_list(args: argparse.Namespace) -> None:
    """List saved custom rules."""
    store = SqliteRuleStore(db_path=args.db)
    rules = [{"id": rule_id, **rule.to_dict()} for rule_id, rule in store.items()]
    json.dump(rules, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    store.close()


def cmd_rules_add(args: argparse.Namespace) -> None:
    """Save a custom rule."""
    store = SqliteRuleStore(db_path=args.db)
    rule_id = store.add(CustomRule(
        name=args.name,
        pattern=args.pattern,
        replacement=args.replacement,
        description=args.description,
        enabled=not args.disabled,
    ))
    sys.stdout.write(f"{rule_id}\n")
    store.close()


def cmd_rules_remove(args: argparse.Namespace) -> None:
    """Delete a saved custom rule."""
    store = SqliteRuleStore(db_path=args.db)
    store.delete(args.rule_id)
    sys.stderr.write(f"Removed rule {args.rule_id}\n")
    store.close()


def cmd_rules_toggle(args: argparse.Namespace) -> None:
    """Enable or disable a saved custom rule."""
    store = SqliteRuleStore(db_path=args.db)
    store.update(args.rule_id, enabled=args.command == "rules-enable")
    store.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="resume_redactor",
        description="Find and redact PII in resumes and letters",
    )
    parser.add_argument("--db", default=DEFAULT_DB, help="SQLite custom rule store path")
    parser.add_argument("--config", default="", help="YAML config file")
    parser.add_argument("--rules", default="", help="YAML/JSON file with extra custom rules")
    parser.add_argument("--file", default="", help="Read the document from a file instead of stdin")
    parser.add_argument("--ignore", default="", help="Comma-separated finding ids to leave unredacted")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("detect", help="List findings (JSON)")
    sub.add_parser("redact", help="Redact the document")
    sub.add_parser("highlight", help="Render findings as HTML")
    sub.add_parser("stats", help="Finding counts (JSON)")
    sub.add_parser("rules-list", help="List saved custom rules")
    add = sub.add_parser("rules-add", help="Save a custom rule")
    add.add_argument("--name", required=True)
    add.add_argument("--pattern", required=True)
    add.add_argument("--replacement", default="[REDACTED]")
    add.add_argument("--description", default="")
    add.add_argument("--disabled", action="store_true")
    for name in ("rules-remove", "rules-enable", "rules-disable"):
        p = sub.add_parser(name, help=f"{name.split('-')[1].capitalize()} a saved custom rule")
        p.add_argument("rule_id", type=int)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "detect": cmd_detect,
        "redact": cmd_redact,
        "highlight": cmd_highlight,
        "stats": cmd_stats,
        "rules-list": cmd_rules_list,
        "rules-add": cmd_rules_add,
        "rules-remove": cmd_rules_remove,
        "rules-enable": cmd_rules_toggle,
        "rules-disable": cmd_rules_toggle,
    }
    try:
        cmds[args.command](args)
    except ExtractionError as e:
        sys.stderr.write(f"error: could not read document: {e}\n")
        return 2
    except (RedactorError, KeyError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
