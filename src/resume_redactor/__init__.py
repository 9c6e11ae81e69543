"""Resume Redactor: pattern and heuristic PII anonymization for documents."""

from .detector import Detector, DetectorConfig, detect_pii
from .render import get_stats, highlight, redact, resolve_overlaps, segments
from .names import NameDetector, NameLexicon
from .merge import merge
from .session import ReviewSession
from .offload import OffloadedDetector, DetectionRequest, DetectionResponse
from .rules import RuleStore
from .rules_sqlite import SqliteRuleStore
from .config import create_detector, create_rule_store, load_config, load_from_yaml
from .errors import (
    RedactorError, InputError, ExtractionError, RuleValidationError,
    OverlapError, StaleFindingsError,
)
from .types import Category, CustomRule, DetectionResult, Finding, Stats

__all__ = [
    "Detector", "DetectorConfig", "detect_pii",
    "redact", "highlight", "segments", "get_stats", "resolve_overlaps",
    "NameDetector", "NameLexicon",
    "merge",
    "ReviewSession",
    "OffloadedDetector", "DetectionRequest", "DetectionResponse",
    "RuleStore", "SqliteRuleStore",
    "create_detector", "create_rule_store", "load_config", "load_from_yaml",
    "RedactorError", "InputError", "ExtractionError", "RuleValidationError",
    "OverlapError", "StaleFindingsError",
    "Category", "CustomRule", "DetectionResult", "Finding", "Stats",
]
__version__ = "0.1.0"
