"""Exception hierarchy.

Detection itself only ever raises ``InputError``.  A bad custom rule is
skipped and reported, never raised.
"""

from __future__ import annotations


class RedactorError(Exception):
    """Base class for every error raised by resume_redactor."""


class InputError(RedactorError, TypeError):
    """The text handed to detection is not a string."""


class ExtractionError(RedactorError):
    """The text-extraction collaborator could not produce plain text."""


class RuleValidationError(RedactorError, ValueError):
    """A custom rule was rejected before being stored."""


class OverlapError(RedactorError):
    """Two active findings overlap and strict redaction was requested."""

    def __init__(self, first, second) -> None:
        super().__init__(
            f"active findings overlap: {first.id} [{first.start}, {first.end}) "
            f"and {second.id} [{second.start}, {second.end})"
        )
        self.first = first
        self.second = second


class StaleFindingsError(RedactorError):
    """Findings were computed against different text."""
