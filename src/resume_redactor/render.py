"""Redaction and highlight rendering.

Both renderers take the source text plus the finding list and consult only
each finding's ``redact`` flag.  Redaction splices placeholders right to
left so earlier offsets stay valid.  Splicing two overlapping spans would
corrupt the output, so active findings are first reduced to a disjoint set
(see :func:`resolve_overlaps`).
"""

from __future__ import annotations
import html
import logging
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from .errors import OverlapError, StaleFindingsError
from .types import Category, Finding, Stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of the source text, either plain or covered by a finding."""
    text: str
    start: int
    end: int
    finding: Finding | None = None
    nested: tuple[Finding, ...] = ()   # findings fully inside this segment

    @property
    def marked(self) -> bool:
        return self.finding is not None


def _check_bound(text: str, findings: Iterable[Finding]) -> None:
    for f in findings:
        if not (0 <= f.start < f.end <= len(text)) or text[f.start:f.end] != f.value:
            raise StaleFindingsError(
                f"finding {f.id} ({f.value!r} at [{f.start}, {f.end})) does not match the text"
            )


def resolve_overlaps(findings: Iterable[Finding], *, strict: bool = False) -> list[Finding]:
    """Reduce findings to a disjoint set, ordered by start.

    Within a cluster of overlapping findings the highest-confidence one
    wins, then the longest, then the earliest.  With ``strict`` the first
    overlap raises :class:`OverlapError` instead.
    """
    ranked = sorted(findings, key=lambda f: (-f.confidence, -(f.end - f.start), f.start))
    kept: list[Finding] = []
    for f in ranked:
        clash = next((k for k in kept if k.overlaps(f)), None)
        if clash is not None:
            if strict:
                raise OverlapError(clash, f)
            logger.debug("Dropping %s %r: overlaps %s %r", f.id, f.value, clash.id, clash.value)
            continue
        kept.append(f)
    return sorted(kept, key=lambda f: f.start)


def redact(text: str, findings: Iterable[Finding], *, strict: bool = False) -> str:
    """Replace every active finding's span with its placeholder."""
    active = [f for f in findings if f.redact]
    if not text or not active:
        return text
    _check_bound(text, active)

    result = text
    for f in sorted(resolve_overlaps(active, strict=strict), key=lambda f: f.start, reverse=True):
        result = result[:f.start] + f.replacement + result[f.end:]
    return result


def segments(text: str, findings: Iterable[Finding]) -> list[Segment]:
    """Split text into plain and marked segments, in ascending order.

    A finding starting inside an earlier marked segment is clipped to the
    part not yet covered; one lying entirely inside is attached to the
    covering segment's ``nested``.
    """
    ordered = sorted(findings, key=lambda f: f.start)
    _check_bound(text, ordered)

    out: list[Segment] = []
    cursor = 0
    for f in ordered:
        if f.end <= cursor:
            for i in range(len(out) - 1, -1, -1):
                seg = out[i]
                if seg.marked and seg.start <= f.start:
                    out[i] = replace(seg, nested=seg.nested + (f,))
                    break
            continue
        start = max(f.start, cursor)
        if start > cursor:
            out.append(Segment(text[cursor:start], cursor, start))
        out.append(Segment(text[start:f.end], start, f.end, finding=f))
        cursor = f.end

    if cursor < len(text):
        out.append(Segment(text[cursor:], cursor, len(text)))
    return out


def _label(f: Finding) -> str:
    if f.category is Category.CUSTOM and f.custom_label:
        return f.custom_label
    return f.category.value


def _mark(seg: Segment) -> str:
    f = seg.finding
    state = "redact" if f.redact else "ignored"
    title = f"{_label(f)}: {'Will be redacted' if f.redact else 'Ignored'} → {f.replacement}"
    css = f"pii pii-{f.category.value}" if f.redact else "pii pii-ignored"
    attrs = [
        f'class="{css}"',
        f'data-pii-id="{html.escape(f.id)}"',
        f'data-category="{f.category.value}"',
        f'data-state="{state}"',
        f'title="{html.escape(title)}"',
    ]
    if seg.nested:
        attrs.append(f'data-nested="{html.escape(" ".join(n.id for n in seg.nested))}"')
    return f"<mark {' '.join(attrs)}>{html.escape(seg.text)}</mark>"


def highlight(text: str, findings: Iterable[Finding]) -> str:
    """Render text as HTML with every finding wrapped in a ``<mark>``.

    All literal text and attribute values are escaped.
    """
    if not text:
        return ""
    return "".join(
        _mark(seg) if seg.marked else html.escape(seg.text)
        for seg in segments(text, findings)
    )


def get_stats(findings: Sequence[Finding]) -> Stats:
    """Count findings overall, active, and per category."""
    by_category = {c.value: 0 for c in Category}
    for f in findings:
        by_category[f.category.value] += 1
    return Stats(
        total=len(findings),
        active_count=sum(1 for f in findings if f.redact),
        by_category=by_category,
    )
