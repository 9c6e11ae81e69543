"""Tests for redaction, highlighting and stats."""

import pytest

from resume_redactor.errors import OverlapError, StaleFindingsError
from resume_redactor.render import get_stats, highlight, redact, resolve_overlaps, segments
from resume_redactor.types import Category, Finding


def make(text, value, category=Category.EMAIL, id="pii-0", confidence=1.0, start=None,
         replacement=None, **kw):
    start = text.index(value) if start is None else start
    return Finding(
        id=id, category=category, start=start, end=start + len(value), value=value,
        replacement=replacement or f"[{category.value} redacted]", confidence=confidence, **kw,
    )


# ── redact ───────────────────────────────────────────────────────────

def test_redact_single_finding():
    text = "Email me at jane@x.com today"
    email = make(text, "jane@x.com", replacement="[email redacted]")
    assert email.span == (12, 22)
    assert redact(text, [email]) == "Email me at [email redacted] today"


def test_redact_respects_ignored_findings():
    text = "Contact John Smith or jane@x.com"
    name = make(text, "John Smith", Category.NAME, id="pii-1", confidence=0.95,
                replacement="Candidate")
    email = make(text, "jane@x.com", id="pii-0", replacement="[email redacted]")
    assert name.span == (8, 18)
    assert email.span == (22, 32)

    assert redact(text, [email, name]) == "Contact Candidate or [email redacted]"
    name.set_redact(False)
    assert redact(text, [email, name]) == "Contact John Smith or [email redacted]"
    email.set_redact(False)
    assert redact(text, [email, name]) == text


def test_redact_with_no_findings_is_identity():
    assert redact("plain text", []) == "plain text"
    assert redact("", []) == ""


def test_redact_resolves_overlaps_by_confidence_then_length():
    text = "mail jane@example.com"
    email = make(text, "jane@example.com", id="pii-0", replacement="[email redacted]")
    url = make(text, "example.com", Category.URL, id="pii-1", replacement="[URL redacted]")
    assert redact(text, [email, url]) == "mail [email redacted]"
    # ignoring the winner lets the other one through
    email.set_redact(False)
    assert redact(text, [email, url]) == "mail jane@[URL redacted]"


def test_higher_confidence_beats_longer_span():
    text = "Dr Jane Doe Street"
    name = make(text, "Jane Doe", Category.NAME, id="pii-0", confidence=0.98)
    fake = make(text, "Jane Doe Street", Category.ADDRESS, id="pii-1", confidence=0.5)
    kept = resolve_overlaps([fake, name])
    assert [f.id for f in kept] == ["pii-0"]


def test_strict_redaction_raises_on_overlap():
    text = "mail jane@example.com"
    email = make(text, "jane@example.com", id="pii-0")
    url = make(text, "example.com", Category.URL, id="pii-1")
    with pytest.raises(OverlapError) as exc:
        redact(text, [email, url], strict=True)
    assert {exc.value.first.id, exc.value.second.id} == {"pii-0", "pii-1"}


def test_adjacent_findings_do_not_overlap():
    text = "ab"
    a = make(text, "a", id="pii-0", replacement="1")
    b = make(text, "b", id="pii-1", replacement="2")
    assert redact(text, [a, b], strict=True) == "12"


def test_stale_findings_are_rejected():
    finding = make("Email me at jane@x.com today", "jane@x.com")
    with pytest.raises(StaleFindingsError):
        redact("Totally different text here", [finding])
    with pytest.raises(StaleFindingsError):
        highlight("short", [finding])


# ── highlight ────────────────────────────────────────────────────────

def test_highlight_markup_is_escaped():
    text = "Hi <b> jane@x.com"
    email = make(text, "jane@x.com", replacement="[email redacted]")
    assert highlight(text, [email]) == (
        'Hi &lt;b&gt; <mark class="pii pii-email" data-pii-id="pii-0" '
        'data-category="email" data-state="redact" '
        'title="email: Will be redacted → [email redacted]">jane@x.com</mark>'
    )


def test_highlight_ignored_finding():
    text = "call Jane"
    name = make(text, "Jane", Category.NAME, replacement="Candidate")
    name.set_redact(False)
    html = highlight(text, [name])
    assert 'class="pii pii-ignored"' in html
    assert 'data-state="ignored"' in html
    assert 'title="name: Ignored → Candidate"' in html


def test_highlight_uses_custom_label():
    text = "Badge EMP-123"
    f = make(text, "EMP-123", Category.CUSTOM, custom_label="Employee <ID>",
             replacement="[REDACTED]")
    assert 'title="Employee &lt;ID&gt;: Will be redacted → [REDACTED]"' in highlight(text, [f])


def test_highlight_without_findings_is_escaped_text():
    assert highlight("a & b", []) == "a &amp; b"
    assert highlight("", []) == ""


# ── segments ─────────────────────────────────────────────────────────

def test_segments_cover_the_text():
    text = "Contact John Smith or jane@x.com"
    name = make(text, "John Smith", Category.NAME, id="pii-1")
    email = make(text, "jane@x.com", id="pii-0")
    segs = segments(text, [email, name])
    assert "".join(s.text for s in segs) == text
    assert [(s.start, s.end, s.marked) for s in segs] == [
        (0, 8, False), (8, 18, True), (18, 22, False), (22, 32, True),
    ]


def test_nested_finding_is_attached_to_its_container():
    text = "mail jane@example.com"
    email = make(text, "jane@example.com", id="pii-0")
    url = make(text, "example.com", Category.URL, id="pii-1")
    segs = segments(text, [email, url])
    marked = [s for s in segs if s.marked]
    assert len(marked) == 1
    assert marked[0].finding is email
    assert marked[0].nested == (url,)
    assert 'data-nested="pii-1"' in highlight(text, [email, url])


def test_partial_overlap_is_clipped():
    text = "abcdefgh"
    first = make(text, "abcde", id="pii-0")
    second = make(text, "defgh", Category.URL, id="pii-1")
    segs = segments(text, [first, second])
    assert [(s.text, s.finding.id) for s in segs] == [("abcde", "pii-0"), ("fgh", "pii-1")]


# ── stats ────────────────────────────────────────────────────────────

def test_stats_zero_fill_and_active_count():
    text = "Contact John Smith or jane@x.com"
    name = make(text, "John Smith", Category.NAME, id="pii-1")
    email = make(text, "jane@x.com", id="pii-0")
    name.set_redact(False)
    stats = get_stats([email, name])
    assert stats.total == 2
    assert stats.active_count == 1
    assert stats.by_category["email"] == 1
    assert stats.by_category["name"] == 1
    assert stats.by_category["ssn"] == 0
    assert set(stats.by_category) == {c.value for c in Category}


def test_stats_empty():
    stats = get_stats([])
    assert stats.to_dict()["total"] == 0
    assert stats.active_count == 0
