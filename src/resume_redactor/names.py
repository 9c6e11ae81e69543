"""Heuristic personal-name detection.

Resumes put the candidate's name in predictable places: the very first
line, a short header block, or next to an initial.  The detector runs an
ordered list of passes over the same text.  Each pass proposes spans and a
span is only kept when it does not overlap anything an earlier pass already
kept, so the more certain passes win.

Section headings ("Work Experience") and technical jargon ("ROBOTIC P") are
the usual false positives; two blacklists in :class:`NameLexicon` gate
them.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Iterable, Iterator

from .lexicon import FIRST_NAMES, LAST_NAMES, PARTIAL_WORDS, SECTION_HEADERS, TECHNICAL_CONTEXT
from .patterns import REPLACEMENTS
from .types import Category, Finding

# Confidence tiers, one per pass
ALL_CAPS_HEADER_SCORE = 0.98
GAZETTEER_SCORE = 0.95
INITIAL_SCORE = 0.92
HEADER_LINE_SCORE = 0.85
LONE_FIRST_NAME_SCORE = 0.70

INITIAL_WINDOW = 300       # chars scanned by the name-with-initial pass
LONE_NAME_WINDOW = 200     # chars scanned by the lone-first-name pass
CONTEXT_RADIUS = 15        # chars either side checked for technical keywords
MAX_ACRONYM_LEN = 8

_ALL_CAPS_HEADER = re.compile(r"([A-Z]{2,}(?: [A-Z]+)+)(?:[ \t]*\r?\n| {2,}|\t)")
_NAME_WITH_INITIAL = re.compile(r"\b([A-Z][a-z]{2,}|[A-Z]{3,})[ \t]+[A-Z]\b")
_HEADER_LINE = re.compile(r"^([A-Z][a-z]{2,}[ \t]+[A-Z][a-z]{2,})[ \t]*\r?$", re.MULTILINE)

Span = tuple[int, int, float]


def _alternation(words: Iterable[str]) -> str:
    words = list(words)
    if not words:
        return "(?!)"
    # Longest first so a short name never shadows a longer one
    return "|".join(re.escape(w) for w in sorted(words, key=lambda w: (-len(w), w)))


@dataclass(frozen=True)
class NameLexicon:
    """Gazetteers and blacklists driving the name passes."""
    first_names: frozenset[str] = FIRST_NAMES
    last_names: frozenset[str] = LAST_NAMES
    section_headers: frozenset[str] = SECTION_HEADERS
    partial_words: frozenset[str] = PARTIAL_WORDS
    technical_context: frozenset[str] = TECHNICAL_CONTEXT

    def extended(
        self,
        *,
        first_names: Iterable[str] = (),
        last_names: Iterable[str] = (),
        section_headers: Iterable[str] = (),
        partial_words: Iterable[str] = (),
    ) -> NameLexicon:
        """Return a copy with extra entries merged in."""
        return replace(
            self,
            first_names=self.first_names | frozenset(first_names),
            last_names=self.last_names | frozenset(last_names),
            section_headers=self.section_headers | frozenset(section_headers),
            partial_words=self.partial_words | frozenset(w.upper() for w in partial_words),
        )

    @cached_property
    def _headers_folded(self) -> frozenset[str]:
        return frozenset(" ".join(h.split()).casefold() for h in self.section_headers)

    def is_section_header(self, phrase: str) -> bool:
        return " ".join(phrase.split()).casefold() in self._headers_folded

    def is_technical_word(self, word: str) -> bool:
        """True when word equals, contains, or is contained in a partial-word term."""
        upper = word.upper()
        return any(term == upper or term in upper or upper in term for term in self.partial_words)


class NameDetector:
    """Multi-pass name detector.  Reusable; holds no per-call state."""

    def __init__(
        self,
        lexicon: NameLexicon | None = None,
        *,
        replacement: str = REPLACEMENTS[Category.NAME],
    ) -> None:
        self.lexicon = lexicon or NameLexicon()
        self.replacement = replacement

        lex = self.lexicon
        self._gazetteer = re.compile(
            rf"\b(?:{_alternation(lex.first_names)})\s+(?:{_alternation(lex.last_names)})\b",
            re.IGNORECASE,
        )
        self._lone_first = re.compile(
            rf"^(?:{_alternation(lex.first_names)})[ \t]*\r?$", re.MULTILINE,
        )
        self._technical = re.compile(
            rf"\b(?:{_alternation(lex.technical_context)})\b", re.IGNORECASE,
        )
        self._passes = (
            self._all_caps_header,
            self._name_with_initial,
            self._gazetteer_pairs,
            self._header_lines,
            self._lone_first_names,
        )

    def detect(self, text: str) -> list[Finding]:
        """Run every pass in order; first pass wins on overlap."""
        if not text or not text.strip():
            return []
        found: list[Finding] = []
        for run_pass in self._passes:
            for start, end, score in run_pass(text):
                if any(start < f.end and end > f.start for f in found):
                    continue
                found.append(Finding(
                    id="",
                    category=Category.NAME,
                    start=start,
                    end=end,
                    value=text[start:end],
                    replacement=self.replacement,
                    confidence=score,
                ))
        return found

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _all_caps_header(self, text: str) -> Iterator[Span]:
        m = _ALL_CAPS_HEADER.match(text)
        if not m:
            return
        phrase = m.group(1)
        if self.lexicon.is_section_header(phrase):
            return
        if any(word in self.lexicon.partial_words for word in phrase.split()):
            return
        yield (0, m.end(1), ALL_CAPS_HEADER_SCORE)

    def _name_with_initial(self, text: str) -> Iterator[Span]:
        for m in _NAME_WITH_INITIAL.finditer(text):
            start, end = m.span()
            if start >= INITIAL_WINDOW:
                break
            word = m.group(1)
            if self.lexicon.is_technical_word(word):
                continue
            # Must be a standalone token, not the tail of a longer identifier
            if start > 0 and not text[start - 1].isspace():
                continue
            if end < len(text) and not (text[end].isspace() or text[end] in ",."):
                continue
            if word.isupper() and len(word) > MAX_ACRONYM_LEN:
                continue
            around = text[max(0, start - CONTEXT_RADIUS):end + CONTEXT_RADIUS]
            if self._technical.search(around):
                continue
            yield (start, end, INITIAL_SCORE)

    def _gazetteer_pairs(self, text: str) -> Iterator[Span]:
        for m in self._gazetteer.finditer(text):
            yield (m.start(), m.end(), GAZETTEER_SCORE)

    def _header_lines(self, text: str) -> Iterator[Span]:
        for m in _HEADER_LINE.finditer(text):
            if self.lexicon.is_section_header(m.group(1)):
                continue
            yield (m.start(1), m.end(1), HEADER_LINE_SCORE)

    def _lone_first_names(self, text: str) -> Iterator[Span]:
        for m in self._lone_first.finditer(text):
            if m.start() >= LONE_NAME_WINDOW:
                break
            yield (m.start(), m.start() + len(m.group().rstrip()), LONE_FIRST_NAME_SCORE)
