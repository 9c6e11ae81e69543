"""Pattern registry and categorical detector.

The registry is plain data: one compiled regex per category plus the
placeholder substituted for it.  ``scan_patterns`` runs every entry with
``finditer`` so scanning resumes after each match and no scan position is
shared between calls.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .types import Category, Finding


@dataclass(frozen=True, slots=True)
class PatternSpec:
    category: Category
    regex: re.Pattern


REPLACEMENTS: Mapping[Category, str] = MappingProxyType({
    Category.EMAIL: "[email redacted]",
    Category.PHONE: "[phone redacted]",
    Category.URL: "[URL redacted]",
    Category.NAME: "Candidate",
    Category.ADDRESS: "[address redacted]",
    Category.SSN: "[SSN redacted]",
    Category.CREDIT_CARD: "[card redacted]",
    Category.DATE_OF_BIRTH: "[DOB redacted]",
    Category.PASSPORT: "[passport redacted]",
    Category.IP_ADDRESS: "[IP redacted]",
    Category.BANK_ACCOUNT: "[account redacted]",
    Category.TAX_ID: "[tax ID redacted]",
    Category.AGE: "[age redacted]",
    Category.CUSTOM: "[REDACTED]",
})

_MONTHS = (
    r"January|February|March|April|May|June|July|August|September|October|November|December"
    r"|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sep|Oct|Nov|Dec"
)

_STREET_SUFFIXES = (
    r"Street|St|Avenue|Ave|Road|Rd|Boulevard|Blvd|Lane|Ln|Drive|Dr|Court|Ct"
    r"|Circle|Cir|Way|Place|Pl|Parkway|Pkwy|Nagar|Colony|Extension|Ext|Cross|Main"
)

# Registry order is the emission order of scan_patterns.
PATTERNS: tuple[PatternSpec, ...] = (
    # Email
    PatternSpec(Category.EMAIL, re.compile(
        r"\b[a-zA-Z0-9][a-zA-Z0-9._%+\-]{0,63}@[a-zA-Z0-9][a-zA-Z0-9.\-]{0,253}\.[a-zA-Z]{2,}\b",
        re.IGNORECASE,
    )),

    # Phone: optional country code, US-style groups, or a bare 10-digit run
    PatternSpec(Category.PHONE, re.compile(
        r"(?:\+?\d{1,3}[\-.\s]?)?\(?\d{3}\)?[\-.\s]?\d{3}[\-.\s]?\d{4}\b"
        r"|\b\d{10}\b"
    )),

    # URL: scheme, www., domain with path, social profiles, bare domains
    PatternSpec(Category.URL, re.compile(
        r"https?://[^\s,)]+"
        r"|www\.[^\s,)]+"
        r"|[a-z0-9\-]+\.(?:com|org|net|io|dev|app|in|co\.in)/[^\s,)]+"
        r"|(?:linkedin|github|twitter|facebook|instagram|medium|behance)\.com/[^\s,)]+"
        r"|\b[a-z0-9\-]+\.(?:com|org|net|io|dev|app)\b",
        re.IGNORECASE,
    )),

    # Street address: number, capitalized street words, suffix (US and Indian)
    PatternSpec(Category.ADDRESS, re.compile(
        r"\b\d+[\-/,]?\s*[A-Z][a-z]+(?:\s+[A-Z][a-z]+){0,3}\s+"
        rf"(?i:{_STREET_SUFFIXES})\b"
    )),

    # SSN: never area 000/666/9xx, group 00 or serial 0000
    PatternSpec(Category.SSN, re.compile(
        r"\b(?!000|666|9\d{2})\d{3}[\-\s]?(?!00)\d{2}[\-\s]?(?!0000)\d{4}\b"
    )),

    # Credit card: Visa, MasterCard, Discover, Amex prefixes
    PatternSpec(Category.CREDIT_CARD, re.compile(
        r"\b(?:4\d{3}|5[1-5]\d{2}|6011|3[47]\d{2})"
        r"[\-\s]?\d{4,6}[\-\s]?\d{4,5}[\-\s]?\d{3,4}\b"
    )),

    # Date of birth: labelled dates, month-name dates, numeric 19xx/20xx dates
    PatternSpec(Category.DATE_OF_BIRTH, re.compile(
        r"\b(?:DOB|Date of Birth|Born|Birth Date|Birthday)\s*:?\s*\d{1,2}[\-/]\d{1,2}[\-/]\d{2,4}\b"
        rf"|\b(?:{_MONTHS})\.?\s+\d{{1,2}},?\s+\d{{4}}\b"
        r"|\b\d{1,2}[\-/](?:0?[1-9]|1[0-2])[\-/](?:19|20)\d{2}\b",
        re.IGNORECASE,
    )),

    # Passport: labelled number, or one/two letters followed by seven digits
    PatternSpec(Category.PASSPORT, re.compile(
        r"\b(?:Passport|Passport No|Passport Number)\s*:?\s*[A-Z]{1,2}[0-9]{6,9}\b"
        r"|\b[A-Z][0-9]{7}\b"
        r"|\b[A-Z]{2}[0-9]{7}\b",
        re.IGNORECASE,
    )),

    # IPv4 and full-form IPv6
    PatternSpec(Category.IP_ADDRESS, re.compile(
        r"\b(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
        r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\b"
        r"|\b(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}\b"
    )),

    # Bank account: labelled IBAN or 9–18 digit account number
    PatternSpec(Category.BANK_ACCOUNT, re.compile(
        r"\b(?:Account|Account No|Account Number|A/C|IBAN)\s*:?\s*[A-Z]{2}\d{2}[A-Z0-9]{10,30}\b"
        r"|\b(?:Account|Account No|Account Number|A/C)\s*:?\s*\d{9,18}\b",
        re.IGNORECASE,
    )),

    # Tax ID: labelled EIN/TIN/PAN/Aadhaar, PAN shape, Aadhaar shape
    PatternSpec(Category.TAX_ID, re.compile(
        r"\b(?:EIN|Tax ID|TIN|PAN|Aadhaar|Aadhar)\s*:?\s*\d{2}[\-\s]?\d{7}\b"
        r"|\b[A-Z]{5}\d{4}[A-Z]\b"
        r"|\b\d{4}[\-\s]?\d{4}[\-\s]?\d{4}\b",
        re.IGNORECASE,
    )),

    # Age: "Age: 25", "25 years old"
    PatternSpec(Category.AGE, re.compile(
        r"\bAge\s*:?\s*\d{1,3}\b"
        r"|\b\d{1,3}\s+years?\s+old\b",
        re.IGNORECASE,
    )),
)


def replacement_for(
    category: Category,
    overrides: Mapping[Category, str] | None = None,
) -> str:
    """Placeholder text for a category, honouring per-config overrides."""
    if overrides and category in overrides:
        return overrides[category]
    return REPLACEMENTS[category]


def scan_patterns(
    text: str,
    *,
    replacements: Mapping[Category, str] | None = None,
) -> list[Finding]:
    """Run every registered pattern against text.

    Matches from different categories may overlap; they are all kept.
    Ids are left blank for the merge step to assign.
    """
    if not text or not text.strip():
        return []
    findings: list[Finding] = []
    for spec in PATTERNS:
        placeholder = replacement_for(spec.category, replacements)
        for m in spec.regex.finditer(text):
            if m.start() == m.end():
                continue
            findings.append(Finding(
                id="",
                category=spec.category,
                start=m.start(),
                end=m.end(),
                value=m.group(),
                replacement=placeholder,
                confidence=1.0,
            ))
    return findings
