"""Tests for the heuristic name detector."""

from resume_redactor.names import NameDetector, NameLexicon
from resume_redactor.types import Category


def names(text, lexicon=None):
    return [(f.value, f.confidence) for f in NameDetector(lexicon).detect(text)]


# ── Pass 1: all-caps header ──────────────────────────────────────────

def test_all_caps_header_at_start():
    assert names("JOHN SMITH\nSoftware Engineer\n") == [("JOHN SMITH", 0.98)]


def test_all_caps_header_with_trailing_whitespace():
    found = names("PRIYA SHARMA \nData Engineer\n")
    assert found[0] == ("PRIYA SHARMA", 0.98)
    assert names("PRIYA SHARMA\t\r\nrest") == [("PRIYA SHARMA", 0.98)]


def test_all_caps_header_ended_by_double_space():
    assert names("PRIYA SHARMA  priya@x.com") == [("PRIYA SHARMA", 0.98)]


def test_all_caps_header_needs_two_words():
    assert names("RESUME\nsomething else") == []


def test_all_caps_section_header_is_not_a_name():
    assert names("PROFESSIONAL SUMMARY\n\nExperienced engineer with 5 years of work.") == []


def test_all_caps_technical_words_are_not_a_name():
    assert names("DATA ENGINEER\n\nBuilt pipelines.") == []


def test_all_caps_only_at_start_of_text():
    assert names("hello\nJOHN DOE\n") == []


# ── Pass 2: name with initial ────────────────────────────────────────

def test_name_with_initial():
    assert names("Resume of Priya K, Chennai") == [("Priya K", 0.92)]


def test_initial_rejected_for_technical_word():
    assert names("worked with Docker X daily") == []


def test_initial_rejected_in_technical_context():
    assert names("Lead Engineer Ravi K at Acme") == []


def test_initial_rejected_for_long_acronym():
    assert names("Certified ABCDEFGHIJ K, 2020") == []


def test_initial_must_be_standalone_token():
    assert names("see x-Rahul K today") == []


def test_initial_only_in_header_area():
    text = "filler line\n" * 30 + "Rahul K\n"
    assert names(text) == []


# ── Pass 3: gazetteer pairs ──────────────────────────────────────────

def test_gazetteer_pair_anywhere():
    text = "References available from Mary Johnson on request."
    assert names(text) == [("Mary Johnson", 0.95)]


def test_gazetteer_is_case_insensitive():
    assert names("contact MARY JOHNSON for details") == [("MARY JOHNSON", 0.95)]


def test_gazetteer_skips_span_covered_by_header():
    # "JOHN SMITH" is found by the header pass first
    found = names("JOHN SMITH\nmentor: John Smith\n")
    assert found == [("JOHN SMITH", 0.98), ("John Smith", 0.95)]


# ── Pass 4: header line ──────────────────────────────────────────────

def test_header_line():
    assert names("Resume\nPriya Sharma\nChennai\n") == [("Priya Sharma", 0.85)]


def test_header_line_skips_section_headers():
    assert names("Work Experience\nPriya Sharma\n") == [("Priya Sharma", 0.85)]


def test_header_line_blacklist_is_case_insensitive():
    text = "intro\nSide Projects\n"
    assert names(text) == [("Side Projects", 0.85)]
    lexicon = NameLexicon().extended(section_headers=["side projects"])
    assert names(text, lexicon) == []


def test_consecutive_header_lines_are_all_seen():
    found = names("intro\nPriya Sharma\nAnand Kumar\n")
    assert found == [("Priya Sharma", 0.85), ("Anand Kumar", 0.85)]


# ── Pass 5: lone first name ──────────────────────────────────────────

def test_lone_first_name():
    assert names("Jennifer\nData analyst\n") == [("Jennifer", 0.70)]


def test_lone_first_name_only_near_top():
    assert names("\n" * 250 + "Jennifer\n") == []


def test_lone_first_name_needs_its_own_line():
    assert names("Jennifer likes data\n") == []


# ── Lexicon ──────────────────────────────────────────────────────────

def test_lexicon_extension():
    lexicon = NameLexicon().extended(first_names=["Priya"], last_names=["Sharma"])
    assert names("met priya sharma yesterday", lexicon) == [("priya sharma", 0.95)]


def test_lexicon_partial_word_check():
    lexicon = NameLexicon()
    assert lexicon.is_technical_word("Docker")
    assert lexicon.is_technical_word("DEVOPSX")      # contains a term
    assert lexicon.is_technical_word("NET")          # inside NETWORK
    assert not lexicon.is_technical_word("Priya")


def test_lexicon_section_header_check():
    lexicon = NameLexicon()
    assert lexicon.is_section_header("professional   summary")
    assert not lexicon.is_section_header("Priya Sharma")


def test_empty_lexicon_finds_no_gazetteer_names():
    empty = NameLexicon(first_names=frozenset(), last_names=frozenset())
    assert names("contact Mary Johnson today", empty) == []


def test_findings_are_names_with_placeholder():
    findings = NameDetector(replacement="[name]").detect("JANE DOE\nrest")
    assert findings[0].category is Category.NAME
    assert findings[0].replacement == "[name]"
    assert findings[0].span == (0, 8)


def test_blank_text():
    assert names("") == []
    assert names("  \n ") == []
