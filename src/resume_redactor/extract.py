"""Text extraction boundary.

PDF and DOCX extraction live outside this package; anything that can turn
a document into one newline-delimited string satisfies ``TextExtractor``.
Only plain-text files are handled here.
"""

from __future__ import annotations
import codecs
from pathlib import Path
from typing import Protocol

from .errors import ExtractionError

TEXT_SUFFIXES = frozenset({".txt", ".text", ".md", ""})


class TextExtractor(Protocol):
    def extract(self, path: str | Path) -> str: ...


def decode_text(raw: bytes) -> str:
    """Decode UTF-8 or BOM-marked UTF-16 bytes and normalise line endings."""
    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        encoding = "utf-16"
    else:
        encoding = "utf-8-sig"
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise ExtractionError(f"could not decode text as {encoding}: {e}") from e
    return text.replace("\r\n", "\n").replace("\r", "\n")


class PlainTextExtractor:
    """Reads .txt/.md files."""

    def extract(self, path: str | Path) -> str:
        path = Path(path).expanduser()
        if path.suffix.lower() not in TEXT_SUFFIXES:
            raise ExtractionError(f"unsupported file type: {path.suffix or path.name}")
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise ExtractionError(f"could not read {path}: {e}") from e
        return decode_text(raw)
