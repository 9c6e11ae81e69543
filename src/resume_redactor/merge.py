"""Merge detector outputs into one ordered, duplicate-free finding list."""

from __future__ import annotations
from dataclasses import replace
from typing import Iterable

from .types import Finding


def merge(
    categorical: Iterable[Finding],
    names: Iterable[Finding],
    custom: Iterable[Finding],
) -> list[Finding]:
    """Concatenate, number, sort and collapse exact duplicates.

    Two findings are duplicates when they share ``start`` and ``value``;
    the first one seen wins whatever its category.  Overlapping findings
    that are not exact duplicates are all kept.
    """
    combined = [*categorical, *names, *custom]
    numbered = [replace(f, id=f"pii-{i}") for i, f in enumerate(combined)]
    numbered.sort(key=lambda f: f.start)   # stable: detector order on ties

    seen: set[tuple[int, str]] = set()
    unique: list[Finding] = []
    for f in numbered:
        key = (f.start, f.value)
        if key in seen:
            continue
        seen.add(key)
        unique.append(f)
    return unique
