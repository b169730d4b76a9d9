"""Shared helpers for answer normalization."""

from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")


def clean_answer(text: str) -> str:
    """Return ``text`` upper-cased with all whitespace removed."""

    if not text:
        return ""
    return WHITESPACE_RE.sub("", text).upper()


__all__ = ["clean_answer"]
