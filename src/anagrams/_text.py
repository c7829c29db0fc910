"""Regex-based splitting of free text into words."""

from __future__ import annotations

import re

_WORD_RE = re.compile(r"[^\W\d_]+")


def split_words(text: str) -> list[str]:
    """Split text into alphabetic words, dropping digits and punctuation."""
    return _WORD_RE.findall(text)


def split_all(words: list[str] | tuple[str, ...]) -> list[str]:
    """Split each argument in turn so "Yes man" and ("Yes", "man") agree."""
    result: list[str] = []
    for w in words:
        result.extend(split_words(w))
    return result
