"""Data structures for anagrams."""

from __future__ import annotations

from dataclasses import dataclass

Word = str
Sentence = list[Word]

# Sorted by letter, lowercase, no zero counts.
Occurrence = tuple[str, int]
Occurrences = tuple[Occurrence, ...]


@dataclass(slots=True, frozen=True)
class DictionaryInfo:
    name: str
    n_words: int        # distinct indexed words
    n_signatures: int
    source: str         # data dir, word list path, or "<memory>"
