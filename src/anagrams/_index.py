"""Dictionary index: words grouped by their occurrence list."""

from __future__ import annotations

from typing import Iterable, Iterator

from ._occurrences import word_occurrences
from ._types import Occurrences, Word


class DictionaryIndex:
    """Read-only map from occurrence list to the dictionary words sharing it.

    Words keep first-seen dictionary order and duplicates are dropped.
    The empty word is never indexed, so the empty occurrence list maps
    to nothing.
    """

    __slots__ = ("_by_occurrences", "_words")

    def __init__(self, words: Iterable[Word]) -> None:
        grouped: dict[Occurrences, list[Word]] = {}
        seen: set[Word] = set()
        ordered: list[Word] = []
        for word in words:
            if word in seen:
                continue
            seen.add(word)
            occ = word_occurrences(word)
            if not occ:
                continue
            ordered.append(word)
            grouped.setdefault(occ, []).append(word)

        self._words: tuple[Word, ...] = tuple(ordered)
        self._by_occurrences: dict[Occurrences, tuple[Word, ...]] = {
            occ: tuple(ws) for occ, ws in grouped.items()
        }

    def get(self, occurrences: Occurrences) -> tuple[Word, ...]:
        """Words with exactly these occurrences, or ``()`` if there are none."""
        return self._by_occurrences.get(occurrences, ())

    def __getitem__(self, occurrences: Occurrences) -> tuple[Word, ...]:
        return self._by_occurrences[occurrences]

    def __contains__(self, occurrences: object) -> bool:
        return occurrences in self._by_occurrences

    def __len__(self) -> int:
        return len(self._by_occurrences)

    def __iter__(self) -> Iterator[Occurrences]:
        return iter(self._by_occurrences)

    @property
    def words(self) -> tuple[Word, ...]:
        return self._words

    def signatures(self) -> list[Occurrences]:
        return list(self._by_occurrences)

    def word_anagrams(self, word: Word) -> set[Word]:
        """All dictionary words that are anagrams of ``word``."""
        return set(self.get(word_occurrences(word)))
