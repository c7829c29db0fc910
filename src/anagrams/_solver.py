"""AnagramSolver: holds a dictionary index and exposes the public API."""

from __future__ import annotations

from typing import Iterable

from ._index import DictionaryIndex
from ._occurrences import word_occurrences
from ._search import sentence_anagrams, signature_anagrams
from ._types import DictionaryInfo, Occurrences, Sentence, Word


class AnagramSolver:
    """Anagram lookups over one immutable dictionary.

    Safe to share between threads: searches keep their state per call.
    """

    __slots__ = ("_index", "_info")

    def __init__(
        self,
        words: Iterable[Word],
        *,
        name: str = "custom",
        source: str = "<memory>",
    ) -> None:
        self._index = DictionaryIndex(words)
        self._info = DictionaryInfo(
            name=name,
            n_words=len(self._index.words),
            n_signatures=len(self._index),
            source=source,
        )

    @classmethod
    def from_words(cls, words: Iterable[Word], name: str = "custom") -> AnagramSolver:
        return cls(words, name=name)

    @property
    def index(self) -> DictionaryIndex:
        return self._index

    @property
    def info(self) -> DictionaryInfo:
        return self._info

    @property
    def dictionary(self) -> tuple[Word, ...]:
        return self._index.words

    def word_anagrams(self, word: Word) -> set[Word]:
        """All dictionary words with the same letters as ``word``."""
        return self._index.word_anagrams(word)

    def sentence_anagrams(self, sentence: Iterable[Word]) -> list[Sentence]:
        """All anagram sentences of ``sentence`` using dictionary words."""
        return sentence_anagrams(sentence, self._index)

    def signature_anagrams(self, occurrences: Occurrences) -> list[Sentence]:
        return signature_anagrams(occurrences, self._index)

    def is_word(self, word: Word) -> bool:
        return word in self._index.get(word_occurrences(word))
