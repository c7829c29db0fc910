"""Recursive anagram sentence search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from ._occurrences import combinations, sentence_occurrences, subtract
from ._types import Occurrences, Sentence, Word

if TYPE_CHECKING:
    from ._index import DictionaryIndex

log = logging.getLogger(__name__)


def signature_anagrams(
    occurrences: Occurrences, index: DictionaryIndex
) -> list[Sentence]:
    """Return every sentence of dictionary words with exactly these occurrences.

    Sentences with the same words in a different order are distinct
    results. The empty occurrence list has one anagram, the empty
    sentence.
    """
    # Completions per remainder, local to this call. Each remainder is searched once.
    memo: dict[Occurrences, list[Sentence]] = {}

    def search(target: Occurrences) -> list[Sentence]:
        cached = memo.get(target)
        if cached is not None:
            return cached
        if not target:
            result: list[Sentence] = [[]]
        else:
            result = []
            for subset in combinations(target):
                if not subset:
                    continue
                words = index.get(subset)
                if not words:
                    continue
                completions = search(subtract(target, subset))
                for word in words:
                    result.extend([word, *rest] for rest in completions)
        memo[target] = result
        return result

    sentences = search(occurrences)
    log.debug(
        "Found %d sentences for %r (%d remainders searched)",
        len(sentences), occurrences, len(memo),
    )
    return sentences


def sentence_anagrams(
    sentence: Iterable[Word], index: DictionaryIndex
) -> list[Sentence]:
    """Return all anagram sentences of ``sentence`` over ``index``.

    An anagram uses all the letters of all the words in the sentence;
    the number of words need not match. ``["I", "love", "you"]`` is an
    anagram of ``["You", "olive"]``. Every returned word is a dictionary
    word, and if all words of ``sentence`` are in the dictionary the
    sentence itself is among the results.
    """
    return signature_anagrams(sentence_occurrences(sentence), index)
