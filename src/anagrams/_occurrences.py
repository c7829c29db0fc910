"""Letter occurrence signatures: encoding, subsets and subtraction.

An occurrence list (``Occurrences``) is a tuple of ``(letter, count)``
pairs sorted by letter, lowercase, with every count >= 1. The word "eat"
encodes as ``(('a', 1), ('e', 1), ('t', 1))``, as do "ate" and "tea".
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from ._errors import InvalidSubtractionError
from ._types import Occurrences, Word


def word_occurrences(word: Word) -> Occurrences:
    """Convert a word into its occurrence list.

    Upper and lower case are the same character and are represented in
    lowercase.
    """
    return tuple(sorted(Counter(word.lower()).items()))


def sentence_occurrences(sentence: Iterable[Word]) -> Occurrences:
    """Convert a sentence into the occurrence list of all its letters."""
    return word_occurrences("".join(sentence))


def occurrences(word_or_sentence: Word | Iterable[Word]) -> Occurrences:
    """Encode either a single word or a sentence (sequence of words)."""
    if isinstance(word_or_sentence, str):
        return word_occurrences(word_or_sentence)
    return sentence_occurrences(word_or_sentence)


def combinations(occurrences: Occurrences) -> list[Occurrences]:
    """Return every subset of the occurrence list.

    Includes the empty subset ``()`` and the occurrence list itself. The
    subsets of ``(('a', 2), ('b', 2))`` are::

        ()
        (('a', 1),)
        (('a', 2),)
        (('b', 1),)
        (('a', 1), ('b', 1))
        (('a', 2), ('b', 1))
        (('b', 2),)
        (('a', 1), ('b', 2))
        (('a', 2), ('b', 2))

    No particular order is guaranteed.
    """
    subsets: list[Occurrences] = [()]
    for letter, max_count in occurrences:
        # Letters arrive in sorted order, so appending keeps each subset sorted.
        extended: list[Occurrences] = []
        for count in range(1, max_count + 1):
            extended.extend(subset + ((letter, count),) for subset in subsets)
        subsets = extended + subsets
    return subsets


def subtract(x: Occurrences, y: Occurrences) -> Occurrences:
    """Subtract occurrence list ``y`` from occurrence list ``x``.

    ``y`` must be a subset of ``x``: every letter in ``y`` appears in ``x``
    with at least the same count. The result is sorted and has no
    zero entries.

    Raises:
        InvalidSubtractionError: If ``y`` is not a subset of ``x``.
    """
    remaining = dict(x)
    for letter, count in y:
        have = remaining.get(letter)
        if have is None:
            raise InvalidSubtractionError(
                f"Letter {letter!r} not present in {x!r}"
            )
        diff = have - count
        if diff < 0:
            raise InvalidSubtractionError(
                f"Cannot remove {count} x {letter!r}, only {have} present"
            )
        if diff == 0:
            del remaining[letter]
        else:
            remaining[letter] = diff
    return tuple(sorted(remaining.items()))
