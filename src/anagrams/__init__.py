"""Anagrams: dictionary-backed word and sentence anagram generator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ._errors import (
    AnagramError,
    DictionaryChecksumError,
    DictionaryVersionError,
    InvalidSubtractionError,
)
from ._index import DictionaryIndex
from ._occurrences import (
    combinations,
    occurrences,
    sentence_occurrences,
    subtract,
    word_occurrences,
)
from ._solver import AnagramSolver
from ._text import split_words
from ._types import DictionaryInfo, Occurrences, Sentence, Word

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "load_word_list",
    "sentence_anagrams",
    "word_anagrams",
    "AnagramError",
    "AnagramSolver",
    "DictionaryChecksumError",
    "DictionaryIndex",
    "DictionaryInfo",
    "DictionaryVersionError",
    "InvalidSubtractionError",
    "Occurrences",
    "Sentence",
    "Word",
    "combinations",
    "occurrences",
    "sentence_occurrences",
    "split_words",
    "subtract",
    "word_occurrences",
]

_default_solver: AnagramSolver | None = None


def load(data_dir: Path | str | None = None) -> AnagramSolver:
    """Load a dictionary and return a ready-to-use AnagramSolver.

    Args:
        data_dir: Path to data directory. If None, uses $ANAGRAMS_DATA_DIR
            or the bundled package data.
    """
    from ._loader import load_data

    data = load_data(data_dir)
    return AnagramSolver(data["words"], name=data["name"], source=data["source"])


def load_word_list(path: Path | str) -> AnagramSolver:
    """Build an AnagramSolver from a plain-text word list."""
    from ._loader import read_word_list

    return AnagramSolver(read_word_list(path), name=str(path), source=str(path))


def _default() -> AnagramSolver:
    # The bundled dictionary is loaded lazily, once per process.
    global _default_solver
    if _default_solver is None:
        _default_solver = load()
    return _default_solver


def word_anagrams(word: Word) -> set[Word]:
    """Anagrams of ``word`` in the default dictionary."""
    return _default().word_anagrams(word)


def sentence_anagrams(sentence: Iterable[Word]) -> list[Sentence]:
    """Anagram sentences of ``sentence`` over the default dictionary."""
    return _default().sentence_anagrams(sentence)
