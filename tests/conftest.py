"""Shared fixtures for anagrams tests."""

import pytest

import anagrams

YES_MAN_WORDS = ["yes", "man", "men", "say", "as", "en", "my", "sane", "Sean"]

LINUX_WORDS = ["Rex", "Lin", "Zulu", "nil", "null", "Uzi", "Linux", "rulez"]


@pytest.fixture(scope="session")
def solver():
    """Small in-memory dictionary shared by search tests."""
    return anagrams.AnagramSolver.from_words(YES_MAN_WORDS + LINUX_WORDS)


@pytest.fixture(scope="session")
def bundled():
    """Load the bundled dictionary once for all tests."""
    return anagrams.load()
