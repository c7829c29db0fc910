"""Tests for the sentence anagram search."""

import pytest

import anagrams
from anagrams import DictionaryIndex, sentence_occurrences
from anagrams._search import sentence_anagrams, signature_anagrams

from conftest import YES_MAN_WORDS


@pytest.fixture(scope="module")
def yes_man_index():
    return DictionaryIndex(YES_MAN_WORDS)


def _as_set(sentences):
    return {tuple(s) for s in sentences}


def test_empty_sentence(yes_man_index):
    assert sentence_anagrams([], yes_man_index) == [[]]


def test_empty_occurrences(yes_man_index):
    assert signature_anagrams((), yes_man_index) == [[]]


def test_yes_man_full(yes_man_index):
    expected = {
        ("en", "as", "my"),
        ("en", "my", "as"),
        ("man", "yes"),
        ("men", "say"),
        ("as", "en", "my"),
        ("as", "my", "en"),
        ("sane", "my"),
        ("Sean", "my"),
        ("my", "en", "as"),
        ("my", "as", "en"),
        ("my", "sane"),
        ("my", "Sean"),
        ("say", "men"),
        ("yes", "man"),
    }
    result = sentence_anagrams(["Yes", "man"], yes_man_index)
    assert len(result) == 14
    assert _as_set(result) == expected


def test_no_duplicate_sentences(yes_man_index):
    result = sentence_anagrams(["Yes", "man"], yes_man_index)
    assert len(_as_set(result)) == len(result)


def test_order_sensitive(yes_man_index):
    result = _as_set(sentence_anagrams(["Yes", "man"], yes_man_index))
    assert ("man", "yes") in result
    assert ("yes", "man") in result


def test_only_dictionary_words(yes_man_index):
    for sentence in sentence_anagrams(["Yes", "man"], yes_man_index):
        for word in sentence:
            assert word in YES_MAN_WORDS


def test_letters_preserved(yes_man_index):
    target = sentence_occurrences(["Yes", "man"])
    for sentence in sentence_anagrams(["Yes", "man"], yes_man_index):
        assert sentence_occurrences(sentence) == target


def test_self_membership(yes_man_index):
    result = sentence_anagrams(["men", "say"], yes_man_index)
    assert ["men", "say"] in result


def test_no_anagrams(yes_man_index):
    assert sentence_anagrams(["xyzzy"], yes_man_index) == []


def test_linux_rulez(solver):
    expected = {
        ("Rex", "Lin", "Zulu"),
        ("nil", "Zulu", "Rex"),
        ("Rex", "nil", "Zulu"),
        ("Zulu", "Rex", "Lin"),
        ("null", "Uzi", "Rex"),
        ("Rex", "Zulu", "Lin"),
        ("Uzi", "null", "Rex"),
        ("Rex", "null", "Uzi"),
        ("null", "Rex", "Uzi"),
        ("Lin", "Rex", "Zulu"),
        ("nil", "Rex", "Zulu"),
        ("Rex", "Uzi", "null"),
        ("Rex", "Zulu", "nil"),
        ("Zulu", "Rex", "nil"),
        ("Zulu", "Lin", "Rex"),
        ("Lin", "Zulu", "Rex"),
        ("Uzi", "Rex", "null"),
        ("Zulu", "nil", "Rex"),
        ("rulez", "Linux"),
        ("Linux", "rulez"),
    }
    result = solver.sentence_anagrams(["Linux", "rulez"])
    assert _as_set(result) == expected
    assert len(result) == 20


def test_repeated_letters_single_word():
    index = DictionaryIndex(["a", "aa"])
    result = _as_set(sentence_anagrams(["aaa"], index))
    assert result == {("a", "a", "a"), ("a", "aa"), ("aa", "a")}


def test_empty_word_in_dictionary_terminates():
    index = DictionaryIndex(["", "ab", "ba"])
    result = _as_set(sentence_anagrams(["ab"], index))
    assert result == {("ab",), ("ba",)}


def test_remainders_searched_once(monkeypatch, yes_man_index):
    """Each distinct remainder is expanded once per call."""
    calls = []
    real = anagrams._search.combinations

    def counting(occ):
        calls.append(occ)
        return real(occ)

    monkeypatch.setattr(anagrams._search, "combinations", counting)
    sentence_anagrams(["Yes", "man"], yes_man_index)
    assert len(calls) == len(set(calls))
