"""Anagram error types."""


class AnagramError(Exception):
    """Base error for all anagram failures."""


class InvalidSubtractionError(AnagramError, ValueError):
    """Subtrahend is not a sub-signature of the minuend."""


class DictionaryVersionError(AnagramError):
    """Manifest version mismatch."""


class DictionaryChecksumError(AnagramError):
    """File checksum verification failed."""
