"""Dictionary loading, manifest validation, and SHA-256 checksum verification."""

from __future__ import annotations

import hashlib
import json
import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any, Iterable

import msgpack

from ._errors import AnagramError, DictionaryChecksumError, DictionaryVersionError

log = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

_DATA_FILES = ("words.bin",)

DATA_DIR_ENV = "ANAGRAMS_DATA_DIR"


def _default_data_dir() -> Path:
    return Path(str(resources.files("anagrams") / "data"))


def resolve_data_dir(data_dir: Path | str | None = None) -> Path:
    """Explicit path, then $ANAGRAMS_DATA_DIR, then the bundled data."""
    if data_dir is not None:
        return Path(data_dir)
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return _default_data_dir()


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise AnagramError(f"manifest.json not found in {data_dir}")
    with open(manifest_path) as f:
        return json.load(f)


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise DictionaryVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    checksums = manifest.get("files", {})
    for filename in _DATA_FILES:
        filepath = data_dir / filename
        if not filepath.exists():
            raise AnagramError(f"Missing data file: {filepath}")
        expected = checksums.get(filename)
        if expected is None:
            raise AnagramError(f"No checksum in manifest for {filename}")
        actual = _sha256(filepath)
        if actual != expected:
            raise DictionaryChecksumError(
                f"Checksum mismatch for {filename}: "
                f"expected {expected[:16]}..., got {actual[:16]}..."
            )


def _load_msgpack(path: Path, **kwargs: Any) -> Any:
    with open(path, "rb") as f:
        return msgpack.unpackb(f.read(), raw=False, **kwargs)


def load_data(data_dir: Path | str | None = None) -> dict[str, Any]:
    """Load and validate a dictionary data directory.

    Returns a dict with ``words`` (list of str), ``name`` and ``source``.
    """
    data_dir = resolve_data_dir(data_dir)

    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    words = _load_msgpack(data_dir / "words.bin")
    if not isinstance(words, list):
        raise AnagramError(
            f"words.bin must hold an array of words, got {type(words).__name__}"
        )

    log.info("Loaded %d words from %s", len(words), data_dir)
    return {
        "words": [str(w) for w in words],
        "name": manifest.get("name", data_dir.name),
        "source": str(data_dir),
    }


def read_word_list(path: Path | str) -> list[str]:
    """Read a plain-text word list, one word per line.

    Surrounding whitespace and blank lines are ignored.
    """
    path = Path(path)
    if not path.exists():
        raise AnagramError(f"Word list not found: {path}")
    with open(path, encoding="utf-8") as f:
        words = [line.strip() for line in f]
    words = [w for w in words if w]
    log.info("Read %d words from %s", len(words), path)
    return words


def write_data(
    words: Iterable[str],
    data_dir: Path | str,
    name: str | None = None,
) -> Path:
    """Pack ``words`` into a data directory that :func:`load_data` accepts.

    Writes ``words.bin`` (msgpack array) and ``manifest.json`` with its
    SHA-256 checksum. Returns the data directory path.
    """
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    words_path = data_dir / "words.bin"
    with open(words_path, "wb") as f:
        f.write(msgpack.packb(list(words), use_bin_type=True))

    manifest = {
        "version": _EXPECTED_VERSION,
        "name": name or data_dir.name,
        "files": {filename: _sha256(data_dir / filename) for filename in _DATA_FILES},
    }
    with open(data_dir / "manifest.json", "w") as f:
        json.dump(manifest, f, indent=2)
        f.write("\n")

    log.info("Wrote dictionary %r to %s", manifest["name"], data_dir)
    return data_dir
