"""Language profile streams and where they come from.

A profile is JSON, optionally gzip-compressed:

    {"name": "en", "freq": {"a": 123, "th": 45, ...}, "n_words": [n1, n2, n3]}

n_words holds the total occurrence count of grams of length 1, 2 and 3.
Sources hand out one byte stream per language code; the detector never
cares whether that stream came from disk, a package or memory.
"""

from __future__ import annotations

import gzip
import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import BinaryIO, Protocol

from pydantic import ValidationError

from ngram_langid.models import LanguageProfile

_GZIP_MAGIC = b"\x1f\x8b"

# Checked in order when resolving a language code to a file
_SUFFIXES = ("", ".json", ".json.gz", ".bin.gz", ".gz")


class ProfileFormatError(ValueError):
    """A profile stream could not be parsed."""


def parse_profile(data: bytes | BinaryIO) -> LanguageProfile:
    """Parse a (possibly gzip-compressed) JSON profile."""
    raw = data if isinstance(data, bytes) else data.read()
    try:
        if raw[:2] == _GZIP_MAGIC:
            raw = gzip.decompress(raw)
        doc = json.loads(raw.decode("utf-8"))
    except (OSError, EOFError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ProfileFormatError(f"unreadable profile: {e}") from e

    if not isinstance(doc, dict):
        raise ProfileFormatError("profile must be a JSON object")

    try:
        return LanguageProfile(
            code=doc.get("name"),
            frequencies=doc.get("freq"),
            word_count=doc.get("n_words"),
        )
    except ValidationError as e:
        raise ProfileFormatError(f"invalid profile: {e}") from e


def dump_profile(profile: LanguageProfile, compress: bool = False) -> bytes:
    """Serialize a profile into the format parse_profile reads."""
    raw = json.dumps(
        {
            "name": profile.code,
            "freq": dict(profile.frequencies),
            "n_words": list(profile.word_count),
        },
        ensure_ascii=False,
    ).encode("utf-8")
    return gzip.compress(raw) if compress else raw


class ProfileSource(Protocol):
    def available_languages(self) -> list[str]: ...

    def read(self, code: str) -> bytes | None:
        """Profile bytes for code, or None when the source has none."""
        ...


class DirectoryProfileSource:
    """One profile file per language: `en`, `en.json`, `en.json.gz`, ..."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, code: str) -> Path | None:
        # Codes never name anything outside the directory
        if not code or "/" in code or "\\" in code or code.startswith("."):
            return None
        for suffix in _SUFFIXES:
            path = self.directory / f"{code}{suffix}"
            if path.is_file():
                return path
        return None

    def available_languages(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        codes: list[str] = []
        for path in sorted(self.directory.iterdir()):
            if not path.is_file() or path.name.startswith("."):
                continue
            code = path.name
            for suffix in _SUFFIXES[1:]:
                if code.endswith(suffix):
                    code = code[: -len(suffix)]
                    break
            if code and code not in codes:
                codes.append(code)
        return codes

    def read(self, code: str) -> bytes | None:
        path = self._path(code)
        if path is None:
            return None
        return path.read_bytes()


class MappingProfileSource:
    """In-memory profile bytes keyed by language code."""

    def __init__(self, profiles: Mapping[str, bytes] | Iterable[tuple[str, bytes]]):
        self._profiles = dict(profiles)

    def available_languages(self) -> list[str]:
        return list(self._profiles)

    def read(self, code: str) -> bytes | None:
        return self._profiles.get(code)
