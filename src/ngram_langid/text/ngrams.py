"""Character n-gram extraction over a 3-character sliding buffer.

The buffer starts as a single space and restarts after every space, so
grams never span a word boundary by more than the one leading space.
Two consecutive uppercase letters mark the position as an acronym or
heading and suppress all grams until a non-uppercase character arrives.
"""

from __future__ import annotations

from collections.abc import Container

NGRAM_LENGTH = 3


class NGramBuffer:
    def __init__(self) -> None:
        self._buffer = " "
        self._capital = False

    @property
    def capital(self) -> bool:
        return self._capital

    def add(self, c: str) -> None:
        last = self._buffer[-1]

        if last == " ":
            self._buffer = " "
            self._capital = False
            if c == " ":
                return
        elif len(self._buffer) >= NGRAM_LENGTH:
            self._buffer = self._buffer[1:]

        self._buffer += c

        if c.isupper():
            if last.isupper():
                self._capital = True
        else:
            self._capital = False

    def get(self, n: int) -> str | None:
        """Trailing n characters of the buffer, or None when unavailable."""
        if self._capital:
            return None
        if n < 1 or n > NGRAM_LENGTH or len(self._buffer) < n:
            return None
        if n == 1:
            c = self._buffer[-1]
            return None if c == " " else c
        return self._buffer[-n:]


def extract_ngrams(text: str, vocabulary: Container[str]) -> list[str]:
    """All known 1-, 2- and 3-grams of text, in order of appearance."""
    grams: list[str] = []
    buffer = NGramBuffer()

    for c in text:
        buffer.add(c)
        for n in range(1, NGRAM_LENGTH + 1):
            gram = buffer.get(n)
            if gram is not None and gram in vocabulary:
                grams.append(gram)

    return grams
