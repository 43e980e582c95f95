"""Text normalization ahead of n-gram extraction.

Steps, in order:
1. Truncate to max_text_length characters
2. Replace URLs and email addresses with a single space
3. NFKC normalization, then address removal again
4. Drop Latin letters when the text is predominantly non-Latin
5. Vietnamese pass (pass-through)
6. Collapse runs of spaces
"""

import re
import unicodedata

_URL_RE = re.compile(r"https?://[-_.?&~;+=/#0-9A-Za-z]{1,2076}")
_EMAIL_RE = re.compile(r"[-_.0-9A-Za-z]{1,64}@[-_0-9A-Za-z]{1,255}[-_.0-9A-Za-z]{1,255}")
_SPACES_RE = re.compile(r" {2,}")

DEFAULT_MAX_TEXT_LENGTH = 10000


def _is_latin(c: str) -> bool:
    # ASCII window 'A'..'z', punctuation between the cases included
    return "A" <= c <= "z"


def _is_non_latin(c: str) -> bool:
    # Combining marks and above, minus Latin Extended Additional
    return c >= "\u0300" and not ("\u1e00" <= c <= "\u1eff")


def remove_addresses(text: str) -> str:
    text = _URL_RE.sub(" ", text)
    text = _EMAIL_RE.sub(" ", text)
    return text


def normalize_alphabet(text: str) -> str:
    """Drop incidental Latin letters from predominantly non-Latin text."""
    latin_count = 0
    non_latin_count = 0
    for c in text:
        if _is_latin(c):
            latin_count += 1
        elif _is_non_latin(c):
            non_latin_count += 1

    if latin_count * 2 < non_latin_count:
        text = "".join(c for c in text if not _is_latin(c))
    return text


def normalize_vietnamese(text: str) -> str:
    # Vietnamese diacritic folding is not applied
    return text


def normalize_whitespace(text: str) -> str:
    """Collapse runs of the space character. Tabs and newlines are kept."""
    return _SPACES_RE.sub(" ", text)


def normalize_text(text: str | None, max_text_length: int = DEFAULT_MAX_TEXT_LENGTH) -> str:
    if not text:
        return ""

    if len(text) > max_text_length:
        text = text[:max_text_length]

    text = remove_addresses(text)
    text = unicodedata.normalize("NFKC", text)
    # NFKC can turn fullwidth addresses into ASCII ones
    text = remove_addresses(text)
    text = normalize_alphabet(text)
    text = normalize_vietnamese(text)
    text = normalize_whitespace(text)
    return text
