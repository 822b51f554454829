"""
Word and letter validation.

The packed store can only hold words made of lowercase ASCII letters, with a
length in 1..MAX_WORD_LEN-1. Anything else is rejected here, before a single
byte is written into a bucket.
"""

from __future__ import annotations

from typing import Union

# Exclusive upper bound on word length (buckets exist for lengths 1..29).
MAX_WORD_LEN = 30

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

_LOWER = frozenset(range(ord("a"), ord("z") + 1))


class InvalidWordError(ValueError):
    """Raised when a word cannot be represented in the packed word store."""


def is_valid_word(word: Union[str, bytes]) -> bool:
    """
    Return True if `word` can be stored: 0 < len < MAX_WORD_LEN and every
    character is one of a-z.
    """
    if isinstance(word, str):
        if not word.isascii():
            return False
        word = word.encode("ascii")
    if not 0 < len(word) < MAX_WORD_LEN:
        return False
    return all(b in _LOWER for b in word)


def encode_word(word: Union[str, bytes]) -> bytes:
    """
    Validate `word` and return its ASCII bytes.

    Raises:
      InvalidWordError if the word is empty, too long, or contains anything
      other than lowercase ASCII letters.
    """
    if not isinstance(word, (str, bytes)):
        raise InvalidWordError(f"word must be str or bytes, not {type(word).__name__}")
    if not is_valid_word(word):
        raise InvalidWordError(
            f"cannot store {word!r}: need 1..{MAX_WORD_LEN - 1} lowercase ASCII letters")
    return word.encode("ascii") if isinstance(word, str) else bytes(word)


def validate_letter(letter: str) -> int:
    """Return the byte value of a single lowercase letter, or raise ValueError."""
    if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
        raise ValueError(f"guess must be a single letter a-z, got {letter!r}")
    return ord(letter)
