"""
Letter statistics shared by the frequency-table and adaptive strategies.

Counts are per-word PRESENCE counts: a letter counts once for every word that
contains it, no matter how many times it appears in that word. That is what
matters in hangman, where one guess reveals every occurrence at once.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from hangbench.engine import ALPHABET, WordStore

# Most-frequent-first order computed from /usr/share/dict/words.
LETTER_ORDER = "eiaorntslcupmdhygbfvkwzxqj"

_A = ord("a")


def check_order(order: Sequence[str]) -> str:
    """Return `order` as a string if it is a permutation of a-z, else raise ValueError."""
    s = "".join(order)
    if len(s) != len(ALPHABET) or set(s) != set(ALPHABET):
        raise ValueError(f"letter order must be a permutation of a-z, got {s!r}")
    return s


def letter_ranks(order: str = LETTER_ORDER) -> np.ndarray:
    """Alphabet indices (0 = 'a') listed in `order`."""
    return np.frombuffer(check_order(order).encode("ascii"), dtype=np.uint8).astype(np.intp) - _A


def presence_matrix(rows: np.ndarray) -> np.ndarray:
    """
    For a (words, length) uint8 matrix, return a (words, 26) bool matrix whose
    entry [i, k] says whether row i contains letter k.
    """
    present = np.zeros((rows.shape[0], len(ALPHABET)), dtype=bool)
    if rows.size:
        present[np.arange(rows.shape[0])[:, None], rows.astype(np.intp) - _A] = True
    return present


def presence_counts(rows: np.ndarray) -> np.ndarray:
    """
    For a (words, length) uint8 matrix, return a length-26 array whose entry k
    is the number of rows containing letter k at least once.
    """
    return presence_matrix(rows).sum(axis=0, dtype=np.int64)


def letter_order(words: WordStore) -> str:
    """
    Most-frequent-first order of a-z over a whole dictionary, by the number of
    words containing each letter. Ties go to the earlier letter.
    """
    counts = np.zeros(len(ALPHABET), dtype=np.int64)
    for length in words.lengths():
        counts += presence_counts(words.matrix(length))
    # stable sort on -count keeps alphabetical order among ties
    ranked = np.argsort(-counts, kind="stable")
    return "".join(ALPHABET[i] for i in ranked)
