"""
Compact, length-bucketed word storage.

Layout:
  - one bytearray ("bucket") per word length L, kept in `_buckets[L - 1]`
  - a bucket is the plain concatenation of every stored word of length L,
    so the Nth word of length L occupies bytes [N*L, (N+1)*L)
  - words are addressed by a WordHandle (length, index), never copied

The store is built once (insert/extend) and then treated as read-only while
strategies run. Handles stay valid as long as nothing is removed, which the
store never does.
"""

from __future__ import annotations

import random
from typing import Iterable, Iterator, List, NamedTuple, Union

import numpy as np

from .validation import encode_word


class WordHandle(NamedTuple):
    """Address of a stored word: its length and its index within that bucket."""
    length: int
    index: int


class WordStore:
    def __init__(self, words: Iterable[Union[str, bytes]] = ()):
        self._buckets: List[bytearray] = []
        self.total_words = 0
        self.extend(words)

    # -----------------------------
    # Population
    # -----------------------------

    def insert(self, word: Union[str, bytes]) -> WordHandle:
        """
        Append `word` to the bucket for its length and return its handle.

        Raises InvalidWordError (nothing is written) for an empty or overlong
        word, or one with characters outside a-z. Raises RuntimeError if a
        matrix() view of that length is still alive.
        """
        data = encode_word(word)
        n = len(data)
        while len(self._buckets) < n:
            self._buckets.append(bytearray())
        bucket = self._buckets[n - 1]
        idx = len(bucket) // n
        try:
            bucket += data
        except BufferError as e:
            raise RuntimeError(
                f"cannot insert {word!r}: a matrix() view of length {n} is still in use; "
                f"the store is read-only once strategies run") from e
        self.total_words += 1
        return WordHandle(n, idx)

    def extend(self, words: Iterable[Union[str, bytes]]) -> int:
        """Insert every word; return how many were inserted."""
        count = 0
        for w in words:
            self.insert(w)
            count += 1
        return count

    # -----------------------------
    # Lookup
    # -----------------------------

    def count_with_length(self, length: int) -> int:
        """Number of stored words with exactly `length` letters (0 if none)."""
        if not 0 < length <= len(self._buckets):
            return 0
        return len(self._buckets[length - 1]) // length

    def get(self, handle: WordHandle) -> bytes:
        """Return the letters of a stored word."""
        length, idx = handle
        if not 0 <= idx < self.count_with_length(length):
            raise IndexError(f"no word at {handle!r}")
        return bytes(self._buckets[length - 1][length * idx:length * (idx + 1)])

    def text(self, handle: WordHandle) -> str:
        """Same as get(), decoded to str."""
        return self.get(handle).decode("ascii")

    def matrix(self, length: int) -> np.ndarray:
        """
        Read-only (count, length) uint8 view over the bucket for `length`.

        The view shares memory with the bucket; while it is alive, insert() of
        that length raises RuntimeError.
        """
        count = self.count_with_length(length)
        if count == 0:
            return np.empty((0, max(length, 0)), dtype=np.uint8)
        view = np.frombuffer(self._buckets[length - 1], dtype=np.uint8).reshape(count, length)
        view.flags.writeable = False
        return view

    def lengths(self) -> List[int]:
        """Word lengths that have at least one stored word, ascending."""
        return [i + 1 for i, b in enumerate(self._buckets) if b]

    # -----------------------------
    # Sampling & enumeration
    # -----------------------------

    def random(self, rng: random.Random) -> WordHandle:
        """
        Draw a word uniformly over the whole collection (not per length).

        One index in [0, total_words) is drawn, then buckets are walked in
        length order until the running count passes it.
        """
        if self.total_words == 0:
            raise ValueError("cannot sample from an empty word store")
        idx = rng.randrange(self.total_words)
        words_so_far = 0
        for i, bucket in enumerate(self._buckets):
            length = i + 1
            words = len(bucket) // length
            words_so_far += words
            if words_so_far > idx:
                return WordHandle(length, idx - (words_so_far - words))
        raise AssertionError("total_words out of sync with buckets")

    def __iter__(self) -> Iterator[WordHandle]:
        # Counts are snapshotted up front; words inserted mid-iteration are not visited.
        counts = [len(b) // (i + 1) for i, b in enumerate(self._buckets)]
        for i, count in enumerate(counts):
            for j in range(count):
                yield WordHandle(i + 1, j)

    def iter(self) -> Iterator[WordHandle]:
        return iter(self)

    def __len__(self) -> int:
        return self.total_words

    def describe(self) -> str:
        """
        Human-readable dump of the store, one section per length:

            word list (3):
            - length 1 (0):
            - length 2 (1):
              - at
            ...
        """
        lines = [f"word list ({self.total_words}):"]
        for i, bucket in enumerate(self._buckets):
            length = i + 1
            lines.append(f"- length {length} ({len(bucket) // length}):")
            for k in range(0, len(bucket), length):
                lines.append(f"  - {bucket[k:k + length].decode('ascii')}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"WordStore(total_words={self.total_words}, lengths={self.lengths()})"
