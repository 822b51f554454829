"""
Adaptive candidate-filtering strategy.

Idea:
  - Candidates start as EVERY stored word with the secret's length.
  - Each turn, count for every letter how many candidates contain it at
    least once, and guess the not-yet-guessed letter with the highest count.
  - Keep only the candidates whose positional signature for that letter
    (where it does and does not occur) matches the executioner's answer
    exactly.

Why it works:
  - The most widely shared letter is the guess most likely to hit.
  - The secret always matches its own signature, so the set never empties;
    once a single candidate is left, every later guess is a hit.

Tie-break:
  - Equal counts go to the letter ranked earlier in LETTER_ORDER, so a game is
    fully deterministic for a given dictionary.

Performance:
  - The bucket is read through a zero-copy numpy view. Letter presence is
    computed once per game as a (words, 26) bool mask; each turn only builds
    bool scratch arrays, never copies of the stored words.
"""

from __future__ import annotations

import random
from typing import List

import numpy as np

from hangbench.engine import ALPHABET, BaseExecutioner, WordStore
from .base import BaseStrategy, register
from .letters import LETTER_ORDER, letter_ranks, presence_matrix


@register
class AdaptiveFilteringStrategy(BaseStrategy):
    id = "adaptive"
    name = "Adaptive Candidate Filtering"
    version = "1.0.0"

    def __init__(self, tie_order: str = LETTER_ORDER):
        super().__init__()
        self.ranks = letter_ranks(tie_order)
        self.candidates = np.empty(0, dtype=np.intp)
        # Candidate-set size after each guess of the last game.
        self.candidate_counts: List[int] = []

    def _next_letter(self, present: np.ndarray, remaining: np.ndarray) -> int:
        """Alphabet index of the remaining letter found in the most candidates."""
        counts = present[self.candidates].sum(axis=0, dtype=np.int64)
        counts[~remaining] = -1
        ranked = counts[self.ranks]
        return int(self.ranks[int(np.argmax(ranked))])

    def play(self, executioner: BaseExecutioner, words: WordStore, rng: random.Random) -> None:
        self.guesses.clear()
        self.candidate_counts.clear()

        word_len = executioner.word_len
        bucket = words.matrix(word_len)
        present = presence_matrix(bucket)
        self.candidates = np.arange(bucket.shape[0], dtype=np.intp)
        remaining = np.ones(len(ALPHABET), dtype=bool)

        revealed = 0
        while revealed < word_len:
            assert remaining.any(), "ran out of letters before the word was revealed"
            k = self._next_letter(present, remaining)
            remaining[k] = False

            revealed += self._guess(executioner, words, ALPHABET[k])

            # Keep candidates that have the letter exactly at the reported positions.
            signature = np.zeros(word_len, dtype=bool)
            signature[self.positions] = True
            hits = (bucket == ord(ALPHABET[k]))[self.candidates]
            keep = (hits == signature).all(axis=1)
            self.candidates = self.candidates[keep]
            self.candidate_counts.append(len(self.candidates))
            assert len(self.candidates) > 0, "no candidate matches the executioner's answers"

        assert revealed == word_len
