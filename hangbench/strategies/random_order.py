"""
Random-order strategy.

Shuffle the alphabet once per game (Fisher-Yates via the injected RNG) and
guess letters in that order until the word is revealed. No feedback is used;
this is the baseline the other strategies should beat.
"""

from __future__ import annotations

import random

from hangbench.engine import ALPHABET, BaseExecutioner, WordStore
from .base import BaseStrategy, register


@register
class RandomStrategy(BaseStrategy):
    id = "random"
    name = "Random Order"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.order = list(ALPHABET)

    def play(self, executioner: BaseExecutioner, words: WordStore, rng: random.Random) -> None:
        self.guesses.clear()
        self.order[:] = ALPHABET
        rng.shuffle(self.order)
        self._play_in_order(self.order, executioner, words)
