"""
Frequency-table strategy.

Guess letters in one fixed, global order (most frequent English letter first)
and ignore everything the executioner says except when to stop. The RNG is
never touched, so two runs with different seeds make identical guesses.

The default table is LETTER_ORDER; `letter_order(words)` derives a table from
the dictionary actually being played, which can be passed as `order=`.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from hangbench.engine import BaseExecutioner, WordStore
from .base import BaseStrategy, register
from .letters import LETTER_ORDER, check_order


@register
class FrequencyTableStrategy(BaseStrategy):
    id = "frequency"
    name = "Frequency Table"
    version = "1.0.0"

    def __init__(self, order: Optional[Sequence[str]] = None):
        super().__init__()
        self.order = LETTER_ORDER if order is None else check_order(order)

    def play(self, executioner: BaseExecutioner, words: WordStore, rng: random.Random) -> None:
        self.guesses.clear()
        self._play_in_order(self.order, executioner, words)
