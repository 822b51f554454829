from __future__ import annotations
import random
from typing import Dict, List, Type

from hangbench.engine import ALPHABET, BaseExecutioner, WordStore

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that strategies inherit ----
class BaseStrategy:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        # Letters guessed during the current/last play(), in order.
        self.guesses: List[str] = []
        self.positions: List[int] = []

    def play(self, executioner: BaseExecutioner, words: WordStore, rng: random.Random) -> None:
        """Guess letters until every letter of the executioner's word is revealed."""
        raise NotImplementedError("Override in subclass")

    def _play_in_order(self, order, executioner: BaseExecutioner, words: WordStore) -> None:
        """Guess letters from `order` until the word is fully revealed."""
        word_len = executioner.word_len
        revealed = 0
        letters = iter(order)
        while revealed < word_len:
            letter = next(letters, None)
            assert letter is not None, "ran out of letters before the word was revealed"
            revealed += self._guess(executioner, words, letter)
        assert revealed == word_len

    def _guess(self, executioner: BaseExecutioner, words: WordStore, letter: str) -> int:
        """Ask one letter, record it, and return how many positions it revealed."""
        assert letter in ALPHABET and letter not in self.guesses, letter
        self.guesses.append(letter)
        executioner.guess(words, letter, self.positions)
        return len(self.positions)
