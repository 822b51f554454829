"""
Executioners: the side of the game that knows the secret word.

A strategy never sees the secret. It only calls guess(letter) and learns the
positions where that letter occurs (or nothing, which counts as a wrong
guess). Executioners self-register by `id` so alternative variants (e.g. an
adversarial one) can be selected from the CLI without touching strategy code.
"""

from __future__ import annotations

import random
from typing import Dict, List, Type

from .validation import validate_letter
from .wordstore import WordHandle, WordStore

# ---- Global executioner registry ----
EXECUTIONERS: Dict[str, Type["BaseExecutioner"]] = {}


def register_executioner(cls: Type["BaseExecutioner"]) -> Type["BaseExecutioner"]:
    """
    Decorator: @register_executioner adds the class to EXECUTIONERS by its `id`.
    """
    eid = getattr(cls, "id", None)
    if not eid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if eid in EXECUTIONERS:
        raise ValueError(f"Duplicate executioner id: {eid}")
    EXECUTIONERS[eid] = cls
    return cls


def get_executioner(executioner_id: str) -> Type["BaseExecutioner"]:
    try:
        return EXECUTIONERS[executioner_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown executioner id: {executioner_id}. Available: {sorted(EXECUTIONERS)}") from e


class BaseExecutioner:
    id = "base"
    name = "Base"

    def __init__(self, word: WordHandle, words: WordStore):
        self.word = word
        self._wrong_guesses = 0

    @classmethod
    def choose(cls, words: WordStore, rng: random.Random) -> "BaseExecutioner":
        """Start a game with a word drawn uniformly from the store."""
        return cls(words.random(rng), words)

    def guess(self, words: WordStore, letter: str, positions: List[int]) -> List[int]:
        """
        Overwrite `positions` with the ascending indices where `letter` occurs
        in the chosen word, and return it. An empty result is a wrong guess.
        """
        raise NotImplementedError("Override in subclass")

    @property
    def word_len(self) -> int:
        return self.word.length

    @property
    def wrong_guesses(self) -> int:
        """Number of guesses so far that revealed nothing."""
        return self._wrong_guesses


@register_executioner
class HonestExecutioner(BaseExecutioner):
    """Picks a word in advance and answers every guess truthfully."""
    id = "honest"
    name = "Honest"

    def guess(self, words: WordStore, letter: str, positions: List[int]) -> List[int]:
        code = validate_letter(letter)
        positions.clear()
        for i, c in enumerate(words.get(self.word)):
            if c == code:
                positions.append(i)
        if not positions:
            self._wrong_guesses += 1
        return positions
