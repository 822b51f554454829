"""
Experiment harness core primitives.

- run_trial: play one word with one strategy against a fresh executioner.
- run_sweep: play EVERY stored word with one strategy and collect scores.

A score is the number of wrong guesses the strategy needed for a word. The
harness checks the positional-feedback contract after every trial: the
strategy must have revealed exactly word_len letters and never guessed more
than the 26 letters of the alphabet.

These functions are UI-agnostic; progress output is opt-in so the CLI,
tests and notebooks can share them.
"""

from __future__ import annotations
import random
import sys
import time
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Type

# Optional rich progress bar
try:
    from tqdm import tqdm  # pip install tqdm
    _HAS_TQDM = True
except Exception:
    _HAS_TQDM = False

from hangbench.engine import ALPHABET, BaseExecutioner, HonestExecutioner, WordHandle, WordStore
from hangbench.strategies import BaseStrategy

# (wrong_guesses, word)
Score = Tuple[int, str]


@dataclass
class SweepResult:
    """Per-word scores and totals for one strategy over a whole store."""
    strategy_id: str
    scores: List[Score] = field(default_factory=list)
    total_wrong_guesses: int = 0
    num_words: int = 0
    elapsed_s: float = 0.0

    @property
    def average(self) -> float:
        """Average number of wrong guesses per word (0.0 for an empty store)."""
        return self.total_wrong_guesses / self.num_words if self.num_words else 0.0


def run_trial(
        strategy: BaseStrategy,
        word: WordHandle,
        words: WordStore,
        rng: random.Random,
        *,
        executioner_cls: Type[BaseExecutioner] = HonestExecutioner,
) -> Dict:
    """
    Play a single game: the executioner holds `word`, the strategy guesses
    until it is revealed.

    Returns:
        dict with keys: word (str), length (int), wrong_guesses (int),
        guesses (list of letters in the order guessed)
    """
    executioner = executioner_cls(word, words)
    strategy.play(executioner, words, rng)

    guesses = list(strategy.guesses)
    assert len(guesses) <= len(ALPHABET), f"{strategy.id} guessed {len(guesses)} letters"
    assert executioner.wrong_guesses <= len(guesses)

    return {
        "word": words.text(word),
        "length": word.length,
        "wrong_guesses": executioner.wrong_guesses,
        "guesses": guesses,
    }


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    if mode == "bar" and not _HAS_TQDM:
        return "plain"
    return mode


def run_sweep(
        strategy: BaseStrategy,
        words: WordStore,
        rng: random.Random,
        *,
        executioner_cls: Type[BaseExecutioner] = HonestExecutioner,
        progress: str = "off",
) -> SweepResult:
    """
    Run `strategy` once against every stored word (ascending by length, then
    insertion order) and collect (wrong_guesses, word) scores in that order.

    progress: "off" | "plain" | "bar" | "auto" (bar if tqdm and a TTY)
    """
    result = SweepResult(strategy_id=strategy.id)
    total = len(words)
    mode = _progress_mode(progress)
    iterator = words.iter()
    if mode == "bar":
        iterator = tqdm(iterator, total=total, ncols=80, desc=strategy.id, unit="word")

    start = time.perf_counter()
    last_print = 0.0
    for idx, handle in enumerate(iterator, 1):
        r = run_trial(strategy, handle, words, rng, executioner_cls=executioner_cls)
        result.scores.append((r["wrong_guesses"], r["word"]))
        result.total_wrong_guesses += r["wrong_guesses"]
        result.num_words += 1

        if mode == "plain":
            now = time.perf_counter()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{strategy.id}] {idx}/{total} {pct:5.1f}% "
                    f"| elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain" and total:
        sys.stderr.write("\n")
        sys.stderr.flush()

    result.elapsed_s = time.perf_counter() - start
    return result
