import random

import pytest
from hangbench.engine import BaseExecutioner, HonestExecutioner, WordStore
from hangbench.strategies import (
    LETTER_ORDER, FrequencyTableStrategy, create_strategy, get_strategy_ids, letter_order,
)
from hangbench.strategies.letters import presence_counts, presence_matrix

WORDS = ["a", "at", "cat", "car", "bat", "dog", "tiger", "banana", "letter", "queue",
         "jazz", "fizz", "puzzle", "rhythm", "zebra", "xylophone", "mississippi"]


class RecordingExecutioner(HonestExecutioner):
    """Honest executioner that also remembers how many positions each guess revealed."""
    id = "recording"

    def __init__(self, word, words):
        super().__init__(word, words)
        self.revealed = []

    def guess(self, words, letter, positions):
        super().guess(words, letter, positions)
        self.revealed.append(len(positions))
        return positions


def test_registered_ids():
    assert get_strategy_ids() == ["random", "frequency", "adaptive"]
    with pytest.raises(ValueError):
        create_strategy("oracle")


@pytest.mark.parametrize("sid", ["random", "frequency", "adaptive"])
def test_reveals_exactly_word_len(sid):
    ws = WordStore(WORDS)
    strategy = create_strategy(sid)
    rng = random.Random(7)
    for h in ws:
        ex = RecordingExecutioner(h, ws)
        strategy.play(ex, ws, rng)
        assert sum(ex.revealed) == h.length
        assert len(strategy.guesses) == len(set(strategy.guesses)) <= 26
        assert all("a" <= c <= "z" for c in strategy.guesses)
        assert ex.wrong_guesses == ex.revealed.count(0)


def test_frequency_order_ignores_seed():
    ws = WordStore(WORDS)
    s1, s2 = FrequencyTableStrategy(), FrequencyTableStrategy()
    for h in ws:
        e1, e2 = HonestExecutioner(h, ws), HonestExecutioner(h, ws)
        s1.play(e1, ws, random.Random(1))
        s2.play(e2, ws, random.Random(999))
        assert s1.guesses == s2.guesses
        assert e1.wrong_guesses == e2.wrong_guesses
        assert "".join(s1.guesses) == LETTER_ORDER[:len(s1.guesses)]


def test_frequency_custom_order():
    ws = WordStore()
    h = ws.insert("cab")
    s = FrequencyTableStrategy(order="abcdefghijklmnopqrstuvwxyz")
    ex = HonestExecutioner(h, ws)
    s.play(ex, ws, random.Random(0))
    assert s.guesses == ["a", "b", "c"]
    assert ex.wrong_guesses == 0
    with pytest.raises(ValueError):
        FrequencyTableStrategy(order="abc")


def test_letter_order_from_dictionary():
    ws = WordStore(["aaa", "ab", "bc", "b"])
    order = letter_order(ws)
    # b in 3 words, a in 2, c in 1, rest alphabetical
    assert order[:4] == "bacd"
    assert sorted(order) == list("abcdefghijklmnopqrstuvwxyz")


def test_random_strategy_is_seeded():
    ws = WordStore(WORDS)
    h = next(iter(ws))
    s = create_strategy("random")
    runs = []
    for _ in range(2):
        s.play(HonestExecutioner(h, ws), ws, random.Random(42))
        runs.append(list(s.guesses))
    assert runs[0] == runs[1]


def test_random_strategy_does_worst_on_average():
    ws = WordStore(WORDS)
    rng = random.Random(2024)
    totals = {}
    for sid in ("random", "frequency", "adaptive"):
        s = create_strategy(sid)
        total = 0
        for _ in range(20):
            for h in ws:
                ex = HonestExecutioner(h, ws)
                s.play(ex, ws, rng)
                total += ex.wrong_guesses
        totals[sid] = total
    assert totals["random"] > totals["frequency"]
    assert totals["random"] > totals["adaptive"]


def test_base_executioner_is_abstract():
    ws = WordStore()
    ex = BaseExecutioner(ws.insert("cat"), ws)
    with pytest.raises(NotImplementedError):
        ex.guess(ws, "c", [])


class SilentExecutioner(HonestExecutioner):
    """Never reveals anything, even for letters that are in the word."""
    id = "silent"

    def guess(self, words, letter, positions):
        super().guess(words, letter, positions)
        positions.clear()
        return positions


class OverReportingExecutioner(HonestExecutioner):
    """Claims every position twice, whatever the letter."""
    id = "over_reporting"

    def guess(self, words, letter, positions):
        super().guess(words, letter, positions)
        positions[:] = list(range(self.word_len)) * 2
        return positions


@pytest.mark.parametrize("sid", ["random", "frequency", "adaptive"])
@pytest.mark.parametrize("executioner_cls", [SilentExecutioner, OverReportingExecutioner])
def test_broken_feedback_is_fatal(sid, executioner_cls):
    ws = WordStore(["cat", "car", "bat"])
    h = next(iter(ws))
    strategy = create_strategy(sid)
    with pytest.raises(AssertionError):
        strategy.play(executioner_cls(h, ws), ws, random.Random(0))


def test_presence_matrix_counts_letters_once_per_word():
    ws = WordStore(["noon", "moon", "mood"])
    present = presence_matrix(ws.matrix(4))
    assert present.shape == (3, 26)
    assert present[0].nonzero()[0].tolist() == [ord("n") - 97, ord("o") - 97]
    counts = presence_counts(ws.matrix(4))
    assert counts[ord("o") - 97] == 3
    assert counts[ord("m") - 97] == 2
    assert counts[ord("n") - 97] == 2
    assert counts.sum() == 2 + 3 + 3
