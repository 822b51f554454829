import random

import pytest
from hangbench.engine import HonestExecutioner, WordStore, get_executioner


def test_guess_reports_positions():
    ws = WordStore(["banana"])
    ex = HonestExecutioner(ws.insert("letter"), ws)
    out = [99]
    assert ex.guess(ws, "t", out) == [2, 3]
    assert out == [2, 3]
    assert ex.guess(ws, "e", out) == [1, 4]
    assert ex.wrong_guesses == 0
    assert ex.word_len == 6


def test_miss_counts_once_and_repeats_recount():
    ws = WordStore()
    ex = HonestExecutioner(ws.insert("cat"), ws)
    out = []
    ex.guess(ws, "z", out)
    assert out == [] and ex.wrong_guesses == 1
    ex.guess(ws, "z", out)
    assert ex.wrong_guesses == 2
    ex.guess(ws, "a", out)
    ex.guess(ws, "a", out)
    assert out == [1] and ex.wrong_guesses == 2


@pytest.mark.parametrize("bad", ["A", "ab", "", "1", "é"])
def test_guess_rejects_non_letters(bad):
    ws = WordStore()
    ex = HonestExecutioner(ws.insert("cat"), ws)
    with pytest.raises(ValueError):
        ex.guess(ws, bad, [])
    assert ex.wrong_guesses == 0


def test_choose_draws_from_store():
    ws = WordStore(["cat", "dog", "tiger"])
    ex = HonestExecutioner.choose(ws, random.Random(3))
    assert ws.text(ex.word) in {"cat", "dog", "tiger"}
    assert ex.wrong_guesses == 0


def test_registry_lookup():
    assert get_executioner("honest") is HonestExecutioner
    with pytest.raises(ValueError):
        get_executioner("liar")
