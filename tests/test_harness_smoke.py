import random
from pathlib import Path

from hangbench.engine import WordStore
from hangbench.harness import run_sweep, run_trial, sorted_scores, summarize, write_report
from hangbench.strategies import create_strategy

WORDS = ["cat", "car", "bat", "a", "tiger", "zebra"]


def test_run_trial_smoke():
    ws = WordStore(WORDS)
    h = next(h for h in ws if ws.text(h) == "cat")
    r = run_trial(create_strategy("adaptive"), h, ws, random.Random(42))
    assert r["word"] == "cat" and r["length"] == 3
    assert r["wrong_guesses"] == 0
    assert set("cat") <= set(r["guesses"])


def test_run_sweep_scores_every_word():
    ws = WordStore(WORDS)
    res = run_sweep(create_strategy("frequency"), ws, random.Random(1))
    assert res.strategy_id == "frequency"
    assert [w for _, w in res.scores] == ["a", "cat", "car", "bat", "tiger", "zebra"]
    assert res.num_words == len(WORDS)
    assert res.total_wrong_guesses == sum(s for s, _ in res.scores)
    assert res.average == res.total_wrong_guesses / len(WORDS)
    assert res.elapsed_s >= 0.0


def test_run_sweep_empty_store():
    res = run_sweep(create_strategy("random"), WordStore(), random.Random(1), progress="plain")
    assert res.num_words == 0 and res.average == 0.0


def test_sorted_scores_is_stable_descending():
    scores = [(1, "a"), (3, "b"), (1, "c"), (3, "d"), (0, "e")]
    assert sorted_scores(scores) == [(3, "b"), (3, "d"), (1, "a"), (1, "c"), (0, "e")]


def test_write_report(tmp_path: Path):
    ws = WordStore(WORDS)
    res = run_sweep(create_strategy("random"), ws, random.Random(5))
    path = write_report(res, tmp_path / "out")
    assert Path(path).name == "random.txt"
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    assert len(lines) == len(WORDS)
    counts = [int(ln.split(" ")[0]) for ln in lines]
    assert counts == sorted(counts, reverse=True)
    assert {ln.split(" ")[1] for ln in lines} == set(WORDS)
    assert summarize(res)["num_words"] == len(WORDS)
