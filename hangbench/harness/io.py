"""
I/O utilities for strategy sweeps.

Responsibilities:
- sorted_scores:  order scores hardest-word-first (stable for ties).
- write_report:   `<strategy_id>.txt` with one "<wrong_guesses> <word>" line per word.
- write_manifest: dump a JSON manifest with config, dictionary report and averages.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Tuple
import json
import subprocess
import datetime as dt

from .core import SweepResult


def sorted_scores(scores: Iterable[Tuple[int, str]]) -> List[Tuple[int, str]]:
    """
    Sort (wrong_guesses, word) pairs by descending wrong guesses. Words with
    equal scores keep their original (store) order.
    """
    return sorted(scores, key=lambda s: s[0], reverse=True)


def write_report(result: SweepResult, outdir: str | Path = ".") -> str:
    """
    Write the per-word report for one sweep to `<outdir>/<strategy_id>.txt`.

    Returns:
      The path written (string).
    """
    p = Path(outdir) / f"{result.strategy_id}.txt"
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        for wrong, word in sorted_scores(result.scores):
            f.write(f"{wrong} {word}\n")
    return str(p)


def summarize(result: SweepResult) -> Dict:
    """Totals of one sweep as a JSON-friendly dict (no per-word scores)."""
    return {
        "strategy_id": result.strategy_id,
        "num_words": result.num_words,
        "total_wrong_guesses": result.total_wrong_guesses,
        "average_wrong_guesses": result.average,
        "elapsed_s": round(result.elapsed_s, 3),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and sweep summaries.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dict, strategies, seed, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - strategies: list of summarize(...) dicts
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
