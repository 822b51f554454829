# apps/cli/run.py
"""
CLI entry point for hangbench sweeps.

This script:
  1) Validates the dictionary (prints counts + SHA; aborts on invalid lines).
     Reading from stdin ("--dict -") skips validation; a bad word still aborts
     the load with its line number.
  2) Packs the dictionary into a WordStore.
  3) For every requested strategy, plays every stored word against a fresh
     executioner and writes:
       - <outdir>/<strategy>.txt: "<wrong_guesses> <word>" lines, hardest first
       - optionally a JSON manifest with config, dictionary report and averages

Usage:
    python -m apps.cli.run --dict /usr/share/dict/words
    grep -x '[a-z]*' words.txt | python -m apps.cli.run --dict - --strategies adaptive
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from hangbench.datasets import validate_wordlist, pretty_summary, load_wordstore
from hangbench.engine import EXECUTIONERS, InvalidWordError, get_executioner
from hangbench.harness import run_sweep, write_report, summarize, write_manifest
from hangbench.harness.io import timestamp_id, git_commit_or_unknown
from hangbench.strategies import create_strategy, get_strategy_ids, letter_order


def _parse_args(argv=None):
    registered = get_strategy_ids()
    ap = argparse.ArgumentParser(description="hangbench: score hangman guessing strategies")
    ap.add_argument("--dict", default="-",
                    help="dictionary path, one lowercase word per line ('-' reads stdin)")
    ap.add_argument("--strategies", nargs="+", default=["ALL"],
                    help=f"strategy ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--executioner", default="honest", choices=sorted(EXECUTIONERS),
                    help="executioner variant holding the secret word")
    ap.add_argument("--seed", type=int,
                    help="RNG seed (default: nondeterministic)")
    ap.add_argument("--outdir", default=".", help="directory for <strategy>.txt reports")
    ap.add_argument("--derive-order", action="store_true",
                    help="frequency strategy: derive its letter table from this dictionary")
    ap.add_argument("--manifest", action="store_true",
                    help="also write run_<timestamp>_manifest.json to --outdir")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show sweep progress (auto=bar if tqdm available, else plain text)."
    )
    args = ap.parse_args(argv)

    if len(args.strategies) == 1 and args.strategies[0].lower() == "all":
        args.strategies = registered
    else:
        missing = [s for s in args.strategies if s not in registered]
        if missing:
            ap.error(f"Unknown strategy ids: {missing}. Registered: {registered}")
    return args


def run(argv=None) -> list:
    """
    Parse CLI args, load the dictionary, sweep each strategy and write reports.
    Returns one summary dict per strategy.
    """
    args = _parse_args(argv)

    # 1) Validate and load the dictionary
    report = None
    try:
        if args.dict == "-":
            words = load_wordstore(sys.stdin)
        else:
            report = validate_wordlist(args.dict)
            print(pretty_summary(report))
            if not report["passed"]:
                raise SystemExit("Dictionary validation failed: " + "; ".join(report["issues"]))
            words = load_wordstore(args.dict)
    except InvalidWordError as e:
        raise SystemExit(f"Malformed dictionary: {e}") from e
    print(f"Loaded {len(words)} words.")

    executioner_cls = get_executioner(args.executioner)
    rng = random.Random(args.seed)
    outdir = Path(args.outdir)
    summaries = []

    # 2) Sweep each strategy over the whole store
    for sid in args.strategies:
        kwargs = {}
        if sid == "frequency" and args.derive_order:
            kwargs["order"] = letter_order(words)
        strategy = create_strategy(sid, **kwargs)

        print(f"Strategy '{sid}':")
        result = run_sweep(strategy, words, rng, executioner_cls=executioner_cls,
                           progress=args.progress)
        print(f"  Average # of wrong guesses: {result.average}")
        path = write_report(result, outdir)
        print(f"  Wrote report to file '{path}'.")
        print(f"  Completed in {result.elapsed_s:.3f}s.")
        summaries.append(summarize(result))

    # 3) Optional manifest
    if args.manifest:
        run_id = timestamp_id()
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": report,
            "num_words": len(words),
            "strategies": summaries,
        }
        manifest_path = write_manifest(manifest, str(outdir / f"run_{run_id}_manifest.json"))
        print(f"Wrote: {manifest_path}")

    return summaries


def main(argv=None):
    run(argv)


if __name__ == "__main__":
    main()
