"""
Turn a raw dictionary into a word list WordStore can load.

Features:
- Drops lines that are not 1..29 lowercase letters a-z (proper nouns,
  possessives like "cat's", accented words).
- Optional --lowercase: fold case first instead of dropping capitalised words.
- Removes duplicates, preserving original order by default (stable dedupe).
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.clean_wordlist --in /usr/share/dict/words --out data/words.txt
"""

import argparse
from pathlib import Path

from hangbench.datasets import read_lines, write_lines
from hangbench.engine import is_valid_word


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean(lines: list[str], lowercase: bool = False) -> list[str]:
    words = (ln.strip() for ln in lines)
    if lowercase:
        words = (w.lower() for w in words)
    return unique_preserve_order([w for w in words if is_valid_word(w)])


def main():
    ap = argparse.ArgumentParser(description="Normalise a dictionary for hangbench.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--lowercase", action="store_true", help="fold 'Paris' to 'paris' instead of dropping it")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean(lines, lowercase=args.lowercase)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
