"""
Dictionary validator for hangbench.

What this module does:
- Validate a word list before it is packed into a WordStore.
- Enforce formatting rules (lowercase a–z only, length 1..29, one per line).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Build a per-length histogram so a run's manifest records what was played.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from hangbench.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from hangbench.engine import MAX_WORD_LEN, is_valid_word

# Show at most this many offending lines in `issues`.
MAX_EXAMPLES = 5


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    by_length: Dict[int, int] = field(default_factory=dict)  # valid words per length
    passed: bool = False
    issues: List[str] = field(default_factory=list)  # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], List[Tuple[int, str]]]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - length between 1 and MAX_WORD_LEN - 1
      - blank lines are skipped (not counted as invalid)

    Returns:
      (valid_words, [(line_number, bad_line), ...])
    """
    valid: List[str] = []
    invalid: List[Tuple[int, str]] = []

    with path.open("r", encoding="utf-8", errors="replace") as f:
        for lineno, raw in enumerate(f, start=1):
            w = raw.strip()
            if not w:
                continue
            if is_valid_word(w):
                valid.append(w)
            else:
                invalid.append((lineno, w))

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a dictionary file for use with WordStore.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema) with:
          - counts, SHA-256, per-length histogram
          - `passed` boolean (strict: requires non-empty and no invalid lines;
            duplicates are reported but allowed)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path, False, 0, "", 0, 0,
                             issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    by_length = Counter(len(w) for w in words)

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=len(invalid),
        by_length={n: by_length[n] for n in sorted(by_length)},
    )

    if rep.count == 0:
        rep.issues.append("dictionary contains 0 valid words")
    if invalid:
        examples = ", ".join(f"{n}:{w!r}" for n, w in invalid[:MAX_EXAMPLES])
        rep.issues.append(
            f"{len(invalid)} invalid line(s), need 1..{MAX_WORD_LEN - 1} letters a-z "
            f"(e.g., {examples})")
    if rep.count != rep.unique_count:
        rep.issues.append(f"{rep.count - rep.unique_count} duplicate word(s)")

    rep.passed = rep.count > 0 and not invalid
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=/usr/share/dict/words | count=72398 (uniq=72398, sha=abc123...) | lengths=1..24 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = list(report.get("by_length") or {})
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "-"
    return (
        f"words={report['path']} | count={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | lengths={span} | {status}"
    )
