from __future__ import annotations
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Union

from hangbench.engine import InvalidWordError, WordStore


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def iter_words(stream: IO[str]) -> Iterator[tuple[int, str]]:
    """Yield (line_number, word) for every non-blank line of an open text stream."""
    for lineno, raw in enumerate(stream, start=1):
        w = raw.strip()
        if w:
            yield lineno, w


def load_wordstore(source: Union[Path, str, IO[str]]) -> WordStore:
    """
    Build a WordStore from a dictionary: a path, or an already-open text
    stream such as sys.stdin. One word per line; blank lines are skipped.

    Raises InvalidWordError (with the line number) on the first word the
    store cannot hold. Undecodable bytes become U+FFFD, so they fail the same
    way instead of escaping as UnicodeDecodeError.
    """
    if isinstance(source, (str, Path)):
        with Path(source).open("r", encoding="utf-8", errors="replace") as f:
            return load_wordstore(f)
    if hasattr(source, "reconfigure"):
        source.reconfigure(errors="replace")

    words = WordStore()
    for lineno, w in iter_words(source):
        try:
            words.insert(w)
        except InvalidWordError as e:
            raise InvalidWordError(f"line {lineno}: {e}") from e
    return words
