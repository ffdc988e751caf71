"""Compare two position listings and report the largest positional difference."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

_LINE_BUFFER = 80
_FIELD_COLUMNS = (22, 39, 56)
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Comparison:
    """Result of comparing two listings."""

    n_lines: int = 0
    n_valid: int = 0
    max_difference: float = 0.0
    worst_line: int = -1


def _leading_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def is_position_line(line: str) -> bool:
    """True if a line holds an x/y/z position at the fixed columns."""
    return (
        len(line) > 73
        and ord(line[73]) < 32
        and line[29] == "."
        and line[46] == "."
        and line[63] == "."
    )


def compare_outputs(lines1: Iterable[str], lines2: Iterable[str]) -> Comparison:
    """Compare paired lines and find the position line with the largest difference."""
    n_lines = n_valid = 0
    worst_line = -1
    max_diff2 = 0.0
    for line1, line2 in zip(lines1, lines2):
        n_lines += 1
        if is_position_line(line1) and is_position_line(line2):
            n_valid += 1
            diff2 = sum(
                (_leading_float(line1[col:]) - _leading_float(line2[col:])) ** 2
                for col in _FIELD_COLUMNS
            )
            if diff2 > max_diff2:
                max_diff2 = diff2
                worst_line = n_lines
    return Comparison(n_lines, n_valid, math.sqrt(max_diff2), worst_line)


def _read_chunks(path: str) -> list[str]:
    """Read a file as fixed-buffer line pieces, as a line reader with an 80-byte buffer would."""
    limit = _LINE_BUFFER - 1
    chunks = []
    with open(path, "rb") as handle:
        for raw in handle:
            line = raw.decode("latin-1")
            chunks.extend(line[i:i + limit] for i in range(0, len(line), limit))
    return chunks


def _iter_loaded(paths: list[str]) -> Iterator[list[str] | None]:
    for path in paths:
        try:
            yield _read_chunks(path)
        except OSError:
            print(f"{path} not opened")
            yield None


def main(argv: list[str] | None = None) -> int:
    """Compare two listing files named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    loaded = list(_iter_loaded(args[:2]))
    if len(loaded) < 2 or any(lines is None for lines in loaded):
        print("out_comp needs two files of output from test_sat to compare.")
        return 1
    result = compare_outputs(loaded[0], loaded[1])
    print(f"{result.n_lines} lines read in; {result.n_valid} had positions")
    print(f"Max difference: {result.max_difference:.8f} km at line {result.worst_line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())