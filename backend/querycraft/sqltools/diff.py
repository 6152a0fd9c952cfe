"""
SQL Diff

Position-wise line comparison between two SQL texts, used to show an original
query next to its optimized or converted version.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from itertools import zip_longest


class DiffKind(str, Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class DiffLine:
    kind: DiffKind
    original: str
    modified: str


def diff_sql(original: str, modified: str) -> list[DiffLine]:
    """Compare line i of each text; a missing or empty line counts as absent."""
    result = []
    for orig_line, mod_line in zip_longest(original.split("\n"), modified.split("\n"), fillvalue=""):
        if orig_line == mod_line:
            kind = DiffKind.UNCHANGED
        elif not orig_line:
            kind = DiffKind.ADDED
        elif not mod_line:
            kind = DiffKind.REMOVED
        else:
            kind = DiffKind.MODIFIED
        result.append(DiffLine(kind, orig_line, mod_line))
    return result


def summarize(lines: list[DiffLine]) -> dict[str, int]:
    counts = Counter(line.kind.value for line in lines)
    return {kind.value: counts.get(kind.value, 0) for kind in DiffKind}
