import difflib
from typing import Tuple


def diff_line_stats(before: str, after: str) -> Tuple[int, int]:
    """
    Count (additions, deletions) between two texts, line by line.

    A modified line counts as one deletion plus one addition, which matches
    the summary numbers diff viewers show.
    """
    a = before.splitlines()
    b = after.splitlines()
    additions = deletions = 0
    for tag, i1, i2, j1, j2 in difflib.SequenceMatcher(None, a, b, autojunk=False).get_opcodes():
        if tag in ("replace", "delete"):
            deletions += i2 - i1
        if tag in ("replace", "insert"):
            additions += j2 - j1
    return additions, deletions
