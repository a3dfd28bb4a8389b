from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


# Operation codes stored in the backtrace matrix. Candidates at a cell are
# tried in this order and only a strictly smaller cost displaces an earlier one.
OP_MATCH = 0
OP_SUBSTITUTE = 1
OP_INSERT = 2
OP_DELETE = 3
OP_TRANSPOSE = 4


@dataclass(frozen=True)
class EditOperations:
    """Edit distance plus one optimal decomposition into operation counts."""

    total: int = 0
    substitutions: int = 0
    insert_deletes: int = 0
    transpositions: int = 0


def levenshtein(a: list[str] | str, b: list[str] | str) -> int:
    """Pure-Python Levenshtein distance.

    Supports either strings or token lists.
    """
    if a == b:
        return 0
    a_seq = list(a) if isinstance(a, str) else a
    b_seq = list(b) if isinstance(b, str) else b
    if not a_seq:
        return len(b_seq)
    if not b_seq:
        return len(a_seq)

    # DP with O(min(n,m)) space
    if len(a_seq) < len(b_seq):
        a_seq, b_seq = b_seq, a_seq
    prev = list(range(len(b_seq) + 1))
    for i, ca in enumerate(a_seq, start=1):
        cur = [i]
        for j, cb in enumerate(b_seq, start=1):
            ins = cur[j - 1] + 1
            dele = prev[j] + 1
            sub = prev[j - 1] + (0 if ca == cb else 1)
            cur.append(min(ins, dele, sub))
        prev = cur
    return prev[-1]


def levenshtein_operations(a: str, b: str) -> EditOperations:
    """Damerau-Levenshtein (optimal string alignment) distance from ``a`` to ``b``.

    Adjacent transpositions cost 1 like any other edit. The full cost matrix
    is kept together with the operation that produced each cell so the path
    from (len(a), len(b)) back to (0, 0) can be tallied. Ties at a cell are
    broken substitution > insertion > deletion > transposition.
    """
    if a == b:
        return EditOperations()

    rows = len(a) + 1
    cols = len(b) + 1
    dp = np.zeros((rows, cols), dtype=np.int64)
    ops = np.zeros((rows, cols), dtype=np.int8)
    dp[:, 0] = np.arange(rows)
    dp[0, :] = np.arange(cols)
    ops[1:, 0] = OP_DELETE
    ops[0, 1:] = OP_INSERT

    for i in range(1, rows):
        ca = a[i - 1]
        for j in range(1, cols):
            cb = b[j - 1]
            if ca == cb:
                best, op = int(dp[i - 1, j - 1]), OP_MATCH
            else:
                best, op = int(dp[i - 1, j - 1]) + 1, OP_SUBSTITUTE

            ins = int(dp[i, j - 1]) + 1
            if ins < best:
                best, op = ins, OP_INSERT

            dele = int(dp[i - 1, j]) + 1
            if dele < best:
                best, op = dele, OP_DELETE

            if i > 1 and j > 1 and ca == b[j - 2] and a[i - 2] == cb:
                trans = int(dp[i - 2, j - 2]) + 1
                if trans < best:
                    best, op = trans, OP_TRANSPOSE

            dp[i, j] = best
            ops[i, j] = op

    substitutions = insert_deletes = transpositions = 0
    i, j = rows - 1, cols - 1
    while i > 0 or j > 0:
        op = ops[i, j]
        if op == OP_MATCH:
            i, j = i - 1, j - 1
        elif op == OP_SUBSTITUTE:
            substitutions += 1
            i, j = i - 1, j - 1
        elif op == OP_INSERT:
            insert_deletes += 1
            j -= 1
        elif op == OP_DELETE:
            insert_deletes += 1
            i -= 1
        else:
            transpositions += 1
            i, j = i - 2, j - 2

    return EditOperations(
        total=int(dp[rows - 1, cols - 1]),
        substitutions=substitutions,
        insert_deletes=insert_deletes,
        transpositions=transpositions,
    )


def osa_first_row(target: str) -> list[int]:
    return list(range(len(target) + 1))


def osa_next_row(
    prev: Sequence[int],
    prev_prev: Sequence[int] | None,
    ch: str,
    prev_ch: str | None,
    target: str,
) -> list[int]:
    """Extend an optimal-string-alignment matrix by one source character.

    ``prev``/``prev_prev`` are the rows for the source prefix without ``ch``
    and without ``prev_ch + ch``. Used for incremental distance while walking
    a prefix tree; the last cell equals ``levenshtein_operations(...).total``.
    """
    row = [prev[0] + 1]
    for j in range(1, len(target) + 1):
        tc = target[j - 1]
        value = min(
            row[j - 1] + 1,
            prev[j] + 1,
            prev[j - 1] + (0 if ch == tc else 1),
        )
        if (
            prev_prev is not None
            and j > 1
            and ch == target[j - 2]
            and prev_ch == tc
        ):
            value = min(value, prev_prev[j - 2] + 1)
        row.append(value)
    return row
