from __future__ import annotations


def prefix_length(a: str, b: str) -> int:
    """Number of leading characters ``a`` and ``b`` have in common.

    e.g. ``grant`` and ``grace`` share ``gra`` -> 3.
    """
    n = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            break
        n += 1
    return n


def suffix_length(a: str, b: str) -> int:
    return prefix_length(a[::-1], b[::-1])


def shared_characters(a: str, b: str) -> int:
    """Positions where both strings hold the same character (overlap only)."""
    return sum(1 for ca, cb in zip(a, b) if ca == cb)
