from __future__ import annotations

from typing import Sequence


ROW_WIDTH = 13

# US QWERTY, unshifted. Short rows are implicitly padded to ROW_WIDTH.
QWERTY_ROWS: tuple[str, ...] = (
    "`1234567890-=",
    "qwertyuiop[]\\",
    "asdfghjkl;'",
    "zxcvbnm,./",
)


class KeyboardLayout:
    """Physical key positions for a fixed grid layout.

    Key positions are fixed at construction and read-only afterwards.
    """

    def __init__(self, rows: Sequence[str] = QWERTY_ROWS, row_width: int = ROW_WIDTH):
        if any(len(r) > row_width for r in rows):
            raise ValueError(f"Keyboard rows must be at most {row_width} keys wide")
        self.row_width = row_width
        positions: dict[str, int] = {}
        for r, keys in enumerate(rows):
            for c, key in enumerate(keys):
                positions.setdefault(key, r * row_width + c)
        self._positions = positions

    def position(self, ch: str) -> tuple[int, int]:
        """(row, column) of ``ch``; keys missing from the layout sit at (0, 0)."""
        flat = self._positions.get(ch.lower(), 0)
        return divmod(flat, self.row_width)

    def proximity(self, a: str, b: str) -> int:
        """Chebyshev distance between two keys, +1 when their case differs."""
        if a == b:
            return 0
        ra, ca = self.position(a)
        rb, cb = self.position(b)
        dist = max(abs(ra - rb), abs(ca - cb))
        if a.isupper() != b.isupper():
            dist += 1
        return dist


QWERTY = KeyboardLayout()


def proximity(a: str, b: str) -> int:
    return QWERTY.proximity(a, b)
