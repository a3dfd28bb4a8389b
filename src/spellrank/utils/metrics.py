from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


def reciprocal_rank(ranked: Sequence[str | None], expected: str) -> float:
    """1/rank of ``expected`` in ``ranked`` (1-based), 0.0 when absent."""
    for i, word in enumerate(ranked, start=1):
        if word == expected:
            return 1.0 / i
    return 0.0


@dataclass(frozen=True)
class RunningAverage:
    total: float = 0.0
    n: int = 0

    def add(self, x: float) -> "RunningAverage":
        return RunningAverage(total=self.total + float(x), n=self.n + 1)

    @property
    def mean(self) -> float:
        return self.total / self.n if self.n else 0.0
