from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

import numpy as np

from .exceptions import EmptyTableError, ProbabilitiesNotCalculatedError


@dataclass(frozen=True)
class CharCount:
    char: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p:.4g} {self.cp:.4g})"


class FrequencyTable:
    """Next-character counts observed after one window.

    Entries keep the order in which characters were first seen. That order is
    also the enumeration order of the cumulative distribution, so sampling and
    probability calculation must never reorder them.
    """

    def __init__(self) -> None:
        self._entries: list[CharCount] = []
        self._index: dict[str, int] = {}
        self._cps: np.ndarray | None = None

    def update(self, c: str) -> None:
        self._cps = None
        i = self._index.get(c)
        if i is None:
            self._index[c] = len(self._entries)
            self._entries.append(CharCount(c))
        else:
            entry = self._entries[i]
            self._entries[i] = replace(entry, count=entry.count + 1)

    def calculate_probabilities(self) -> None:
        """Set ``p`` and ``cp`` on every entry from the current counts."""

        if not self._entries:
            raise EmptyTableError("cannot calculate probabilities of an empty table")

        counts = np.fromiter((e.count for e in self._entries), dtype=np.float64, count=len(self._entries))
        p = counts / counts.sum()
        cp = np.cumsum(p)

        self._entries = [
            replace(entry, p=float(pi), cp=float(cpi))
            for entry, pi, cpi in zip(self._entries, p, cp)
        ]
        self._cps = cp

    def sample_char(self, r: float) -> str:
        """Return the first character whose cumulative probability is >= r."""

        if self._cps is None:
            raise ProbabilitiesNotCalculatedError("calculate_probabilities() has not been called")

        i = int(np.searchsorted(self._cps, r, side="left"))
        # Rounding can leave the last cp a hair under 1.0.
        i = min(i, len(self._entries) - 1)
        return self._entries[i].char

    def copy(self) -> FrequencyTable:
        """Return an independent table with the same entries and distribution."""

        other = FrequencyTable()
        other._entries = list(self._entries)
        other._index = dict(self._index)
        other._cps = None if self._cps is None else self._cps.copy()
        return other

    @property
    def total(self) -> int:
        return sum(e.count for e in self._entries)

    @property
    def entries(self) -> tuple[CharCount, ...]:
        return tuple(self._entries)

    def count(self, c: str) -> int:
        i = self._index.get(c)
        return 0 if i is None else self._entries[i].count

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharCount]:
        return iter(self._entries)

    def __contains__(self, c: object) -> bool:
        return c in self._index

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in self._entries) + ")"

    def __repr__(self) -> str:
        return f"FrequencyTable({self._entries!r})"
