"""Random link matrix between web pages and the visit-based page ranking."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

CONVERGENCE_THRESHOLD = 0.0001


@dataclass
class PageRank:
    """A page number together with its share of all visits."""

    page: int
    grade: float


class LinkMatrix:
    """Square-ish adjacency matrix of random links, with visit counters per page."""

    def __init__(self, rows: int, columns: int, rng: random.Random | None = None) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.columns = columns
        self._rng = rng if rng is not None else random.Random()
        self.links: list[list[int]] = [
            [0 if i == j else self._rng.randint(0, 1) for j in range(columns)]
            for i in range(rows)
        ]
        self.visits: list[int] = [0] * rows
        self.previous_rank = 0.0
        self.rank: list[PageRank] = []

    def reset_visits(self) -> None:
        """Clear the visit counters of every page."""
        self.visits = [0] * self.rows

    def neighbors(self, page: int) -> list[int]:
        """Return the pages that ``page`` links to."""
        return [target for target, link in enumerate(self.links[page]) if link]

    def find_ranking(self) -> str:
        """Rank the pages by their share of visits and describe the ranking."""
        self.previous_rank = self.rank[0].grade if self.rank else 0.0
        total = sum(self.visits)
        grades = [
            PageRank(page, count / total if total else math.nan)
            for page, count in enumerate(self.visits)
        ]
        self.rank = sorted(grades, key=lambda entry: entry.grade, reverse=True)
        return "".join(
            f"Sthn thesh  {position} vrisketai h selida {entry.page} "
            f"me vathmo {entry.grade:.6f}\n"
            for position, entry in enumerate(self.rank, 1)
        )

    def difference(self) -> bool:
        """Tell whether the top grade has settled since the previous ranking."""
        if not self.rank:
            return False
        return abs(self.rank[0].grade - self.previous_rank) <= CONVERGENCE_THRESHOLD