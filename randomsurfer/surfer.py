"""Random surfers wandering over a random link matrix until the ranking settles."""

from __future__ import annotations

import random

from randomsurfer.matrix import LinkMatrix


class Surfer(LinkMatrix):
    """A set of pages that visitors surf at random."""

    def __init__(self, pages: int, rng: random.Random | None = None) -> None:
        super().__init__(pages, pages, rng)

    def _jump(self, current: int) -> int:
        page = self._rng.randrange(self.rows)
        while page == current:
            page = self._rng.randrange(self.rows)
        return page

    def surf(self, visitors: int, damping_factor: float) -> str:
        """Let the visitors surf until the top grade converges; return the log."""
        if self.rows < 2:
            raise ValueError("at least two pages are needed to surf")
        if visitors < 1:
            raise ValueError("at least one visitor is needed to surf")
        self.reset_visits()
        log: list[str] = []
        positions = [self._rng.randrange(self.rows) for _ in range(visitors)]
        for number, page in enumerate(positions, 1):
            log.append(f"O episkepths {number} topothetithike sthn istoselida {page}\n")
            self.visits[page] += 1
        log.append("\n")

        while not self.difference():
            moved = []
            for number, current in enumerate(positions, 1):
                if self._rng.random() <= damping_factor:
                    nbs = self.neighbors(current)
                    if nbs:
                        following = nbs[self._rng.randrange(self.rows) % len(nbs)]
                    else:
                        log.append("Dead End!! ")
                        following = self._jump(current)
                else:
                    following = self._jump(current)
                self.visits[following] += 1
                log.append(
                    f"O episkepths {number} tha metakinithei apo thn istoselida "
                    f"{current} sthn istoselida {following}\n"
                )
                moved.append(following)
            positions = moved
            log.append("\n")
            self.find_ranking()
        return "".join(log)

    def top(self) -> float:
        """Return the highest grade, or -1.0 when nothing has been ranked yet."""
        if not self.rank:
            return -1.0
        return self.rank[0].grade