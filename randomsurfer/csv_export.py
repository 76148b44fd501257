"""Export top page grades over a grid of page counts and damping factors as CSV."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from randomsurfer.surfer import Surfer


def damping_factors(first: float, last: float, step: float) -> Iterator[float]:
    """Yield damping factors from ``first`` up to ``last`` by repeated addition of ``step``."""
    if step <= 0:
        raise ValueError("damping factor step must be positive")
    value = first
    while value <= last:
        yield value
        value = value + step


def export_grid(
    stream: TextIO,
    visitors: int,
    first_page: int = 10,
    last_page: int = 1000,
    page_step: int = 5,
    first_damping_factor: float = 0.50,
    last_damping_factor: float = 0.99,
    damping_factor_step: float = 0.01,
    rng: random.Random | None = None,
) -> None:
    """Write one row per page count and one column per damping factor to ``stream``."""
    if page_step <= 0:
        raise ValueError("page step must be positive")
    rng = rng if rng is not None else random.Random()
    factors = list(damping_factors(first_damping_factor, last_damping_factor, damping_factor_step))
    stream.write("".join(f";DMP_{dp:g}" for dp in factors) + "\n")
    for pages in range(first_page, last_page + 1, page_step):
        cells = [str(pages)]
        for dp in factors:
            surfer = Surfer(pages, rng)
            surfer.surf(visitors, dp)
            cells.append(f"{surfer.top():f}".replace(".", ","))
        stream.write(";".join(cells) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Ask for the visitors and file name, then write the CSV grid."""
    parser = argparse.ArgumentParser(description="Export top page grades as CSV.")
    parser.add_argument("visitors", nargs="?", type=int)
    parser.add_argument("name", nargs="?")
    parser.add_argument("--directory", default="Exel_files")
    parser.add_argument("--first-page", type=int, default=10)
    parser.add_argument("--last-page", type=int, default=1000)
    parser.add_argument("--page-step", type=int, default=5)
    parser.add_argument("--first-damping-factor", type=float, default=0.50)
    parser.add_argument("--last-damping-factor", type=float, default=0.99)
    parser.add_argument("--damping-factor-step", type=float, default=0.01)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    visitors = args.visitors
    if visitors is None:
        visitors = int(input("Dwse ton arithmo twn episkeptwn: "))
    name = args.name
    if name is None:
        print()
        name = input("Dwse onoma arxeiou: ")
    path = Path(args.directory) / f"{name}.csv"

    with path.open("w", encoding="utf-8") as stream:
        export_grid(
            stream,
            visitors,
            args.first_page,
            args.last_page,
            args.page_step,
            args.first_damping_factor,
            args.last_damping_factor,
            args.damping_factor_step,
            random.Random(args.seed),
        )
    print(f"\nAt current folder at:{time.strftime('%H:%M:%S')} file:{path} created!!!!!")
    return 0