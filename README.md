# randomsurfer

This package estimates page ranks by simulating visitors who surf a randomly
generated web.

Pages are linked at random. Each page links to each other page with
probability one half, and never to itself. Visitors start on random pages and
then move one step at a time:

- With probability equal to the damping factor, a visitor follows one of the
  current page's links.
- Otherwise, a visitor jumps to a random page other than the current one.
- When the current page has no links (a dead end), the visitor also jumps.

After every step, each page's grade is its share of all visits. The simulation
stops when the top grade changes by no more than 0.0001 from one step to the
next.

## Installation

```
pip install .
```

The package needs only the Python standard library. The window uses tkinter.

## Using it from Python

```python
import random

from randomsurfer.surfer import Surfer

surfer = Surfer(10, random.Random(42))
log = surfer.surf(3, 0.85)    # text log of every placement and move
print(log)
print(surfer.top())           # highest grade, or -1.0 before any ranking
print(surfer.find_ranking())  # pages listed from the highest grade down
```

`Surfer.surf(visitors, damping_factor)` raises `ValueError` in two cases:

- the surfer has fewer than two pages;
- fewer than one visitor is given.

Pass a `random.Random` instance to make runs reproducible.

`Surfer` extends `randomsurfer.matrix.LinkMatrix`, which holds the random link
graph. Its public attributes are:

- `links`: the 0/1 adjacency rows.
- `visits`: the visit counts.
- `rank`: a list of `PageRank(page, grade)` entries, sorted from the highest
  grade down.

Its methods are:

- `neighbors(page)`
- `reset_visits()`
- `find_ranking()`, which re-ranks the pages and returns the ranking as text.
- `difference()`, which tells whether the top grade has settled.

To sweep many graph sizes and damping factors, use
`randomsurfer.csv_export.export_grid(stream, visitors, ...)`. It writes the top
grade of each run to an open text stream. Each row is one page count and each
column is one damping factor. Cells are separated by semicolons and use
decimal commas.

`randomsurfer.csv_export.damping_factors(first, last, step)` yields the damping
factors of one row of that sweep.

`randomsurfer.gui.SurferController` runs a surf from the text values of a form.
It raises these errors:

- `ValueError("Fill all the blanks")` when a field is empty.
- `RuntimeError` when asked for a ranking before any surf.

## Commands

```
randomsurfer-export [VISITORS] [NAME]
```

This command asks for the number of visitors and the file name when they are
not given. It then writes `NAME.csv` into the folder given by `--directory`
(default `Exel_files`). That folder must already exist.

By default, it runs one simulation for every combination of:

- page counts from 10 to 1000, in steps of 5;
- damping factors from 0.50 to 0.99, in steps of 0.01.

These options change the sweep:

- `--first-page`
- `--last-page`
- `--page-step`
- `--first-damping-factor`
- `--last-damping-factor`
- `--damping-factor-step`
- `--seed`, which fixes the random generator.

```
randomsurfer-gui
```

This command opens a small window with fields for pages, damping factor and
visitors. Their default values are 10, 0.85 and 3.

- **SURFING** runs a simulation and shows its log.
- **RANKING** shows the ranking of the last run in a message box.

## Tests

```
pip install .[test]
pytest
```