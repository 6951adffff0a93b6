# watersort

A small solver for water sort puzzles. The puzzle is a row of tubes of equal
capacity, each holding units of coloured liquid. Units are poured from one
tube into another until the board matches a goal arrangement.

Two search strategies are included:

- **Breadth-first search** (`watersort.bfs.breadth_first_search`). It
  explores boards in order of the number of pours made, so it finds a
  shortest sequence of pours.
- **Greedy best-first search** (`watersort.best_first.best_first_search`).
  It always expands the queued board with the lowest score from
  `watersort.best_first.heuristic`. This search only pours a unit onto an
  empty tube or onto a unit of the same colour.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Installing the package provides the `watersort` command. It solves one of two
built-in puzzles:

- `four` has four tubes.
- `five` has five tubes. Its breadth-first solve only lets a unit land on a
  matching colour or an empty tube.

```
watersort four
watersort five --algorithm best-first
watersort --help
```

`-a` / `--algorithm` picks `bfs` (the default) or `best-first`.

The command prints the following, in this order:

1. The start board.
2. The goal board.
3. Each step of the solution, starting with `Action 0: First State`. Each
   step gives the pour made, such as "Pour color tubes 1 to tubes 2", and the
   board after it.

Boards are drawn with the top of each tube first. When no solution is found,
the command prints `No solution found.` and exits with status 1.

## Library use

### Boards and search nodes (`watersort.puzzle`)

- `Board` is an immutable, hashable board.
  - `Board.from_tubes` builds a board from a list of tubes. Each tube is
    listed bottom to top, with `0` for an empty slot. It raises `ValueError`
    for an empty board, tubes of unequal or zero capacity, or negative
    colours.
  - `Board.tube(index)` returns one tube's contents.
  - `Board.pour(source, target, match_color=False)` returns the board after
    moving the top unit of one tube into the lowest free slot of another. It
    returns `None` when that pour is not allowed. With `match_color=True`, a
    unit may only land on an empty tube or on its own colour.
  - `Board.render(footer=False)` draws the board as text. With
    `footer=True`, it adds a line marking the tube bottoms.
- `SearchNode` records a board, the node it was reached from and the number
  of the pour that led to it. `SearchNode.path()` returns the nodes from the
  start board to that one.
- `action_label(number, tubes)` names a pour by its number.
- `format_solution(node, tubes=None, footer=False)` turns a solved node into
  the printed list of steps.

### Searches (`watersort.bfs` and `watersort.best_first`)

- `watersort.bfs.successors(board, sources=None, match_color=False)` yields
  `(move number, board)` for every allowed pour. When `sources` is given,
  only the first `sources` tubes are poured from.
- `breadth_first_search(start, goal, sources=None, match_color=False)` and
  `best_first_search(start, goal, sources=None)` return the `SearchNode` that
  reaches the goal. They return `None` when the goal cannot be reached, and
  raise `ValueError` when the two boards differ in shape.

### Built-in puzzles (`watersort.cli`)

- `get_puzzle(name)` returns a built-in `Puzzle`: a start board, a goal board
  and the search settings.
- `solve(puzzle, algorithm="bfs")` runs the chosen search on it.

## What it does not do

There is no way to play a puzzle interactively. The command cannot load
puzzles from a file; only the two built-in puzzles can be solved from the
command line. Other boards can be solved through the library functions above.