from collections import Counter

import pytest

from watersort.cli import Puzzle, get_puzzle, main, solve
from watersort.puzzle import format_solution


def _colours(board):
    return Counter(unit for tube in board.tubes for unit in tube)


@pytest.mark.parametrize("name", ["four", "five"])
def test_puzzles_keep_colour_counts(name):
    puzzle = get_puzzle(name)
    assert isinstance(puzzle, Puzzle)
    assert puzzle.name == name
    assert _colours(puzzle.start) == _colours(puzzle.goal)
    assert (len(puzzle.start), puzzle.start.capacity) == (len(puzzle.goal), puzzle.goal.capacity)


def test_five_puzzle_layout():
    puzzle = get_puzzle("five")
    assert puzzle.start.tube(0) == (1, 3, 2, 1)
    assert puzzle.goal.tube(4) == (1, 1, 1, 1)
    assert puzzle.match_color and puzzle.footer


def test_unknown_puzzle():
    with pytest.raises(ValueError):
        get_puzzle("six")


def test_unknown_algorithm():
    with pytest.raises(ValueError):
        solve(get_puzzle("four"), "depth-first")


def test_bfs_finds_shortest_four_solution():
    puzzle = get_puzzle("four")
    node = solve(puzzle, "bfs")
    assert node.board == puzzle.goal
    assert len(node.path()) == 7


def test_best_first_reaches_goal():
    puzzle = get_puzzle("four")
    node = solve(puzzle, "best-first")
    assert node.board == puzzle.goal
    assert node.path()[0].board == puzzle.start


def test_main_prints_states_and_solution(capsys):
    assert main(["four"]) == 0
    out = capsys.readouterr().out
    puzzle = get_puzzle("four")
    header = "Start state:\n" + puzzle.start.render() + "Goal state:\n" + puzzle.goal.render()
    assert out.startswith(header)
    assert out == header + format_solution(solve(puzzle, "bfs"))
    assert "\nAction 0: First State\n" in out
    assert out.endswith(puzzle.goal.render())


def test_main_best_first_uses_footer(capsys):
    assert main(["four", "--algorithm", "best-first"]) == 0
    out = capsys.readouterr().out
    puzzle = get_puzzle("four")
    assert out.startswith("Start state:\n" + puzzle.start.render(True))
    assert out.endswith(puzzle.goal.render(True))


def test_main_rejects_unknown_puzzle():
    with pytest.raises(SystemExit) as info:
        main(["seven"])
    assert info.value.code == 2