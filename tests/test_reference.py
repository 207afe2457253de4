import pytest

from nqueens.reference import (
    RelationalSolver,
    is_safe,
    reference_queen_count,
    reference_rook_count,
)
from nqueens.solvers import all_queen_solutions, all_rook_solutions, columns_of


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_relational_queens_match_board_solver(n):
    expected = sorted(columns_of(solution) for solution in all_queen_solutions(n))
    assert RelationalSolver(n).solve() == expected


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_relational_rooks_match_board_solver(n):
    expected = sorted(columns_of(solution) for solution in all_rook_solutions(n))
    assert RelationalSolver(n, diagonals=False).solve() == expected


def test_solve_matrices():
    matrices = RelationalSolver(4).solve_matrices()
    assert matrices[0] == [
        [0, 1, 0, 0],
        [0, 0, 0, 1],
        [1, 0, 0, 0],
        [0, 0, 1, 0],
    ]


def test_allowed_pairs_excludes_attacks():
    pairs = RelationalSolver(4).allowed_pairs(0, 1)
    assert (0, 0) not in pairs
    assert (0, 1) not in pairs
    assert (0, 2) in pairs


def test_reference_counts():
    assert reference_rook_count(5) == 120
    assert reference_queen_count(8) == 92
    assert is_safe((1, 3, 0, 2))
    assert not is_safe((0, 1, 2, 3))


def test_reference_rejects_bad_size():
    with pytest.raises(ValueError):
        RelationalSolver(0)
    with pytest.raises(ValueError):
        reference_queen_count(-1)
