from nqueens.board import CORNERS, Board, matrices_are_same
from nqueens.solvers import (
    all_queen_solutions,
    all_rook_solutions,
    count_queen_solutions,
    count_rook_solutions,
    find_one_queen_solution,
    find_one_rook_solution,
)

__version__ = "0.1.0"
