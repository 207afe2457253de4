import os
import sys

import pytest

# Ensure the repository root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from nqueens.board import Board


@pytest.fixture
def empty_board():
    return Board(4)


@pytest.fixture
def queens_board():
    # 4 皇后的一个解：每行的列为 1, 3, 0, 2
    return Board.from_matrix([
        [0, 1, 0, 0],
        [0, 0, 0, 1],
        [1, 0, 0, 0],
        [0, 0, 1, 0],
    ])
