import json
import logging
import numbers
from typing import Iterable, List, Optional, Sequence, Tuple

from nqueens.board import CORNERS, Board, matrices_are_same

logger = logging.getLogger(__name__)

Matrix = List[List[int]]


def _is_valid_size(n) -> bool:
    return isinstance(n, numbers.Integral) and not isinstance(n, bool) and n >= 1


def dedupe_matrices(matrices: Iterable[Matrix]) -> List[Matrix]:
    """去除重复矩阵，保留每个矩阵第一次出现的位置

    每个矩阵转成元组的元组作为键，键相等（按 == 和哈希）即视为重复，
    因此格子取值必须可哈希。对 0/1 矩阵这与 matrices_are_same 的逐格比较一致，
    结果顺序也与逐个两两比较的做法一致。
    """
    seen = set()
    unique = []
    for matrix in matrices:
        key = tuple(tuple(row) for row in matrix)
        if key in seen:
            continue
        seen.add(key)
        unique.append(matrix)
    return unique


def columns_of(matrix: Sequence[Sequence[int]]) -> Tuple[int, ...]:
    """置换矩阵 -> 每行棋子所在的列"""
    columns = []
    for row in matrix:
        occupied = [col_index for col_index, square in enumerate(row) if square]
        if len(occupied) != 1:
            raise ValueError(f"Row {list(row)} does not hold exactly one piece")
        columns.append(occupied[0])
    return tuple(columns)


def matrix_from_columns(columns: Sequence[int]) -> Matrix:
    n = len(columns)
    return [[1 if col_index == column else 0 for col_index in range(n)] for column in columns]


def _new_edges(n: int, corner: str) -> Tuple[int, int]:
    """返回放大后棋盘中新增行和新增列的下标"""
    vertical, horizontal = corner.split('-')
    new_row = 0 if vertical == 'top' else n - 1
    new_col = 0 if horizontal == 'left' else n - 1
    return new_row, new_col


def _edge_cells(n: int, new_row: int, new_col: int) -> List[Tuple[int, int]]:
    cells = [(new_row, col_index) for col_index in range(n)]
    cells.extend((row_index, new_col) for row_index in range(n) if row_index != new_row)
    return cells


def _placement_toggles(board: Board, row_index: int, col_index: int,
                       new_row: int, new_col: int) -> List[Tuple[int, int]]:
    """在新增边上 (row, col) 放一个棋子所需的全部翻转

    新棋子落在旧棋盘已占用的列（行）时，原来那枚棋子被挤到另一条新增边上，
    这样旧解加一枚新棋子仍然每行每列恰好一个。
    """
    toggles = [(row_index, col_index)]
    if (row_index, col_index) == (new_row, new_col):
        return toggles
    rows = board.rows()
    if row_index == new_row:
        for displaced_row, row in enumerate(rows):
            if displaced_row != new_row and row[col_index]:
                toggles.append((displaced_row, col_index))
                toggles.append((displaced_row, new_col))
                break
    else:
        for displaced_col, square in enumerate(rows[row_index]):
            if displaced_col != new_col and square:
                toggles.append((row_index, displaced_col))
                toggles.append((new_row, displaced_col))
                break
    return toggles


def all_rook_solutions(n: int) -> Optional[List[Matrix]]:
    """求 n 车问题的全部解

    由 n-1 的全部解递归构造：每个旧解在四个角各放大一次，
    再在新增的行和列上逐格尝试放一枚棋子，无冲突的局面记为候选解，
    随后撤销翻转继续尝试下一格。最后按矩阵去重。

    Args:
        n: 棋盘边长
    Returns:
        list: 去重后的解（n×n 矩阵）列表；n < 1 时返回 None
    """
    if not _is_valid_size(n):
        return None
    if n == 1:
        return [[[1]]]

    candidates = []
    for smaller_solution in all_rook_solutions(n - 1):
        smaller_board = Board.from_matrix(smaller_solution)
        for corner in CORNERS:
            larger_board = smaller_board.generate_larger_board_at(corner)
            new_row, new_col = _new_edges(n, corner)
            for row_index, col_index in _edge_cells(n, new_row, new_col):
                toggles = _placement_toggles(larger_board, row_index, col_index, new_row, new_col)
                for cell in toggles:
                    larger_board.toggle_piece(*cell)
                if not larger_board.has_any_rooks_conflicts():
                    candidates.append([list(row) for row in larger_board.rows()])
                for cell in reversed(toggles):
                    larger_board.toggle_piece(*cell)

    solutions = dedupe_matrices(candidates)
    logger.debug("%d candidates for %d rooks, %d unique", len(candidates), n, len(solutions))
    return solutions


def find_one_rook_solution(n: int) -> Optional[Matrix]:
    solutions = all_rook_solutions(n)
    solution = solutions[0] if solutions else None
    logger.info("Single solution for %s rooks: %s", n, json.dumps(solution))
    return solution


def count_rook_solutions(n: int) -> Optional[int]:
    solutions = all_rook_solutions(n)
    if solutions is None:
        return None
    solution_count = len(solutions)
    logger.info("Number of solutions for %s rooks: %d", n, solution_count)
    return solution_count


def all_queen_solutions(n: int) -> Optional[List[Matrix]]:
    """n 皇后的全部解：n 车解中对角线也没有冲突的那部分"""
    rook_solutions = all_rook_solutions(n)
    if rook_solutions is None:
        return None
    return [
        solution for solution in rook_solutions
        if not Board.from_matrix(solution).has_any_queens_conflicts()
    ]


def find_one_queen_solution(n: int) -> Optional[Matrix]:
    solutions = all_queen_solutions(n)
    solution = solutions[0] if solutions else None
    logger.info("Single solution for %s queens: %s", n, json.dumps(solution))
    return solution


def count_queen_solutions(n: int) -> Optional[int]:
    solutions = all_queen_solutions(n)
    if solutions is None:
        return None
    solution_count = len(solutions)
    logger.info("Number of solutions for %s queens: %d", n, solution_count)
    return solution_count


__all__ = [
    'all_rook_solutions',
    'find_one_rook_solution',
    'count_rook_solutions',
    'all_queen_solutions',
    'find_one_queen_solution',
    'count_queen_solutions',
    'dedupe_matrices',
    'matrices_are_same',
    'columns_of',
    'matrix_from_columns',
]
