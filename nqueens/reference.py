from itertools import permutations
from typing import List, Tuple

from kanren import membero, run, var  # 关系式求解，用于交叉验证

from nqueens.solvers import matrix_from_columns


class RelationalSolver:
    def __init__(self, n: int = 6, diagonals: bool = True):
        """用 kanren 描述的 N 皇后（或 N 车）问题
        Args:
            n (int): 棋盘大小和棋子数量
            diagonals (bool): True 为皇后（同时约束对角线），False 为车
        """
        if n < 1:
            raise ValueError(f"Board size must be at least 1, got {n}")
        self.N = n
        self.diagonals = diagonals
        self.cols = tuple(range(n))  # 列值域(0到n-1)
        self.queens = tuple(var() for _ in range(n))  # 每行一个逻辑变量，取值为该行棋子所在列

    def allowed_pairs(self, i: int, j: int) -> Tuple[Tuple[int, int], ...]:
        """第 i 行和第 j 行的棋子可以同时取的列组合"""
        return tuple(
            (col1, col2)
            for col1 in self.cols
            for col2 in self.cols
            if col1 != col2 and not (self.diagonals and abs(col1 - col2) == abs(i - j))
        )

    def get_constraints(self):
        """按 (0,1), (0,2), (1,2), (0,3)... 的顺序生成两两约束，尽早剪枝"""
        if self.N == 1:
            return [membero(self.queens[0], self.cols)]
        return [
            membero((self.queens[i], self.queens[j]), self.allowed_pairs(i, j))
            for j in range(1, self.N)
            for i in range(j)
        ]

    def solve(self) -> List[Tuple[int, ...]]:
        solutions = run(0, self.queens, *self.get_constraints())
        return sorted(tuple(solution) for solution in solutions)

    def solve_matrices(self):
        return [matrix_from_columns(solution) for solution in self.solve()]


def is_safe(pos: Tuple[int, ...]) -> bool:
    """检查给定位置是否安全（无对角线冲突）"""
    for i in range(len(pos)):
        for j in range(i + 1, len(pos)):
            if abs(pos[i] - pos[j]) == j - i:
                return False
    return True


def reference_rook_count(n: int) -> int:
    if n < 1:
        raise ValueError(f"Board size must be at least 1, got {n}")
    return sum(1 for _ in permutations(range(n)))


def reference_queen_count(n: int) -> int:
    if n < 1:
        raise ValueError(f"Board size must be at least 1, got {n}")
    return sum(1 for pos in permutations(range(n)) if is_safe(pos))
