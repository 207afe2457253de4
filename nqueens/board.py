import numbers
from typing import Callable, List, Optional, Sequence

CORNERS = ('top-left', 'top-right', 'bottom-left', 'bottom-right')


def _is_index(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def make_empty_matrix(n: int) -> List[List[int]]:
    return [[0] * n for _ in range(n)]


def matrices_are_same(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> bool:
    """逐格比较两个矩阵是否完全相同"""
    if len(a) != len(b):
        return False
    for row_a, row_b in zip(a, b):
        if len(row_a) != len(row_b):
            return False
        for value_a, value_b in zip(row_a, row_b):
            if value_a != value_b:
                return False
    return True


class Board:
    """n×n 棋盘，格子为 0（空）或非 0（有棋子）

    冲突判断约定：
        - 行/列：同一行（列）中棋子数大于 1
        - 主对角线：col - row 为常数，编号范围 [-(n-1), n-1]
        - 副对角线：col + row 为常数，编号范围 [0, 2(n-1)]
    下标非法时返回 None，而不是 False，调用方必须先判断。
    """

    def __init__(self, n: int = 0):
        if not _is_index(n) or n < 0:
            raise ValueError(f"Board size must be a non-negative integer, got {n!r}")
        self._n = int(n)
        self._rows = make_empty_matrix(self._n)
        self._listeners: List[Callable[['Board'], None]] = []

    @classmethod
    def create(cls, n: int) -> 'Board':
        return cls(n)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> 'Board':
        """由 n×n 矩阵创建棋盘，n 取矩阵的行数

        Args:
            matrix: 方阵，每个元素为棋子标记（0 表示空）
        Returns:
            Board: 新棋盘，持有矩阵各行的拷贝
        Raises:
            ValueError: 矩阵不是方阵
        """
        n = len(matrix)
        for row_index, row in enumerate(matrix):
            if len(row) != n:
                raise ValueError(
                    f"Matrix must be square: row {row_index} has {len(row)} cells, expected {n}"
                )
        board = cls(n)
        board._rows = [list(row) for row in matrix]
        return board

    @property
    def n(self) -> int:
        return self._n

    def rows(self) -> List[List[int]]:
        return self._rows

    def add_listener(self, callback: Callable[['Board'], None]) -> None:
        """注册棋子变化回调，每次 toggle_piece 之后调用"""
        self._listeners.append(callback)

    def toggle_piece(self, row_index: int, col_index: int) -> None:
        if not self._is_in_bounds(row_index, col_index):
            raise IndexError(f"Cell ({row_index}, {col_index}) is outside a {self._n}x{self._n} board")
        row = self._rows[row_index]
        row[col_index] = 0 if row[col_index] else 1
        for callback in self._listeners:
            callback(self)

    def _is_in_bounds(self, row_index: int, col_index: int) -> bool:
        return (
            _is_index(row_index) and _is_index(col_index) and
            0 <= row_index < self._n and 0 <= col_index < self._n
        )

    def _major_diagonal_index_on(self, row_index: int, col_index: int) -> int:
        return col_index - row_index

    def _minor_diagonal_index_on(self, row_index: int, col_index: int) -> int:
        return col_index + row_index

    def has_any_rooks_conflicts(self) -> bool:
        return self.has_any_row_conflicts() or self.has_any_col_conflicts()

    def has_any_queens_conflicts(self) -> bool:
        return (
            self.has_any_rooks_conflicts() or
            self.has_any_major_diagonal_conflicts() or
            self.has_any_minor_diagonal_conflicts()
        )

    def has_any_queen_conflicts_on(self, row_index: int, col_index: int) -> Optional[bool]:
        """检查经过 (row, col) 的行、列和两条对角线上是否有冲突"""
        if not self._is_in_bounds(row_index, col_index):
            return None
        return (
            self.has_row_conflict_at(row_index) or
            self.has_col_conflict_at(col_index) or
            self.has_major_diagonal_conflict_at(self._major_diagonal_index_on(row_index, col_index)) or
            self.has_minor_diagonal_conflict_at(self._minor_diagonal_index_on(row_index, col_index))
        )

    # 行：从左到右

    def has_row_conflict_at(self, row_index: int) -> Optional[bool]:
        if not _is_index(row_index) or not 0 <= row_index < self._n:
            return None
        pieces = sum(1 for square in self._rows[row_index] if square)
        return pieces > 1

    def has_any_row_conflicts(self) -> bool:
        for row_index in range(self._n):
            if self.has_row_conflict_at(row_index):
                return True
        return False

    # 列：从上到下

    def has_col_conflict_at(self, col_index: int) -> Optional[bool]:
        if not _is_index(col_index) or not 0 <= col_index < self._n:
            return None
        pieces = 0
        for row in self._rows:
            if row[col_index]:
                pieces += 1
                if pieces > 1:
                    return True
        return False

    def has_any_col_conflicts(self) -> bool:
        for col_index in range(self._n):
            if self.has_col_conflict_at(col_index):
                return True
        return False

    # 主对角线：从左上到右下，编号为该对角线在第 0 行所处的列

    def has_major_diagonal_conflict_at(self, col_index_at_first_row: int) -> Optional[bool]:
        if not _is_index(col_index_at_first_row):
            return None
        if not -(self._n - 1) <= col_index_at_first_row <= self._n - 1:
            return None
        pieces = 0
        for row_index in range(self._n):
            col_index = col_index_at_first_row + row_index
            if 0 <= col_index < self._n and self._rows[row_index][col_index]:
                pieces += 1
        return pieces > 1

    def has_any_major_diagonal_conflicts(self) -> bool:
        for diagonal in range(-(self._n - 1), self._n):
            if self.has_major_diagonal_conflict_at(diagonal):
                return True
        return False

    # 副对角线：从右上到左下

    def has_minor_diagonal_conflict_at(self, col_index_at_first_row: int) -> Optional[bool]:
        if not _is_index(col_index_at_first_row):
            return None
        if not 0 <= col_index_at_first_row <= 2 * (self._n - 1):
            return None
        pieces = 0
        for row_index in range(self._n):
            col_index = col_index_at_first_row - row_index
            if 0 <= col_index < self._n and self._rows[row_index][col_index]:
                pieces += 1
        return pieces > 1

    def has_any_minor_diagonal_conflicts(self) -> bool:
        for diagonal in range(2 * (self._n - 1) + 1):
            if self.has_minor_diagonal_conflict_at(diagonal):
                return True
        return False

    def generate_larger_board_at(self, corner: str) -> 'Board':
        """生成边长加 1 的新棋盘，新增的空行和空列位于 corner 一侧

        原棋盘内容嵌入到相对的角上，原棋盘不会被修改。

        Args:
            corner: CORNERS 之一，例如 'top-left' 表示在顶部加一行、左侧加一列
        Returns:
            Board: (n+1)×(n+1) 的新棋盘
        """
        if corner not in CORNERS:
            raise ValueError(f"Unknown corner {corner!r}, expected one of {CORNERS}")
        vertical, horizontal = corner.split('-')
        row_offset = 1 if vertical == 'top' else 0
        col_offset = 1 if horizontal == 'left' else 0

        larger = Board(self._n + 1)
        for row_index, row in enumerate(self._rows):
            target = larger._rows[row_index + row_offset]
            target[col_offset:col_offset + self._n] = row
        return larger

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return matrices_are_same(self._rows, other._rows)

    # 棋盘可变，按内容比较，不可哈希
    __hash__ = None

    def __repr__(self):
        return f"Board(n={self._n}, rows={self._rows!r})"
