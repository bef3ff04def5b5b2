"""棋盘模块
矩形棋盘，每个格子是一张 Card（空洞 / 空格子 / 已落子）
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from .card import Card
from .enums import Direction
from .exceptions import InvalidActionError, InvalidBoardError

logger = logging.getLogger(__name__)


class Grid:
    """矩形棋盘

    格子总数必须为奇数，保证双方手牌数之和恰好填满所有空格子后
    不会出现平分的空格。
    """

    def __init__(self, cells: Sequence[Sequence[Card]]):
        """初始化棋盘

        Args:
            cells: 按行排列的卡牌矩阵（会被深拷贝）

        Raises:
            InvalidActionError: 矩阵为空或含有 None
            InvalidBoardError: 行长度不一致或格子总数为偶数
        """
        if cells is None or len(cells) == 0:
            raise InvalidActionError(reason="empty board")
        if any(row is None for row in cells):
            raise InvalidActionError(reason="null board row")
        rows = len(cells)
        cols = len(cells[0])
        if cols == 0:
            raise InvalidActionError(reason="empty board row")
        for row in cells:
            if len(row) != cols:
                raise InvalidBoardError(rows=rows, cols=cols)
            if any(cell is None for cell in row):
                raise InvalidActionError(reason="null board cell")
        if (rows * cols) % 2 == 0:
            raise InvalidBoardError(rows=rows, cols=cols)

        self._rows = rows
        self._cols = cols
        self._cells: list[list[Card]] = [[cell.copy() for cell in row] for row in cells]

    @classmethod
    def from_layout(cls, layout: Sequence[str]) -> Grid:
        """由字符布局构造棋盘：``X`` 为空洞，``C`` 为空格子"""
        cells = [
            [Card.hole() if ch.upper() == "X" else Card.tile() for ch in line]
            for line in layout
        ]
        return cls(cells)

    # ==================== 尺寸与坐标 ====================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def neighbor(self, row: int, col: int, direction: Direction) -> tuple[int, int]:
        """direction 方向上相邻格子的坐标（不检查越界）"""
        dr, dc = direction.delta
        return row + dr, col + dc

    def neighbors(
        self, row: int, col: int, directions: Sequence[Direction] = tuple(Direction)
    ) -> Iterator[tuple[Direction, int, int]]:
        """遍历棋盘内的相邻格子，产出 (方向, 行, 列)"""
        for direction in directions:
            r, c = self.neighbor(row, col, direction)
            if self.in_bounds(r, c):
                yield direction, r, c

    # ==================== 读写 ====================

    def get(self, row: int, col: int) -> Card:
        """返回格子上卡牌的副本"""
        return self.cell(row, col).copy()

    def cell(self, row: int, col: int) -> Card:
        """返回格子上的卡牌本身（供引擎内部修改）"""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) outside {self._rows}x{self._cols} board")
        return self._cells[row][col]

    def set(self, row: int, col: int, card: Card) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) outside {self._rows}x{self._cols} board")
        self._cells[row][col] = card

    # ==================== 统计 ====================

    def positions(self) -> Iterator[tuple[int, int]]:
        """按行优先顺序遍历全部坐标"""
        for r in range(self._rows):
            for c in range(self._cols):
                yield r, c

    def open_positions(self) -> list[tuple[int, int]]:
        """仍可落子的坐标（行优先）"""
        return [(r, c) for r, c in self.positions() if self._cells[r][c].is_open]

    def open_tile_count(self) -> int:
        """非空洞格子的数量（无论是否已落子）"""
        return sum(1 for r, c in self.positions() if not self._cells[r][c].is_hole)

    def is_full(self) -> bool:
        return not self.open_positions()

    def corners(self) -> set[tuple[int, int]]:
        last_r, last_c = self._rows - 1, self._cols - 1
        return {(0, 0), (0, last_c), (last_r, 0), (last_r, last_c)}

    def copy(self) -> Grid:
        return Grid(self._cells)

    def to_rows(self) -> list[list[Card]]:
        """整张棋盘的深拷贝"""
        return [[cell.copy() for cell in row] for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self._rows}x{self._cols}, open={len(self.open_positions())})"
