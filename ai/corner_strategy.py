"""角落防守策略

实现 PlayerStrategy 协议。角落只有两个方向暴露给对手，
优先把朝外两面数值最大的卡放到空着的角落。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from game.card import MAX_ATTACK
from game.enums import Direction

from .strategy import Move, break_tie, fallback_move

if TYPE_CHECKING:
    from game.card import Card
    from game.grid import Grid
    from game.state import GameState

# 角落额外加分（standalone score 使用）
CORNER_BONUS = 10


def _corner_facings(grid: Grid, row: int, col: int) -> tuple[Direction, Direction] | None:
    """角落朝向棋盘内部的两个方向（竖直, 水平）；非角落返回 None"""
    last_r, last_c = grid.rows - 1, grid.cols - 1
    if row not in (0, last_r) or col not in (0, last_c):
        return None
    vertical = Direction.SOUTH if row == 0 else Direction.NORTH
    horizontal = Direction.EAST if col == 0 else Direction.WEST
    return vertical, horizontal


class CornerStrategy:
    """角落防守策略

    选点：只考虑四个角。每个朝内方向若相邻格是空洞、已被占用或在棋盘外，
    记为不可翻的 10 分，否则记卡牌在该方向的攻击值；两方向相加取最大。
    """

    name = "corner"

    def select_move(self, state: GameState) -> Move:
        grid = state.grid
        best_score: int | None = None
        ties: list[Move] = []
        for card in state.active_hand():
            for row, col in sorted(grid.corners()):
                if not state.is_valid_move(row, col):
                    continue
                value = self.defensive_score(grid, row, col, card)
                if best_score is None or value > best_score:
                    best_score = value
                    ties = [Move(row, col, card)]
                elif value == best_score:
                    ties.append(Move(row, col, card))
        if not ties:
            return fallback_move(state)
        return break_tie(ties)

    def defensive_score(self, grid: Grid, row: int, col: int, card: Card) -> int:
        """角落上两个朝内方向的防守分"""
        facings = _corner_facings(grid, row, col)
        if facings is None:
            return 0
        total = 0
        for direction in facings:
            r, c = grid.neighbor(row, col, direction)
            if not grid.in_bounds(r, c) or not grid.cell(r, c).is_open:
                total += MAX_ATTACK
            else:
                total += card.attack(direction)
        return total

    def score(self, state: GameState, move: Move) -> int:
        """角落 +10，再加上本卡能压制的相邻卡牌面数"""
        grid = state.grid
        value = CORNER_BONUS if (move.row, move.col) in grid.corners() else 0
        comparison = state.rule.comparison
        for direction, r, c in grid.neighbors(move.row, move.col):
            neighbor = grid.cell(r, c)
            if not neighbor.is_occupied:
                continue
            if comparison.compare(move.card.attack(direction), neighbor.attack(direction.opposite)):
                value += 1
        return value
