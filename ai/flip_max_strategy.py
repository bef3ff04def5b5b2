"""最大翻牌策略

实现 PlayerStrategy 协议：遍历 手牌 × 空格子，选择翻牌数最多的落子。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .strategy import Move, candidate_moves, pick_best

if TYPE_CHECKING:
    from game.state import GameState


class FlipMaxStrategy:
    """最大翻牌策略：分数 = 在副本上模拟落子后翻面的卡牌数"""

    name = "flipmax"

    def select_move(self, state: GameState) -> Move:
        return pick_best(state, self, candidate_moves(state))

    def score(self, state: GameState, move: Move) -> int:
        return state.count_possible_flips(move.row, move.col, move.card)
