"""最少暴露策略（最不容易被翻的落子）

实现 PlayerStrategy 协议：对每个空格子、每张手牌，
统计对手手牌中有多少张能从各个仍空着的相邻方向击败它，选择最少者。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .strategy import Move, break_tie, fallback_move

if TYPE_CHECKING:
    from game.card import Card
    from game.state import GameState


class MinExposureStrategy:
    """最少暴露策略，分数为暴露数的相反数"""

    name = "leastlikely"

    def select_move(self, state: GameState) -> Move:
        grid = state.grid
        best_score: int | None = None
        ties: list[Move] = []
        for row, col in grid.open_positions():
            # 同一格子只保留暴露最少的第一张手牌
            spot_move: Move | None = None
            spot_score: int | None = None
            for card in state.active_hand():
                move = Move(row, col, card)
                value = self.score(state, move)
                if spot_score is None or value > spot_score:
                    spot_score, spot_move = value, move
            if spot_move is None:
                continue
            if best_score is None or spot_score > best_score:
                best_score = spot_score
                ties = [spot_move]
            elif spot_score == best_score:
                ties.append(spot_move)
        if not ties:
            return fallback_move(state)
        return break_tie(ties)

    def score(self, state: GameState, move: Move) -> int:
        return -self.exposure(state, move.row, move.col, move.card)

    def exposure(self, state: GameState, row: int, col: int, card: Card) -> int:
        """对手手牌从空着的相邻方向击败 card 的次数总和"""
        grid = state.grid
        comparison = state.rule.comparison
        opponents = state.other_hand()
        count = 0
        for direction, r, c in grid.neighbors(row, col):
            if not grid.cell(r, c).is_open:
                continue
            for other in opponents:
                if comparison.compare(other.attack(direction.opposite), card.attack(direction)):
                    count += 1
        return count
