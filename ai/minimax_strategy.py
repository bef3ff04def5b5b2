"""单层对抗（minimax 风格）策略

实现 PlayerStrategy 协议。对每一步候选落子：
1. 在 GameState.simulate() 得到的副本上落子
2. 用若干评估策略分别求出对手在新局面下能拿到的最高分
3. 按权重加总，作为这一步给对手留下的机会

选择留给对手机会最小的一步。只推演对手的一次应手，不做多层搜索。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from .strategy import Move, candidate_moves, pick_best

if TYPE_CHECKING:
    from game.state import GameState

    from .strategy import PlayerStrategy

logger = logging.getLogger(__name__)

# 不能作为评估策略的类型
_NESTED = {"minimax", "complex"}


class MinimaxStrategy:
    """单层对抗策略

    Attributes:
        weights: 评估策略名称 → 权重
    """

    name = "minimax"

    def __init__(self, weights: Mapping[str, int] | None = None):
        from game.config import get_config

        from .factory import create_strategy

        self.weights: dict[str, int] = dict(weights if weights is not None else get_config().minimax_weights)
        nested = _NESTED & set(self.weights)
        if nested:
            raise ValueError(f"Minimax cannot evaluate with {sorted(nested)}")
        self._evaluators: list[tuple[PlayerStrategy, int]] = [
            (create_strategy(name), weight) for name, weight in self.weights.items()
        ]

    def select_move(self, state: GameState) -> Move:
        return pick_best(state, self, candidate_moves(state))

    def score(self, state: GameState, move: Move) -> int:
        """对手最佳加权分的相反数"""
        return -self.opponent_best(state, move)

    def opponent_best(self, state: GameState, move: Move) -> int:
        """落下 move 之后，对手按各评估策略能取得的最高分的加权和"""
        sim = state.simulate()
        hand_index = sim.active_hand().index(move.card)
        result = sim.play(move.row, move.col, hand_index)
        if result.game_over:
            return 0

        replies = list(candidate_moves(sim))
        total = 0
        for evaluator, weight in self._evaluators:
            best = max((evaluator.score(sim, reply) for reply in replies), default=0)
            total += best * weight
        logger.debug("minimax %s leaves opponent %d", move, total)
        return total
