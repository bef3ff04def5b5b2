"""
AI机器人模块
把策略给出的 Move 转换为手牌索引并在 GameState 上落子
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from game.exceptions import InvalidActionError

from .decision_log import AIDecision, AIDecisionLogger
from .strategy import Move

if TYPE_CHECKING:
    from game.player import Player
    from game.state import GameState, PlayResult

logger = logging.getLogger(__name__)


class AIBot:
    """
    AI机器人类
    负责为脚本玩家做出决策并执行
    """

    def __init__(self, player: Player, decisions: AIDecisionLogger | None = None):
        """
        初始化AI机器人

        Args:
            player: 关联的脚本玩家
            decisions: 决策日志（可选）
        """
        if player.strategy is None:
            raise ValueError(f"{player} has no strategy")
        self.player = player
        self.decisions = decisions or AIDecisionLogger(enabled=False)

    def choose(self, state: GameState) -> tuple[Move, int]:
        """
        选择一步落子

        Returns:
            (Move, 手牌索引)

        Raises:
            InvalidActionError: 策略给出的卡牌不在当前手牌中
            NoValidMoveError: 棋盘已满
        """
        move = self.player.next_move(state)
        hand = state.active_hand()
        try:
            hand_index = hand.index(move.card)
        except ValueError as e:
            raise InvalidActionError(reason=f"{move.card.name} is not in hand") from e
        return move, hand_index

    def take_turn(self, state: GameState) -> PlayResult:
        """为当前玩家选择并执行一步落子"""
        move, hand_index = self.choose(state)
        strategy = self.player.strategy
        value = strategy.score(state, move) if self.decisions.enabled else 0
        result = state.play(move.row, move.col, hand_index)
        self.decisions.log(AIDecision(
            color=self.player.color.value,
            strategy=strategy.name,
            card=move.card.name or "",
            row=move.row,
            col=move.col,
            score=value,
            hand_size=len(state.hand(self.player.color)) + 1,
            flips=result.flip_count,
        ))
        logger.debug("%s plays %s", self.player, move)
        return result
