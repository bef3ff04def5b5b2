"""落子策略协议与共享工具函数

各策略实现 PlayerStrategy 协议，AIBot 作为薄协调器委托。
所有策略只读取 GameState；需要推演时使用 GameState.simulate() 得到的副本。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Protocol

from game.exceptions import NoValidMoveError

if TYPE_CHECKING:
    from game.card import Card
    from game.state import GameState

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Move:
    """一次候选落子"""

    row: int
    col: int
    card: Card

    def __str__(self) -> str:
        return f"{self.card.name} -> ({self.row}, {self.col})"


class PlayerStrategy(Protocol):
    """落子策略协议：所有策略共用接口"""

    name: str

    def select_move(self, state: GameState) -> Move:
        """为当前玩家选出一步落子"""
        ...

    def score(self, state: GameState, move: Move) -> int:
        """为当前玩家评估一步落子，分数越高越好"""
        ...


# ==================== 共享工具函数 ====================


def candidate_moves(state: GameState) -> Iterator[Move]:
    """枚举当前玩家的全部合法落子：手牌在外层，然后按行优先遍历空格子"""
    open_cells = state.grid.open_positions()
    for card in state.active_hand():
        for row, col in open_cells:
            yield Move(row, col, card)


def break_tie(ties: Iterable[Move]) -> Move:
    """从同分候选中选出行最小、其次列最小的一步；同一格子取最先出现者

    Raises:
        ValueError: 候选为空
    """
    best: Move | None = None
    for move in ties:
        if best is None or (move.row, move.col) < (best.row, best.col):
            best = move
    if best is None:
        raise ValueError("break_tie needs at least one move")
    return best


def fallback_move(state: GameState) -> Move:
    """没有合适候选时的兜底落子：行优先的第一个空格子 + 第一张手牌

    Raises:
        NoValidMoveError: 棋盘已满
    """
    hand = state.active_hand()
    open_cells = state.grid.open_positions() if state.started else []
    if not open_cells or not hand:
        raise NoValidMoveError()
    row, col = open_cells[0]
    logger.debug("Falling back to first open cell (%d, %d)", row, col)
    return Move(row, col, hand[0])


def pick_best(state: GameState, strategy: PlayerStrategy, moves: Iterable[Move]) -> Move:
    """按 strategy.score 选最高分的候选，同分交给 break_tie；无候选时兜底"""
    best_score: int | None = None
    ties: list[Move] = []
    for move in moves:
        value = strategy.score(state, move)
        if best_score is None or value > best_score:
            best_score = value
            ties = [move]
        elif value == best_score:
            ties.append(move)
    if not ties:
        return fallback_move(state)
    chosen = break_tie(ties)
    logger.debug(
        "%s picked %s (score=%s, %d tied)", strategy.name, chosen, best_score, len(ties)
    )
    return chosen
