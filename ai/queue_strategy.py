"""策略队列

第 N 次 select_move 交给队列中的第 N 个策略，用完后一直使用最后一个。
score 按给出上一步落子的策略评分。
用法::

    strategy = QueueStrategy(CornerStrategy()).then(MinimaxStrategy())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from game.state import GameState

    from .strategy import Move, PlayerStrategy


class QueueStrategy:
    """按顺序轮换的组合策略"""

    name = "complex"

    def __init__(self, *strategies: PlayerStrategy):
        if not strategies:
            raise ValueError("QueueStrategy needs at least one strategy")
        self._queue: list[PlayerStrategy] = list(strategies)
        self._position = 0
        self._last: PlayerStrategy | None = None

    def then(self, strategy: PlayerStrategy) -> QueueStrategy:
        """在队尾追加一个策略，返回自身以便链式调用"""
        self._queue.append(strategy)
        return self

    @property
    def current(self) -> PlayerStrategy:
        return self._queue[self._position]

    def select_move(self, state: GameState) -> Move:
        self._last = self.current
        move = self._last.select_move(state)
        if self._position < len(self._queue) - 1:
            self._position += 1
        return move

    def score(self, state: GameState, move: Move) -> int:
        strategy = self._last if self._last is not None else self.current
        return strategy.score(state, move)

    def __len__(self) -> int:
        return len(self._queue)
