"""对战结算模块
落子后按 北、南、西、东 的顺序攻击相邻敌方卡牌，被翻面的卡牌继续向外攻击，
逐层广度优先扩散，直到没有新的翻面为止。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .card import Card
from .enums import BATTLE_ORDER, Direction
from .exceptions import InvalidMoveError
from .grid import Grid
from .rules import ComparisonRule, FlipTrigger, as_trigger

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Flip:
    """一次翻面记录（card 为翻面后的副本）"""

    row: int
    col: int
    card: Card


class BattleEngine:
    """对战结算引擎

    无状态：所有输入都通过 resolve 传入，引擎只修改传入的 grid。
    """

    def resolve(
        self,
        grid: Grid,
        row: int,
        col: int,
        card: Card,
        rule: ComparisonRule | FlipTrigger,
    ) -> list[Flip]:
        """把 card 放到 (row, col) 并结算连锁翻面

        Args:
            grid: 棋盘（会被原地修改）
            row: 落子行
            col: 落子列
            card: 已带有所属颜色的卡牌
            rule: 比较规则或翻牌触发规则

        Returns:
            按翻面顺序排列的 Flip 列表

        Raises:
            InvalidMoveError: 目标格子不是空格子或卡牌没有颜色
        """
        if not grid.in_bounds(row, col) or not grid.cell(row, col).is_open:
            raise InvalidMoveError(row=row, col=col)
        if not card.is_occupied or card.owner is None:
            raise InvalidMoveError("Only an owned card can be placed", row=row, col=col)

        trigger = as_trigger(rule)
        placed = card.copy()
        grid.set(row, col, placed)
        flips: list[Flip] = []

        # 第一层：连击（仅在落子时判定），然后是普通攻击
        front: list[tuple[int, int, Direction | None]] = []
        for r, c in trigger.combo_targets(grid, row, col, placed):
            self._flip(grid, r, c, placed, flips)
            front.append((r, c, self._direction_between(r, c, row, col)))
        front.extend(self._attack_from(grid, row, col, None, trigger, flips))

        while front:
            next_front: list[tuple[int, int, Direction | None]] = []
            for r, c, came_from in front:
                next_front.extend(self._attack_from(grid, r, c, came_from, trigger, flips))
            front = next_front

        logger.debug(
            "%s at (%d, %d) flipped %d card(s) under %r",
            placed.name, row, col, len(flips), trigger,
        )
        return flips

    def _attack_from(
        self,
        grid: Grid,
        row: int,
        col: int,
        came_from: Direction | None,
        trigger: FlipTrigger,
        flips: list[Flip],
    ) -> list[tuple[int, int, Direction]]:
        """以 (row, col) 上的卡牌为攻击方结算一轮，返回新翻面的坐标"""
        attacker = grid.cell(row, col)
        flipped: list[tuple[int, int, Direction]] = []
        for direction in BATTLE_ORDER:
            if direction is came_from:
                continue
            r, c = grid.neighbor(row, col, direction)
            if not grid.in_bounds(r, c):
                continue
            defender = grid.cell(r, c)
            if not defender.is_occupied or defender.owner is attacker.owner:
                continue
            if trigger.decide(attacker, defender, direction, direction.opposite):
                self._flip(grid, r, c, attacker, flips)
                flipped.append((r, c, direction.opposite))
        return flipped

    @staticmethod
    def _flip(grid: Grid, row: int, col: int, attacker: Card, flips: list[Flip]) -> None:
        defender = grid.cell(row, col)
        defender.owner = attacker.owner
        flips.append(Flip(row, col, defender.copy()))

    @staticmethod
    def _direction_between(row: int, col: int, to_row: int, to_col: int) -> Direction:
        """从 (row, col) 指向相邻格 (to_row, to_col) 的方向"""
        delta = (to_row - row, to_col - col)
        for direction in Direction:
            if direction.delta == delta:
                return direction
        raise ValueError(f"({row}, {col}) and ({to_row}, {to_col}) are not adjacent")
