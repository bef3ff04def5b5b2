"""游戏状态模块
负责发牌、轮流落子、胜负判定；对战结算委托给 BattleEngine。

状态机:
    NOT_STARTED --start_game--> IN_PROGRESS --最后一个空格子被填满--> FINISHED
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from i18n import t as _t

from .battle import BattleEngine, Flip
from .card import Card, copy_cards
from .enums import Color, GameStatus
from .exceptions import (
    DeckTooSmallError,
    GameAlreadyFinishedError,
    GameAlreadyStartedError,
    GameNotFinishedError,
    InvalidActionError,
    InvalidBoardError,
    InvalidMoveError,
    raise_if_game_finished,
    raise_if_game_not_started,
)
from .grid import Grid
from .rules import BasicTrigger, ComparisonRule, FlipTrigger, StandardRule, as_trigger

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlayResult:
    """一次落子的结果

    Attributes:
        row: 落子行
        col: 落子列
        card: 落下的卡牌（副本）
        color: 落子方
        flipped: 按顺序排列的翻面记录
        turn_ended: 回合是否已交给对方
        game_over: 本次落子后游戏是否结束
        winner: 游戏结束时的胜者，平局或未结束为 None
    """

    row: int
    col: int
    card: Card
    color: Color
    flipped: list[Flip] = field(default_factory=list)
    turn_ended: bool = True
    game_over: bool = False
    winner: Color | None = None

    @property
    def flip_count(self) -> int:
        return len(self.flipped)


class GameState:
    """三重奏游戏状态

    Attributes:
        rule: 当前使用的翻牌规则
        status: 游戏状态
    """

    def __init__(
        self,
        rule: ComparisonRule | FlipTrigger | None = None,
        engine: BattleEngine | None = None,
    ):
        self.rule: FlipTrigger = as_trigger(rule) if rule is not None else BasicTrigger(StandardRule())
        self.engine = engine or BattleEngine()
        self.status = GameStatus.NOT_STARTED
        self._grid: Grid | None = None
        self._hands: dict[Color, list[Card]] = {Color.RED: [], Color.BLUE: []}
        self._active = Color.RED

    # ==================== 开局 ====================

    def start_game(self, deck: Sequence[Card], grid: Grid | Sequence[Sequence[Card]]) -> None:
        """开始游戏并发牌

        红方先发，交替发出 空格子数 + 1 张牌。

        Args:
            deck: 牌组（按发牌顺序）
            grid: 棋盘或卡牌矩阵

        Raises:
            GameAlreadyStartedError: 游戏已经开始
            GameAlreadyFinishedError: 游戏已经结束
            InvalidActionError: 牌组/棋盘为空、含 None、格子数为偶数
            DeckTooSmallError: 牌组少于 空格子数 + 1
        """
        if self.status is GameStatus.IN_PROGRESS:
            raise GameAlreadyStartedError()
        if self.status is GameStatus.FINISHED:
            raise GameAlreadyFinishedError()
        if deck is None or grid is None:
            raise InvalidActionError(reason="deck and board must not be None")
        if any(card is None for card in deck):
            raise InvalidActionError(reason="deck must not contain None")
        if any(not card.is_occupied for card in deck):
            raise InvalidActionError(reason="deck may only contain named cards")

        if isinstance(grid, Grid):
            board = grid.copy()
        else:
            try:
                board = Grid(grid)
            except InvalidBoardError as e:
                raise InvalidActionError(e.message, reason="board needs an odd number of cells") from e

        open_count = len(board.open_positions())
        required = open_count + 1
        if len(deck) < required:
            raise DeckTooSmallError(required=required, available=len(deck))

        hands: dict[Color, list[Card]] = {Color.RED: [], Color.BLUE: []}
        for i, card in enumerate(deck[:required]):
            color = Color.RED if i % 2 == 0 else Color.BLUE
            hands[color].append(card.with_owner(color))

        self._grid = board
        self._hands = hands
        self._active = Color.RED
        self.status = GameStatus.IN_PROGRESS if open_count else GameStatus.FINISHED
        logger.info(
            "Game started: %dx%d board, %d open tiles, hands %d/%d, rule=%r",
            board.rows, board.cols, open_count,
            len(hands[Color.RED]), len(hands[Color.BLUE]), self.rule,
        )

    # ==================== 落子 ====================

    def play(self, row: int, col: int, hand_index: int) -> PlayResult:
        """当前玩家把第 hand_index 张手牌放到 (row, col)

        校验全部先于状态修改，抛出异常时状态不变。

        Raises:
            GameNotStartedError: 游戏未开始
            GameAlreadyFinishedError: 游戏已结束
            InvalidMoveError: 越界、空洞、已占用或手牌索引无效
        """
        raise_if_game_not_started(self.started)
        raise_if_game_finished(self.status is GameStatus.FINISHED)
        self._check_cell(row, col)
        hand = self._hands[self._active]
        if not 0 <= hand_index < len(hand):
            raise InvalidMoveError(_t("exc.bad_hand_index"), row=row, col=col, hand_index=hand_index)

        color = self._active
        card = hand.pop(hand_index)
        flipped = self.engine.resolve(self._grid, row, col, card, self.rule)
        logger.debug(
            "%s played %s at (%d, %d), %d flipped",
            color.name, card.name, row, col, len(flipped),
        )

        result = PlayResult(row=row, col=col, card=card.copy(), color=color, flipped=flipped)
        if self._grid.is_full():
            self.status = GameStatus.FINISHED
            result.game_over = True
            result.winner = self._leader()
            logger.info(
                "Game over: RED %d, BLUE %d, winner %s",
                self.score(Color.RED), self.score(Color.BLUE),
                result.winner.name if result.winner else "draw",
            )
        self._active = color.opponent
        return result

    def _check_cell(self, row: int, col: int) -> None:
        if not self._grid.in_bounds(row, col):
            raise InvalidMoveError(_t("exc.out_of_bounds"), row=row, col=col)
        cell = self._grid.cell(row, col)
        if cell.is_hole:
            raise InvalidMoveError(_t("exc.play_to_hole"), row=row, col=col)
        if cell.is_occupied:
            raise InvalidMoveError(_t("exc.cell_occupied"), row=row, col=col)

    # ==================== 查询 ====================

    @property
    def started(self) -> bool:
        return self.status is not GameStatus.NOT_STARTED

    def is_over(self) -> bool:
        return self.status is GameStatus.FINISHED

    def winner(self) -> Color | None:
        """胜者颜色，平局返回 None

        Raises:
            GameNotStartedError: 游戏未开始
            GameNotFinishedError: 游戏尚未结束
        """
        raise_if_game_not_started(self.started)
        if not self.is_over():
            raise GameNotFinishedError()
        return self._leader()

    def _leader(self) -> Color | None:
        red, blue = self.score(Color.RED), self.score(Color.BLUE)
        if red > blue:
            return Color.RED
        if blue > red:
            return Color.BLUE
        return None

    def score(self, color: Color) -> int:
        """棋盘上该颜色的卡牌数 + 该颜色的手牌数"""
        raise_if_game_not_started(self.started)
        on_board = sum(
            1
            for r, c in self._grid.positions()
            if self._grid.cell(r, c).is_occupied and self._grid.cell(r, c).owner is color
        )
        return on_board + len(self._hands[color])

    def is_valid_move(self, row: int, col: int) -> bool:
        """(row, col) 是否为棋盘内、未被占用的空格子"""
        if self._grid is None or not self._grid.in_bounds(row, col):
            return False
        return self._grid.cell(row, col).is_open

    def count_possible_flips(self, row: int, col: int, card: Card) -> int:
        """若当前玩家把 card 放到 (row, col) 会翻多少张牌（在副本上模拟）

        Raises:
            GameNotStartedError: 游戏未开始
            GameAlreadyFinishedError: 游戏已结束
            InvalidMoveError: 目标不是可落子的空格子
        """
        raise_if_game_not_started(self.started)
        raise_if_game_finished(self.is_over())
        self._check_cell(row, col)
        scratch = self._grid.copy()
        flips = self.engine.resolve(scratch, row, col, card.with_owner(self._active), self.rule)
        return len(flips)

    def simulate(self) -> GameState:
        """返回一个完全独立的副本，供策略推演"""
        clone = GameState(self.rule, self.engine)
        clone.status = self.status
        clone._grid = self._grid.copy() if self._grid is not None else None
        clone._hands = {color: copy_cards(hand) for color, hand in self._hands.items()}
        clone._active = self._active
        return clone

    # ==================== 快照 ====================

    @property
    def grid(self) -> Grid:
        """棋盘副本"""
        raise_if_game_not_started(self.started)
        return self._grid.copy()

    @property
    def rows(self) -> int:
        raise_if_game_not_started(self.started)
        return self._grid.rows

    @property
    def cols(self) -> int:
        raise_if_game_not_started(self.started)
        return self._grid.cols

    def card_at(self, row: int, col: int) -> Card:
        raise_if_game_not_started(self.started)
        return self._grid.get(row, col)

    @property
    def active_color(self) -> Color:
        return self._active

    @property
    def is_red_turn(self) -> bool:
        return self._active is Color.RED

    def hand(self, color: Color) -> list[Card]:
        return copy_cards(self._hands[color])

    def active_hand(self) -> list[Card]:
        return self.hand(self._active)

    def other_hand(self) -> list[Card]:
        return self.hand(self._active.opponent)

    def __repr__(self) -> str:
        return f"GameState(status={self.status.value}, active={self._active.name})"
