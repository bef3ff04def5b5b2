"""游戏控制器模块.

管理一局游戏的开局、回合流程和落子交互。
控制器是权威 GameState 的唯一写入者：人类玩家的输入和脚本玩家的决策
都经由这里调用 GameState.play。
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Sequence

from i18n import t as _t

from .config import get_config
from .enums import Color
from .events import EventBus, EventType
from .exceptions import InvalidActionError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ai.bot import AIBot
    from ai.decision_log import AIDecisionLogger
    from ui.protocol import GameUI

    from .card import Card
    from .grid import Grid
    from .player import Player
    from .state import GameState, PlayResult


class GameController:
    """游戏控制器.

    负责一局游戏的开局、主循环和流程控制。
    由 main.py 创建并调用 ``play_game()``。
    """

    def __init__(
        self,
        state: GameState,
        players: Sequence[Player],
        ui: GameUI,
        events: EventBus | None = None,
        decisions: AIDecisionLogger | None = None,
        ai_delay: float | None = None,
    ):
        """初始化游戏控制器.

        Args:
            state: 尚未开始的游戏状态。
            players: 红方与蓝方两名玩家（顺序不限）。
            ui: 实现 GameUI 协议的 UI 后端实例。
            events: 事件总线，默认新建。
            decisions: 脚本玩家的决策日志（可选）。
            ai_delay: 脚本玩家落子前的停顿秒数，默认取配置。

        Raises:
            ValueError: 玩家数量不是 2 或颜色重复。
        """
        from ai.bot import AIBot

        by_color = {player.color: player for player in players}
        if len(players) != 2 or set(by_color) != {Color.RED, Color.BLUE}:
            raise ValueError("Exactly one RED and one BLUE player are required")

        self.state = state
        self.players: dict[Color, Player] = by_color
        self.ui = ui
        self.events = events or EventBus()
        self.ai_delay = get_config().ai_turn_delay if ai_delay is None else ai_delay
        self.bots: dict[Color, AIBot] = {
            player.color: AIBot(player, decisions)
            for player in players
            if player.is_ai
        }

    # ==================== 主循环 ====================

    def play_game(self, deck: Sequence[Card], grid: Grid) -> Color | None:
        """开始一局并运行到结束，返回胜者（平局为 None）"""
        self.state.start_game(deck, grid)
        self.events.emit(
            EventType.GAME_START,
            rows=self.state.rows,
            cols=self.state.cols,
            color=self.state.active_color,
        )
        self.ui.show_title()

        while not self.state.is_over():
            self.play_turn()

        winner = self.state.winner()
        logger.info(
            "Match finished: RED %d - BLUE %d",
            self.state.score(Color.RED), self.state.score(Color.BLUE),
        )
        self.events.emit(
            EventType.GAME_OVER,
            winner=winner,
            red=self.state.score(Color.RED),
            blue=self.state.score(Color.BLUE),
        )
        self.ui.show_game_over(self.state)
        return winner

    def play_turn(self) -> PlayResult:
        """执行当前玩家的一个回合"""
        player = self.players[self.state.active_color]
        self.ui.show_state(self.state, player)

        if player.is_ai:
            result = self._run_ai_turn(player)
        else:
            result = self._run_human_turn(player)

        self._publish_play(result, player)
        self.ui.show_play(result, player)
        return result

    # ==================== 回合流程 ====================

    def _run_ai_turn(self, player: Player) -> PlayResult:
        """执行脚本玩家回合"""
        self.ui.show_log(_t("ui.ai_thinking", player=player.name))
        if self.ai_delay > 0:
            time.sleep(self.ai_delay)
        return self.bots[player.color].take_turn(self.state)

    def _run_human_turn(self, player: Player) -> PlayResult:
        """执行人类玩家回合，非法落子时提示并重新输入"""
        while True:
            hand_index, row, col = self.ui.choose_move(self.state, player)
            try:
                return self.state.play(row, col, hand_index)
            except InvalidActionError as e:
                logger.warning(
                    "Rejected move by %s: hand=%d at (%d, %d): %s",
                    player, hand_index, row, col, e.message,
                )
                self.events.emit(
                    EventType.INVALID_MOVE,
                    color=player.color,
                    row=row,
                    col=col,
                    hand_index=hand_index,
                    message=e.message,
                )
                self.ui.show_invalid_move(e.message)

    def _publish_play(self, result: PlayResult, player: Player) -> None:
        self.events.emit(
            EventType.CARD_PLAYED,
            color=player.color,
            card=result.card,
            row=result.row,
            col=result.col,
        )
        if result.flipped:
            self.events.emit(EventType.CARDS_FLIPPED, color=player.color, flips=result.flipped)
        if not result.game_over:
            self.events.emit(EventType.TURN_CHANGED, color=self.state.active_color)
