"""GameUI 协议：接口隔离拆分

将 UI 拆分为两个职责明确的子协议：
  - GameDisplay : 纯展示输出（fire-and-forget）
  - GameInput   : 交互输入（阻塞获取人类玩家的落子）

GameUI 为组合协议，GameController 只依赖它。
RichTerminalUI 等实现类基于结构子类型化自动满足协议要求，无需显式继承。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from game.player import Player
    from game.state import GameState, PlayResult


# ====================================================================== #
#  子协议 1: GameDisplay：纯展示                                         #
# ====================================================================== #


class GameDisplay(Protocol):
    """纯展示协议：只负责向用户输出信息，无需返回有意义的值。"""

    def show_title(self) -> None: ...
    def show_state(self, state: GameState, player: Player) -> None: ...
    def show_play(self, result: PlayResult, player: Player) -> None: ...
    def show_invalid_move(self, reason: str) -> None: ...
    def show_log(self, message: str) -> None: ...
    def show_game_over(self, state: GameState) -> None: ...


# ====================================================================== #
#  子协议 2: GameInput：交互输入                                          #
# ====================================================================== #


class GameInput(Protocol):
    """交互输入协议：阻塞等待并返回人类玩家的落子。"""

    def choose_move(self, state: GameState, player: Player) -> tuple[int, int, int]:
        """返回 (手牌索引, 行, 列)"""
        ...


# ====================================================================== #
#  组合协议: GameUI                                                       #
# ====================================================================== #


class GameUI(GameDisplay, GameInput, Protocol):
    """完整 UI 协议：组合 Display + Input。"""

    ...
