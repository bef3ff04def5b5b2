"""
玩家模块
玩家只有两种：人类（由 UI 输入落子）和脚本玩家（由策略给出落子）
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .enums import Color

if TYPE_CHECKING:
    from ai.strategy import Move, PlayerStrategy

    from .state import GameState


class PlayerKind(Enum):
    """玩家类型枚举"""

    HUMAN = "human"
    SCRIPTED = "scripted"


@dataclass(slots=True)
class Player:
    """
    玩家类

    Attributes:
        name: 显示名称
        color: 执棋颜色
        kind: 玩家类型
        strategy: 脚本玩家使用的策略，人类玩家为 None
    """

    name: str
    color: Color
    kind: PlayerKind = PlayerKind.HUMAN
    strategy: PlayerStrategy | None = None

    def __post_init__(self):
        if self.kind is PlayerKind.SCRIPTED and self.strategy is None:
            raise ValueError("A scripted player needs a strategy")
        if self.kind is PlayerKind.HUMAN and self.strategy is not None:
            raise ValueError("A human player takes no strategy")

    @classmethod
    def human(cls, name: str, color: Color) -> Player:
        return cls(name=name, color=color, kind=PlayerKind.HUMAN)

    @classmethod
    def scripted(cls, name: str, color: Color, strategy: PlayerStrategy) -> Player:
        return cls(name=name, color=color, kind=PlayerKind.SCRIPTED, strategy=strategy)

    @property
    def is_ai(self) -> bool:
        return self.kind is PlayerKind.SCRIPTED

    def next_move(self, state: GameState) -> Move | None:
        """脚本玩家返回策略选出的落子，人类玩家返回 None（等待 UI 输入）"""
        if self.strategy is None:
            return None
        return self.strategy.select_move(state)

    def __str__(self) -> str:
        return f"{self.name}({self.color.name})"
