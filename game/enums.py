"""玩家颜色、方向与游戏状态枚举

独立成模块以便 card / grid / rules / battle 互相引用时不产生循环导入。
"""

from enum import Enum


class Color(Enum):
    """玩家颜色（红方先手）"""

    RED = "red"
    BLUE = "blue"

    @property
    def short(self) -> str:
        """棋盘上的单字符表示"""
        return "R" if self is Color.RED else "B"

    @property
    def opponent(self) -> "Color":
        return Color.BLUE if self is Color.RED else Color.RED


class Direction(Enum):
    """四个攻击方向，值为 (行偏移, 列偏移)"""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# 结算顺序：北、南、西、东
BATTLE_ORDER: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.WEST,
    Direction.EAST,
)


class GameStatus(Enum):
    """游戏状态枚举"""

    NOT_STARTED = "not_started"  # 未开始
    IN_PROGRESS = "in_progress"  # 进行中
    FINISHED = "finished"  # 已结束
