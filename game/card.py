"""卡牌模块
定义攻击值范围、卡牌类，以及空格子 / 空洞占位

棋盘上的每个位置都是一个 Card：
- 空洞 (hole)：永远不能落子，没有攻击值
- 空格子 (tile)：没有名字的占位卡，等待落子
- 已落子：有名字、四向攻击值和所属颜色
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .enums import Color, Direction

MIN_ATTACK = 1
MAX_ATTACK = 10
# 仅供比较规则内部使用的哨兵值，发出的卡牌永远不会携带
AMPLIFIED_ACE = 11

_TOKEN_TO_VALUE = {str(v): v for v in range(MIN_ATTACK, MAX_ATTACK)}
_TOKEN_TO_VALUE["A"] = MAX_ATTACK


def parse_attack(token: str) -> int:
    """把牌组文件中的攻击值记号 (1-9 / A) 转换为整数

    Raises:
        ValueError: 记号不合法
    """
    value = _TOKEN_TO_VALUE.get(token.strip().upper())
    if value is None:
        raise ValueError(f"Invalid attack value: {token!r}")
    return value


def attack_token(value: int) -> str:
    """整数攻击值 → 记号（10 写作 A）"""
    return "A" if value == MAX_ATTACK else str(value)


@dataclass(slots=True)
class Card:
    """卡牌类

    Attributes:
        name: 卡牌名称，None 表示空格子或空洞
        attacks: 四个方向的攻击值
        owner: 所属颜色，落子前为 None
        is_hole: 是否为空洞
    """

    name: str | None = None
    attacks: dict[Direction, int] = field(default_factory=dict)
    owner: Color | None = None
    is_hole: bool = False

    def __post_init__(self):
        if self.is_hole or self.name is None:
            if self.attacks:
                raise ValueError("Holes and empty tiles carry no attacks")
            return
        if set(self.attacks) != set(Direction):
            raise ValueError(f"Card {self.name!r} needs an attack value for every direction")
        for direction, value in self.attacks.items():
            if not isinstance(value, int) or not MIN_ATTACK <= value <= MAX_ATTACK:
                raise ValueError(
                    f"Card {self.name!r} has invalid {direction.name} attack: {value!r}"
                )

    # ==================== 构造 ====================

    @classmethod
    def create(
        cls,
        name: str,
        north: int,
        south: int,
        east: int,
        west: int,
        owner: Color | None = None,
    ) -> Card:
        """按 北 南 东 西 的顺序创建一张卡牌"""
        return cls(
            name=name,
            attacks={
                Direction.NORTH: north,
                Direction.SOUTH: south,
                Direction.EAST: east,
                Direction.WEST: west,
            },
            owner=owner,
        )

    @classmethod
    def tile(cls) -> Card:
        """空格子"""
        return cls()

    @classmethod
    def hole(cls) -> Card:
        """空洞"""
        return cls(is_hole=True)

    # ==================== 查询 ====================

    @property
    def is_occupied(self) -> bool:
        """是否为已落子的卡牌"""
        return not self.is_hole and self.name is not None

    @property
    def is_open(self) -> bool:
        """是否为可落子的空格子"""
        return not self.is_hole and self.name is None

    def attack(self, direction: Direction) -> int:
        """获取指定方向的攻击值"""
        if not self.is_occupied:
            raise ValueError("Holes and empty tiles have no attacks")
        return self.attacks[direction]

    def copy(self) -> Card:
        """返回一张独立的副本"""
        return Card(
            name=self.name,
            attacks=dict(self.attacks),
            owner=self.owner,
            is_hole=self.is_hole,
        )

    def with_owner(self, owner: Color | None) -> Card:
        """返回改变所属颜色后的副本"""
        clone = self.copy()
        clone.owner = owner
        return clone

    @property
    def short_str(self) -> str:
        """棋盘上的单字符表示"""
        if self.is_hole:
            return "X"
        if self.name is None or self.owner is None:
            return "_"
        return self.owner.short

    def __str__(self) -> str:
        if self.is_hole:
            return "Hole"
        if self.name is None:
            return "Tile"
        values = " ".join(
            str(self.attacks[d])
            for d in (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
        )
        return f"{self.name} {values}"


def copy_cards(cards: Iterable[Card]) -> list[Card]:
    """深拷贝一组卡牌"""
    return [card.copy() for card in cards]
