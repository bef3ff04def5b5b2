"""对战规则模块
比较规则（标准 / 反转 / 堕落）与翻牌触发规则（基础 / 同数 / 加和）

规则通过包装组合：
    ReversedRule(FallenRule(StandardRule()))   # 反转 + 堕落
    PlusTrigger(ReversedRule(StandardRule()))  # 反转 + 加和
比较规则和触发规则都提供 decide(attacker, defender, dir_from, dir_to)，
BattleEngine 只依赖这一能力；触发规则额外提供 combo_targets 供落子时的连击预判。
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .card import MAX_ATTACK, MIN_ATTACK, Card
from .enums import BATTLE_ORDER, Direction
from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .grid import Grid

logger = logging.getLogger(__name__)

RULE_MODES = ("normal", "reverse", "fallen", "reverse_fallen")
RULE_MODIFIERS = ("none", "same", "plus")


@runtime_checkable
class ComparisonRule(Protocol):
    """比较规则协议"""

    name: str

    def compare(self, attack: int, defense: int) -> bool:
        """攻击值 attack 是否击败防守值 defense"""
        ...

    def decide(
        self, attacker: Card, defender: Card, dir_from: Direction, dir_to: Direction
    ) -> bool:
        """attacker 经 dir_from 方向攻击 defender 的 dir_to 面，是否翻牌"""
        ...


@runtime_checkable
class FlipTrigger(Protocol):
    """翻牌触发规则协议"""

    name: str
    comparison: ComparisonRule

    def decide(
        self, attacker: Card, defender: Card, dir_from: Direction, dir_to: Direction
    ) -> bool:
        ...

    def combo_targets(self, grid: Grid, row: int, col: int, card: Card) -> list[tuple[int, int]]:
        """落子时因连击被强制翻面的相邻坐标"""
        ...


# ==================== 比较规则 ====================


class _Comparison:
    """比较规则公共部分：从卡牌上取出对峙的两个面再比较"""

    name = "comparison"

    def compare(self, attack: int, defense: int) -> bool:
        raise NotImplementedError

    def decide(
        self, attacker: Card, defender: Card, dir_from: Direction, dir_to: Direction
    ) -> bool:
        if not attacker.is_occupied or not defender.is_occupied:
            return False
        return self.compare(attacker.attack(dir_from), defender.attack(dir_to))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StandardRule(_Comparison):
    """标准规则：攻击值严格大于防守值时获胜"""

    name = "normal"

    def compare(self, attack: int, defense: int) -> bool:
        return attack > defense


def _is_ace_matchup(attack: int, defense: int) -> bool:
    return attack == MIN_ATTACK and defense == MAX_ATTACK


class ReversedRule(_Comparison):
    """反转规则：数值小者获胜

    被包装规则以交换后的两个面求值；
    唯一例外是攻击 1 对防守 A，此时直接取被包装规则结果的反面。
    """

    def __init__(self, base: ComparisonRule | None = None):
        self.base = base if base is not None else StandardRule()

    @property
    def name(self) -> str:
        if isinstance(self.base, FallenRule):
            return "reverse_fallen"
        return "reverse"

    def compare(self, attack: int, defense: int) -> bool:
        if _is_ace_matchup(attack, defense):
            return not self.base.compare(attack, defense)
        return self.base.compare(defense, attack)

    def __repr__(self) -> str:
        return f"ReversedRule({self.base!r})"


class FallenRule(_Comparison):
    """堕落规则：攻击 1 可以击败防守 A，其余情况交给被包装规则"""

    name = "fallen"

    def __init__(self, base: ComparisonRule | None = None):
        self.base = base if base is not None else StandardRule()

    def compare(self, attack: int, defense: int) -> bool:
        if _is_ace_matchup(attack, defense):
            return not self.base.compare(attack, defense)
        return self.base.compare(attack, defense)

    def __repr__(self) -> str:
        return f"FallenRule({self.base!r})"


# ==================== 翻牌触发规则 ====================


def _opposing_neighbors(
    grid: Grid, row: int, col: int, card: Card
) -> list[tuple[Direction, int, int, Card]]:
    """按结算顺序列出与 card 颜色不同的已落子邻居"""
    found = []
    for direction, r, c in grid.neighbors(row, col, BATTLE_ORDER):
        other = grid.cell(r, c)
        if other.is_occupied and other.owner is not card.owner:
            found.append((direction, r, c, other))
    return found


class BasicTrigger:
    """基础翻牌：完全交给比较规则，没有连击"""

    def __init__(self, comparison: ComparisonRule | None = None):
        self.comparison = comparison if comparison is not None else StandardRule()

    @property
    def name(self) -> str:
        return "none"

    def decide(
        self, attacker: Card, defender: Card, dir_from: Direction, dir_to: Direction
    ) -> bool:
        return self.comparison.decide(attacker, defender, dir_from, dir_to)

    def combo_targets(self, grid: Grid, row: int, col: int, card: Card) -> list[tuple[int, int]]:
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.comparison!r})"


class SameTrigger(BasicTrigger):
    """同数规则

    落子时，若至少两个敌方邻居朝向本卡的数值与本卡对应面相等，
    这些邻居全部翻面；其余邻居按比较规则结算。
    """

    @property
    def name(self) -> str:
        return "same"

    def combo_targets(self, grid: Grid, row: int, col: int, card: Card) -> list[tuple[int, int]]:
        matched = [
            (r, c)
            for direction, r, c, other in _opposing_neighbors(grid, row, col, card)
            if card.attack(direction) == other.attack(direction.opposite)
        ]
        return matched if len(matched) >= 2 else []


class PlusTrigger(BasicTrigger):
    """加和规则

    落子时，把本卡每个面与对应敌方邻居朝向面相加，
    和相同的邻居达到两个及以上即全部翻面（可能存在多组）。
    """

    @property
    def name(self) -> str:
        return "plus"

    def combo_targets(self, grid: Grid, row: int, col: int, card: Card) -> list[tuple[int, int]]:
        by_sum: dict[int, list[tuple[int, int]]] = defaultdict(list)
        order: list[tuple[int, int]] = []
        for direction, r, c, other in _opposing_neighbors(grid, row, col, card):
            by_sum[card.attack(direction) + other.attack(direction.opposite)].append((r, c))
            order.append((r, c))
        combo = {pos for group in by_sum.values() if len(group) >= 2 for pos in group}
        return [pos for pos in order if pos in combo]


def as_trigger(rule: ComparisonRule | FlipTrigger) -> FlipTrigger:
    """把单独的比较规则包装为基础翻牌规则"""
    if hasattr(rule, "combo_targets"):
        return rule  # type: ignore[return-value]
    return BasicTrigger(rule)  # type: ignore[arg-type]


def build_rule(mode: str = "normal", modifier: str = "none") -> FlipTrigger:
    """按名称组合规则

    Args:
        mode: normal / reverse / fallen / reverse_fallen
        modifier: none / same / plus

    Raises:
        ConfigurationError: 名称未知
    """
    mode = (mode or "normal").lower()
    modifier = (modifier or "none").lower()

    if mode == "normal":
        comparison: ComparisonRule = StandardRule()
    elif mode == "reverse":
        comparison = ReversedRule(StandardRule())
    elif mode == "fallen":
        comparison = FallenRule(StandardRule())
    elif mode == "reverse_fallen":
        comparison = ReversedRule(FallenRule(StandardRule()))
    else:
        raise ConfigurationError(f"Unknown rule mode: {mode}", config_key="mode")

    triggers = {"none": BasicTrigger, "same": SameTrigger, "plus": PlusTrigger}
    if modifier not in triggers:
        raise ConfigurationError(f"Unknown rule modifier: {modifier}", config_key="modifier")

    rule = triggers[modifier](comparison)
    logger.debug("Built rule %r", rule)
    return rule
