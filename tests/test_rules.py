"""
对战规则测试：比较规则与翻牌触发规则
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.card import Card
from game.enums import Color, Direction
from game.exceptions import ConfigurationError
from game.grid import Grid
from game.rules import (
    BasicTrigger,
    ComparisonRule,
    FallenRule,
    FlipTrigger,
    PlusTrigger,
    ReversedRule,
    SameTrigger,
    StandardRule,
    as_trigger,
    build_rule,
)


class TestComparisonRules:

    def test_standard(self):
        rule = StandardRule()
        assert rule.compare(5, 3)
        assert not rule.compare(3, 3)
        assert not rule.compare(1, 10)

    def test_reversed(self):
        rule = ReversedRule(StandardRule())
        assert rule.compare(3, 5)
        assert not rule.compare(5, 3)
        assert not rule.compare(4, 4)
        assert not rule.compare(10, 1)

    def test_fallen_ace_beats_ten(self):
        rule = FallenRule(StandardRule())
        assert rule.compare(1, 10)
        assert rule.compare(10, 1)
        assert not rule.compare(1, 9)
        assert rule.compare(7, 2)

    def test_reverse_fallen(self):
        rule = ReversedRule(FallenRule(StandardRule()))
        # A 攻击 1 获胜，1 攻击 A 失败
        assert rule.compare(10, 1)
        assert not rule.compare(1, 10)
        assert rule.compare(3, 5)
        assert not rule.compare(5, 3)

    def test_names(self):
        assert StandardRule().name == "normal"
        assert ReversedRule().name == "reverse"
        assert FallenRule().name == "fallen"
        assert ReversedRule(FallenRule()).name == "reverse_fallen"

    def test_decide_reads_facing_sides(self):
        attacker = Card.create("Att", 1, 1, 1, 5, owner=Color.BLUE)
        defender = Card.create("Def", 1, 1, 3, 9, owner=Color.RED)
        rule = StandardRule()
        assert rule.decide(attacker, defender, Direction.WEST, Direction.EAST)
        assert not rule.decide(attacker, defender, Direction.WEST, Direction.WEST)

    def test_decide_on_empty_cells(self):
        attacker = Card.create("Att", 9, 9, 9, 9, owner=Color.BLUE)
        assert not StandardRule().decide(attacker, Card.tile(), Direction.NORTH, Direction.SOUTH)
        assert not StandardRule().decide(attacker, Card.hole(), Direction.NORTH, Direction.SOUTH)

    def test_protocols(self):
        assert isinstance(StandardRule(), ComparisonRule)
        assert isinstance(SameTrigger(StandardRule()), FlipTrigger)


def _cross_grid(placed_facing: dict) -> Grid:
    """3x3 棋盘，按 {方向: 朝向中心的数值} 在中心四周放红方卡"""
    grid = Grid.from_layout(["CCC", "CCC", "CCC"])
    for direction, value in placed_facing.items():
        r, c = grid.neighbor(1, 1, direction)
        attacks = {d: 1 for d in Direction}
        attacks[direction.opposite] = value
        grid.set(r, c, Card(name=f"N{r}{c}", attacks=attacks, owner=Color.RED))
    return grid


class TestTriggers:

    def test_basic_has_no_combo(self):
        grid = _cross_grid({Direction.NORTH: 3, Direction.WEST: 4})
        placed = Card.create("Mid", 3, 1, 1, 4, owner=Color.BLUE)
        assert BasicTrigger(StandardRule()).combo_targets(grid, 1, 1, placed) == []

    def test_same_needs_two_matches(self):
        grid = _cross_grid({Direction.NORTH: 3, Direction.WEST: 4, Direction.EAST: 8})
        placed = Card.create("Mid", 3, 1, 2, 4, owner=Color.BLUE)
        assert SameTrigger(StandardRule()).combo_targets(grid, 1, 1, placed) == [(0, 1), (1, 0)]

        single = _cross_grid({Direction.NORTH: 3, Direction.WEST: 6})
        assert SameTrigger(StandardRule()).combo_targets(single, 1, 1, placed) == []

    def test_same_ignores_own_color(self):
        grid = _cross_grid({Direction.NORTH: 3, Direction.WEST: 4})
        placed = Card.create("Mid", 3, 1, 1, 4, owner=Color.RED)
        assert SameTrigger(StandardRule()).combo_targets(grid, 1, 1, placed) == []

    def test_plus_groups_by_sum(self):
        grid = _cross_grid({
            Direction.NORTH: 2,
            Direction.SOUTH: 6,
            Direction.WEST: 3,
            Direction.EAST: 9,
        })
        # 北 5+2=7，西 4+3=7，南 4+6=10，东 1+9=10，两组都成立
        placed = Card.create("Mid", 5, 4, 1, 4, owner=Color.BLUE)
        targets = PlusTrigger(StandardRule()).combo_targets(grid, 1, 1, placed)
        assert targets == [(0, 1), (2, 1), (1, 0), (1, 2)]

    def test_plus_single_sum_no_combo(self):
        grid = _cross_grid({Direction.NORTH: 2, Direction.WEST: 5})
        placed = Card.create("Mid", 5, 1, 1, 4, owner=Color.BLUE)
        assert PlusTrigger(StandardRule()).combo_targets(grid, 1, 1, placed) == []

    def test_trigger_delegates_to_comparison(self):
        attacker = Card.create("Att", 1, 1, 1, 2, owner=Color.BLUE)
        defender = Card.create("Def", 1, 1, 3, 1, owner=Color.RED)
        trigger = PlusTrigger(ReversedRule(StandardRule()))
        assert trigger.decide(attacker, defender, Direction.WEST, Direction.EAST)

    def test_as_trigger(self):
        wrapped = as_trigger(StandardRule())
        assert isinstance(wrapped, BasicTrigger)
        same = SameTrigger(StandardRule())
        assert as_trigger(same) is same


class TestBuildRule:

    @pytest.mark.parametrize("mode", ["normal", "reverse", "fallen", "reverse_fallen"])
    @pytest.mark.parametrize("modifier", ["none", "same", "plus"])
    def test_all_combinations(self, mode, modifier):
        rule = build_rule(mode, modifier)
        assert rule.name == modifier
        assert rule.comparison.name == mode

    def test_case_insensitive(self):
        assert build_rule("REVERSE", "Plus").name == "plus"

    def test_unknown(self):
        with pytest.raises(ConfigurationError):
            build_rule("sideways")
        with pytest.raises(ConfigurationError):
            build_rule("normal", "minus")
