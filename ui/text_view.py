"""纯文本视图

把 GameState 渲染为纯文本，供日志、测试和不带颜色的终端使用::

    Player: RED
    __X
    _B_
    X_R
    Hand:
    Dragon 9 3 7 A
    Jerome 1 2 3 4
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from game.card import Card
    from game.grid import Grid
    from game.state import GameState


class TextView:
    """GameState 的纯文本渲染器"""

    def __init__(self, state: GameState):
        self.state = state

    def board_text(self, grid: Grid | None = None) -> str:
        grid = grid or self.state.grid
        lines = []
        for r in range(grid.rows):
            lines.append("".join(grid.cell(r, c).short_str for c in range(grid.cols)))
        return "\n".join(lines)

    def hand_text(self) -> str:
        return "\n".join(str(card) for card in self.state.active_hand())

    def render(self) -> str:
        parts = [
            f"Player: {self.state.active_color.name}",
            self.board_text(),
            "Hand:",
        ]
        hand = self.hand_text()
        if hand:
            parts.append(hand)
        return "\n".join(parts)

    def hint_text(self, card: Card) -> str:
        """每个空格子显示 card 放在该处能翻的张数（超过 9 显示 +）"""
        grid = self.state.grid
        lines = []
        for r in range(grid.rows):
            row = []
            for c in range(grid.cols):
                cell = grid.cell(r, c)
                if cell.is_open:
                    flips = self.state.count_possible_flips(r, c, card)
                    row.append(str(flips) if flips < 10 else "+")
                else:
                    row.append(cell.short_str)
            lines.append("".join(row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
