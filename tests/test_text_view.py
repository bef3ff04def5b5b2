"""
纯文本视图测试
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.card import Card
from game.grid import Grid
from game.state import GameState
from ui.text_view import TextView


def _state(layout, deck):
    state = GameState()
    state.start_game(deck, Grid.from_layout(layout))
    return state


def _deck():
    return [
        Card.create("Jerome", 1, 2, 3, 4),
        Card.create("Striker", 1, 1, 1, 5),
        Card.create("Dragon", 10, 9, 7, 3),
        Card.create("Weak", 1, 1, 1, 1),
    ]


class TestTextView:

    def test_initial_render(self):
        view = TextView(_state(["CXC"], _deck()[:3]))
        assert view.render() == "Player: RED\n_X_\nHand:\nJerome 1 2 3 4\nDragon 10 9 7 3"

    def test_board_after_moves(self):
        state = _state(["CCC"], _deck())
        state.play(0, 0, 0)
        view = TextView(state)
        assert view.board_text() == "R__"
        state.play(0, 1, 0)
        assert view.board_text() == "BB_"

    def test_render_shows_active_hand(self):
        state = _state(["CCC"], _deck())
        for col in range(3):
            state.play(0, col, 0)
        # 红方最后一手后轮到蓝方，蓝方还剩一张
        assert TextView(state).render().endswith("Hand:\nWeak 1 1 1 1")
        assert TextView(state).hand_text() == "Weak 1 1 1 1"

    def test_hint_text(self):
        state = _state(["CCC"], _deck())
        state.play(0, 0, 0)
        striker = state.active_hand()[0]
        assert TextView(state).hint_text(striker) == "R10"

    def test_str(self):
        view = TextView(_state(["CXC"], _deck()[:3]))
        assert str(view) == view.render()
