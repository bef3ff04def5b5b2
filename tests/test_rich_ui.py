import io
import os
import sys

import pytest
from rich.console import Console

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ai.flip_max_strategy import FlipMaxStrategy
from game.card import Card
from game.enums import Color
from game.grid import Grid
from game.player import Player
from game.state import GameState
from i18n import set_locale
from ui.rich_ui import RichTerminalUI


@pytest.fixture(autouse=True)
def _en_locale():
    set_locale("en_US")
    yield
    set_locale("zh_CN")


def _ui(inputs=(), hints=False):
    out = io.StringIO()
    answers = iter(inputs)
    ui = RichTerminalUI(
        console=Console(file=out, width=100, color_system=None),
        input_func=lambda prompt: next(answers),
        show_hints=hints,
    )
    return ui, out


def _state():
    deck = [
        Card.create("Jerome", 1, 2, 3, 4),
        Card.create("Striker", 1, 1, 1, 5),
        Card.create("Dragon", 10, 9, 7, 3),
        Card.create("Weak", 1, 1, 1, 1),
    ]
    state = GameState()
    state.start_game(deck, Grid.from_layout(["CCC"]))
    return state


def test_rich_ui_instantiation():
    ui = RichTerminalUI()
    assert ui is not None
    assert not ui.hints_enabled


def test_show_title():
    ui, out = _ui()
    ui.show_title()
    assert "Three Trios" in out.getvalue()


def test_show_state_lists_hand_for_human():
    ui, out = _ui()
    ui.show_state(_state(), Player.human("Alice", Color.RED))
    text = out.getvalue()
    assert "Player: Red" in text
    assert "Jerome" in text
    assert "Dragon" in text
    assert "Score" in text


def test_show_state_hides_hand_for_bot():
    ui, out = _ui()
    ui.show_state(_state(), Player.scripted("Bot", Color.RED, FlipMaxStrategy()))
    assert "Jerome" not in out.getvalue()


def test_show_play_goes_to_log():
    ui, out = _ui()
    state = _state()
    result = state.play(0, 0, 0)
    ui.show_play(result, Player.human("Alice", Color.RED))
    assert ui.log_messages == ["Alice played Jerome at (0, 0), flipping 0"]
    ui.show_state(state, Player.human("Bob", Color.BLUE))
    assert "Alice played Jerome" in out.getvalue()


def test_choose_move_reprompts_on_bad_input():
    ui, out = _ui(["x", "7", "1", "0", "2"])
    move = ui.choose_move(_state(), Player.human("Alice", Color.RED))
    assert move == (1, 0, 2)
    assert out.getvalue().count("Invalid choice") == 2


def test_choose_move_shows_hints():
    ui, out = _ui(["0", "0", "1"], hints=True)
    state = _state()
    state.play(0, 0, 0)
    move = ui.choose_move(state, Player.human("Bob", Color.BLUE))
    assert move == (0, 0, 1)
    text = out.getvalue()
    assert "Hints" in text
    assert "R10" in text


def test_show_invalid_move():
    ui, out = _ui()
    ui.show_invalid_move("Cannot play to a hole")
    assert "Invalid move: Cannot play to a hole" in out.getvalue()


def test_show_game_over():
    ui, out = _ui()
    state = _state()
    for col in range(3):
        state.play(0, col, 0)
    ui.show_game_over(state)
    text = out.getvalue()
    assert "Game Over" in text
