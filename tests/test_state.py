"""
游戏状态测试：发牌、落子、计分、胜负判定与推演副本
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.card import Card
from game.config_reader import load_board, load_deck
from game.enums import Color, GameStatus
from game.exceptions import (
    DeckTooSmallError,
    GameAlreadyFinishedError,
    GameAlreadyStartedError,
    GameNotFinishedError,
    GameNotStartedError,
    InvalidActionError,
    InvalidMoveError,
)
from game.grid import Grid
from game.rules import ReversedRule, StandardRule, build_rule
from game.state import GameState

DATA_DIR = Path(__file__).parent.parent / "data"


def _card(name, n=1, s=1, e=1, w=1):
    return Card.create(name, n, s, e, w)


def _pebbles(count):
    return [_card(f"P{i}") for i in range(count)]


def _jerome_deck():
    """红方: Jerome, Pebble；蓝方: Striker(西 5), Weak"""
    return [
        _card("Jerome", 1, 2, 3, 4),
        _card("Striker", w=5),
        _card("Pebble"),
        _card("Weak"),
    ]


def _started(layout, deck, rule=None):
    state = GameState(rule if rule is not None else build_rule())
    state.start_game(deck, Grid.from_layout(layout))
    return state


class TestStartGame:

    def test_deals_alternately_red_first(self):
        state = _started(["CCC"], _jerome_deck())
        assert [c.name for c in state.hand(Color.RED)] == ["Jerome", "Pebble"]
        assert [c.name for c in state.hand(Color.BLUE)] == ["Striker", "Weak"]
        assert all(c.owner is Color.RED for c in state.hand(Color.RED))
        assert state.status is GameStatus.IN_PROGRESS
        assert state.is_red_turn

    def test_deals_open_tiles_plus_one(self):
        state = _started(["CXC", "XCX", "CXC"], _pebbles(20))
        assert len(state.hand(Color.RED)) == 3
        assert len(state.hand(Color.BLUE)) == 3

    def test_data_files(self):
        state = GameState()
        state.start_game(load_deck(DATA_DIR / "deck.config"), load_board(DATA_DIR / "board.config"))
        assert (state.rows, state.cols) == (5, 7)
        assert len(state.hand(Color.RED)) == 8
        assert len(state.hand(Color.BLUE)) == 8
        assert state.hand(Color.RED)[0].name == "John"
        assert state.hand(Color.BLUE)[0].name == "Bob"

    def test_deck_too_small(self):
        with pytest.raises(DeckTooSmallError) as exc_info:
            _started(["CCC"], _pebbles(3))
        assert exc_info.value.required == 4
        assert isinstance(exc_info.value, InvalidActionError)

    def test_even_board_rejected(self):
        state = GameState()
        with pytest.raises(InvalidActionError):
            state.start_game(_pebbles(5), [[Card.tile(), Card.tile()]])
        assert not state.started

    def test_none_inputs(self):
        state = GameState()
        with pytest.raises(InvalidActionError):
            state.start_game(None, Grid.from_layout(["C"]))
        with pytest.raises(InvalidActionError):
            state.start_game([None, None], Grid.from_layout(["C"]))
        tile, hole = Card.tile(), Card.hole()
        for cells in ([None, [tile] * 3, [hole] * 3], [[tile] * 3, None, [hole] * 3], [[tile, None, hole]]):
            with pytest.raises(InvalidActionError):
                state.start_game(_pebbles(4), cells)
        assert state.status is GameStatus.NOT_STARTED

    def test_start_twice(self):
        state = _started(["CCC"], _jerome_deck())
        with pytest.raises(GameAlreadyStartedError):
            state.start_game(_jerome_deck(), Grid.from_layout(["CCC"]))

    def test_input_grid_not_shared(self):
        grid = Grid.from_layout(["CCC"])
        state = GameState()
        state.start_game(_jerome_deck(), grid)
        state.play(0, 0, 0)
        assert grid.cell(0, 0).is_open

    def test_queries_before_start(self):
        state = GameState()
        with pytest.raises(GameNotStartedError):
            state.play(0, 0, 0)
        with pytest.raises(GameNotStartedError):
            state.score(Color.RED)
        with pytest.raises(GameNotStartedError):
            state.winner()
        assert not state.is_valid_move(0, 0)


class TestPlay:

    def test_jerome_is_flipped(self):
        state = _started(["CCC"], _jerome_deck())
        state.play(0, 0, 0)
        assert not state.is_red_turn
        result = state.play(0, 1, 0)
        assert result.flip_count == 1
        assert state.card_at(0, 0).owner is Color.BLUE
        assert state.score(Color.RED) == 1
        assert state.score(Color.BLUE) == 3

    def test_reversed_rule(self):
        state = _started(["CCC"], _jerome_deck(), rule=ReversedRule(StandardRule()))
        state.play(0, 0, 0)
        result = state.play(0, 1, 0)
        assert result.flipped == []
        assert state.card_at(0, 0).owner is Color.RED

    def test_turn_alternates(self):
        state = _started(["CCC"], _jerome_deck())
        colors = []
        for col in range(3):
            colors.append(state.active_color)
            state.play(0, col, 0)
        assert colors == [Color.RED, Color.BLUE, Color.RED]

    def test_play_removes_card_from_hand(self):
        state = _started(["CCC"], _jerome_deck())
        state.play(0, 0, 1)
        assert [c.name for c in state.hand(Color.RED)] == ["Jerome"]
        assert state.card_at(0, 0).name == "Pebble"

    @pytest.mark.parametrize("row,col,hand_index", [
        (0, 1, 0),   # 空洞
        (1, 0, 0),   # 越界
        (0, -1, 0),  # 越界
        (0, 0, 5),   # 手牌索引
        (0, 0, -1),
    ])
    def test_invalid_move_leaves_state_unchanged(self, row, col, hand_index):
        state = _started(["CXC"], _pebbles(3))
        before = state.grid
        with pytest.raises(InvalidMoveError):
            state.play(row, col, hand_index)
        assert state.grid == before
        assert state.is_red_turn
        assert len(state.hand(Color.RED)) == 2

    def test_occupied_cell(self):
        state = _started(["CCC"], _jerome_deck())
        state.play(0, 0, 0)
        with pytest.raises(InvalidMoveError):
            state.play(0, 0, 0)
        assert not state.is_red_turn

    def test_game_over_and_draw(self):
        state = _started(["CCC"], _pebbles(4))
        results = [state.play(0, col, 0) for col in range(3)]
        assert results[-1].game_over
        assert results[-1].winner is None
        assert state.is_over()
        assert state.score(Color.RED) == 2
        assert state.score(Color.BLUE) == 2
        assert state.winner() is None
        with pytest.raises(GameAlreadyFinishedError):
            state.play(0, 0, 0)

    def test_winner(self):
        state = _started(["CCC"], _jerome_deck())
        state.play(0, 0, 0)  # RED Jerome
        state.play(0, 1, 0)  # BLUE Striker 翻掉 Jerome
        with pytest.raises(GameNotFinishedError):
            state.winner()
        result = state.play(0, 2, 0)  # RED Pebble
        assert result.game_over
        assert state.winner() is Color.BLUE
        assert result.winner is Color.BLUE

    def test_score_counts_hand_and_board(self):
        state = _started(["CCC"], _jerome_deck())
        total = state.score(Color.RED) + state.score(Color.BLUE)
        for col in range(3):
            state.play(0, col, 0)
            assert state.score(Color.RED) + state.score(Color.BLUE) == total


class TestSimulation:

    def test_count_possible_flips_matches_play(self):
        state = _started(["CCC"], _jerome_deck())
        state.play(0, 0, 0)
        striker = state.active_hand()[0]
        assert state.count_possible_flips(0, 1, striker) == 1
        assert state.count_possible_flips(0, 2, striker) == 0
        # 模拟不改变棋盘
        assert state.card_at(0, 0).owner is Color.RED
        assert state.play(0, 1, 0).flip_count == 1

    def test_count_possible_flips_uses_active_color(self):
        state = _started(["CCC"], _jerome_deck())
        state.play(0, 0, 0)
        # 红方的卡由蓝方打出时按蓝方计算
        assert state.count_possible_flips(0, 1, _card("Any", w=9)) == 1

    def test_count_possible_flips_rejects_bad_cell(self):
        state = _started(["CXC"], _pebbles(3))
        with pytest.raises(InvalidMoveError):
            state.count_possible_flips(0, 1, _card("Any"))
        with pytest.raises(InvalidMoveError):
            state.count_possible_flips(3, 3, _card("Any"))

    def test_simulate_is_independent(self):
        state = _started(["CCC"], _jerome_deck())
        sim = state.simulate()
        sim.play(0, 0, 0)
        assert state.card_at(0, 0).is_open
        assert state.is_red_turn
        assert len(state.hand(Color.RED)) == 2
        assert not sim.is_red_turn

    def test_is_valid_move(self):
        state = _started(["CXC"], _pebbles(3))
        assert state.is_valid_move(0, 0)
        assert not state.is_valid_move(0, 1)
        assert not state.is_valid_move(4, 4)
        state.play(0, 0, 0)
        assert not state.is_valid_move(0, 0)

    def test_snapshots_are_copies(self):
        state = _started(["CCC"], _jerome_deck())
        state.hand(Color.RED).clear()
        state.grid.set(0, 0, Card.hole())
        assert len(state.hand(Color.RED)) == 2
        assert state.card_at(0, 0).is_open
