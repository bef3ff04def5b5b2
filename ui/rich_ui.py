"""
Rich TUI Module
Uses the 'rich' library to render the board, hands and prompts in a terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from rich.align import Align
from rich.box import DOUBLE, ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from game.card import attack_token
from game.enums import Color, Direction
from i18n import color_name, ruleset_label
from i18n import t as _t

from .text_view import TextView

if TYPE_CHECKING:
    from game.card import Card
    from game.player import Player
    from game.state import GameState, PlayResult

_STYLES = {Color.RED: "bold white on red", Color.BLUE: "bold white on blue"}


class RichTerminalUI:
    """
    Rich TUI Class
    Implements the GameUI protocol on top of a rich Console.
    """

    def __init__(
        self,
        console: Console | None = None,
        input_func: Callable[[str], str] = input,
        show_hints: bool = False,
    ):
        self.console = console or Console(highlight=False)
        self.input_func = input_func
        self.hints_enabled = show_hints
        self.log_messages: list[str] = []
        self.max_log_lines = 8

    def clear_screen(self) -> None:
        self.console.clear()

    def show_title(self) -> None:
        title_text = Text(_t("ui.title"), style="bold red", justify="center")
        self.console.print(Panel(title_text, box=DOUBLE))

    # --- Game State Rendering ---

    def _render_cell(self, card: Card) -> Text:
        if card.is_hole:
            return Text("\n###\n", style="dim")
        if card.is_open:
            return Text("\n · \n")
        n, s, e, w = (
            attack_token(card.attack(d))
            for d in (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
        )
        return Text(f" {n} \n{w} {e}\n {s} ", style=_STYLES.get(card.owner, ""))

    def _render_board(self, state: GameState) -> Table:
        grid = state.grid
        table = Table(box=ROUNDED, show_header=True, show_lines=True)
        table.add_column("")
        for c in range(grid.cols):
            table.add_column(str(c), justify="center")
        for r in range(grid.rows):
            table.add_row(str(r), *(self._render_cell(grid.cell(r, c)) for c in range(grid.cols)))
        return table

    def _render_hand(self, state: GameState) -> Table:
        table = Table(box=ROUNDED, title=_t("ui.hand"))
        table.add_column("#", justify="right")
        table.add_column("Name")
        for label in ("N", "S", "E", "W"):
            table.add_column(label, justify="center")
        for i, card in enumerate(state.active_hand()):
            table.add_row(
                str(i),
                card.name,
                *(attack_token(card.attack(d))
                  for d in (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)),
            )
        return table

    def _render_score(self, state: GameState) -> Text:
        return Text(_t(
            "ui.score",
            red_name=color_name(Color.RED.value),
            red=state.score(Color.RED),
            blue_name=color_name(Color.BLUE.value),
            blue=state.score(Color.BLUE),
        ))

    def _render_logs(self) -> Panel:
        log_text = Text()
        for msg in self.log_messages[-self.max_log_lines:]:
            log_text.append(msg + "\n")
        return Panel(log_text, title="Log", border_style="cyan")

    def show_state(self, state: GameState, player: Player) -> None:
        """Render the board, the score line and the active hand"""
        turn = _t("ui.turn", color=color_name(player.color.value))
        mode = ruleset_label(state.rule.comparison.name, state.rule.name)
        header = Table.grid(expand=True)
        header.add_column(justify="left")
        header.add_column(justify="right")
        header.add_row(Text(turn, style=_STYLES[player.color]), mode)
        self.console.print(Panel(header, box=ROUNDED))
        self.console.print(Align.center(self._render_board(state)))
        self.console.print(self._render_score(state))
        if self.log_messages:
            self.console.print(self._render_logs())
        if not player.is_ai:
            self.console.print(self._render_hand(state))

    def show_hints(self, state: GameState, card: Card) -> None:
        self.console.print(Text(_t("ui.hints"), style="bold yellow"))
        self.console.print(TextView(state).hint_text(card))

    def show_play(self, result: PlayResult, player: Player) -> None:
        self.show_log(_t(
            "ui.played",
            player=player.name,
            card=result.card.name,
            row=result.row,
            col=result.col,
            flips=result.flip_count,
        ))

    def show_invalid_move(self, reason: str) -> None:
        self.console.print(f"[red]{_t('ui.invalid_move', reason=reason)}[/red]")

    def show_log(self, message: str) -> None:
        self.log_messages.append(message)

    def show_game_over(self, state: GameState) -> None:
        self.console.print(Align.center(self._render_board(state)))
        winner = state.winner()
        if winner is None:
            message = _t("ui.game_draw")
        else:
            message = _t("ui.game_over", winner=color_name(winner.value), score=state.score(winner))
        self.console.print(Panel(Text(message, style="bold green", justify="center"), box=DOUBLE))

    # --- Input ---

    def _ask_int(self, prompt: str, upper: int) -> int:
        while True:
            raw = self.input_func(prompt).strip()
            if raw.isdigit() and 0 <= int(raw) <= upper:
                return int(raw)
            self.console.print(f"[red]{_t('ui.invalid_choice')}[/red]")

    def choose_move(self, state: GameState, player: Player) -> tuple[int, int, int]:
        hand = state.active_hand()
        hand_index = self._ask_int(_t("ui.choose_card", max=len(hand) - 1), len(hand) - 1)
        if self.hints_enabled:
            self.show_hints(state, hand[hand_index])
        row = self._ask_int(_t("ui.choose_row", max=state.rows - 1), state.rows - 1)
        col = self._ask_int(_t("ui.choose_col", max=state.cols - 1), state.cols - 1)
        return hand_index, row, col
