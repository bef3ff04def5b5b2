"""English translation table."""

STRINGS: dict[str, str] = {
    # ── colors / rules ──
    "color.red": "Red",
    "color.blue": "Blue",
    "rule.normal": "Normal",
    "rule.reverse": "Reverse",
    "rule.fallen": "Fallen Ace",
    "rule.reverse_fallen": "Reverse Fallen Ace",
    "rule.none": "None",
    "rule.same": "Same",
    "rule.plus": "Plus",

    # ── exceptions ──
    "exc.game_error": "Game error",
    "exc.invalid_action": "Invalid action",
    "exc.invalid_move": "Invalid move",
    "exc.out_of_bounds": "Row or column out of bounds",
    "exc.play_to_hole": "Cannot play to a hole",
    "exc.cell_occupied": "Cell already holds a card",
    "exc.bad_hand_index": "Invalid hand index",
    "exc.game_state": "Invalid game state",
    "exc.game_not_started": "The game has not started",
    "exc.game_started": "The game has already started",
    "exc.game_finished": "The game is already over",
    "exc.game_not_finished": "The game is not finished",
    "exc.config_error": "Configuration error",
    "exc.malformed_config": "Malformed configuration file",
    "exc.invalid_board": "The board must have an odd number of cells",
    "exc.data_load_error": "Failed to load data",
    "exc.deck_too_small": "The deck does not have enough cards",
    "exc.no_valid_move": "No valid moves, the board is full",

    # ── UI ──
    "ui.title": "Three Trios",
    "ui.turn": "Player: {color}",
    "ui.hand": "Hand:",
    "ui.score": "Score  {red_name}: {red}  {blue_name}: {blue}",
    "ui.choose_card": "Hand index [0-{max}]: ",
    "ui.choose_row": "Row [0-{max}]: ",
    "ui.choose_col": "Column [0-{max}]: ",
    "ui.invalid_choice": "Invalid choice",
    "ui.invalid_move": "Invalid move: {reason}",
    "ui.played": "{player} played {card} at ({row}, {col}), flipping {flips}",
    "ui.ai_thinking": "{player} is thinking...",
    "ui.hints": "Hints (possible flips):",
    "ui.game_over": "Game Over! {winner} wins with a score of {score}",
    "ui.game_draw": "Game Over! It's a draw",

    # ── main.py ──
    "main.interrupted": "\n\nGame interrupted. Goodbye!",
    "main.error": "\nError: {error}",
}
