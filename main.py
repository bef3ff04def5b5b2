"""
三重奏 (Three Trios) - 命令行终端版
主程序入口

使用方法:
    python main.py
    python main.py --p1 human --p2 computer:flipmax --mode reverse --modifier plus
    python main.py --p1 computer:corner --p2 computer:minimax --seed 7 --lang en_US
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from logging_config import setup_logging

logger = logging.getLogger(__name__)

# 确保可以导入项目模块
sys.path.insert(0, str(Path(__file__).parent))

from ai.decision_log import AIDecisionLogger  # noqa: E402
from ai.factory import StrategyType, create_strategy, parse_player_spec  # noqa: E402
from game.config import get_config  # noqa: E402
from game.config_reader import load_board, load_deck  # noqa: E402
from game.enums import Color  # noqa: E402
from game.events import EventBus, attach_event_logging  # noqa: E402
from game.exceptions import GameError  # noqa: E402
from game.game_controller import GameController  # noqa: E402
from game.player import Player  # noqa: E402
from game.rules import RULE_MODES, RULE_MODIFIERS, build_rule  # noqa: E402
from game.state import GameState  # noqa: E402
from i18n import get_available_locales, set_locale  # noqa: E402
from i18n import t as _t  # noqa: E402
from ui.rich_ui import RichTerminalUI  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    strategies = ", ".join(t.value for t in StrategyType)
    parser = argparse.ArgumentParser(description="三重奏 卡牌对战")
    parser.add_argument("--p1", default="human", help=f"红方: human 或 computer:<{strategies}>")
    parser.add_argument("--p2", default="computer:flipmax", help="蓝方，格式同 --p1")
    parser.add_argument("--mode", choices=RULE_MODES, default="normal", help="比较规则")
    parser.add_argument("--modifier", choices=RULE_MODIFIERS, default="none", help="翻牌触发规则")
    parser.add_argument("--board", help="棋盘配置文件")
    parser.add_argument("--deck", help="牌组配置文件")
    parser.add_argument("--seed", type=int, help="洗牌随机种子（指定即洗牌）")
    parser.add_argument("--hints", action="store_true", help="为人类玩家显示翻牌提示")
    parser.add_argument("--lang", choices=get_available_locales(), help="界面语言")
    parser.add_argument("--log-decisions", metavar="FILE", help="把 AI 决策导出为 JSON")
    return parser


def make_player(spec: str, color: Color, label: str) -> Player:
    """根据命令行描述创建玩家"""
    kind = parse_player_spec(spec)
    if kind is None:
        return Player.human(label, color)
    return Player.scripted(f"{label} [{kind.value}]", color, create_strategy(kind))


def run(argv: list[str] | None = None) -> int:
    """解析参数并运行一局，返回退出码"""
    args = build_parser().parse_args(argv)
    cfg = get_config()

    setup_logging(level=cfg.log_level, enable_console=cfg.debug_mode)
    set_locale(args.lang or cfg.locale)

    try:
        red = make_player(args.p1, Color.RED, "Player 1")
        blue = make_player(args.p2, Color.BLUE, "Player 2")
    except ValueError as e:
        build_parser().error(str(e))

    grid = load_board(args.board or cfg.board_path)
    deck = load_deck(args.deck or cfg.deck_path)
    seed = args.seed if args.seed is not None else cfg.shuffle_seed
    if seed is not None or cfg.shuffle_deck:
        random.Random(seed).shuffle(deck)
        logger.info("Deck shuffled with seed %s", seed)

    state = GameState(build_rule(args.mode, args.modifier))
    decisions = AIDecisionLogger(enabled=bool(args.log_decisions))
    ui = RichTerminalUI(show_hints=args.hints)
    events = EventBus()
    attach_event_logging(events)
    controller = GameController(state, (red, blue), ui, events=events, decisions=decisions)
    winner = controller.play_game(deck, grid)
    logger.info("Winner: %s", winner.name if winner else "draw")

    if args.log_decisions:
        decisions.export_json(args.log_decisions)
        logger.info("AI decision summary: %s", decisions.summary())
    return 0


def main():
    """程序入口"""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        print(_t("main.interrupted"))
        sys.exit(0)
    except GameError as e:
        logger.exception("Game error")
        print(_t("main.error", error=e))
        sys.exit(1)


if __name__ == "__main__":
    main()
