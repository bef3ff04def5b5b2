"""
三重奏游戏核心模块
包含卡牌、棋盘、对战规则、对战结算、游戏状态、玩家和事件系统
"""

from .battle import BattleEngine, Flip
from .card import AMPLIFIED_ACE, MAX_ATTACK, MIN_ATTACK, Card
from .enums import Color, Direction, GameStatus
from .events import EventBus, EventType, GameEvent
from .grid import Grid
from .player import Player, PlayerKind
from .rules import (
    BasicTrigger, FallenRule, PlusTrigger, ReversedRule, SameTrigger,
    StandardRule, build_rule,
)
from .state import GameState, PlayResult

__all__ = [
    # 卡牌与棋盘
    'Card', 'Grid', 'MIN_ATTACK', 'MAX_ATTACK', 'AMPLIFIED_ACE',
    'Color', 'Direction', 'GameStatus',
    # 规则
    'StandardRule', 'ReversedRule', 'FallenRule',
    'BasicTrigger', 'SameTrigger', 'PlusTrigger', 'build_rule',
    # 结算与状态
    'BattleEngine', 'Flip', 'GameState', 'PlayResult',
    # 玩家
    'Player', 'PlayerKind',
    # 事件系统
    'EventBus', 'EventType', 'GameEvent',
]

__version__ = '1.0.0'
