"""
AI模块
提供落子策略与脚本玩家
"""

from .bot import AIBot
from .corner_strategy import CornerStrategy
from .decision_log import AIDecision, AIDecisionLogger
from .factory import StrategyType, create_strategy, parse_player_spec
from .flip_max_strategy import FlipMaxStrategy
from .min_exposure_strategy import MinExposureStrategy
from .minimax_strategy import MinimaxStrategy
from .queue_strategy import QueueStrategy
from .strategy import Move, PlayerStrategy, break_tie, fallback_move

__all__ = [
    'AIBot', 'AIDecision', 'AIDecisionLogger',
    'Move', 'PlayerStrategy', 'break_tie', 'fallback_move',
    'FlipMaxStrategy', 'CornerStrategy', 'MinExposureStrategy',
    'MinimaxStrategy', 'QueueStrategy',
    'StrategyType', 'create_strategy', 'parse_player_spec',
]
