"""策略工厂

按名称创建策略，并解析命令行中的玩家描述::

    human
    computer:flipmax
    computer:complex
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Mapping

from .corner_strategy import CornerStrategy
from .flip_max_strategy import FlipMaxStrategy
from .min_exposure_strategy import MinExposureStrategy
from .minimax_strategy import MinimaxStrategy
from .queue_strategy import QueueStrategy

if TYPE_CHECKING:
    from .strategy import PlayerStrategy


class StrategyType(Enum):
    """策略类型枚举"""

    FLIPMAX = "flipmax"          # 最大翻牌
    CORNER = "corner"            # 角落防守
    LEASTLIKELY = "leastlikely"  # 最少暴露
    MINIMAX = "minimax"          # 单层对抗
    COMPLEX = "complex"          # 先角落，之后单层对抗


def create_strategy(
    kind: StrategyType | str, weights: Mapping[str, int] | None = None
) -> PlayerStrategy:
    """按类型创建策略

    Args:
        kind: StrategyType 或其字符串值
        weights: 单层对抗策略的评估权重（仅 minimax / complex 使用）

    Raises:
        ValueError: 未知的策略名称
    """
    kind = StrategyType(kind.lower()) if isinstance(kind, str) else kind
    if kind is StrategyType.FLIPMAX:
        return FlipMaxStrategy()
    if kind is StrategyType.CORNER:
        return CornerStrategy()
    if kind is StrategyType.LEASTLIKELY:
        return MinExposureStrategy()
    if kind is StrategyType.MINIMAX:
        return MinimaxStrategy(weights)
    return QueueStrategy(CornerStrategy()).then(MinimaxStrategy(weights))


def parse_player_spec(spec: str) -> StrategyType | None:
    """解析玩家描述：``human`` 返回 None，``computer:<strategy>`` 返回策略类型

    Raises:
        ValueError: 描述格式不正确或策略未知
    """
    text = spec.strip().lower()
    if text == "human":
        return None
    kind, sep, strategy = text.partition(":")
    if kind != "computer" or not sep:
        raise ValueError(f"Player must be 'human' or 'computer:<strategy>', got {spec!r}")
    try:
        return StrategyType(strategy)
    except ValueError as e:
        choices = ", ".join(t.value for t in StrategyType)
        raise ValueError(f"Unknown strategy {strategy!r}, choose from: {choices}") from e
