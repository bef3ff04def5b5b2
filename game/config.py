"""游戏配置中心 (SSOT - 单一事实来源)

可调参数集中在 GameConfig 中，每一项都可以用 ``THREETRIOS_*`` 环境变量覆盖。
环境变量格式不对时记一条警告并使用默认值。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

T = TypeVar("T")

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


def _to_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _to_weights(raw: str) -> dict[str, int]:
    """``"flipmax=2,corner=1"`` → ``{"flipmax": 2, "corner": 1}``"""
    weights: dict[str, int] = {}
    for item in raw.split(","):
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"bad weight entry: {item!r}")
        weights[name.strip().lower()] = int(value)
    return weights


def _env(key: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, using default %r", key, raw, default)
        return default


def _default_weights() -> dict[str, int]:
    return {"flipmax": 2, "corner": 1, "leastlikely": 1}


@dataclass(frozen=True)
class GameConfig:
    """游戏配置 (不可变)

    环境变量:
    - THREETRIOS_BOARD / THREETRIOS_DECK: 棋盘、牌组配置文件
    - THREETRIOS_SHUFFLE / THREETRIOS_SEED: 开局前洗牌及其种子
    - THREETRIOS_AI_DELAY: 脚本玩家落子前的停顿秒数
    - THREETRIOS_WEIGHTS: 对抗策略的评估权重，如 ``flipmax=2,corner=1``
    - THREETRIOS_LOG_LEVEL / THREETRIOS_DEBUG / THREETRIOS_LOCALE
    """

    # ==================== 数据文件 ====================
    board_path: str = field(
        default_factory=lambda: _env("THREETRIOS_BOARD", str(_DATA_DIR / "board.config"), str)
    )
    deck_path: str = field(
        default_factory=lambda: _env("THREETRIOS_DECK", str(_DATA_DIR / "deck.config"), str)
    )

    # ==================== 发牌 ====================
    shuffle_deck: bool = field(default_factory=lambda: _env("THREETRIOS_SHUFFLE", False, _to_bool))
    shuffle_seed: int | None = field(default_factory=lambda: _env("THREETRIOS_SEED", None, int))

    # ==================== AI ====================
    ai_turn_delay: float = field(default_factory=lambda: _env("THREETRIOS_AI_DELAY", 0.0, float))
    minimax_weights: dict[str, int] = field(
        default_factory=lambda: _env("THREETRIOS_WEIGHTS", _default_weights(), _to_weights)
    )

    # ==================== 日志与本地化 ====================
    log_level: str = field(default_factory=lambda: _env("THREETRIOS_LOG_LEVEL", "INFO", str))
    debug_mode: bool = field(default_factory=lambda: _env("THREETRIOS_DEBUG", False, _to_bool))
    locale: str = field(default_factory=lambda: _env("THREETRIOS_LOCALE", "zh_CN", str))

    @classmethod
    def from_env(cls) -> GameConfig:
        """按当前环境变量创建配置"""
        return cls()


_config: GameConfig | None = None


def get_config() -> GameConfig:
    """全局配置（懒加载单例）"""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """丢弃单例，下次 get_config() 重新读取环境变量"""
    global _config
    _config = None
