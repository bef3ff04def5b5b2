"""脚本玩家的决策记录

每次脚本玩家落子，AIBot 记下策略名、所选卡牌、落点、
策略评分和实际翻牌数。用于调试策略和赛后复盘，
``--log-decisions FILE`` 会把整局记录导出为 JSON 数组。
"""

from __future__ import annotations

import json
import logging
import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AIDecision:
    """一次落子决策"""

    timestamp: float = field(default_factory=time.time)
    color: str = ""
    strategy: str = ""
    card: str = ""
    row: int = -1
    col: int = -1
    score: int = 0
    hand_size: int = 0
    flips: int = 0


class AIDecisionLogger:
    """决策记录器，enabled 为 False 时不记录任何内容"""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._entries: list[AIDecision] = []

    @property
    def history(self) -> list[AIDecision]:
        return list(self._entries)

    def for_color(self, color: str) -> list[AIDecision]:
        return [d for d in self._entries if d.color == color]

    def log(self, decision: AIDecision) -> None:
        if not self.enabled:
            return
        self._entries.append(decision)
        logger.debug(
            "%s[%s] %s -> (%d, %d) score=%d hand=%d flipped=%d",
            decision.color, decision.strategy, decision.card,
            decision.row, decision.col, decision.score, decision.hand_size, decision.flips,
        )

    def clear(self) -> None:
        self._entries.clear()

    def export_json(self, path: str | Path) -> None:
        """把全部决策按时间顺序写成 JSON 数组"""
        path = Path(path)
        path.write_text(
            json.dumps([asdict(d) for d in self._entries], indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.info("Exported %d AI decisions to %s", len(self._entries), path)

    def summary(self) -> dict[str, Any]:
        """
        汇总统计

        Returns:
            ``total``、各策略使用次数 ``strategies``、平均翻牌数 ``avg_flips``，
            以及按颜色拆分的 ``by_color``（每方的落子数和总翻牌数）
        """
        if not self._entries:
            return {"total": 0}

        by_color: dict[str, dict[str, int]] = {}
        for d in self._entries:
            stats = by_color.setdefault(d.color, {"moves": 0, "flips": 0})
            stats["moves"] += 1
            stats["flips"] += d.flips

        return {
            "total": len(self._entries),
            "strategies": dict(Counter(d.strategy for d in self._entries)),
            "avg_flips": sum(d.flips for d in self._entries) / len(self._entries),
            "by_color": by_color,
        }
