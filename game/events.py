"""
事件总线
控制器把开局、落子、翻面、回合切换和终局作为事件发布，
UI、日志等监听者按需订阅，不直接依赖控制器
"""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .battle import Flip
    from .card import Card
    from .enums import Color

logger = logging.getLogger(__name__)


class EventType(Enum):
    """游戏事件类型"""

    GAME_START = auto()
    CARD_PLAYED = auto()
    CARDS_FLIPPED = auto()
    TURN_CHANGED = auto()
    INVALID_MOVE = auto()
    GAME_OVER = auto()


@dataclass
class GameEvent:
    """一条游戏事件，附带的数据放在 data 中"""

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def color(self) -> Color | None:
        return self.data.get("color")

    @property
    def card(self) -> Card | None:
        return self.data.get("card")

    @property
    def flips(self) -> list[Flip]:
        return self.data.get("flips", [])

    @property
    def winner(self) -> Color | None:
        return self.data.get("winner")

    @property
    def message(self) -> str:
        return self.data.get("message", "")

    def describe(self) -> str:
        """单行描述，用于日志"""
        name = self.event_type.name
        if self.event_type is EventType.CARD_PLAYED:
            return f"{name} {self.color.name} {self.card.name} at ({self.data['row']}, {self.data['col']})"
        if self.event_type is EventType.CARDS_FLIPPED:
            cells = ", ".join(f"({f.row}, {f.col})" for f in self.flips)
            return f"{name} {self.color.name} x{len(self.flips)}: {cells}"
        if self.event_type is EventType.GAME_OVER:
            winner = self.winner.name if self.winner else "draw"
            return f"{name} {winner} RED {self.data.get('red')} - BLUE {self.data.get('blue')}"
        if self.event_type is EventType.INVALID_MOVE:
            return f"{name} {self.color.name}: {self.message}"
        return f"{name} {self.color.name}" if self.color else name


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    事件总线

    处理器按优先级从高到低调用，全局处理器先于按类型订阅的处理器。
    最近 max_history 条事件保留在历史中。
    """

    def __init__(self, max_history: int = 100):
        self._handlers: dict[EventType, list[tuple[int, EventHandler]]] = defaultdict(list)
        self._global_handlers: list[tuple[int, EventHandler]] = []
        self._history: deque[GameEvent] = deque(maxlen=max_history)

    @staticmethod
    def _insert(handlers: list[tuple[int, EventHandler]], handler: EventHandler, priority: int) -> None:
        handlers.append((priority, handler))
        handlers.sort(key=lambda item: item[0], reverse=True)

    def subscribe(self, event_type: EventType, handler: EventHandler, priority: int = 0) -> None:
        """
        订阅一种事件

        Args:
            event_type: 事件类型
            handler: 事件处理器
            priority: 优先级（数字越大越先执行，相同优先级按订阅顺序）
        """
        self._insert(self._handlers[event_type], handler, priority)

    def subscribe_all(self, handler: EventHandler, priority: int = 0) -> None:
        self._insert(self._global_handlers, handler, priority)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        self._handlers[event_type] = [
            (p, h) for p, h in self._handlers[event_type] if h != handler
        ]

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """从全局订阅和所有类型订阅中移除 handler"""
        self._global_handlers = [(p, h) for p, h in self._global_handlers if h != handler]
        for event_type in list(self._handlers):
            self.unsubscribe(event_type, handler)

    def publish(self, event: GameEvent) -> GameEvent:
        """
        发布事件

        处理器抛出的异常只记录日志，不会打断对局。
        """
        self._history.append(event)
        for _, handler in self._global_handlers + self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler failed for %s", event.event_type.name)
        return event

    def emit(self, event_type: EventType, **data) -> GameEvent:
        """用关键字参数构造事件并发布"""
        return self.publish(GameEvent(event_type=event_type, data=data))

    def clear(self) -> None:
        """清除所有订阅（历史保留）"""
        self._handlers.clear()
        self._global_handlers.clear()

    def get_history(self, count: int = 10) -> list[GameEvent]:
        """最近 count 条事件，按发布顺序"""
        if count <= 0:
            return []
        return list(self._history)[-count:]


def attach_event_logging(bus: EventBus, event_logger: logging.Logger | None = None) -> EventHandler:
    """
    给总线挂上日志监听：终局记 INFO，非法落子记 WARNING，其余记 DEBUG

    Returns:
        挂上的处理器，可用 ``bus.unsubscribe_all`` 取下
    """
    target = event_logger or logger

    def _log(event: GameEvent) -> None:
        if event.event_type is EventType.GAME_OVER:
            level = logging.INFO
        elif event.event_type is EventType.INVALID_MOVE:
            level = logging.WARNING
        else:
            level = logging.DEBUG
        target.log(level, "event: %s", event.describe())

    bus.subscribe_all(_log, priority=100)
    return _log
