"""游戏异常模块

三类错误：
- 配置错误（ConfigurationError 及子类）：棋盘/牌组文件缺失或有误，启动失败
- 参数错误（InvalidActionError 及子类）：坐标越界、落子到空洞等，调用方可重试
- 状态错误（GameStateError 及子类）：调用顺序错误，如未开始就落子

每个异常都带 ``message``（默认取当前语言的文案）和 ``details`` 字典。
"""

from __future__ import annotations

from typing import Any

from i18n import t as _t


def _compact(**fields: Any) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


class GameError(Exception):
    """游戏异常基类

    main.py 在顶层捕获 GameError，打印本地化信息后以退出码 1 结束。
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 参数错误 ====================


class InvalidActionError(GameError):
    """调用方传入了不合法的参数（牌组为空、棋盘不合规等）"""

    def __init__(self, message: str | None = None, reason: str | None = None):
        super().__init__(message or _t("exc.invalid_action"), _compact(reason=reason))
        self.reason = reason


class InvalidMoveError(InvalidActionError):
    """无效落子

    坐标越界、目标为空洞、目标已被占用或手牌索引越界时抛出。
    校验先于任何状态修改，抛出时游戏状态保持不变。
    """

    def __init__(
        self,
        message: str | None = None,
        row: int | None = None,
        col: int | None = None,
        hand_index: int | None = None,
    ):
        super().__init__(message or _t("exc.invalid_move"))
        self.row = row
        self.col = col
        self.hand_index = hand_index
        self.details.update(_compact(row=row, col=col, hand_index=hand_index))


class DeckTooSmallError(InvalidActionError):
    """牌组张数少于开放格子数 + 1"""

    def __init__(self, message: str | None = None, required: int = 0, available: int = 0):
        super().__init__(message or _t("exc.deck_too_small"))
        self.required = required
        self.available = available
        self.details.update(required=required, available=available)


# ==================== 状态错误 ====================


class GameStateError(GameError):
    """当前阶段不允许该操作"""

    def __init__(
        self,
        message: str | None = None,
        current_state: str | None = None,
        expected_state: str | None = None,
    ):
        super().__init__(
            message or _t("exc.game_state"),
            _compact(current_state=current_state, expected_state=expected_state),
        )
        self.current_state = current_state
        self.expected_state = expected_state


class GameNotStartedError(GameStateError):
    def __init__(self, message: str | None = None):
        super().__init__(message or _t("exc.game_not_started"), current_state="not_started")


class GameAlreadyStartedError(GameStateError):
    def __init__(self, message: str | None = None):
        super().__init__(
            message or _t("exc.game_started"),
            current_state="in_progress", expected_state="not_started",
        )


class GameAlreadyFinishedError(GameStateError):
    """棋盘已满后仍尝试落子"""

    def __init__(self, message: str | None = None):
        super().__init__(message or _t("exc.game_finished"), current_state="finished")


class GameNotFinishedError(GameStateError):
    """对局未结束时查询胜者"""

    def __init__(self, message: str | None = None):
        super().__init__(
            message or _t("exc.game_not_finished"),
            current_state="in_progress", expected_state="finished",
        )


class NoValidMoveError(GameStateError):
    """棋盘已满，策略无法给出任何落子"""

    def __init__(self, message: str | None = None):
        super().__init__(message or _t("exc.no_valid_move"), current_state="board_full")


# ==================== 配置错误 ====================


class ConfigurationError(GameError):
    """棋盘或牌组配置有问题，对局无法开始"""

    def __init__(self, message: str | None = None, config_key: str | None = None, **details: Any):
        super().__init__(message or _t("exc.config_error"), _compact(config_key=config_key, **details))
        self.config_key = config_key


class InvalidBoardError(ConfigurationError):
    """棋盘格子总数为偶数，或行列形状不规则"""

    def __init__(self, message: str | None = None, rows: int = 0, cols: int = 0):
        super().__init__(message or _t("exc.invalid_board"), rows=rows, cols=cols)
        self.rows = rows
        self.cols = cols


class MalformedConfigError(ConfigurationError):
    """配置文件内容无法解析，line 为出错的行号（从 1 开始）"""

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        line: int | None = None,
    ):
        super().__init__(message or _t("exc.malformed_config"), file_path=file_path, line=line)
        self.file_path = file_path
        self.line = line


class DataLoadError(ConfigurationError):
    """配置文件不存在或无法读取"""

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        super().__init__(message or _t("exc.data_load_error"), file_path=file_path, reason=reason)
        self.file_path = file_path
        self.reason = reason


# ==================== 工具函数 ====================


def raise_if_game_not_started(started: bool) -> None:
    """
    Raises:
        GameNotStartedError: 游戏尚未开始
    """
    if not started:
        raise GameNotStartedError()


def raise_if_game_finished(over: bool) -> None:
    """
    Raises:
        GameAlreadyFinishedError: 游戏已经结束
    """
    if over:
        raise GameAlreadyFinishedError()
