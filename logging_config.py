"""日志配置

整个项目共用一套根日志设置：
- 日志写入 UTF-8 滚动文件，默认 logs/threetrios.log
- 控制台输出默认关闭，避免打乱棋盘渲染
- 重复调用不会叠加 handler（按名字查找后原地更新）

用法:
    from logging_config import setup_logging
    setup_logging(level=get_config().log_level)

环境变量覆盖:
    THREETRIOS_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    THREETRIOS_LOG_FILE=path/to/file.log
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable

FILE_HANDLER_NAME = "threetrios_file"
CONSOLE_HANDLER_NAME = "threetrios_console"
DEFAULT_LOG_FILE = Path("logs") / "threetrios.log"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    return logging._nameToLevel.get(name, logging.INFO)


def resolve_log_path(log_file: str | os.PathLike | None = None) -> Path:
    """日志文件的绝对路径；相对路径按当前工作目录展开"""
    path = Path(log_file) if log_file else DEFAULT_LOG_FILE
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def _install(
    root: logging.Logger,
    name: str,
    factory: Callable[[], logging.Handler],
    level: str | int,
    formatter: logging.Formatter,
) -> logging.Handler:
    handler = next((h for h in root.handlers if h.name == name), None)
    if handler is None:
        handler = factory()
        handler.name = name
        root.addHandler(handler)
    handler.setFormatter(formatter)
    handler.setLevel(_parse_level(level))
    return handler


def setup_logging(
    *,
    level: str | int = "INFO",
    log_file: str | None = None,
    enable_file: bool = True,
    enable_console: bool = False,
    console_level: str | int = "WARNING",
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """配置根 logger 并返回它。

    根 logger 固定为 DEBUG，由各 handler 自行按级别过滤；
    AI 决策在 DEBUG 级别记录，只有把 level 调到 DEBUG 才会落盘。
    """
    level = os.environ.get("THREETRIOS_LOG_LEVEL") or level
    log_file = os.environ.get("THREETRIOS_LOG_FILE") or log_file

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = resolve_log_path(log_file)
    if enable_file:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _install(
            root, FILE_HANDLER_NAME,
            lambda: RotatingFileHandler(
                str(log_path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8",
            ),
            level, formatter,
        )

    if enable_console:
        _install(root, CONSOLE_HANDLER_NAME, logging.StreamHandler, console_level, formatter)

    logging.getLogger(__name__).info(
        "Logging initialized | level=%s file=%s console=%s",
        level, log_path if enable_file else None, enable_console,
    )
    return root


def teardown_logging() -> int:
    """移除并关闭本项目安装的 handler，返回移除数量"""
    root = logging.getLogger()
    ours = [h for h in root.handlers if h.name in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME)]
    for handler in ours:
        root.removeHandler(handler)
        handler.close()
    return len(ours)
