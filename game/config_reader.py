"""棋盘 / 牌组配置文件读取

棋盘文件::

    5 7
    CCXXXXC
    CXCXXXC
    ...

首行为 行数 列数，其后每行一个字符串，X 表示空洞，C 表示空格子。

牌组文件::

    Jerome 1 2 3 4
    Dragon A 9 7 3

每行一张卡：名称 北 南 东 西，攻击值为 1-9 或 A (=10)。
空行和 # 开头的注释行会被忽略。

解析后的每一项先经过 Pydantic 模型校验（CardEntry / BoardLayout），
再构造内部的 Card / Grid 对象。
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .card import Card, parse_attack
from .exceptions import DataLoadError, InvalidBoardError, MalformedConfigError
from .grid import Grid

logger = logging.getLogger(__name__)


# ==================== 校验模型 ====================


class CardEntry(BaseModel):
    """牌组文件中一行的校验模型"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1, max_length=40)
    north: int = Field(ge=1, le=10)
    south: int = Field(ge=1, le=10)
    east: int = Field(ge=1, le=10)
    west: int = Field(ge=1, le=10)

    @field_validator("north", "south", "east", "west", mode="before")
    @classmethod
    def parse_token(cls, v: object) -> object:
        if isinstance(v, str):
            return parse_attack(v)
        return v

    def to_card(self) -> Card:
        return Card.create(self.name, self.north, self.south, self.east, self.west)


class BoardLayout(BaseModel):
    """棋盘文件的校验模型"""

    model_config = ConfigDict(extra="forbid")

    rows: int = Field(ge=1)
    cols: int = Field(ge=1)
    lines: list[str]

    @field_validator("lines")
    @classmethod
    def only_known_cells(cls, v: list[str]) -> list[str]:
        for line in v:
            bad = set(line.upper()) - {"X", "C"}
            if bad:
                raise ValueError(f"unknown cell marker(s): {''.join(sorted(bad))}")
        return v

    @model_validator(mode="after")
    def shape_matches(self) -> BoardLayout:
        if len(self.lines) != self.rows:
            raise ValueError(f"expected {self.rows} rows, found {len(self.lines)}")
        for i, line in enumerate(self.lines):
            if len(line) != self.cols:
                raise ValueError(f"row {i} has {len(line)} cells, expected {self.cols}")
        return self


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    return str(err.get("msg", e))


# ==================== 解析 ====================


def parse_board(text: str, source: str | None = None) -> Grid:
    """把棋盘文件内容解析为 Grid

    Raises:
        MalformedConfigError: 头部或行内容不合法
        InvalidBoardError: 格子总数为偶数
    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line and not line.startswith("#")]
    if not lines:
        raise MalformedConfigError("Board file is empty", file_path=source, line=1)

    header = lines[0].split()
    if len(header) != 2 or not all(part.isdigit() for part in header):
        raise MalformedConfigError(
            f"Board header must be 'ROWS COLS', got {lines[0]!r}", file_path=source, line=1
        )
    rows, cols = int(header[0]), int(header[1])
    if (rows * cols) % 2 == 0:
        raise InvalidBoardError(rows=rows, cols=cols)

    try:
        layout = BoardLayout(rows=rows, cols=cols, lines=lines[1:])
    except ValidationError as e:
        raise MalformedConfigError(
            f"Invalid board layout: {_first_error(e)}", file_path=source
        ) from e
    return Grid.from_layout(layout.lines)


def parse_deck(text: str, source: str | None = None) -> list[Card]:
    """把牌组文件内容解析为卡牌列表（按文件顺序）

    Raises:
        MalformedConfigError: 某行字段数不对、攻击值非法或卡名重复
    """
    cards: list[Card] = []
    seen: set[str] = set()
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if len(parts) != 5:
            raise MalformedConfigError(
                f"Expected 'NAME N S E W', got {line!r}", file_path=source, line=lineno
            )
        name, north, south, east, west = parts
        try:
            entry = CardEntry(name=name, north=north, south=south, east=east, west=west)
        except ValidationError as e:
            raise MalformedConfigError(
                f"Invalid card {name!r}: {_first_error(e)}", file_path=source, line=lineno
            ) from e
        if entry.name in seen:
            raise MalformedConfigError(
                f"Duplicate card name {entry.name!r}", file_path=source, line=lineno
            )
        seen.add(entry.name)
        cards.append(entry.to_card())
    return cards


# ==================== 文件加载 ====================


def _read_text(path: str | Path) -> str:
    p = Path(path)
    if not p.is_file():
        raise DataLoadError(file_path=str(p), reason="file not found")
    try:
        data = p.read_bytes()
    except OSError as e:
        raise DataLoadError(file_path=str(p), reason=str(e)) from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        line = data[:e.start].count(b"\n") + 1
        raise MalformedConfigError(f"Not valid UTF-8: {e.reason}", file_path=str(p), line=line) from e


def load_board(path: str | Path) -> Grid:
    """读取棋盘配置文件

    Raises:
        DataLoadError: 文件不存在或无法读取
        MalformedConfigError / InvalidBoardError: 内容不合法或不是 UTF-8
    """
    grid = parse_board(_read_text(path), source=str(path))
    logger.info(
        "Loaded board %s: %dx%d, %d open tiles",
        path, grid.rows, grid.cols, len(grid.open_positions()),
    )
    return grid


def load_deck(path: str | Path) -> list[Card]:
    """读取牌组配置文件

    Raises:
        DataLoadError: 文件不存在或无法读取
        MalformedConfigError: 内容不合法或不是 UTF-8
    """
    cards = parse_deck(_read_text(path), source=str(path))
    logger.info("Loaded deck %s: %d cards", path, len(cards))
    return cards
