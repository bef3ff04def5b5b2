"""界面文案的多语言支持。

翻译表是同目录下的 Python 模块（``zh_CN.py``、``en_US.py``），
各自导出一个 ``STRINGS`` 字典，首次使用时才导入。

用法::

    from i18n import t, set_locale

    set_locale("en_US")
    print(t("ui.turn", color="Red"))          # → "Player: Red"

    from i18n import color_name, ruleset_label
    print(color_name("red"))                  # → "红方" / "Red"
    print(ruleset_label("reverse", "same"))   # → "逆转 / 同数" / "Reverse / Same"
"""

from __future__ import annotations

import importlib
import logging

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "zh_CN"
LOCALES: tuple[str, ...] = ("zh_CN", "en_US")

_locale: str = DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _table(locale: str) -> dict[str, str]:
    if locale not in _tables:
        if locale not in LOCALES:
            raise ValueError(f"Unsupported locale: {locale}")
        module = importlib.import_module(f".{locale}", __name__)
        _tables[locale] = module.STRINGS
        logger.debug("Loaded %d strings for %s", len(module.STRINGS), locale)
    return _tables[locale]


def set_locale(locale: str) -> None:
    """切换界面语言，未知语言抛 ValueError"""
    global _locale
    _table(locale)
    _locale = locale


def get_locale() -> str:
    return _locale


def get_available_locales() -> list[str]:
    return list(LOCALES)


def t(key: str, **kwargs: object) -> str:
    """翻译函数。

    在当前语言里查找 ``key``，找不到时回退到默认语言（zh_CN），
    仍然找不到则返回 ``[key]``。带参数时用 ``format_map`` 填充，
    参数不全时返回未填充的模板。
    """
    template = _table(_locale).get(key)
    if template is None and _locale != DEFAULT_LOCALE:
        template = _table(DEFAULT_LOCALE).get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s", key, _locale)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"
    if not kwargs:
        return template
    try:
        return template.format_map(kwargs)
    except KeyError as e:
        logger.warning("i18n format error: key='%s', missing=%s", key, e)
        return template


_ = t


def missing_keys(locale: str) -> set[str]:
    """默认语言中有、但 ``locale`` 里缺失的键"""
    return set(_table(DEFAULT_LOCALE)) - set(_table(locale))


# ── 领域名称 ──


def _display_name(prefix: str, value: str) -> str:
    key = f"{prefix}.{value}"
    if key in _table(_locale) or key in _table(DEFAULT_LOCALE):
        return t(key)
    return value


def color_name(value: str) -> str:
    """玩家颜色的显示名，如 ``"red"`` → ``"红方"``；未知值原样返回"""
    return _display_name("color", value)


def rule_name(value: str) -> str:
    """比较规则或翻面触发器的显示名（``normal`` / ``reverse`` / ``same`` ...）"""
    return _display_name("rule", value)


def ruleset_label(comparison: str, trigger: str) -> str:
    return f"{rule_name(comparison)} / {rule_name(trigger)}"
