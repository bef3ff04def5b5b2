"""简体中文翻译表（默认语言）。"""

STRINGS: dict[str, str] = {
    # ── 颜色 / 规则 ──
    "color.red": "红方",
    "color.blue": "蓝方",
    "rule.normal": "标准",
    "rule.reverse": "逆转",
    "rule.fallen": "下克上",
    "rule.reverse_fallen": "逆转下克上",
    "rule.none": "无",
    "rule.same": "同数",
    "rule.plus": "加算",

    # ── 异常 ──
    "exc.game_error": "游戏错误",
    "exc.invalid_action": "无效的操作",
    "exc.invalid_move": "无效的落子",
    "exc.out_of_bounds": "坐标越界",
    "exc.play_to_hole": "不能落子到空洞",
    "exc.cell_occupied": "该格子已有卡牌",
    "exc.bad_hand_index": "手牌索引无效",
    "exc.game_state": "游戏状态错误",
    "exc.game_not_started": "游戏尚未开始",
    "exc.game_started": "游戏已经开始",
    "exc.game_finished": "游戏已经结束",
    "exc.game_not_finished": "游戏尚未结束",
    "exc.config_error": "配置错误",
    "exc.malformed_config": "配置文件格式错误",
    "exc.invalid_board": "棋盘格子总数必须为奇数",
    "exc.data_load_error": "数据加载失败",
    "exc.deck_too_small": "牌组数量不足",
    "exc.no_valid_move": "没有可用的落子位置，棋盘已满",

    # ── UI ──
    "ui.title": "三重奏",
    "ui.turn": "当前回合: {color}",
    "ui.hand": "手牌:",
    "ui.score": "比分  {red_name}: {red}  {blue_name}: {blue}",
    "ui.choose_card": "选择手牌索引 [0-{max}]: ",
    "ui.choose_row": "选择行 [0-{max}]: ",
    "ui.choose_col": "选择列 [0-{max}]: ",
    "ui.invalid_choice": "无效选择",
    "ui.invalid_move": "无效落子: {reason}",
    "ui.played": "{player} 将 {card} 放置于 ({row}, {col})，翻转 {flips} 张",
    "ui.ai_thinking": "{player} 思考中...",
    "ui.hints": "提示（可翻转数量）:",
    "ui.game_over": "游戏结束！{winner} 获胜，得分 {score}",
    "ui.game_draw": "游戏结束！平局",

    # ── main.py ──
    "main.interrupted": "\n\n游戏被中断，再见！",
    "main.error": "\n发生错误: {error}",
}
