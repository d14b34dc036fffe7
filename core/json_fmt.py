# -*- coding: utf-8 -*-
"""JSON 格式化引擎 — 纯函数，无 UI 依赖"""

import json
import math

# 超过此值的整数浮点保持浮点形式（与 JSON.stringify 的指数阈值一致）
_INT_FLOAT_LIMIT = 1e21


def _reject_constant(name):
    # NaN / Infinity 不是合法 JSON
    raise ValueError(f"invalid JSON constant: {name}")


def _parse_number(literal):
    """1.0 → 1；溢出为无穷大的数值 → null"""
    value = float(literal)
    if math.isinf(value):
        return None
    if value.is_integer() and abs(value) < _INT_FLOAT_LIMIT:
        return int(value)
    return value


def format_json(text, indent=2, sort_keys=False, ensure_ascii=False):
    """格式化（美化）JSON，非法输入抛出 ValueError"""
    obj = json.loads(text, parse_float=_parse_number,
                     parse_constant=_reject_constant)
    return json.dumps(obj, indent=indent, sort_keys=sort_keys,
                      ensure_ascii=ensure_ascii)


def try_pretty_json(text, indent=2):
    """能解析为 JSON 则返回美化结果，否则原样返回"""
    try:
        return format_json(text, indent=indent)
    except (ValueError, RecursionError):
        # 嵌套过深同样视为无法解析
        return text
