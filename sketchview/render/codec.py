"""
颜色与混合模式编码 - 通道值/混合模式 → 字符串

纯函数，无失败分支：
- 缺省/NaN 通道输出 0，缺省 alpha 输出 1
- 未知混合模式输出空字符串
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from ..models import BlendMode, Color, round_half_up

# 混合模式双向表（导入时构建，之后只读）
BLEND_MODE_NAMES: Mapping[int, str] = {
    int(mode): mode.name.lower().replace("_", "-") for mode in BlendMode
}
BLEND_MODE_VALUES: Mapping[str, int] = {name: value for value, name in BLEND_MODE_NAMES.items()}


def format_number(value: float | int) -> str:
    """
    数值格式化（与 JS Number#toString 一致）

    - 整数不带小数点：2.0 → "2"，0.5 → "0.5"
    - 指数 ∈ (-7, 21) 用定点表示：1e-05 → "0.00001"
    - 其余用指数表示，指数不补零：1e-07 → "1e-7"，1e21 → "1e+21"
    """
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"

    sign = "-" if number < 0 else ""
    # repr 给出最短往返数字串，Decimal 负责拆分有效数字与指数
    parts = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    point = len(digits) + parts.exponent
    exponent = point - 1

    if -7 < exponent < 21:
        if point <= 0:
            text = "0." + "0" * -point + digits
        elif point >= len(digits):
            text = digits + "0" * (point - len(digits))
        else:
            text = f"{digits[:point]}.{digits[point:]}"
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        text = f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"
    return sign + text


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _channel(value: Any) -> int:
    number = _to_float(value)
    if number is None:
        return 0
    return round_half_up(number * 255)


def _context_opacity(context: Any) -> float:
    if context is None:
        return 1
    if isinstance(context, Mapping):
        opacity = context.get("opacity")
    else:
        opacity = getattr(context, "opacity", None)
    return 1 if opacity is None else opacity


def color_to_string(color: Color | None, context: Any = None) -> str:
    """颜色 → "rgba(R,G,B,A)"，A = alpha × context.opacity"""
    if color is None:
        color = Color()
    alpha = _to_float(color.alpha)
    if alpha is None:
        alpha = 1
    a = alpha * _context_opacity(context)
    return (
        f"rgba({_channel(color.red)},{_channel(color.green)},"
        f"{_channel(color.blue)},{format_number(a)})"
    )


def blend_mode_to_string(blend_mode: int | None) -> str:
    """混合模式 → 短横线小写名称，未知返回空字符串"""
    if blend_mode is None or isinstance(blend_mode, bool):
        return ""
    if isinstance(blend_mode, float) and not blend_mode.is_integer():
        return ""
    try:
        return BLEND_MODE_NAMES.get(int(blend_mode), "")
    except (TypeError, ValueError, OverflowError):
        return ""


def blend_mode_from_string(name: str) -> int | None:
    """名称 → 混合模式，未知返回None"""
    return BLEND_MODE_VALUES.get(name)
