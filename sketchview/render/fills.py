"""
渐变与填充渲染 - 填充/渐变模型 → 画刷字符串

职责：
1. 纯色填充渲染为两个相同色标的线性渐变（与渐变填充共用一种表示）
2. 线性渐变按节点 frame 宽高投影 from/to，计算角度
3. 非线性渐变/未知填充类型降级为空标记，不抛出

测试要点：
- test_flat_fill_two_stops: 纯色两色标
- test_linear_gradient_angle: 角度计算
- test_stop_order_kept: 色标顺序不重排
- test_non_linear_gradient_empty: 非线性渐变标记
- test_fill_blend_mode_normal: 单填充混合模式 normal
"""

from __future__ import annotations

import logging
import math
from typing import Any

from ..interfaces import UnsupportedFeatureError
from ..models import BlendMode, Fill, FillType, Gradient, GradientStop, GradientType, Layer
from .codec import blend_mode_to_string, color_to_string, format_number
from .geometry import parse_point

logger = logging.getLogger(__name__)

EMPTY_GRADIENT = "<Empty>"


def gradient_stop_to_string(stop: GradientStop) -> str:
    return f"{color_to_string(stop.color)} {format_number(stop.position * 100)}%"


def gradient_angle(gradient: Gradient, node: Layer) -> float:
    """线性渐变角度：90 + atan2(Δy, Δx)（度）"""
    x1, y1 = parse_point(gradient.from_)
    x2, y2 = parse_point(gradient.to)
    width = node.frame.width
    height = node.frame.height
    x1 *= width
    x2 *= width
    y1 *= height
    y2 *= height
    return 90 + math.degrees(math.atan2(y2 - y1, x2 - x1))


def gradient_to_string(gradient: Gradient, node: Layer, strict: bool = False) -> str:
    """渐变 → linear-gradient 字符串（仅支持线性；strict 时不支持的类型抛出）"""
    if gradient.gradient_type != GradientType.LINEAR:
        if strict:
            raise UnsupportedFeatureError(f"不支持的渐变类型: {gradient.gradient_type}")
        logger.debug(f"不支持的渐变类型: {gradient.gradient_type}")
        return EMPTY_GRADIENT
    angle = gradient_angle(gradient, node)
    stops = ", ".join(gradient_stop_to_string(stop) for stop in gradient.stops)
    return f"linear-gradient({format_number(angle)}deg, {stops})"


def fill_to_string(fill: Fill, node: Layer, strict: bool = False) -> str:
    """填充 → 画刷字符串"""
    if fill.fill_type == FillType.FLAT:
        c = color_to_string(fill.color)
        return f"linear-gradient(0deg, {c},{c})"
    if fill.fill_type == FillType.GRADIENT:
        if fill.gradient is not None:
            return gradient_to_string(fill.gradient, node, strict)
        if strict:
            raise UnsupportedFeatureError("渐变填充缺少 gradient")
        logger.debug("渐变填充缺少 gradient")
        return ""
    if strict:
        raise UnsupportedFeatureError(f"不支持的填充类型: {fill.fill_type}")
    logger.debug(f"不支持的填充类型: {fill.fill_type}")
    return ""


def fill_blend_mode(fill: Fill) -> str:
    """单个填充的混合模式，无上下文时为 normal"""
    if fill.context_settings is None:
        return blend_mode_to_string(BlendMode.NORMAL)
    return blend_mode_to_string(fill.context_settings.blend_mode)


def fill_to_style(fill: Fill, node: Layer) -> dict[str, Any]:
    """填充 → {background, mix-blend-mode}，不支持的类型返回空dict"""
    background = fill_to_string(fill, node)
    if not background:
        return {}
    return {"background": background, "mix-blend-mode": fill_blend_mode(fill)}
