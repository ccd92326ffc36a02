"""
样式解析器 - 样式模型 + 节点 → 扁平样式描述

规则按固定顺序执行，后面的规则可以覆盖前面写入的键：
1. 圆角（单子形状的形状组：椭圆→50%，矩形→首点圆角）
2. 矢量填充（仅矢量模式）
3. 描边（首个启用的描边）
4. 阴影（外阴影在前，内阴影在后）
5. 交互（锁定优先于点击穿透）
6. 可见性
7. 变换（旋转 + 翻转矩阵）
8. 不透明度/混合模式（normal 不输出）

测试要点：
- test_corner_radius_oval / test_corner_radius_rectangle
- test_vector_fill_topmost
- test_border_raster / test_border_vector
- test_shadow_order
- test_pointer_events_locked_wins
- test_transform_rotate_flip
- test_blend_normal_omitted
"""

from __future__ import annotations

from typing import Any

from ..config import get_config
from ..interfaces import IStyleResolver, MalformedGeometryError
from ..models import (
    BlendMode,
    Border,
    Frame,
    Layer,
    Shadow,
    ShapeGroup,
    ShapeKind,
    ShapePath,
    Style,
)
from .codec import blend_mode_to_string, color_to_string, format_number


def border_to_string(border: Border) -> str:
    return f"{format_number(border.thickness)}px solid {color_to_string(border.color)}"


def border_to_style(border: Border, is_vector: bool = False) -> dict[str, Any]:
    """描边：位图模式为 border 简写，矢量模式为 stroke/stroke-width"""
    if not is_vector:
        return {"border": border_to_string(border)}
    return {"stroke": color_to_string(border.color), "stroke-width": border.thickness}


def shadow_to_string(shadow: Shadow) -> str:
    text = (
        f"{format_number(shadow.offset_x)}px {format_number(shadow.offset_y)}px "
        f"{format_number(shadow.blur_radius)}px {format_number(shadow.spread)}px "
        f"{color_to_string(shadow.color)}"
    )
    return f"inset {text}" if shadow.inset else text


def box_style(frame: Frame) -> dict[str, Any]:
    """绝对定位盒子（图层在父坐标系中的位置与尺寸）"""
    return {
        "display": "block",
        "position": "absolute",
        "left": frame.x,
        "top": frame.y,
        "width": frame.width,
        "height": frame.height,
    }


class StyleResolver(IStyleResolver):
    """样式解析器实现"""

    def __init__(self, fill_rule: str | None = None):
        self.config = get_config()
        self.fill_rule = fill_rule or self.config.render.vector_fill_rule

    def resolve(
        self,
        style: Style | None,
        node: Layer | None,
        is_vector: bool = False,
    ) -> dict[str, Any]:
        """计算扁平样式描述"""
        style = style or Style()
        node = node if node is not None else Layer()
        ret: dict[str, Any] = {}

        self._apply_corner_radius(ret, node)
        if is_vector:
            self._apply_vector_fill(ret, style)
        self._apply_border(ret, style, is_vector)
        self._apply_shadows(ret, style)
        self._apply_interaction(ret, node)
        if not node.is_visible:
            ret["display"] = "none"
        self._apply_transform(ret, node)
        self._apply_context(ret, style)

        return ret

    def _apply_corner_radius(self, ret: dict[str, Any], node: Layer) -> None:
        """单个未编辑子形状的形状组：椭圆/矩形转换为圆角"""
        if not isinstance(node, ShapeGroup) or len(node.layers) != 1:
            return
        shape = node.layers[0]
        if not isinstance(shape, ShapePath) or shape.edited:
            return

        if shape.kind == ShapeKind.OVAL and node.frame.is_square:
            ret["border-radius"] = "50%"
        if shape.kind == ShapeKind.RECTANGLE:
            if not shape.path.points:
                raise MalformedGeometryError(f"矩形路径没有任何点: {shape.name}")
            # 只取第一个点的圆角，四角复用
            radius = f"{format_number(shape.path.points[0].corner_radius)}px"
            ret["border-radius"] = " ".join([radius] * 4)

    def _apply_vector_fill(self, ret: dict[str, Any], style: Style) -> None:
        """矢量填充：取最后声明的启用填充（视觉最上层）的纯色"""
        ret["fill-rule"] = self.fill_rule
        fills = list(reversed(style.enabled_fills()))
        if not fills:
            ret["fill"] = "none"
            return
        ret["fill"] = color_to_string(fills[0].color)

    @staticmethod
    def _apply_border(ret: dict[str, Any], style: Style, is_vector: bool) -> None:
        borders = style.enabled_borders()
        if not borders:
            return
        ret["box-sizing"] = "border-box"
        ret.update(border_to_style(borders[0], is_vector))

    @staticmethod
    def _apply_shadows(ret: dict[str, Any], style: Style) -> None:
        shadows = style.enabled_shadows()
        if shadows:
            ret["box-shadow"] = ", ".join(shadow_to_string(s) for s in shadows)

    @staticmethod
    def _apply_interaction(ret: dict[str, Any], node: Layer) -> None:
        if node.is_locked:
            ret["pointer-events"] = "none"
        elif not node.has_click_through:
            ret["pointer-events"] = "auto"

    @staticmethod
    def _apply_transform(ret: dict[str, Any], node: Layer) -> None:
        parts = []
        if node.rotation:
            parts.append(f"rotate({format_number(-node.rotation)}deg)")
        if node.is_flipped_horizontal or node.is_flipped_vertical:
            a = -1 if node.is_flipped_horizontal else 1
            d = -1 if node.is_flipped_vertical else 1
            parts.append(f"matrix({a}, 0, 0, {d}, 0, 0)")
        if parts:
            ret["transform"] = " ".join(parts)

    @staticmethod
    def _apply_context(ret: dict[str, Any], style: Style) -> None:
        context = style.context_settings
        if context is None:
            return
        if context.opacity != 1:
            ret["opacity"] = context.opacity
        if context.blend_mode != BlendMode.NORMAL:
            ret["mix-blend-mode"] = blend_mode_to_string(context.blend_mode)


def resolve_style(
    style: Style | None,
    node: Layer | None,
    is_vector: bool = False,
) -> dict[str, Any]:
    """便捷函数：使用默认配置解析样式"""
    return StyleResolver().resolve(style, node, is_vector)
