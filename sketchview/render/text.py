"""
文本样式解析器 - 文本样式 + 文本节点 → 文本属性

规则：
- 非左对齐时输出 text-align（左对齐为默认，不输出）
- 固定宽度文本输出 width，否则输出 white-space: nowrap（二者互斥）
- 总是输出 font-size 与 color（颜色不带不透明度上下文）
"""

from __future__ import annotations

from typing import Any

from ..interfaces import ITextStyleResolver
from ..models import Layer, TextAlignment, TextStyle
from .codec import color_to_string

ALIGNMENT_NAMES: dict[int, str] = {
    TextAlignment.LEFT: "left",
    TextAlignment.CENTER: "center",
    TextAlignment.RIGHT: "right",
    TextAlignment.JUSTIFY: "justify",
}


class TextStyleResolver(ITextStyleResolver):
    """文本样式解析器实现"""

    def resolve(self, text_style: TextStyle, node: Layer) -> dict[str, Any]:
        style: dict[str, Any] = {
            "font-size": text_style.font_size,
            "color": color_to_string(text_style.color),
        }

        alignment = text_style.alignment
        if alignment != TextAlignment.LEFT and alignment in ALIGNMENT_NAMES:
            style["text-align"] = ALIGNMENT_NAMES[alignment]

        if getattr(node, "wraps_to_box", False):
            style["width"] = node.frame.width
        else:
            style["white-space"] = "nowrap"

        return style


def resolve_text_style(text_style: TextStyle, node: Layer) -> dict[str, Any]:
    """便捷函数"""
    return TextStyleResolver().resolve(text_style, node)
