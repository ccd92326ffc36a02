"""
渲染解析层 - 节点图 → 渲染属性

子模块：
- codec: 颜色/混合模式编码
- geometry: 曲线点投影与路径命令
- fills: 纯色/渐变填充渲染
- style: 图层样式解析
- text: 文本样式解析
- tree: 渲染树汇总
"""

from .codec import (
    blend_mode_from_string,
    blend_mode_to_string,
    color_to_string,
    format_number,
)
from .fills import (
    fill_blend_mode,
    fill_to_string,
    fill_to_style,
    gradient_to_string,
)
from .geometry import (
    PathCommand,
    parse_point,
    project,
    shape_path_commands,
    shape_path_to_d,
)
from .style import StyleResolver, box_style, resolve_style
from .text import TextStyleResolver, resolve_text_style
from .tree import RenderNode, RenderTreeBuilder, build_render_tree, resolve_images

__all__ = [
    "blend_mode_from_string",
    "blend_mode_to_string",
    "color_to_string",
    "format_number",
    "fill_blend_mode",
    "fill_to_string",
    "fill_to_style",
    "gradient_to_string",
    "PathCommand",
    "parse_point",
    "project",
    "shape_path_commands",
    "shape_path_to_d",
    "StyleResolver",
    "box_style",
    "resolve_style",
    "TextStyleResolver",
    "resolve_text_style",
    "RenderNode",
    "RenderTreeBuilder",
    "build_render_tree",
    "resolve_images",
]
