"""
数据模型层 - 文档节点图的类型化表示

所有解析器通过这些模型交互：
- Layer 及其子类: 页面/画板/分组/形状组/文本/位图/符号
- ShapePath: 五种形状共用的几何来源（ShapeKind 区分）
- Style: 填充/描边/阴影/上下文设置
- AssetReference/ResolvedImage: 归档资源引用与图片句柄
- NodeFactory: 按判别标签递归构建节点图
"""

from .assets import AssetReference, ResolvedImage
from .enums import (
    BlendMode,
    FillType,
    GradientType,
    NodeClass,
    RefClass,
    ShapeKind,
    TextAlignment,
)
from .factory import NodeFactory, build_node
from .frame import Frame, round_half_up
from .geometry import CurvePoint, Path, ShapePath
from .layers import (
    Artboard,
    AttributedString,
    Bitmap,
    Document,
    Group,
    Layer,
    Page,
    ShapeGroup,
    SymbolInstance,
    SymbolMaster,
    Text,
)
from .style import (
    Border,
    Color,
    Fill,
    Gradient,
    GradientStop,
    GraphicsContextSettings,
    Shadow,
    Style,
    TextStyle,
)

__all__ = [
    "AssetReference",
    "ResolvedImage",
    "BlendMode",
    "FillType",
    "GradientType",
    "NodeClass",
    "RefClass",
    "ShapeKind",
    "TextAlignment",
    "NodeFactory",
    "build_node",
    "Frame",
    "round_half_up",
    "CurvePoint",
    "Path",
    "ShapePath",
    "Artboard",
    "AttributedString",
    "Bitmap",
    "Document",
    "Group",
    "Layer",
    "Page",
    "ShapeGroup",
    "SymbolInstance",
    "SymbolMaster",
    "Text",
    "Border",
    "Color",
    "Fill",
    "Gradient",
    "GradientStop",
    "GraphicsContextSettings",
    "Shadow",
    "Style",
    "TextStyle",
]
