"""
枚举定义 - 节点判别标签与格式常量

数值与归档格式保持一致（BlendMode/FillType/TextAlignment 等直接来自JSON）
"""

from __future__ import annotations

from enum import Enum, IntEnum


class NodeClass(str, Enum):
    """节点判别标签（JSON中的 _class）"""
    PAGE = "page"
    ARTBOARD = "artboard"
    RECT = "rect"
    SHAPE_GROUP = "shapeGroup"
    GROUP = "group"
    COLOR = "color"
    GRADIENT = "gradient"
    GRADIENT_STOP = "gradientStop"
    STYLE = "style"
    GRAPHICS_CONTEXT_SETTINGS = "graphicsContextSettings"
    FILL = "fill"
    SHADOW = "shadow"
    INNER_SHADOW = "innerShadow"
    BORDER = "border"
    SYMBOL_MASTER = "symbolMaster"
    SYMBOL_INSTANCE = "symbolInstance"
    DOCUMENT = "document"
    EXTERNAL_REFERENCE = "MSJSONFileReference"
    TEXT_STYLE = "textStyle"
    BITMAP = "bitmap"
    SHAPE_PATH = "shapePath"
    RECTANGLE = "rectangle"
    OVAL = "oval"
    STAR = "star"
    POLYGON = "polygon"
    TRIANGLE = "triangle"
    PATH = "path"
    CURVE_POINT = "curvePoint"
    TEXT = "text"
    ATTRIBUTED_STRING = "MSAttributedString"

    @classmethod
    def lookup(cls, tag: object) -> NodeClass | None:
        """按标签查找，未知返回None"""
        try:
            return cls(tag)
        except ValueError:
            return None


class ShapeKind(str, Enum):
    """形状路径种类（共用同一几何来源）"""
    SHAPE_PATH = "shapePath"
    RECTANGLE = "rectangle"
    OVAL = "oval"
    STAR = "star"
    POLYGON = "polygon"
    TRIANGLE = "triangle"


class BlendMode(IntEnum):
    """混合模式"""
    NORMAL = 0
    DARKEN = 1
    MULTIPLY = 2
    COLOR_BURN = 3
    LIGHTEN = 4
    SCREEN = 5
    COLOR_DODGE = 6
    OVERLAY = 7
    SOFT_LIGHT = 8
    HARD_LIGHT = 9
    DIFFERENCE = 10
    EXCLUSION = 11
    HUE = 12
    SATURATION = 13
    COLOR = 14
    LUMINOSITY = 15
    PLUS_DARKER = 16
    PLUS_LIGHTER = 17


class FillType(IntEnum):
    """填充类型"""
    FLAT = 0
    GRADIENT = 1
    PATTERN = 4
    NOISE = 5


class GradientType(IntEnum):
    """渐变类型"""
    LINEAR = 0
    RADIAL = 1
    ANGULAR = 2


class TextAlignment(IntEnum):
    """段落对齐（NSAlignment）"""
    RIGHT = 1
    CENTER = 2
    JUSTIFY = 3
    LEFT = 4


class RefClass(str, Enum):
    """外部引用类型（_ref_class）"""
    PAGE = "MSImmutablePage"
    IMAGE_DATA = "MSImageData"
