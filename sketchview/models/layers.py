"""
图层模型 - 页面/画板/分组/形状组/文本/位图/符号/文档

所有图层共用 Layer 基类：frame、旋转/翻转、锁定/可见/点击穿透、样式、子图层
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .assets import AssetReference
from .base import SketchModel
from .enums import NodeClass
from .frame import Frame
from .style import Style


class Layer(SketchModel):
    """图层基类"""
    NODE_CLASS: ClassVar[NodeClass | None] = None

    object_id: str | None = Field(None, alias="do_objectID")
    name: str = ""
    frame: Frame = Field(default_factory=Frame)
    rotation: float = 0
    is_flipped_horizontal: bool = False
    is_flipped_vertical: bool = False
    is_locked: bool = False
    is_visible: bool = True
    has_click_through: bool = False
    style: Style | None = None

    # 子图层由节点工厂构建，未知类型保持原始数据
    layers: list[Any] = Field(default_factory=list)

    @property
    def node_class(self) -> str:
        return self.NODE_CLASS.value if self.NODE_CLASS else "layer"

    def child_layers(self) -> list[Layer]:
        """已类型化的子图层"""
        return [layer for layer in self.layers if isinstance(layer, Layer)]


class Page(Layer):
    """页面"""
    NODE_CLASS: ClassVar[NodeClass | None] = NodeClass.PAGE


class Artboard(Layer):
    """画板"""
    NODE_CLASS: ClassVar[NodeClass | None] = NodeClass.ARTBOARD


class Group(Layer):
    """分组"""
    NODE_CLASS: ClassVar[NodeClass | None] = NodeClass.GROUP


class ShapeGroup(Layer):
    """形状组（子图层为 ShapePath）"""
    NODE_CLASS: ClassVar[NodeClass | None] = NodeClass.SHAPE_GROUP


class SymbolMaster(Layer):
    """符号母版"""
    NODE_CLASS: ClassVar[NodeClass | None] = NodeClass.SYMBOL_MASTER
    symbol_id: str | None = Field(None, alias="symbolID")


class SymbolInstance(Layer):
    """符号实例"""
    NODE_CLASS: ClassVar[NodeClass | None] = NodeClass.SYMBOL_INSTANCE
    symbol_id: str | None = Field(None, alias="symbolID")


class AttributedString(SketchModel):
    """富文本"""
    string: str = ""
    attributes: list[Any] = Field(default_factory=list)


class Text(Layer):
    """文本图层（textBehaviour 非0表示固定宽度换行）"""
    NODE_CLASS: ClassVar[NodeClass | None] = NodeClass.TEXT
    text_behaviour: int = 0
    attributed_string: AttributedString | dict[str, Any] | None = None

    @property
    def wraps_to_box(self) -> bool:
        return bool(self.text_behaviour)


class Bitmap(Layer):
    """位图图层"""
    NODE_CLASS: ClassVar[NodeClass | None] = NodeClass.BITMAP
    image: AssetReference | None = None


class Document(SketchModel):
    """文档根节点（pages 为页面引用）"""
    object_id: str | None = Field(None, alias="do_objectID")
    pages: list[AssetReference] = Field(default_factory=list)
    assets: Any = None
    layer_styles: Any = None
    layer_text_styles: Any = None
