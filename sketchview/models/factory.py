"""
节点工厂 - 归档JSON → 类型化节点图

职责：
1. 按 _class 判别标签（NodeClass）分派到对应模型
2. 自底向上递归构建（先子节点，后父节点）
3. 外部引用绑定所在归档
4. 未知标签保持原始 dict，不中断构建

测试要点：
- test_build_shape_group: 形状组/形状路径构建
- test_inner_shadow_inset: 内阴影标记
- test_reference_bound: 引用绑定归档
- test_unknown_class_kept_raw: 未知标签保持原样
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..interfaces import INodeFactory
from .assets import AssetReference
from .base import SketchModel
from .enums import NodeClass, ShapeKind
from .frame import Frame
from .geometry import CurvePoint, Path, ShapePath
from .layers import (
    Artboard,
    AttributedString,
    Bitmap,
    Document,
    Group,
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

if TYPE_CHECKING:
    from ..interfaces import IArchive

logger = logging.getLogger(__name__)

CLASS_KEY = "_class"

# 标签 → 模型（一对一）
_MODEL_TYPES: dict[NodeClass, type[SketchModel]] = {
    NodeClass.PAGE: Page,
    NodeClass.ARTBOARD: Artboard,
    NodeClass.RECT: Frame,
    NodeClass.SHAPE_GROUP: ShapeGroup,
    NodeClass.GROUP: Group,
    NodeClass.COLOR: Color,
    NodeClass.GRADIENT: Gradient,
    NodeClass.GRADIENT_STOP: GradientStop,
    NodeClass.STYLE: Style,
    NodeClass.GRAPHICS_CONTEXT_SETTINGS: GraphicsContextSettings,
    NodeClass.FILL: Fill,
    NodeClass.SHADOW: Shadow,
    NodeClass.BORDER: Border,
    NodeClass.SYMBOL_MASTER: SymbolMaster,
    NodeClass.SYMBOL_INSTANCE: SymbolInstance,
    NodeClass.DOCUMENT: Document,
    NodeClass.TEXT_STYLE: TextStyle,
    NodeClass.BITMAP: Bitmap,
    NodeClass.PATH: Path,
    NodeClass.CURVE_POINT: CurvePoint,
    NodeClass.TEXT: Text,
    NodeClass.ATTRIBUTED_STRING: AttributedString,
}

# 形状标签 → ShapeKind（统一为 ShapePath）
_SHAPE_KINDS: dict[NodeClass, ShapeKind] = {
    NodeClass.SHAPE_PATH: ShapeKind.SHAPE_PATH,
    NodeClass.RECTANGLE: ShapeKind.RECTANGLE,
    NodeClass.OVAL: ShapeKind.OVAL,
    NodeClass.STAR: ShapeKind.STAR,
    NodeClass.POLYGON: ShapeKind.POLYGON,
    NodeClass.TRIANGLE: ShapeKind.TRIANGLE,
}


def _strip_private(fields: dict[str, Any]) -> dict[str, Any]:
    """去掉下划线开头的归档元数据键"""
    return {k: v for k, v in fields.items() if not k.startswith("_")}


class NodeFactory(INodeFactory):
    """递归节点工厂"""

    def __init__(self, archive: IArchive | None = None):
        self.archive = archive
        self._builders: dict[NodeClass, Callable[[dict[str, Any]], Any]] = {
            node_class: self._model_builder(model)
            for node_class, model in _MODEL_TYPES.items()
        }
        for node_class, kind in _SHAPE_KINDS.items():
            self._builders[node_class] = self._shape_builder(kind)
        self._builders[NodeClass.INNER_SHADOW] = self._build_inner_shadow
        self._builders[NodeClass.EXTERNAL_REFERENCE] = self._build_reference

    def build(self, data: Any) -> Any:
        """递归构建节点"""
        if isinstance(data, list):
            return [self.build(item) for item in data]
        if not isinstance(data, dict):
            return data

        fields = {key: self.build(value) for key, value in data.items()}

        tag = data.get(CLASS_KEY)
        node_class = NodeClass.lookup(tag)
        if node_class is None:
            if tag is not None:
                logger.debug(f"未知节点类型，保持原始数据: {tag}")
            return fields

        return self._builders[node_class](fields)

    @staticmethod
    def _model_builder(model: type[SketchModel]) -> Callable[[dict[str, Any]], Any]:
        def build(fields: dict[str, Any]) -> Any:
            return model.model_validate(_strip_private(fields))
        return build

    @staticmethod
    def _shape_builder(kind: ShapeKind) -> Callable[[dict[str, Any]], Any]:
        def build(fields: dict[str, Any]) -> Any:
            return ShapePath.model_validate({**_strip_private(fields), "kind": kind})
        return build

    @staticmethod
    def _build_inner_shadow(fields: dict[str, Any]) -> Shadow:
        return Shadow.model_validate({**_strip_private(fields), "inset": True})

    def _build_reference(self, fields: dict[str, Any]) -> AssetReference:
        data = {k: v for k, v in fields.items() if k != CLASS_KEY}
        return AssetReference.model_validate(data).bind(self.archive)


def build_node(data: Any, archive: IArchive | None = None) -> Any:
    """便捷函数：构建节点图"""
    return NodeFactory(archive).build(data)
