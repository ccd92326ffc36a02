"""
几何模型 - CurvePoint / Path / ShapePath

ShapePath 以 kind 区分矩形/椭圆/星形/多边形/三角形，几何计算共用一套
"""

from __future__ import annotations

from pydantic import Field

from .base import SketchModel
from .enums import ShapeKind
from .layers import Layer


class CurvePoint(SketchModel):
    """曲线点（坐标均为 "{u, v}" 归一化字符串）"""
    point: str = "{0, 0}"
    curve_from: str = "{0, 0}"
    curve_to: str = "{0, 0}"
    corner_radius: float = 0
    has_curve_from: bool = False
    has_curve_to: bool = False


class Path(SketchModel):
    """路径"""
    is_closed: bool = False
    points: list[CurvePoint] = Field(default_factory=list)


class ShapePath(Layer):
    """形状路径"""
    kind: ShapeKind = ShapeKind.SHAPE_PATH
    path: Path = Field(default_factory=Path)
    edited: bool = False

    @property
    def node_class(self) -> str:
        return self.kind.value
