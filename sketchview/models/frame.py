"""
图框模型 - 节点边界框

Frame 为不可变值对象，构造时完成取整（四舍五入，.5 向上）
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import field_validator

from .base import SketchModel


def round_half_up(value: float) -> int:
    """四舍五入到整数（.5 向上，与 Math.round 一致）；非有限值取0"""
    number = float(value)
    if not math.isfinite(number):
        return 0
    return math.floor(number + 0.5)


class Frame(SketchModel):
    """边界框（父坐标系）"""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    model_config = {"frozen": True}

    @field_validator("x", "y", "width", "height", mode="before")
    @classmethod
    def _round(cls, value: Any) -> int:
        if value is None:
            return 0
        return round_half_up(value)

    @property
    def is_square(self) -> bool:
        return self.width == self.height
