"""
样式模型 - 颜色/渐变/填充/描边/阴影/文本样式

内阴影不再是阴影的子类型，而是 inset=True 的 Shadow
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base import SketchModel
from .enums import BlendMode, FillType, GradientType, TextAlignment


class Color(SketchModel):
    """颜色（各通道0~1，可缺省）"""
    red: float | None = None
    green: float | None = None
    blue: float | None = None
    alpha: float | None = None


class GraphicsContextSettings(SketchModel):
    """图层上下文（不透明度/混合模式）"""
    opacity: float = 1
    blend_mode: int = BlendMode.NORMAL


class GradientStop(SketchModel):
    """渐变色标"""
    color: Color = Field(default_factory=Color)
    position: float = 0


class Gradient(SketchModel):
    """渐变（from/to 为 "{u, v}" 归一化字符串）"""
    gradient_type: int = GradientType.LINEAR
    from_: str = Field("{0.5, 0}", alias="from")
    to: str = "{0.5, 1}"
    stops: list[GradientStop] = Field(default_factory=list)


class Fill(SketchModel):
    """填充"""
    # 缺少 isEnabled 视为禁用（Fill/Border/Shadow 一致）
    is_enabled: bool = False
    fill_type: int = FillType.FLAT
    color: Color = Field(default_factory=Color)
    gradient: Gradient | None = None
    context_settings: GraphicsContextSettings | None = None


class Border(SketchModel):
    """描边"""
    is_enabled: bool = False
    color: Color = Field(default_factory=Color)
    thickness: float = 1
    fill_type: int = FillType.FLAT
    position: int | None = None


class Shadow(SketchModel):
    """阴影（inset=True 为内阴影）"""
    is_enabled: bool = False
    offset_x: float = 0
    offset_y: float = 0
    blur_radius: float = 0
    spread: float = 0
    color: Color = Field(default_factory=Color)
    inset: bool = False


class TextStyle(SketchModel):
    """文本样式（encodedAttributes 保持归档原始结构）"""
    encoded_attributes: dict[str, Any] = Field(default_factory=dict)

    def _lookup(self, *keys: str) -> Any:
        value: Any = self.encoded_attributes
        for key in keys:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
        return value

    @property
    def alignment(self) -> int:
        """段落对齐，缺省为左对齐"""
        value = self._lookup("NSParagraphStyle", "NSAlignment")
        return TextAlignment.LEFT if value is None else value

    @property
    def font_size(self) -> float | None:
        return self._lookup(
            "MSAttributedStringFontAttribute",
            "NSFontDescriptorAttributes",
            "NSFontSizeAttribute",
        )

    @property
    def color(self) -> Color:
        raw = self.encoded_attributes.get("NSColor")
        if isinstance(raw, Color):
            return raw
        if isinstance(raw, dict):
            return Color.model_validate({k: v for k, v in raw.items() if not k.startswith("_")})
        return Color()


class Style(SketchModel):
    """图层样式"""
    fills: list[Fill] | None = None
    borders: list[Border] | None = None
    shadows: list[Shadow] | None = None
    inner_shadows: list[Shadow] | None = None
    context_settings: GraphicsContextSettings | None = None
    text_style: TextStyle | None = None

    @field_validator("inner_shadows", mode="after")
    @classmethod
    def _mark_inset(cls, value: list[Shadow] | None) -> list[Shadow] | None:
        if value is None:
            return None
        return [s if s.inset else s.model_copy(update={"inset": True}) for s in value]

    def enabled_fills(self) -> list[Fill]:
        return [f for f in self.fills or [] if f.is_enabled]

    def enabled_borders(self) -> list[Border]:
        return [b for b in self.borders or [] if b.is_enabled]

    def enabled_shadows(self) -> list[Shadow]:
        """外阴影在前，内阴影在后，各自保持声明顺序"""
        outer = [s for s in self.shadows or [] if s.is_enabled]
        inner = [s for s in self.inner_shadows or [] if s.is_enabled]
        return outer + inner
