"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(rectangle_group, sketch_archive):
        assert rectangle_group.layers[0].kind == ShapeKind.RECTANGLE
"""

from __future__ import annotations

import io
import json
import zipfile
from typing import Any, Generator

import pytest

from sketchview.assets import ZipArchive
from sketchview.config import RuntimeConfig
from sketchview.models import (
    Border,
    Color,
    CurvePoint,
    Fill,
    Frame,
    GraphicsContextSettings,
    Path,
    Shadow,
    ShapeGroup,
    ShapeKind,
    ShapePath,
    Style,
)

# 1x1 PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置"""
    return RuntimeConfig()


# ============================================================================
# 数据模型 Fixtures
# ============================================================================

@pytest.fixture
def sample_frame() -> Frame:
    """示例图框 100x50"""
    return Frame(x=10, y=20, width=100, height=50)


@pytest.fixture
def red() -> Color:
    return Color(red=1, green=0, blue=0, alpha=1)


@pytest.fixture
def blue() -> Color:
    return Color(red=0, green=0, blue=1, alpha=0.5)


def make_curve_points(corner_radius: float = 0) -> list[CurvePoint]:
    """单位正方形四个角点（曲线控制点与锚点重合）"""
    corners = ["{0, 0}", "{1, 0}", "{1, 1}", "{0, 1}"]
    return [
        CurvePoint(point=c, curve_from=c, curve_to=c, corner_radius=corner_radius)
        for c in corners
    ]


def make_shape(kind: ShapeKind, frame: Frame, corner_radius: float = 0, **kwargs: Any) -> ShapePath:
    return ShapePath(
        kind=kind,
        frame=frame,
        path=Path(is_closed=True, points=make_curve_points(corner_radius)),
        **kwargs,
    )


@pytest.fixture
def shape_factory():
    """形状路径工厂：shape_factory(kind, frame, corner_radius=0, **kwargs)"""
    return make_shape


@pytest.fixture
def rectangle_group() -> ShapeGroup:
    """单矩形形状组（圆角4）"""
    frame = Frame(x=0, y=0, width=80, height=40)
    shape = make_shape(ShapeKind.RECTANGLE, Frame(width=80, height=40), corner_radius=4)
    return ShapeGroup(name="rect", frame=frame, layers=[shape])


@pytest.fixture
def oval_group() -> ShapeGroup:
    """单椭圆形状组（正方形）"""
    frame = Frame(x=0, y=0, width=40, height=40)
    shape = make_shape(ShapeKind.OVAL, Frame(width=40, height=40))
    return ShapeGroup(name="oval", frame=frame, layers=[shape])


@pytest.fixture
def sample_style(red: Color, blue: Color) -> Style:
    """包含填充/描边/阴影/上下文的样式"""
    return Style(
        fills=[
            Fill(color=red, is_enabled=True),
            Fill(color=blue, is_enabled=True),
            Fill(color=Color(red=0, green=1, blue=0), is_enabled=False),
        ],
        borders=[
            Border(color=red, thickness=3, is_enabled=False),
            Border(color=blue, thickness=2, is_enabled=True),
        ],
        shadows=[
            Shadow(offset_x=1, offset_y=2, blur_radius=3, spread=0, color=red, is_enabled=True),
        ],
        inner_shadows=[
            Shadow(offset_x=0, offset_y=1, blur_radius=2, spread=1, color=blue, is_enabled=True),
        ],
        context_settings=GraphicsContextSettings(opacity=0.5, blend_mode=2),
    )


# ============================================================================
# 归档 Fixtures
# ============================================================================

def _ref(ref_class: str, ref: str) -> dict[str, Any]:
    return {"_class": "MSJSONFileReference", "_ref_class": ref_class, "_ref": ref}


def _rect(x: float, y: float, width: float, height: float) -> dict[str, Any]:
    return {"_class": "rect", "x": x, "y": y, "width": width, "height": height}


def _color(r: float, g: float, b: float, a: float = 1) -> dict[str, Any]:
    return {"_class": "color", "red": r, "green": g, "blue": b, "alpha": a}


def _point(text: str, radius: float = 0) -> dict[str, Any]:
    return {
        "_class": "curvePoint",
        "point": text,
        "curveFrom": text,
        "curveTo": text,
        "cornerRadius": radius,
    }


@pytest.fixture
def page_json() -> dict[str, Any]:
    """示例页面JSON（形状组/位图/文本）"""
    return {
        "_class": "page",
        "do_objectID": "page-1",
        "name": "Page 1",
        "frame": _rect(0, 0, 0, 0),
        "layers": [
            {
                "_class": "shapeGroup",
                "name": "Button",
                "frame": _rect(10.4, 20.6, 120, 40),
                "style": {
                    "_class": "style",
                    "fills": [
                        {"_class": "fill", "isEnabled": True, "fillType": 0, "color": _color(1, 0, 0)},
                    ],
                    "innerShadows": [
                        {
                            "_class": "innerShadow",
                            "isEnabled": True,
                            "offsetX": 0,
                            "offsetY": 1,
                            "blurRadius": 2,
                            "spread": 0,
                            "color": _color(0, 0, 0, 0.5),
                        },
                    ],
                },
                "layers": [
                    {
                        "_class": "rectangle",
                        "name": "Rectangle",
                        "edited": False,
                        "frame": _rect(0, 0, 120, 40),
                        "path": {
                            "_class": "path",
                            "isClosed": True,
                            "points": [
                                _point("{0, 0}", 6),
                                _point("{1, 0}", 6),
                                _point("{1, 1}", 6),
                                _point("{0, 1}", 6),
                            ],
                        },
                    },
                ],
            },
            {
                "_class": "bitmap",
                "name": "Logo",
                "frame": _rect(0, 100, 32, 32),
                "image": _ref("MSImageData", "images/logo"),
            },
            {
                "_class": "text",
                "name": "Title",
                "frame": _rect(0, 200, 300, 24),
                "textBehaviour": 0,
                "attributedString": {"_class": "MSAttributedString", "string": "Hello"},
                "style": {
                    "_class": "style",
                    "textStyle": {
                        "_class": "textStyle",
                        "encodedAttributes": {
                            "NSParagraphStyle": {"_class": "paragraphStyle", "NSAlignment": 2},
                            "MSAttributedStringFontAttribute": {
                                "_class": "fontDescriptor",
                                "NSFontDescriptorAttributes": {"NSFontSizeAttribute": 18},
                            },
                            "NSColor": _color(0, 0, 0, 1),
                        },
                    },
                },
            },
            {"_class": "slice", "name": "Export"},
        ],
    }


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def document_json() -> dict[str, Any]:
    """示例文档JSON"""
    return {
        "_class": "document",
        "do_objectID": "doc-1",
        "pages": [_ref("MSImmutablePage", "pages/page-1")],
    }


@pytest.fixture
def archive_bytes(document_json: dict[str, Any], page_json: dict[str, Any]) -> bytes:
    """内存中的示例归档"""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("document.json", json.dumps(document_json))
        zf.writestr("pages/page-1.json", json.dumps(page_json))
        zf.writestr("pages/broken.json", "{not json")
        zf.writestr("images/logo.png", PNG_BYTES)
    return buffer.getvalue()


@pytest.fixture
def sketch_archive(archive_bytes: bytes) -> Generator[ZipArchive, None, None]:
    """示例归档"""
    with ZipArchive(archive_bytes) as archive:
        yield archive
