"""
样式解析器单元测试

每个模块完成后必须运行：pytest tests/unit/test_style.py -v
"""

import pytest

from sketchview.interfaces import MalformedGeometryError
from sketchview.models import (
    Border,
    Color,
    Fill,
    Frame,
    Gradient,
    GradientStop,
    GraphicsContextSettings,
    Layer,
    Path,
    ShapeGroup,
    ShapeKind,
    ShapePath,
    Style,
    build_node,
)
from sketchview.render.codec import color_to_string
from sketchview.render.style import (
    StyleResolver,
    border_to_style,
    box_style,
    resolve_style,
    shadow_to_string,
)


@pytest.fixture
def resolver() -> StyleResolver:
    return StyleResolver()


class TestCornerRadius:
    """圆角规则测试"""

    def test_corner_radius_oval(self, resolver: StyleResolver, oval_group: ShapeGroup):
        """测试正方形椭圆输出50%"""
        ret = resolver.resolve(None, oval_group)
        assert ret["border-radius"] == "50%"

    def test_oval_not_square(self, resolver: StyleResolver, shape_factory):
        """测试非正方形椭圆不输出圆角"""
        shape = shape_factory(ShapeKind.OVAL, Frame(width=40, height=20))
        group = ShapeGroup(frame=Frame(width=40, height=20), layers=[shape])
        assert "border-radius" not in resolver.resolve(None, group)

    def test_corner_radius_rectangle(self, resolver: StyleResolver, rectangle_group: ShapeGroup):
        """测试矩形四角复用首点圆角"""
        ret = resolver.resolve(None, rectangle_group)
        assert ret["border-radius"] == "4px 4px 4px 4px"

    def test_edited_shape_skipped(self, resolver: StyleResolver, shape_factory):
        """测试已编辑形状不转换圆角"""
        shape = shape_factory(ShapeKind.RECTANGLE, Frame(width=80, height=40), 4, edited=True)
        group = ShapeGroup(frame=Frame(width=80, height=40), layers=[shape])
        assert "border-radius" not in resolver.resolve(None, group)

    def test_multiple_children_skipped(self, resolver: StyleResolver, shape_factory):
        """测试多子形状不转换圆角"""
        frame = Frame(width=40, height=40)
        group = ShapeGroup(
            frame=frame,
            layers=[shape_factory(ShapeKind.OVAL, frame), shape_factory(ShapeKind.OVAL, frame)],
        )
        assert "border-radius" not in resolver.resolve(None, group)

    def test_rectangle_without_points(self, resolver: StyleResolver):
        """测试无点矩形直接失败"""
        shape = ShapePath(kind=ShapeKind.RECTANGLE, path=Path(is_closed=True))
        group = ShapeGroup(layers=[shape])
        with pytest.raises(MalformedGeometryError):
            resolver.resolve(None, group)


class TestVectorFill:
    """矢量填充测试"""

    def test_vector_fill_topmost(self, resolver: StyleResolver, sample_style: Style):
        """测试取最后一个启用填充（禁用填充不参与）"""
        ret = resolver.resolve(sample_style, Layer(), is_vector=True)
        assert ret["fill-rule"] == "evenodd"
        assert ret["fill"] == "rgba(0,0,255,0.5)"

    def test_vector_fill_none(self, resolver: StyleResolver):
        """测试无启用填充输出 none"""
        ret = resolver.resolve(Style(), Layer(), is_vector=True)
        assert ret["fill"] == "none"

    def test_raster_mode_no_fill(self, resolver: StyleResolver, sample_style: Style):
        """测试位图模式不输出 fill"""
        ret = resolver.resolve(sample_style, Layer())
        assert "fill" not in ret
        assert "fill-rule" not in ret

    def test_vector_fill_ignores_gradient(self, resolver: StyleResolver, red: Color, blue: Color):
        """测试最上层为渐变填充时只取其纯色"""
        gradient_fill = Fill(
            is_enabled=True,
            fill_type=1,
            color=blue,
            gradient=Gradient(stops=[GradientStop(color=red, position=0)]),
        )
        style = Style(fills=[Fill(color=red, is_enabled=True), gradient_fill])
        ret = resolver.resolve(style, Layer(), is_vector=True)
        assert ret["fill"] == color_to_string(gradient_fill.color)
        assert ret["fill"] == "rgba(0,0,255,0.5)"
        assert "linear-gradient" not in ret["fill"]

    def test_custom_fill_rule(self):
        ret = StyleResolver(fill_rule="nonzero").resolve(Style(), Layer(), is_vector=True)
        assert ret["fill-rule"] == "nonzero"


class TestBorder:
    """描边测试"""

    def test_border_raster(self, resolver: StyleResolver, sample_style: Style):
        """测试首个启用描边（位图模式）"""
        ret = resolver.resolve(sample_style, Layer())
        assert ret["box-sizing"] == "border-box"
        assert ret["border"] == "2px solid rgba(0,0,255,0.5)"

    def test_border_vector(self, resolver: StyleResolver, sample_style: Style):
        """测试矢量模式输出 stroke"""
        ret = resolver.resolve(sample_style, Layer(), is_vector=True)
        assert ret["stroke"] == "rgba(0,0,255,0.5)"
        assert ret["stroke-width"] == 2
        assert "border" not in ret

    def test_no_border(self, resolver: StyleResolver):
        ret = resolver.resolve(Style(), Layer())
        assert "box-sizing" not in ret
        assert "border" not in ret

    def test_border_to_style(self, red: Color):
        assert border_to_style(Border(color=red, thickness=1.5)) == {
            "border": "1.5px solid rgba(255,0,0,1)"
        }


class TestShadow:
    """阴影测试"""

    def test_shadow_order(self, resolver: StyleResolver, sample_style: Style):
        """测试外阴影在前、内阴影在后"""
        ret = resolver.resolve(sample_style, Layer())
        assert ret["box-shadow"] == (
            "1px 2px 3px 0px rgba(255,0,0,1), inset 0px 1px 2px 1px rgba(0,0,255,0.5)"
        )

    def test_shadow_to_string(self, sample_style: Style):
        assert shadow_to_string(sample_style.inner_shadows[0]).startswith("inset ")


class TestInteraction:
    """交互与可见性测试"""

    def test_pointer_events_locked_wins(self, resolver: StyleResolver):
        """测试锁定优先于点击穿透"""
        ret = resolver.resolve(None, Layer(is_locked=True, has_click_through=False))
        assert ret["pointer-events"] == "none"

    def test_pointer_events_auto(self, resolver: StyleResolver):
        ret = resolver.resolve(None, Layer())
        assert ret["pointer-events"] == "auto"

    def test_click_through_omitted(self, resolver: StyleResolver):
        """测试点击穿透时不输出 pointer-events"""
        ret = resolver.resolve(None, Layer(has_click_through=True))
        assert "pointer-events" not in ret

    def test_display_none(self, resolver: StyleResolver):
        ret = resolver.resolve(None, Layer(is_visible=False))
        assert ret["display"] == "none"
        assert "display" not in resolver.resolve(None, Layer())


class TestTransform:
    """变换测试"""

    def test_transform_rotate_flip(self, resolver: StyleResolver):
        """测试旋转 + 水平翻转"""
        ret = resolver.resolve(None, Layer(rotation=90, is_flipped_horizontal=True))
        assert ret["transform"] == "rotate(-90deg) matrix(-1, 0, 0, 1, 0, 0)"

    def test_flip_vertical_only(self, resolver: StyleResolver):
        ret = resolver.resolve(None, Layer(is_flipped_vertical=True))
        assert ret["transform"] == "matrix(1, 0, 0, -1, 0, 0)"

    def test_no_transform(self, resolver: StyleResolver):
        assert "transform" not in resolver.resolve(None, Layer())


class TestContext:
    """不透明度/混合模式测试"""

    def test_opacity_and_blend(self, resolver: StyleResolver, sample_style: Style):
        ret = resolver.resolve(sample_style, Layer())
        assert ret["opacity"] == 0.5
        assert ret["mix-blend-mode"] == "multiply"

    def test_blend_normal_omitted(self, resolver: StyleResolver):
        """测试 normal/不透明度1 不输出"""
        style = Style(context_settings=GraphicsContextSettings(opacity=1, blend_mode=0))
        ret = resolver.resolve(style, Layer())
        assert "opacity" not in ret
        assert "mix-blend-mode" not in ret


class TestHelpers:
    """辅助函数测试"""

    def test_box_style(self, sample_frame: Frame):
        assert box_style(sample_frame) == {
            "display": "block",
            "position": "absolute",
            "left": 10,
            "top": 20,
            "width": 100,
            "height": 50,
        }

    def test_resolve_style_defaults(self):
        """测试空样式与空节点"""
        assert resolve_style(None, None) == {"pointer-events": "auto"}


class TestEnabledFlag:
    """启用标记测试"""

    def test_missing_is_enabled_means_disabled(self, resolver: StyleResolver):
        """测试归档中缺少 isEnabled 的填充/描边/阴影均不生效"""
        red = {"_class": "color", "red": 1, "green": 0, "blue": 0, "alpha": 1}
        style = build_node({
            "_class": "style",
            "fills": [{"_class": "fill", "fillType": 0, "color": red}],
            "borders": [{"_class": "border", "thickness": 2, "color": red}],
            "shadows": [{"_class": "shadow", "offsetX": 1, "offsetY": 1, "color": red}],
            "innerShadows": [{"_class": "innerShadow", "blurRadius": 2, "color": red}],
        })
        assert isinstance(style, Style)

        ret = resolver.resolve(style, Layer(), is_vector=True)
        assert ret["fill"] == "none"
        assert "stroke" not in ret
        assert "box-sizing" not in ret
        assert "box-shadow" not in ret

    def test_explicit_is_enabled(self, resolver: StyleResolver):
        """测试显式启用"""
        red = {"_class": "color", "red": 1, "green": 0, "blue": 0, "alpha": 1}
        style = build_node({
            "_class": "style",
            "fills": [{"_class": "fill", "isEnabled": True, "fillType": 0, "color": red}],
        })
        ret = resolver.resolve(style, Layer(), is_vector=True)
        assert ret["fill"] == "rgba(255,0,0,1)"
