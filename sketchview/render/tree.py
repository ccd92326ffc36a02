"""
渲染树 - 遍历节点图，汇总每个图层的渲染属性

职责：
1. 每个图层计算绝对定位盒子与样式（形状路径使用矢量模式）
2. 形状路径生成 d 字符串，文本图层计算文本样式
3. 位图图层记录待解析的图片引用
4. 异步批量解析图片（失败记录告警，不返回过期数据）

只产出属性，不负责绘制。

测试要点：
- test_build_tree_shape_group: 形状组 + 子路径
- test_build_tree_text: 文本样式
- test_resolve_images: 图片批量解析
- test_resolve_images_missing: 缺失图片记录告警
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..interfaces import AssetResolutionError
from ..models import AssetReference, Bitmap, Layer, ResolvedImage, ShapeGroup, ShapePath, Text
from .geometry import shape_path_to_d
from .style import StyleResolver, box_style
from .text import TextStyleResolver

if TYPE_CHECKING:
    from ..interfaces import IAssetResolver

logger = logging.getLogger(__name__)


@dataclass
class RenderNode:
    """渲染节点"""
    kind: str
    name: str
    box: dict[str, Any]
    style: dict[str, Any]
    vector_style: dict[str, Any] | None = None
    d: str | None = None
    text_style: dict[str, Any] | None = None
    text: str | None = None
    image: AssetReference | None = None
    children: list[RenderNode] = field(default_factory=list)

    def walk(self) -> Iterator[RenderNode]:
        """先序遍历"""
        yield self
        for child in self.children:
            yield from child.walk()


class RenderTreeBuilder:
    """渲染树构建器"""

    def __init__(self):
        self.style_resolver = StyleResolver()
        self.text_resolver = TextStyleResolver()

    def build(self, node: Layer) -> RenderNode:
        """递归构建渲染树"""
        is_shape = isinstance(node, ShapePath)
        render = RenderNode(
            kind=node.node_class,
            name=node.name,
            box=box_style(node.frame),
            style=self.style_resolver.resolve(node.style, node, is_vector=is_shape),
        )

        if is_shape:
            render.d = shape_path_to_d(node)
        elif isinstance(node, ShapeGroup):
            # 子路径按形状组样式以矢量方式绘制
            render.vector_style = self.style_resolver.resolve(node.style, node, is_vector=True)
        elif isinstance(node, Text):
            render.text = self._text_content(node)
            if node.style is not None and node.style.text_style is not None:
                render.text_style = self.text_resolver.resolve(node.style.text_style, node)
        elif isinstance(node, Bitmap):
            render.image = node.image

        render.children = [self.build(child) for child in node.child_layers()]
        return render

    @staticmethod
    def _text_content(node: Text) -> str | None:
        attributed = node.attributed_string
        if attributed is None:
            return None
        if isinstance(attributed, dict):
            return attributed.get("string")
        return attributed.string


def build_render_tree(node: Layer) -> RenderNode:
    """便捷函数：构建渲染树"""
    return RenderTreeBuilder().build(node)


async def resolve_images(
    tree: RenderNode,
    resolver: IAssetResolver | None = None,
) -> dict[str, ResolvedImage]:
    """
    解析渲染树中所有位图引用

    Returns:
        ref_id → 图片句柄（解析失败的引用不出现在结果中）
    """
    if resolver is None:
        from ..assets import AssetResolver

        resolver = AssetResolver()

    references: dict[str, AssetReference] = {}
    for render in tree.walk():
        if render.image is not None:
            references.setdefault(render.image.ref_id, render.image)

    results = await asyncio.gather(
        *(resolver.resolve(ref) for ref in references.values()),
        return_exceptions=True,
    )

    images: dict[str, ResolvedImage] = {}
    for ref_id, result in zip(references, results):
        if isinstance(result, AssetResolutionError):
            logger.warning(f"图片解析失败: {ref_id}: {result}")
            continue
        if isinstance(result, BaseException):
            raise result
        images[ref_id] = result
    return images
