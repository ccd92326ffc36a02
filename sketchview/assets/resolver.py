"""
资源引用解析器 - 惰性异步加载归档中的子文档与图片

职责：
1. MSImmutablePage：读取 <ref>.json，用节点工厂递归构建子页面
2. MSImageData：读取 <ref>.png，包装为可撤销图片句柄
3. 未知引用类型/条目不存在：AssetResolutionError，不返回部分结果

不缓存、不去重、不取消：每次调用都重新解压读取。

测试要点：
- test_resolve_page: 子页面解析
- test_resolve_image: 图片解析
- test_unsupported_reference: 未知引用类型总是失败
- test_entry_not_found: 条目不存在
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from ..config import get_config
from ..interfaces import AssetErrorReason, AssetResolutionError, IAssetResolver
from ..models import AssetReference, NodeFactory, RefClass, ResolvedImage

if TYPE_CHECKING:
    from ..config import RuntimeConfig
    from ..interfaces import IArchive

logger = logging.getLogger(__name__)


class AssetResolver(IAssetResolver):
    """资源引用解析器实现"""

    def __init__(self, config: RuntimeConfig | None = None):
        self.config = config or get_config()

    async def resolve(
        self,
        reference: AssetReference,
        archive: IArchive | None = None,
    ) -> Any:
        """解析资源引用"""
        archive = archive or reference.archive
        if archive is None:
            raise ValueError(f"Reference not bound to an archive: {reference.ref_id}")

        if reference.ref_class == RefClass.PAGE:
            return await self._resolve_page(reference, archive)
        if reference.ref_class == RefClass.IMAGE_DATA:
            return await self._resolve_image(reference, archive)

        raise AssetResolutionError(
            AssetErrorReason.UNSUPPORTED_REFERENCE_TYPE,
            reference.ref_id,
            reference.ref_class,
        )

    async def _resolve_page(self, reference: AssetReference, archive: IArchive) -> Any:
        entry = self.config.archive.page_entry(reference.ref_id)
        text = await archive.read_text(entry)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise AssetResolutionError(AssetErrorReason.INVALID_ENTRY, entry, str(e)) from e

        logger.debug(f"解析子页面: {entry}")
        return NodeFactory(archive).build(data)

    async def _resolve_image(self, reference: AssetReference, archive: IArchive) -> ResolvedImage:
        entry = self.config.archive.image_entry(reference.ref_id)
        payload = await archive.read_bytes(entry)
        logger.debug(f"解析图片: {entry} ({len(payload)} bytes)")
        return ResolvedImage(
            ref_id=reference.ref_id,
            mime_type=self.config.archive.image_mime_type,
            data=payload,
        )
