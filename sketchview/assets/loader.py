"""
文档加载器 - 归档 → Document + 页面

职责：
1. 读取 document.json 并构建 Document
2. 并发解析所有页面引用（结果顺序与引用顺序一致）
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING

from ..config import get_config
from ..interfaces import AssetErrorReason, AssetResolutionError
from ..models import Document, NodeFactory, Page
from .resolver import AssetResolver

if TYPE_CHECKING:
    from ..interfaces import IArchive, IAssetResolver

logger = logging.getLogger(__name__)


async def load_document(archive: IArchive) -> Document:
    """读取并构建文档根节点"""
    entry = get_config().archive.document_entry
    text = await archive.read_text(entry)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AssetResolutionError(AssetErrorReason.INVALID_ENTRY, entry, str(e)) from e

    document = NodeFactory(archive).build(data)
    if not isinstance(document, Document):
        raise AssetResolutionError(AssetErrorReason.INVALID_ENTRY, entry, "not a document")

    logger.info(f"文档加载完成: {len(document.pages)} 个页面引用")
    return document


async def load_pages(
    document: Document,
    resolver: IAssetResolver | None = None,
) -> list[Page]:
    """并发解析文档的所有页面"""
    resolver = resolver or AssetResolver()
    pages = await asyncio.gather(*(resolver.resolve(ref) for ref in document.pages))
    return list(pages)
