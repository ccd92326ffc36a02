"""
资源层 - 归档读取与资源引用异步解析

子模块：
- archive: ZIP 归档（异步读取条目）
- resolver: 子页面/图片引用解析
- loader: 文档与页面加载
"""

from .archive import ZipArchive
from .loader import load_document, load_pages
from .resolver import AssetResolver

__all__ = [
    "ZipArchive",
    "AssetResolver",
    "load_document",
    "load_pages",
]
