"""
ZIP 归档 - 按名称异步读取文档条目

职责：
1. 打开 .sketch（zip）文件或内存字节
2. 异步读取文本/二进制条目（解压在工作线程中执行）
3. 条目不存在时抛出 AssetResolutionError(entry-not-found)

测试要点：
- test_read_text: 读取文本条目
- test_read_bytes: 读取二进制条目
- test_missing_entry: 条目不存在
- test_bad_archive: 非zip文件
"""

from __future__ import annotations

import asyncio
import io
import logging
import zipfile
from pathlib import Path

from ..config import get_config
from ..interfaces import ArchiveError, AssetErrorReason, AssetResolutionError, IArchive

logger = logging.getLogger(__name__)


class ZipArchive(IArchive):
    """ZIP 归档实现"""

    def __init__(self, source: str | Path | bytes, encoding: str | None = None):
        self.encoding = encoding or get_config().archive.text_encoding
        self.source = "<memory>" if isinstance(source, bytes) else str(source)

        try:
            if isinstance(source, bytes):
                self._zip = zipfile.ZipFile(io.BytesIO(source))
            else:
                self._zip = zipfile.ZipFile(Path(source))
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveError(f"归档无法打开: {self.source}: {e}") from e

        logger.info(f"打开归档: {self.source} ({len(self._zip.namelist())} 个条目)")

    def names(self) -> list[str]:
        """列出所有条目"""
        return self._zip.namelist()

    def __contains__(self, name: str) -> bool:
        try:
            self._zip.getinfo(name)
        except KeyError:
            return False
        return True

    async def read_bytes(self, name: str) -> bytes:
        """读取二进制条目"""
        return await asyncio.to_thread(self._read, name)

    async def read_text(self, name: str) -> str:
        """读取文本条目"""
        data = await self.read_bytes(name)
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise AssetResolutionError(AssetErrorReason.INVALID_ENTRY, name, str(e)) from e

    def _read(self, name: str) -> bytes:
        try:
            return self._zip.read(name)
        except KeyError as e:
            raise AssetResolutionError(AssetErrorReason.ENTRY_NOT_FOUND, name) from e

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> ZipArchive:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
