"""
资源模型 - 外部引用与图片句柄

AssetReference 由节点工厂绑定所在归档；解析由 assets.resolver 完成。
ResolvedImage 的生命周期由调用方管理（revoke 后不可再读取）。
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import Field, PrivateAttr

from ..interfaces import AssetErrorReason, AssetResolutionError
from .base import SketchModel

if TYPE_CHECKING:
    from ..interfaces import IArchive


class AssetReference(SketchModel):
    """归档内资源引用（_ref_class/_ref）"""
    ref_class: str = Field(..., alias="_ref_class")
    ref_id: str = Field(..., alias="_ref")

    _archive: Any = PrivateAttr(default=None)

    @property
    def archive(self) -> IArchive | None:
        return self._archive

    def bind(self, archive: IArchive | None) -> AssetReference:
        """绑定所在归档"""
        self._archive = archive
        return self

    async def get_instance(self) -> Any:
        """用绑定归档解析引用（每次都重新读取）"""
        from ..assets.resolver import AssetResolver

        return await AssetResolver().resolve(self)


@dataclass
class ResolvedImage:
    """可撤销的图片源句柄"""
    ref_id: str
    mime_type: str
    data: bytes | None = field(default=None, repr=False)

    @property
    def revoked(self) -> bool:
        return self.data is None

    @property
    def payload(self) -> bytes:
        if self.data is None:
            raise AssetResolutionError(AssetErrorReason.REVOKED, self.ref_id)
        return self.data

    @property
    def url(self) -> str:
        """data URI，可直接作为图片 src"""
        encoded = base64.b64encode(self.payload).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    def revoke(self) -> None:
        """释放数据，之后访问 url/payload 会失败"""
        self.data = None
