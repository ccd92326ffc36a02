"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from sketchview.interfaces import IArchive

    class MemoryArchive(IArchive):
        async def read_text(self, name: str) -> str:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import AssetReference, Layer, ResolvedImage, Style, TextStyle


# ============================================================================
# 归档 / 资源模块接口
# ============================================================================

class IArchive(ABC):
    """归档接口 - 按名称读取压缩包条目（异步、可失败）"""

    @abstractmethod
    async def read_text(self, name: str) -> str:
        """
        读取文本条目

        Args:
            name: 条目名称（如 pages/xxx.json）

        Returns:
            解码后的文本

        Raises:
            AssetResolutionError: 条目不存在或无法解码
        """
        ...

    @abstractmethod
    async def read_bytes(self, name: str) -> bytes:
        """
        读取二进制条目

        Args:
            name: 条目名称（如 images/xxx.png）

        Returns:
            原始字节

        Raises:
            AssetResolutionError: 条目不存在
        """
        ...


class INodeFactory(ABC):
    """节点工厂接口 - 原始JSON → 类型化节点图"""

    @abstractmethod
    def build(self, data: Any) -> Any:
        """
        递归构建节点

        Args:
            data: 归档中解析出的JSON值（dict/list/标量）

        Returns:
            类型化节点；未知类型保持原始数据
        """
        ...


class IAssetResolver(ABC):
    """资源引用解析器接口 - 惰性加载子文档/图片"""

    @abstractmethod
    async def resolve(
        self,
        reference: AssetReference,
        archive: IArchive | None = None,
    ) -> Layer | ResolvedImage:
        """
        解析资源引用

        每次调用都会重新读取归档，不做缓存和去重。

        Args:
            reference: 资源引用
            archive: 归档（默认使用引用绑定的归档）

        Returns:
            子页面节点图，或可撤销的图片句柄

        Raises:
            AssetResolutionError: 条目不存在/引用类型不支持
        """
        ...


# ============================================================================
# 样式解析模块接口
# ============================================================================

class IStyleResolver(ABC):
    """样式解析器接口"""

    @abstractmethod
    def resolve(
        self,
        style: Style | None,
        node: Layer | None,
        is_vector: bool = False,
    ) -> dict[str, Any]:
        """
        计算节点的扁平样式描述

        Args:
            style: 样式模型
            node: 所属节点（提供frame/旋转/锁定等属性）
            is_vector: 是否矢量模式（fill/stroke 属性）

        Returns:
            样式键值（CSS 短横线命名）
        """
        ...


class ITextStyleResolver(ABC):
    """文本样式解析器接口"""

    @abstractmethod
    def resolve(self, text_style: TextStyle, node: Layer) -> dict[str, Any]:
        """计算文本样式属性"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class SketchViewError(Exception):
    """基础异常"""
    pass


class MalformedGeometryError(SketchViewError):
    """几何结构错误（空路径、无法解析的坐标）"""
    pass


class UnsupportedFeatureError(SketchViewError):
    """不支持的特性（非线性渐变、未知填充类型）

    解析器本身降级为空输出，不抛出；供需要严格模式的调用方使用。
    """
    pass


class ArchiveError(SketchViewError):
    """归档无法打开"""
    pass


class AssetErrorReason(str, Enum):
    """资源解析失败原因"""
    ENTRY_NOT_FOUND = "entry-not-found"
    UNSUPPORTED_REFERENCE_TYPE = "unsupported-reference-type"
    INVALID_ENTRY = "invalid-entry"
    REVOKED = "revoked"


class AssetResolutionError(SketchViewError):
    """资源解析错误"""

    def __init__(self, reason: AssetErrorReason, entry: str = "", detail: str = ""):
        self.reason = reason
        self.entry = entry
        message = f"{reason.value}: {entry}" if entry else reason.value
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
