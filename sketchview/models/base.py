"""
模型基类 - 统一别名与额外字段策略

归档JSON使用驼峰命名（isEnabled/fillType），模型字段使用蛇形命名，
两者都可用于构造。未声明的键原样保留。
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class SketchModel(BaseModel):
    """文档节点模型基类"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "allow",
        "arbitrary_types_allowed": True,
    }
