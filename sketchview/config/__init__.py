"""
配置层 - 运行期配置与日志初始化

职责：
- 加载 config/sketchview_runtime.yaml（运行期参数）
- 提供环境变量覆盖机制
- 提供类型安全的配置访问接口
"""

from .log_setup import setup_logging
from .runtime_config import RuntimeConfig, get_config, reload_config

__all__ = [
    "RuntimeConfig",
    "get_config",
    "reload_config",
    "setup_logging",
]
