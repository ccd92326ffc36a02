"""
运行期配置 - 读取 config/sketchview_runtime.yaml

职责：
- 加载归档条目命名/图片类型/日志/渲染等运行参数
- 提供环境变量覆盖机制（SKETCHVIEW_ 前缀）
- 类型安全的配置访问
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_CONFIG_PATH = Path("config/sketchview_runtime.yaml")


class ArchiveConfig(BaseModel):
    """归档条目配置"""

    document_entry: str = "document.json"
    page_entry_suffix: str = ".json"
    image_entry_suffix: str = ".png"
    image_mime_type: str = "image/png"
    text_encoding: str = "utf-8"

    def page_entry(self, ref_id: str) -> str:
        """子页面条目名"""
        return f"{ref_id}{self.page_entry_suffix}"

    def image_entry(self, ref_id: str) -> str:
        """图片条目名"""
        return f"{ref_id}{self.image_entry_suffix}"


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: Path = Path("logs/sketchview.log")


class RenderConfig(BaseModel):
    """渲染配置"""

    vector_fill_rule: str = "evenodd"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    model_config = {
        "env_prefix": "SKETCHVIEW_",
        "env_nested_delimiter": "__",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """环境变量优先于构造参数（YAML 值），使 SKETCHVIEW_* 始终生效"""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 以 dict 传入，环境变量可按键合并覆盖
        config = cls(
            archive=cls._extract(runtime_opts, "archive"),
            logging=cls._extract(runtime_opts, "logging"),
            render=cls._extract(runtime_opts, "render"),
        )

        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """解析相对日志路径为绝对路径（基于配置文件所在目录）"""
        if not self.logging.log_file.is_absolute():
            self.logging.log_file = (base_dir / self.logging.log_file).resolve()


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
