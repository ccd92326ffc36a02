"""
日志初始化 - 控制台 + 可选文件

只配置一次；重复调用直接返回。
"""

from __future__ import annotations

import logging

from .runtime_config import RuntimeConfig, get_config

_LOGGER_CONFIGURED = False


def setup_logging(config: RuntimeConfig | None = None) -> None:
    """按运行期配置初始化根日志器"""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    cfg = (config or get_config()).logging
    level = logging.getLevelName(cfg.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if cfg.log_to_file:
        try:
            cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(cfg.log_file, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        except OSError as e:
            logging.getLogger(__name__).warning(f"日志文件无法写入，仅输出到控制台: {e}")

    _LOGGER_CONFIGURED = True
