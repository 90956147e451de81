"""
日志配置模块
"""

import sys
from loguru import logger

from .config import LoggingConfig


def setup_logging(config: LoggingConfig):
    """
    按配置重建 loguru 的输出

    Args:
        config: 日志配置
    """
    logger.remove()
    logger.add(sys.stderr, level=config.level)

    if config.log_file:
        logger.add(config.log_file, level=config.level, encoding="utf-8")

    logger.debug(f"日志级别: {config.level}")
