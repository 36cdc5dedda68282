"""日志配置模块

提供统一的日志配置和管理功能。

Examples:
    基础使用::

        from packages.common.logger import setup_logger

        logger = setup_logger("blueprint-lint", level="DEBUG")
        logger.debug("开始扫描")
"""

import sys
from typing import TextIO

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logger(
    name: str,
    level: str = "INFO",
    format_string: str | None = None,
    sink: TextIO | None = None,
) -> logger:
    """配置并返回 logger

    日志只写到 stderr（或指定的 sink），stdout 留给报告输出。

    Args:
        name: logger 名称
        level: 日志级别（DEBUG, INFO, WARNING, ERROR, CRITICAL）
        format_string: 自定义格式字符串（可选）
        sink: 输出流，默认为当前的 sys.stderr

    Returns:
        配置好的 loguru logger

    Examples:
        >>> log = setup_logger("blueprint-lint", level="DEBUG")
        >>> log.debug("测试消息")
    """
    # 移除默认 handler
    logger.remove()

    if sink is None:
        sink = sys.stderr

    logger.add(
        sink,
        format=format_string or DEFAULT_FORMAT,
        level=level.upper(),
        colorize=sink.isatty() if hasattr(sink, "isatty") else False,
    )

    # 绑定名称
    return logger.bind(name=name)
