"""
@PURPOSE: 通用组件和工具库，提供 lint 工具共享的配置与日志功能
@OUTLINE:
  - BaseAppConfig: 应用配置基类
  - load_config_mapping: 读取 YAML/JSON 配置文件
  - setup_logger: 日志配置函数
@DEPENDENCIES:
  - 内部: .config, .logger
"""

__version__ = "0.1.0"

from packages.common.config import BaseAppConfig, load_config_mapping
from packages.common.logger import setup_logger

__all__ = [
    "BaseAppConfig",
    "load_config_mapping",
    "setup_logger",
]
