"""配置管理模块

提供应用配置的基类：环境变量 / .env 加载，以及从 YAML、JSON 文件读取。

Examples:
    创建自定义配置::

        from packages.common.config import BaseAppConfig
        from pydantic import Field

        class MyConfig(BaseAppConfig):
            model_config = SettingsConfigDict(env_prefix="MY_")

            depth: int = Field(default=2, description="扫描深度")

        config = MyConfig.from_file(Path("my.yaml"))
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TextIO

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 后缀 -> 解析函数
CONFIG_LOADERS: dict[str, Callable[[TextIO], Any]] = {
    ".json": json.load,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
}


def load_config_mapping(file_path: Path) -> dict[str, Any]:
    """读取配置文件为字典

    空文件视为空配置。

    Args:
        file_path: 文件路径（.json, .yaml, .yml）

    Returns:
        配置字典

    Raises:
        ValueError: 文件格式不支持或内容不是映射
        OSError: 文件无法读取
    """
    loader = CONFIG_LOADERS.get(file_path.suffix.lower())
    if loader is None:
        raise ValueError(f"不支持的文件格式: {file_path.suffix}")

    with open(file_path, encoding="utf-8") as f:
        data = loader(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"配置文件内容必须是映射: {file_path}")
    return data


class BaseAppConfig(BaseSettings):
    """应用配置基类

    所有应用配置应继承此类，获得：
    - 自动从环境变量加载
    - .env 文件支持
    - 类型验证

    Attributes:
        log_level: 日志级别
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="日志级别")

    def to_dict(self) -> dict[str, Any]:
        """转换为字典

        Returns:
            配置字典
        """
        return self.model_dump()

    @classmethod
    def from_file(cls, file_path: Path) -> "BaseAppConfig":
        """从文件加载配置，文件中的值优先于环境变量

        Args:
            file_path: 文件路径

        Returns:
            配置实例
        """
        return cls(**load_config_mapping(file_path))
