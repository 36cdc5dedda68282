"""
@PURPOSE: 定义 lint 过程中的异常
@OUTLINE:
  - LintError: 异常基类
  - ManifestError: JSON 清单/配置文件无法读取或解析
  - load_json_file(): 读取 JSON 文件，失败时抛出 ManifestError
@DEPENDENCIES:
  - 标准库: json, pathlib
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class LintError(Exception):
    """lint 异常基类."""


class ManifestError(LintError):
    """JSON 清单或配置文件无法读取或解析时抛出.

    调用方负责把它转换成 STRUCTURE_INVALID 诊断。
    """

    def __init__(self, path: Path, reason: str) -> None:
        """初始化.

        Args:
            path: 出错的文件
            reason: 原始错误信息
        """
        self.path = path
        self.reason = reason
        super().__init__(f"{path.name}: {reason}")


def load_json_file(path: Path) -> Any:
    """读取并解析 JSON 文件.

    Args:
        path: 文件路径

    Returns:
        解析后的对象

    Raises:
        ManifestError: 文件无法读取或 JSON 格式错误
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(path, str(e)) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(path, str(e)) from e
