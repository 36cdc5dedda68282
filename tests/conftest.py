"""
@PURPOSE: Pytest 配置和通用 fixtures，用于在临时目录中搭建 Blueprint 项目
@OUTLINE:
  - write_file(): 写入文件并自动创建父目录
  - make_project(): 搭建一个（可选缺项的）Blueprint 项目
  - workspace: 扫描根目录 fixture（tmp_path/workspace）
  - reset_loguru: 每个测试后恢复 loguru 默认 handler
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest
from loguru import logger

# 确保项目根目录在 Python 路径中
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from packages.blueprint_lint.config import CHARACTERISTIC_DIRS  # noqa: E402

BLUEPRINT_DEPENDENCY = "@ton-ai-core/blueprint"


def write_file(path: Path, content: str = "") -> Path:
    """写入文件，自动创建父目录."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def make_project(
    root: Path,
    *,
    manifest: bool = True,
    dependency: bool = True,
    dev_dependency: bool = False,
    config: bool = True,
    module: bool = True,
    dirs: Iterable[str] = CHARACTERISTIC_DIRS,
) -> Path:
    """搭建 Blueprint 项目.

    Args:
        root: 项目目录
        manifest: 是否写 package.json
        dependency: 是否在 dependencies 中声明 blueprint
        dev_dependency: 是否在 devDependencies 中声明 blueprint
        config: 是否写 blueprint.config.ts
        module: 是否创建 node_modules/@ton-ai-core/blueprint
        dirs: 需要创建的特征目录

    Returns:
        项目目录
    """
    root.mkdir(parents=True, exist_ok=True)
    if manifest:
        package = {"name": root.name, "dependencies": {}, "devDependencies": {}}
        if dependency:
            package["dependencies"][BLUEPRINT_DEPENDENCY] = "^0.28.0"
        if dev_dependency:
            package["devDependencies"][BLUEPRINT_DEPENDENCY] = "^0.28.0"
        write_file(root / "package.json", json.dumps(package, indent=2))
    if config:
        write_file(root / "blueprint.config.ts", "export const config = {};\n")
    if module:
        write_file(root / "node_modules" / "@ton-ai-core" / "blueprint" / "package.json", "{}")
    for name in dirs:
        (root / name).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """扫描根目录，位于 tmp_path 下一级，避免上级目录检查误触发."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path.resolve()


@pytest.fixture(autouse=True)
def reset_loguru() -> Iterator[None]:
    """CLI 测试会把 loguru 指向临时 stderr，测试结束后恢复."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
