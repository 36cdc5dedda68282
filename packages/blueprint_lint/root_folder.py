"""
@PURPOSE: 检查扫描路径的上一级目录是否混入了 Blueprint 特征目录
@OUTLINE:
  - check_root_folder(): 上级目录检查，最多产生一条诊断
@GOTCHAS:
  - 只检查上一级目录，且只检查一次
  - 上级目录不像开发环境/项目根目录（没有任何标记文件）时不检查
  - 扫描路径已经是文件系统根目录时不检查
@DEPENDENCIES:
  - 内部: .config, .models, .tree
  - 外部: loguru
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from .config import DEFAULT_RULES, LintRules
from .models import Diagnostic, DiagnosticKind
from .tree import render_tree


def check_root_folder(scan_path: Path, rules: LintRules = DEFAULT_RULES) -> list[Diagnostic]:
    """检查扫描路径的上级目录.

    Args:
        scan_path: 扫描路径（绝对路径）
        rules: lint 规则

    Returns:
        发现禁止目录时返回一条 STRUCTURE_INVALID 诊断，否则返回空列表
    """
    parent = scan_path.parent
    if parent == scan_path:
        return []

    markers = [item for item in rules.marker_items if (parent / item).exists()]
    if not markers:
        return []

    found = [name for name in rules.forbidden_dirs if (parent / name).is_dir()]
    if not found:
        return []

    logger.debug(f"上级目录 {parent} 含标记 {markers}，发现禁止目录 {found}")
    snapshot = render_tree(parent, max_depth=rules.tree_depth, ignored=rules.tree_noise)
    names = ", ".join(f"'{name}'" for name in found)
    message = (
        f"上级目录 '{parent}' 中发现禁止的目录: {names}。"
        "请为每个合约创建独立的 Blueprint 项目，并把这些目录放到项目内部。\n"
        f"目录结构:\n{snapshot}"
    )
    return [Diagnostic(kind=DiagnosticKind.STRUCTURE_INVALID, location=str(parent), message=message)]
