"""
@PURPOSE: 检测 contracts 目录下忽略大小写和下划线后重名的文件
@OUTLINE:
  - find_duplicate_names(): 按归一化键分组，每个重复文件产生一条诊断
@GOTCHAS:
  - 扫描 contracts/ 下所有带扩展名的文件，扩展名不参与比较
  - 隐藏文件、隐藏目录和 node_modules 不参与检测
  - 连字符不会被忽略: my-jetton 与 my_jetton 不算重名
@DEPENDENCIES:
  - 内部: .config, .discovery, .models, .normalizer
  - 外部: loguru
"""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path

from loguru import logger

from .config import DEFAULT_RULES, LintRules
from .discovery import iter_project_files
from .models import Diagnostic, DiagnosticKind
from .normalizer import duplicate_key


def find_duplicate_names(project_root: Path, rules: LintRules = DEFAULT_RULES) -> list[Diagnostic]:
    """检测 contracts 目录下的重名文件.

    Args:
        project_root: 项目根目录
        rules: lint 规则

    Returns:
        每个重复文件一条 NAMING_MISMATCH 诊断，消息中列出同组全部文件
    """
    contracts_path = project_root / rules.contracts_dir
    if not contracts_path.is_dir():
        return []

    groups: dict[str, list[str]] = defaultdict(list)
    for file_path in iter_project_files(contracts_path, rules):
        if file_path.name.startswith(".") or not file_path.suffix:
            continue
        relative_path = file_path.relative_to(project_root)
        groups[duplicate_key(file_path)].append(relative_path.as_posix())

    diagnostics: list[Diagnostic] = []
    for key in sorted(groups):
        members = sorted(groups[key])
        if len(members) < 2:
            continue

        logger.debug(f"重名文件组 '{key}': {members}")
        message = (
            f"'{rules.contracts_dir}' 目录中存在重名文件: {', '.join(members)}。"
            "忽略大小写、下划线和扩展名后文件名必须唯一。"
        )
        diagnostics.extend(
            Diagnostic(
                kind=DiagnosticKind.NAMING_MISMATCH,
                location=member,
                message=message,
                names_location=True,
            )
            for member in members
        )

    return diagnostics
