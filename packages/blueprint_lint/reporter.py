"""
@PURPOSE: 把诊断渲染为人类可读文本或 JSON
@OUTLINE:
  - KIND_ORDER / KIND_TITLES: 文本报告中分组的顺序与标题
  - format_diagnostic(): 单条诊断的文本形式
  - render_text(): 按类型分组的文本报告
  - render_json(): 扁平的 JSON 列表
@GOTCHAS:
  - 没有诊断时两种格式都返回空字符串
  - names_location 为真（如重名文件列表）时不再追加 "(文件: ...)"
@DEPENDENCIES:
  - 内部: .models
  - 标准库: json
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from .models import Diagnostic, DiagnosticKind

KIND_ORDER: tuple[DiagnosticKind, ...] = (
    DiagnosticKind.STRUCTURE_INVALID,
    DiagnosticKind.BROKEN_SCAFFOLD,
    DiagnosticKind.NAMING_MISMATCH,
    DiagnosticKind.MISSING_REFERENCED_FILE,
)

KIND_TITLES: dict[DiagnosticKind, str] = {
    DiagnosticKind.STRUCTURE_INVALID: "项目结构",
    DiagnosticKind.BROKEN_SCAFFOLD: "损坏的脚手架",
    DiagnosticKind.NAMING_MISMATCH: "文件命名",
    DiagnosticKind.MISSING_REFERENCED_FILE: "缺失的引用文件",
}


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """单条诊断的文本形式.

    Args:
        diagnostic: 诊断

    Returns:
        一行或多行文本
    """
    kind = diagnostic.kind
    if kind is DiagnosticKind.STRUCTURE_INVALID:
        return f"结构无效: {diagnostic.location}\n    - {diagnostic.message}"
    if kind is DiagnosticKind.BROKEN_SCAFFOLD:
        return diagnostic.message

    prefix = "命名错误" if kind is DiagnosticKind.NAMING_MISMATCH else "缺失的合约文件"
    if diagnostic.names_location:
        return f"{prefix}: {diagnostic.message}"
    return f"{prefix}: {diagnostic.message} (文件: {diagnostic.location})"


def render_text(diagnostics: Sequence[Diagnostic]) -> str:
    """渲染按类型分组的文本报告.

    Args:
        diagnostics: 诊断列表

    Returns:
        报告文本，没有诊断时为空字符串
    """
    if not diagnostics:
        return ""

    lines = [f"Linter 发现 {len(diagnostics)} 个问题:"]
    for kind in KIND_ORDER:
        group = [diagnostic for diagnostic in diagnostics if diagnostic.kind is kind]
        if not group:
            continue
        lines.append("")
        lines.append(f"[{KIND_TITLES[kind]}] {len(group)} 个")
        lines.extend(format_diagnostic(diagnostic) for diagnostic in group)

    return "\n".join(lines)


def render_json(diagnostics: Sequence[Diagnostic]) -> str:
    """渲染扁平的 JSON 列表，保持诊断产生顺序.

    Args:
        diagnostics: 诊断列表

    Returns:
        JSON 文本，没有诊断时为空字符串
    """
    if not diagnostics:
        return ""
    return json.dumps([diagnostic.to_dict() for diagnostic in diagnostics], indent=2, ensure_ascii=False)
