"""
@PURPOSE: 检查构建配置中声明的合约源文件是否存在
@OUTLINE:
  - TARGETS_ARRAY_PATTERN / TARGET_FIELD_PATTERN: .compile.ts 中的目标声明模式
  - extract_compile_targets(): 从 .compile.ts 文本中提取目标路径
  - check_build_config(): 检查 tact.config.json 中 projects[].path
  - check_compile_files(): 检查所有 .compile.ts 中的 targets/target
  - check_referenced_files(): 依次执行以上两项
@GOTCHAS:
  - .compile.ts 只做正则提取，不解析 TypeScript
  - targets 数组优先于 target 字段
  - 单个文件读取失败只影响该文件
@DEPENDENCIES:
  - 内部: .config, .errors, .models, .discovery
  - 外部: loguru
"""

from __future__ import annotations

import re
from pathlib import Path

from loguru import logger

from .config import DEFAULT_RULES, LintRules
from .discovery import iter_project_files, relative_location
from .errors import ManifestError, load_json_file
from .models import Diagnostic, DiagnosticKind

TARGETS_ARRAY_PATTERN = re.compile(r"targets:\s*\[([\s\S]*?)\]")
TARGET_FIELD_PATTERN = re.compile(r"target:\s*['\"`]([^'\"`]+)['\"`]")
QUOTES_PATTERN = re.compile(r"['\"`]")

TARGETS_ARRAY = "targets 数组"
TARGET_FIELD = "target 字段"


def extract_compile_targets(source: str) -> tuple[list[str], str | None]:
    """从 .compile.ts 源码中提取目标路径.

    Args:
        source: 文件内容

    Returns:
        (路径列表, 匹配到的声明形式)，未匹配时为 ([], None)

    Examples:
        >>> extract_compile_targets("targets: ['contracts/a.fc', 'contracts/b.fc']")
        (['contracts/a.fc', 'contracts/b.fc'], 'targets 数组')
        >>> extract_compile_targets("target: 'contracts/counter.tact'")
        (['contracts/counter.tact'], 'target 字段')
    """
    array_match = TARGETS_ARRAY_PATTERN.search(source)
    if array_match:
        targets = [QUOTES_PATTERN.sub("", item.strip()) for item in array_match.group(1).split(",")]
        return [target for target in targets if target], TARGETS_ARRAY

    field_match = TARGET_FIELD_PATTERN.search(source)
    if field_match:
        return [field_match.group(1)], TARGET_FIELD

    return [], None


def check_build_config(project_root: Path, rules: LintRules = DEFAULT_RULES) -> list[Diagnostic]:
    """检查 tact.config.json 中声明的合约路径.

    Args:
        project_root: 项目根目录
        rules: lint 规则

    Returns:
        诊断列表
    """
    config_path = project_root / rules.build_config_name
    if not config_path.exists():
        return []

    try:
        config = load_json_file(config_path)
    except ManifestError as e:
        logger.warning(f"无法解析 {config_path}: {e.reason}")
        return [
            Diagnostic(
                kind=DiagnosticKind.STRUCTURE_INVALID,
                location=rules.build_config_name,
                message=f"无法读取或解析 {rules.build_config_name}: {e.reason}",
            )
        ]

    projects = config.get("projects") if isinstance(config, dict) else None
    if not isinstance(projects, list):
        return []

    diagnostics: list[Diagnostic] = []
    for project in projects:
        if not isinstance(project, dict) or not project.get("path"):
            continue
        declared = str(project["path"])
        if (project_root / declared).exists():
            continue
        diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.MISSING_REFERENCED_FILE,
                location=rules.build_config_name,
                message=(
                    f"{rules.build_config_name} 中项目 '{project.get('name', '')}' "
                    f"声明的合约文件 '{declared}' 不存在"
                ),
                names_location=True,
            )
        )

    return diagnostics


def check_compile_files(project_root: Path, rules: LintRules = DEFAULT_RULES) -> list[Diagnostic]:
    """检查项目内所有 .compile.ts 文件声明的目标路径.

    Args:
        project_root: 项目根目录
        rules: lint 规则

    Returns:
        诊断列表
    """
    diagnostics: list[Diagnostic] = []

    compile_files = sorted(
        path
        for path in iter_project_files(project_root, rules)
        if path.name.endswith(rules.compile_suffix)
    )

    for compile_file in compile_files:
        location = relative_location(compile_file, project_root)
        try:
            source = compile_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"无法读取 {compile_file}: {e}")
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.STRUCTURE_INVALID,
                    location=location,
                    message=f"无法读取或解析 {location}: {e}",
                )
            )
            continue

        targets, form = extract_compile_targets(source)
        for target in targets:
            if (project_root / target).exists():
                continue
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.MISSING_REFERENCED_FILE,
                    location=location,
                    message=f"{location} 的{form}中声明的合约文件 '{target}' 不存在",
                    names_location=True,
                )
            )

    return diagnostics


def check_referenced_files(project_root: Path, rules: LintRules = DEFAULT_RULES) -> list[Diagnostic]:
    """检查构建配置引用的文件: 先 tact.config.json，再 .compile.ts."""
    return check_build_config(project_root, rules) + check_compile_files(project_root, rules)
