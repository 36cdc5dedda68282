"""
@PURPOSE: 文件命名一致性检查（合约 snake_case / wrapper PascalCase / 脚本 lowerCamelCase）
@OUTLINE:
  - EXPORTED_CLASS_PATTERN: 导出类声明的匹配模式
  - class NamingChecker: 命名检查器
    - check_contracts(): 合约源文件必须为 snake_case
    - check_wrappers(): wrapper 必须为 PascalCase，且与导出类名一致
    - check_scripts(): 脚本必须为 lowerCamelCase
  - extract_exported_class(): 从 TypeScript 源码中提取导出类名
@GOTCHAS:
  - 导出类名只是正则匹配，不是真正的 TypeScript 解析
  - .compile.ts 文件不检查导出类名
  - 找不到导出类不算错误
  - 读取 wrapper 失败产生 STRUCTURE_INVALID，而不是命名诊断
@DEPENDENCIES:
  - 内部: .config, .models, .normalizer
  - 外部: loguru
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from loguru import logger

from .config import DEFAULT_RULES, LintRules
from .models import Diagnostic, DiagnosticKind, FileCategory, ScannedFile
from .normalizer import is_lower_camel_case, is_pascal_case

EXPORTED_CLASS_PATTERN = re.compile(r"export\s+(?:abstract\s+)?class\s+([A-Za-z0-9_]+)")


def extract_exported_class(source: str) -> str | None:
    """返回源码中第一个 `export class X` 的类名.

    Examples:
        >>> extract_exported_class("export class Counter implements Contract {}")
        'Counter'
        >>> extract_exported_class("const x = 1;") is None
        True
    """
    match = EXPORTED_CLASS_PATTERN.search(source)
    return match.group(1) if match else None


class NamingChecker:
    """命名检查器.

    每条规则只处理对应分类的文件，互不依赖。
    """

    def __init__(self, rules: LintRules = DEFAULT_RULES):
        self.rules = rules

    def check_contracts(self, files: Iterable[ScannedFile]) -> list[Diagnostic]:
        """合约源文件名必须等于其 snake_case 形式."""
        diagnostics: list[Diagnostic] = []

        for file in _of_category(files, FileCategory.CONTRACT_SOURCE):
            if file.base_name == file.canonical_name:
                continue
            expected = f"{file.canonical_name}{file.extension}"
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.NAMING_MISMATCH,
                    location=file.relative_path.as_posix(),
                    message=(
                        f"合约文件应使用 snake_case 命名。期望: '{expected}'，"
                        f"实际: '{file.name}'。"
                    ),
                )
            )

        return diagnostics

    def check_wrappers(self, files: Iterable[ScannedFile]) -> list[Diagnostic]:
        """wrapper 文件名必须为 PascalCase，且与导出类名一致."""
        diagnostics: list[Diagnostic] = []

        for file in _of_category(files, FileCategory.WRAPPER_SOURCE):
            location = file.relative_path.as_posix()
            stem = self._wrapper_stem(file)

            if not is_pascal_case(stem):
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.NAMING_MISMATCH,
                        location=location,
                        message=f"Wrapper 文件 '{file.name}' 的名称部分 '{stem}' 应使用 PascalCase。",
                    )
                )
                continue

            if file.is_wrapper_compile_variant:
                continue

            try:
                source = file.absolute_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"无法读取 wrapper 文件 {file.absolute_path}: {e}")
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.STRUCTURE_INVALID,
                        location=location,
                        message=f"无法读取 wrapper 文件 '{file.name}': {e}",
                    )
                )
                continue

            class_name = extract_exported_class(source)
            if class_name is not None and class_name != stem:
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.NAMING_MISMATCH,
                        location=location,
                        message=(
                            f"Wrapper 文件名 '{file.name}'（名称部分 '{stem}'）"
                            f"与导出的类名 '{class_name}' 不一致。"
                        ),
                    )
                )

        return diagnostics

    def check_scripts(self, files: Iterable[ScannedFile]) -> list[Diagnostic]:
        """脚本文件名必须为 lowerCamelCase."""
        return [
            Diagnostic(
                kind=DiagnosticKind.NAMING_MISMATCH,
                location=file.relative_path.as_posix(),
                message=f"脚本文件名 '{file.name}' 应使用 lowerCamelCase。",
            )
            for file in _of_category(files, FileCategory.SCRIPT_SOURCE)
            if not is_lower_camel_case(file.base_name)
        ]

    def _wrapper_stem(self, file: ScannedFile) -> str:
        suffix = (
            self.rules.compile_suffix
            if file.is_wrapper_compile_variant
            else self.rules.source_extension
        )
        return file.name[: -len(suffix)]


def _of_category(files: Iterable[ScannedFile], category: FileCategory) -> list[ScannedFile]:
    return [file for file in files if file.category is category]
