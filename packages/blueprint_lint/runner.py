"""
@PURPOSE: 组织一次完整的 lint 运行，按固定顺序汇总所有诊断
@OUTLINE:
  - class LintReport: 运行结果
  - class LintRunner: 运行器
    - run(): 上级目录检查 -> 项目发现 -> 逐个有效项目检查
    - check_project(): 单个有效项目的命名、重名和引用检查
  - run_lint(): 便捷入口
@GOTCHAS:
  - 项目内的诊断位置是相对项目根目录的，汇总前统一改为相对扫描根目录
  - 单个项目检查时的意外异常会转换为一条 STRUCTURE_INVALID，不影响其他项目
@DEPENDENCIES:
  - 内部: .classifier, .config, .discovery, .duplicates, .models, .naming, .references, .root_folder
  - 外部: loguru
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from .classifier import FileClassifier
from .config import CHARACTERISTIC_DIRS, DEFAULT_RULES, LintRules
from .discovery import ProjectDiscoverer, relative_location
from .duplicates import find_duplicate_names
from .models import Diagnostic, DiagnosticKind, ProjectCandidate
from .naming import NamingChecker
from .references import check_referenced_files
from .root_folder import check_root_folder


@dataclass
class LintReport:
    """一次 lint 运行的结果.

    Attributes:
        scan_root: 扫描根目录
        diagnostics: 按产生顺序排列的诊断
        candidates: 发现的候选项目
    """

    scan_root: Path
    diagnostics: list[Diagnostic] = field(default_factory=list)
    candidates: list[ProjectCandidate] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    @property
    def exit_code(self) -> int:
        """0 表示没有诊断，1 表示存在诊断."""
        return 0 if self.ok else 1


class LintRunner:
    """lint 运行器."""

    def __init__(
        self,
        scan_root: Path,
        naming_dirs: Iterable[str] = CHARACTERISTIC_DIRS,
        rules: LintRules = DEFAULT_RULES,
    ):
        """初始化运行器.

        Args:
            scan_root: 扫描根目录
            naming_dirs: 命名检查扫描的子目录（不影响项目发现）
            rules: lint 规则
        """
        self.scan_root = scan_root.resolve()
        self.naming_dirs = list(naming_dirs)
        self.rules = rules
        self.classifier = FileClassifier(rules)
        self.naming = NamingChecker(rules)

    def run(self) -> LintReport:
        """执行完整的 lint.

        Returns:
            LintReport
        """
        report = LintReport(scan_root=self.scan_root)
        logger.debug(f"开始扫描: {self.scan_root}")

        report.diagnostics.extend(check_root_folder(self.scan_root, self.rules))

        discovery = ProjectDiscoverer(self.scan_root, self.rules).discover()
        report.candidates = discovery.candidates
        report.diagnostics.extend(discovery.diagnostics)

        for project_root in discovery.valid_roots:
            report.diagnostics.extend(self.check_project(project_root))

        logger.debug(
            f"扫描完成: {len(report.candidates)} 个候选目录, "
            f"{len(discovery.valid_roots)} 个有效项目, {len(report.diagnostics)} 条诊断"
        )
        return report

    def check_project(self, project_root: Path) -> list[Diagnostic]:
        """对单个有效项目执行命名、重名和引用检查.

        顺序: 合约命名 -> 重名 -> wrapper 命名 -> 脚本命名 -> 引用文件。

        Args:
            project_root: 项目根目录

        Returns:
            位置相对扫描根目录的诊断列表
        """
        project_location = relative_location(project_root, self.scan_root)
        logger.debug(f"检查项目: {project_location}")

        try:
            files = self.classifier.scan(project_root, self.naming_dirs)
            diagnostics = [
                *self.naming.check_contracts(files),
                *find_duplicate_names(project_root, self.rules),
                *self.naming.check_wrappers(files),
                *self.naming.check_scripts(files),
                *check_referenced_files(project_root, self.rules),
            ]
        except Exception as e:
            logger.exception(f"检查项目 {project_location} 时发生意外错误")
            return [
                Diagnostic(
                    kind=DiagnosticKind.STRUCTURE_INVALID,
                    location=project_location,
                    message=f"检查 {project_location} 时发生意外错误: {e}",
                )
            ]

        return [
            diagnostic.relocated(
                relative_location(project_root / diagnostic.location, self.scan_root)
            )
            for diagnostic in diagnostics
        ]


def run_lint(
    scan_root: Path,
    naming_dirs: Iterable[str] = CHARACTERISTIC_DIRS,
    rules: LintRules = DEFAULT_RULES,
) -> LintReport:
    """执行一次 lint 并返回结果."""
    return LintRunner(scan_root, naming_dirs, rules).run()
