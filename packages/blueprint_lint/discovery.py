"""
@PURPOSE: 发现候选 Blueprint 项目目录，分类并校验项目结构
@OUTLINE:
  - relative_location(): 计算相对扫描根目录的位置字符串
  - iter_project_files(): 遍历文件（跳过 node_modules 和隐藏目录）
  - class DiscoveryResult: 发现结果（候选项目 + 诊断）
  - class ProjectDiscoverer: 项目发现器
    - discover(): 遍历扫描根目录并分类所有候选目录
    - find_candidate_dirs(): 收集含 package.json 或特征子目录的目录
    - classify(): 分类单个目录
    - validate_structure(): 校验依赖、配置文件和本地模块
@GOTCHAS:
  - 不进入 node_modules 和隐藏目录
  - 结构校验的各项检查互不短路，一个目录可能同时产生多条诊断
  - 扫描根目录既无 package.json 也无特征目录时为 IGNORABLE
@DEPENDENCIES:
  - 内部: .config, .errors, .models
  - 外部: loguru
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from .config import DEFAULT_RULES, LintRules
from .errors import ManifestError, load_json_file
from .models import Diagnostic, DiagnosticKind, ProjectCandidate, ProjectClassification


def relative_location(path: Path, scan_root: Path) -> str:
    """返回相对扫描根目录的 posix 路径，根目录本身为 '.'.

    不在扫描根目录下的路径原样返回。
    """
    try:
        relative = path.relative_to(scan_root)
    except ValueError:
        return str(path)
    return relative.as_posix() if relative.parts else "."


def iter_project_files(root: Path, rules: LintRules = DEFAULT_RULES) -> Iterator[Path]:
    """遍历目录下的文件，跳过依赖缓存和隐藏目录."""
    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = _walkable(dirnames, rules)
        for filename in filenames:
            yield Path(current) / filename


def _walkable(dirnames: list[str], rules: LintRules) -> list[str]:
    return [
        name
        for name in dirnames
        if name != rules.dependency_cache_dir and not name.startswith(".")
    ]


@dataclass
class DiscoveryResult:
    """项目发现结果.

    Attributes:
        candidates: 所有候选目录（含分类）
        diagnostics: 发现和结构校验过程中的诊断
    """

    candidates: list[ProjectCandidate] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def valid_roots(self) -> list[Path]:
        """通过结构校验的项目根目录."""
        return [candidate.root_path for candidate in self.candidates if candidate.is_valid]


class ProjectDiscoverer:
    """项目发现器."""

    def __init__(self, scan_root: Path, rules: LintRules = DEFAULT_RULES):
        """初始化发现器.

        Args:
            scan_root: 扫描根目录
            rules: lint 规则
        """
        self.scan_root = scan_root.resolve()
        self.rules = rules

    def discover(self) -> DiscoveryResult:
        """遍历扫描根目录并分类所有候选目录.

        Returns:
            DiscoveryResult
        """
        result = DiscoveryResult()

        for directory in self.find_candidate_dirs():
            candidate, diagnostics = self.classify(directory)
            logger.debug(
                f"候选目录 {relative_location(directory, self.scan_root)}: "
                f"{candidate.classification.value}"
            )
            result.candidates.append(candidate)
            result.diagnostics.extend(diagnostics)

        return result

    def find_candidate_dirs(self) -> list[Path]:
        """收集含 package.json 或直接包含特征子目录的目录.

        Returns:
            去重并排序后的目录列表
        """
        rules = self.rules
        found: set[Path] = set()

        for current, dirnames, filenames in os.walk(self.scan_root):
            # 原地修改 dirnames 以跳过依赖缓存和隐藏目录
            dirnames[:] = _walkable(dirnames, rules)
            current_path = Path(current)
            if rules.manifest_name in filenames:
                found.add(current_path)
            if any(name in rules.characteristic_dirs for name in dirnames):
                found.add(current_path)

        return sorted(found)

    def classify(self, directory: Path) -> tuple[ProjectCandidate, list[Diagnostic]]:
        """分类单个目录.

        Args:
            directory: 候选目录

        Returns:
            (ProjectCandidate, 诊断列表)
        """
        has_manifest = (directory / self.rules.manifest_name).is_file()
        existing = self._existing_characteristic_dirs(directory)
        has_characteristic_dirs = bool(existing)

        def candidate(classification: ProjectClassification) -> ProjectCandidate:
            return ProjectCandidate(
                root_path=directory,
                has_manifest=has_manifest,
                has_characteristic_dirs=has_characteristic_dirs,
                classification=classification,
            )

        if has_manifest:
            diagnostics = self.validate_structure(directory)
            if diagnostics:
                return candidate(ProjectClassification.BROKEN_SCAFFOLD), diagnostics
            return candidate(ProjectClassification.VALID), []

        if has_characteristic_dirs:
            return (
                candidate(ProjectClassification.BROKEN_SCAFFOLD),
                [self._broken_scaffold(directory, existing)],
            )

        return candidate(ProjectClassification.IGNORABLE), []

    def validate_structure(self, directory: Path) -> list[Diagnostic]:
        """校验含 package.json 的目录.

        依次检查: package.json 可解析、关键依赖存在、配置文件存在、本地模块已安装。
        各项检查互不短路。

        Args:
            directory: 项目目录

        Returns:
            诊断列表，为空表示结构有效
        """
        rules = self.rules
        diagnostics: list[Diagnostic] = []
        manifest_path = directory / rules.manifest_name
        manifest_location = relative_location(manifest_path, self.scan_root)
        directory_location = relative_location(directory, self.scan_root)

        def structure_error(location: str, message: str) -> None:
            diagnostics.append(
                Diagnostic(kind=DiagnosticKind.STRUCTURE_INVALID, location=location, message=message)
            )

        try:
            manifest = load_json_file(manifest_path)
            if not isinstance(manifest, dict):
                raise ManifestError(manifest_path, "顶层必须是 JSON 对象")
        except ManifestError as e:
            logger.warning(f"无法解析 {manifest_path}: {e.reason}")
            structure_error(manifest_location, f"无法读取或解析 '{rules.manifest_name}': {e.reason}")
        else:
            if not self._declares_dependency(manifest):
                structure_error(
                    manifest_location, f"未找到关键依赖 '{rules.required_dependency}'。"
                )

        if not (directory / rules.required_config).exists():
            structure_error(directory_location, f"未找到配置文件 '{rules.required_config}'。")

        module_path = Path(*rules.required_module_path)
        if not (directory / module_path).exists():
            structure_error(
                directory_location,
                f"未找到本地 blueprint 安装 '{module_path.as_posix()}'。"
                f"是否已运行 '{rules.install_command}'？",
            )

        return diagnostics

    def _declares_dependency(self, manifest: dict) -> bool:
        for section in self.rules.dependency_sections:
            dependencies = manifest.get(section)
            if isinstance(dependencies, dict) and dependencies.get(self.rules.required_dependency):
                return True
        return False

    def _existing_characteristic_dirs(self, directory: Path) -> list[str]:
        return [name for name in self.rules.characteristic_dirs if (directory / name).is_dir()]

    def _broken_scaffold(self, directory: Path, existing: list[str]) -> Diagnostic:
        location = relative_location(directory, self.scan_root)
        scope = "顶层目录" if directory == self.scan_root else "目录"
        lines = [
            f"{scope} '{location}' 有误: 不要用 'npx blueprint create' 搭建整个项目，"
            f"请改用 '{self.rules.scaffold_fix_command}'。",
            f"  检测到特征目录但缺少 '{self.rules.manifest_name}'，建议删除:",
        ]
        lines.extend(f"    - {directory / name}" for name in existing)
        return Diagnostic(
            kind=DiagnosticKind.BROKEN_SCAFFOLD, location=location, message="\n".join(lines)
        )
