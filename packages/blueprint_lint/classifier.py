"""
@PURPOSE: 扫描项目目标子目录中的源文件并分类
@OUTLINE:
  - class FileClassifier: 文件分类器
    - scan(): 扫描目标目录，返回 ScannedFile 列表
    - classify(): 判定单个文件的分类
@GOTCHAS:
  - 依赖缓存目录（node_modules）下的文件一律排除
  - .d.ts 类型声明文件不参与检查
  - 同一个文件可能经多个目标目录到达（如 contracts 与 contracts/sub），按解析后的路径去重
  - tests/ 或 contracts/ 中普通 .ts 辅助文件不归入任何分类
@DEPENDENCIES:
  - 内部: .config, .models, .normalizer
  - 外部: loguru
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from .config import DEFAULT_RULES, LintRules
from .models import FileCategory, ScannedFile
from .normalizer import canonical_base_name


class FileClassifier:
    """文件分类器."""

    def __init__(self, rules: LintRules = DEFAULT_RULES):
        self.rules = rules

    def scan(self, project_root: Path, target_dirs: Iterable[str]) -> list[ScannedFile]:
        """扫描目标目录（递归）并分类文件.

        Args:
            project_root: 项目根目录
            target_dirs: 相对项目根目录的目标目录名

        Returns:
            按相对路径排序的 ScannedFile 列表
        """
        root = project_root.resolve()
        targets = [Path(target) for target in target_dirs]
        seen: dict[Path, ScannedFile] = {}

        for target in targets:
            base_path = root / target
            if not base_path.is_dir():
                continue

            for candidate in base_path.rglob("*"):
                if not candidate.is_file():
                    continue
                if not self._has_relevant_extension(candidate.name):
                    continue

                resolved = candidate.resolve()
                if resolved in seen:
                    continue

                try:
                    relative_path = resolved.relative_to(root)
                except ValueError:
                    logger.debug(f"跳过项目外的文件: {candidate}")
                    continue

                if self.rules.dependency_cache_dir in relative_path.parts:
                    continue

                matched_target = self._matching_target(relative_path, targets)
                if matched_target is None:
                    continue

                scanned = self.classify(resolved, relative_path, matched_target)
                if scanned is not None:
                    seen[resolved] = scanned

        files = sorted(seen.values(), key=lambda item: item.relative_path.as_posix())
        logger.debug(f"{root}: 分类文件 {len(files)} 个")
        return files

    def classify(
        self, absolute_path: Path, relative_path: Path, target_dir: Path
    ) -> ScannedFile | None:
        """判定文件分类.

        Args:
            absolute_path: 文件绝对路径
            relative_path: 相对项目根目录的路径
            target_dir: 文件所在的目标目录

        Returns:
            ScannedFile，不属于任何分类时返回 None
        """
        rules = self.rules
        name = absolute_path.name
        is_compile_variant = False

        if absolute_path.suffix in rules.contract_extensions:
            category = FileCategory.CONTRACT_SOURCE
        elif name.endswith(rules.test_suffixes):
            category = FileCategory.TEST_SOURCE
        elif target_dir.name == rules.wrappers_dir:
            category = FileCategory.WRAPPER_SOURCE
            is_compile_variant = name.endswith(rules.compile_suffix)
        elif target_dir.name == rules.scripts_dir:
            category = FileCategory.SCRIPT_SOURCE
        else:
            return None

        return ScannedFile(
            absolute_path=absolute_path,
            relative_path=relative_path,
            parent_dir_name=absolute_path.parent.name,
            base_name=absolute_path.stem,
            canonical_name=canonical_base_name(absolute_path),
            category=category,
            is_wrapper_compile_variant=is_compile_variant,
        )

    def _has_relevant_extension(self, name: str) -> bool:
        if name.endswith(self.rules.declaration_suffix):
            return False
        return name.endswith(self.rules.all_extensions)

    @staticmethod
    def _matching_target(relative_path: Path, targets: list[Path]) -> Path | None:
        """返回包含该文件的目标目录（按物理路径判断）."""
        parts = relative_path.parent.parts
        for target in targets:
            target_parts = target.parts
            if parts[: len(target_parts)] == target_parts:
                return target
        return None
