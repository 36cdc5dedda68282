"""
@PURPOSE: 仓库自检，检查本仓库 Python 文件和目录是否遵循 snake_case
@OUTLINE:
  - TestRepositoryNaming: 用 normalize_to_snake_case 校验自身文件名和目录名
@DEPENDENCIES:
  - 内部: packages.blueprint_lint.normalizer
  - 外部: pytest
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from packages.blueprint_lint.normalizer import normalize_to_snake_case

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SEARCH_PATHS = ["apps", "packages", "tests"]
DUNDER_FILES = ("__init__.py", "__main__.py")


def _iter_paths(search_path: str) -> Iterator[Path]:
    for path in sorted((PROJECT_ROOT / search_path).rglob("*")):
        relative = path.relative_to(PROJECT_ROOT)
        # 跳过缓存和隐藏目录
        if any(part.startswith((".", "_")) and part not in DUNDER_FILES for part in relative.parts):
            continue
        yield path


class TestRepositoryNaming:
    """仓库文件命名自检."""

    @pytest.mark.parametrize("search_path", SEARCH_PATHS)
    def test_python_files_use_snake_case(self, search_path: str) -> None:
        violations = [
            path.relative_to(PROJECT_ROOT).as_posix()
            for path in _iter_paths(search_path)
            if path.suffix == ".py" and normalize_to_snake_case(path.stem) != path.stem
        ]

        if violations:
            pytest.fail(f"发现 {len(violations)} 个文件命名违规:\n" + "\n".join(violations))

    @pytest.mark.parametrize("search_path", SEARCH_PATHS)
    def test_directories_use_snake_case(self, search_path: str) -> None:
        violations = [
            path.relative_to(PROJECT_ROOT).as_posix()
            for path in _iter_paths(search_path)
            if path.is_dir() and normalize_to_snake_case(path.name) != path.name
        ]

        if violations:
            pytest.fail(f"发现 {len(violations)} 个目录命名违规:\n" + "\n".join(violations))
