"""
@PURPOSE: 渲染目录树快照（纯文本）
@OUTLINE:
  - render_tree(): 渲染限定深度的目录树
@GOTCHAS:
  - 目录排在文件之前，同组内按名称（忽略大小写）排序
  - 输出只使用 "/" 作为目录后缀，与操作系统无关
  - 无法读取的目录按空目录处理
@DEPENDENCIES:
  - 标准库: pathlib
"""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def render_tree(root: Path, max_depth: int = 2, ignored: Collection[str] = ()) -> str:
    """渲染目录树.

    Args:
        root: 根目录
        max_depth: 最多展开的层数，0 表示只输出根目录
        ignored: 需要过滤的名称（如 node_modules, .git）

    Returns:
        多行字符串，第一行为根目录名

    Examples:
        >>> print(render_tree(Path("workspace"), max_depth=1))  # doctest: +SKIP
        workspace/
        ├── contracts/
        └── package.json
    """
    lines = [f"{root.name or root.as_posix()}/"]
    _render_children(root, "", 1, max_depth, ignored, lines)
    return "\n".join(lines)


def _render_children(
    directory: Path,
    prefix: str,
    depth: int,
    max_depth: int,
    ignored: Collection[str],
    lines: list[str],
) -> None:
    if depth > max_depth:
        return

    entries = _sorted_entries(directory, ignored)
    for index, entry in enumerate(entries):
        is_last = index == len(entries) - 1
        is_dir = entry.is_dir()
        lines.append(f"{prefix}{LAST_BRANCH if is_last else BRANCH}{entry.name}{'/' if is_dir else ''}")
        if is_dir:
            child_prefix = prefix + (SPACE if is_last else PIPE)
            _render_children(entry, child_prefix, depth + 1, max_depth, ignored, lines)


def _sorted_entries(directory: Path, ignored: Collection[str]) -> list[Path]:
    try:
        entries = [entry for entry in directory.iterdir() if entry.name not in ignored]
    except OSError:
        return []
    # 目录优先，其次按名称
    return sorted(entries, key=lambda entry: (not entry.is_dir(), entry.name.lower(), entry.name))
