"""
@PURPOSE: 定义 lint 诊断、扫描文件和候选项目的数据模型
@OUTLINE:
  - class DiagnosticKind: 诊断类型枚举
  - class Diagnostic: 单条诊断（不可变）
  - class FileCategory: 文件分类枚举
  - class ScannedFile: 扫描得到的文件信息
  - class ProjectClassification: 候选项目分类枚举
  - class ProjectCandidate: 候选项目目录
@DEPENDENCIES:
  - 标准库: dataclasses, enum, pathlib
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path


class DiagnosticKind(str, Enum):
    """诊断类型."""

    STRUCTURE_INVALID = "STRUCTURE_INVALID"
    BROKEN_SCAFFOLD = "BROKEN_SCAFFOLD"
    NAMING_MISMATCH = "NAMING_MISMATCH"
    MISSING_REFERENCED_FILE = "MISSING_REFERENCED_FILE"


@dataclass(frozen=True)
class Diagnostic:
    """单条诊断.

    Attributes:
        kind: 诊断类型
        location: 出问题的文件或目录（相对扫描根目录）
        message: 诊断信息
        names_location: 消息本身已写明涉及的文件，报告中不再追加位置
    """

    kind: DiagnosticKind
    location: str
    message: str
    names_location: bool = False

    def relocated(self, location: str) -> Diagnostic:
        """返回仅位置不同的新诊断."""
        return replace(self, location=location)

    def to_dict(self) -> dict[str, str]:
        """转换为可 JSON 序列化的字典."""
        return {
            "kind": self.kind.value,
            "location": self.location,
            "message": self.message,
        }


class FileCategory(str, Enum):
    """扫描文件分类."""

    CONTRACT_SOURCE = "CONTRACT_SOURCE"
    SCRIPT_SOURCE = "SCRIPT_SOURCE"
    WRAPPER_SOURCE = "WRAPPER_SOURCE"
    TEST_SOURCE = "TEST_SOURCE"


@dataclass(frozen=True)
class ScannedFile:
    """扫描得到的文件信息.

    Attributes:
        absolute_path: 绝对路径
        relative_path: 相对项目根目录的路径
        parent_dir_name: 直接父目录名
        base_name: 去掉最后一个扩展名后的文件名
        canonical_name: 期望的 snake_case 名称
        category: 文件分类
        is_wrapper_compile_variant: 是否为 wrapper 的 .compile.ts 文件
    """

    absolute_path: Path
    relative_path: Path
    parent_dir_name: str
    base_name: str
    canonical_name: str
    category: FileCategory
    is_wrapper_compile_variant: bool = False

    @property
    def name(self) -> str:
        """完整文件名."""
        return self.absolute_path.name

    @property
    def extension(self) -> str:
        """最后一个扩展名."""
        return self.absolute_path.suffix


class ProjectClassification(str, Enum):
    """候选项目分类."""

    VALID = "VALID"
    BROKEN_SCAFFOLD = "BROKEN_SCAFFOLD"
    IGNORABLE = "IGNORABLE"


@dataclass(frozen=True)
class ProjectCandidate:
    """候选项目目录.

    Attributes:
        root_path: 目录绝对路径
        has_manifest: 是否包含 package.json
        has_characteristic_dirs: 是否直接包含特征子目录
        classification: 分类结果
    """

    root_path: Path
    has_manifest: bool
    has_characteristic_dirs: bool
    classification: ProjectClassification

    @property
    def is_valid(self) -> bool:
        return self.classification is ProjectClassification.VALID
