"""
@PURPOSE: 定义 Blueprint 项目 lint 规则常量与运行配置
@OUTLINE:
  - CHARACTERISTIC_DIRS: 特征子目录名
  - class LintRules: 不可变规则集合（注入到各检查组件）
  - class LinterSettings: 运行配置（环境变量/配置文件）
  - DEFAULT_RULES: 默认规则实例
@GOTCHAS:
  - naming_dirs 只影响命名检查，不影响项目发现
  - 默认日志级别为 WARNING，保证无问题时输出为空
@DEPENDENCIES:
  - 内部: packages.common.config
  - 外部: pydantic, pydantic-settings
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from packages.common.config import BaseAppConfig

CHARACTERISTIC_DIRS: tuple[str, ...] = ("contracts", "wrappers", "scripts", "tests")


@dataclass(frozen=True)
class LintRules:
    """Blueprint 项目约定.

    所有检查组件都接收一个 LintRules 实例，测试中可替换其中任意一项。
    """

    manifest_name: str = "package.json"
    characteristic_dirs: tuple[str, ...] = CHARACTERISTIC_DIRS
    dependency_cache_dir: str = "node_modules"

    # 文件分类
    contract_extensions: tuple[str, ...] = (".tact", ".fc", ".func")
    source_extension: str = ".ts"
    test_suffixes: tuple[str, ...] = (".spec.ts", ".test.ts")
    declaration_suffix: str = ".d.ts"
    compile_suffix: str = ".compile.ts"
    contracts_dir: str = "contracts"
    wrappers_dir: str = "wrappers"
    scripts_dir: str = "scripts"

    # 项目结构
    required_dependency: str = "@ton-ai-core/blueprint"
    dependency_sections: tuple[str, ...] = ("dependencies", "devDependencies")
    required_config: str = "blueprint.config.ts"
    required_module_path: tuple[str, ...] = ("node_modules", "@ton-ai-core", "blueprint")
    scaffold_fix_command: str = "npm create ton@latest"
    install_command: str = "npm install"

    # 引用文件
    build_config_name: str = "tact.config.json"

    # 上级目录检查
    marker_items: tuple[str, ...] = (
        ".cursor",
        ".knowledge",
        ".vscode",
        "package.json",
        ".windsurf",
        ".cursorrules",
        ".windsurfrules",
        "tsconfig.json",
    )
    forbidden_dirs: tuple[str, ...] = (
        "contracts",
        "contract",
        "wrappers",
        "wrapper",
        "scripts",
        "script",
        "tests",
        "test",
    )
    tree_noise: frozenset[str] = frozenset(
        {
            "node_modules",
            ".git",
            "dist",
            "build",
            "coverage",
            "__pycache__",
            ".idea",
            ".DS_Store",
        }
    )
    tree_depth: int = 2

    @property
    def all_extensions(self) -> tuple[str, ...]:
        """分类器关心的全部扩展名."""
        return (*self.contract_extensions, self.source_extension, *self.test_suffixes)


DEFAULT_RULES = LintRules()


class LinterSettings(BaseAppConfig):
    """blueprint-lint 运行配置

    环境变量前缀为 BLUEPRINT_LINT_，例如 BLUEPRINT_LINT_LOG_LEVEL=DEBUG。

    Attributes:
        log_level: 日志级别
        naming_dirs: 命名检查扫描的子目录
        tree_depth: 上级目录快照的渲染深度
    """

    model_config = SettingsConfigDict(
        env_prefix="BLUEPRINT_LINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="日志级别")
    naming_dirs: str = Field(
        default=",".join(CHARACTERISTIC_DIRS),
        description="命名检查扫描的子目录，逗号分隔",
    )
    tree_depth: int = Field(default=2, ge=0, description="目录快照深度")

    @field_validator("naming_dirs", mode="before")
    @classmethod
    def join_naming_dirs(cls, value: object) -> object:
        """配置文件中允许写成列表."""
        if isinstance(value, (list, tuple)):
            return ",".join(str(item) for item in value)
        return value

    @property
    def target_dirs(self) -> list[str]:
        """命名检查扫描的子目录列表."""
        return parse_dir_list(self.naming_dirs)

    def build_rules(self) -> LintRules:
        """根据配置生成规则集合."""
        return LintRules(tree_depth=self.tree_depth)


def parse_dir_list(raw: str) -> list[str]:
    """解析逗号分隔的目录列表，忽略空白项.

    Examples:
        >>> parse_dir_list("contracts, wrappers,,")
        ['contracts', 'wrappers']
    """
    return [part.strip() for part in raw.split(",") if part.strip()]
