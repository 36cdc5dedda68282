"""
@PURPOSE: Blueprint 项目结构与命名 lint 的核心包
@OUTLINE:
  - 导出运行入口、规则配置、诊断模型和报告渲染函数
  - 提供版本信息
@DEPENDENCIES:
  - 内部: .config, .models, .runner, .reporter
"""

__version__ = "0.1.0"

from .config import DEFAULT_RULES, LinterSettings, LintRules, parse_dir_list
from .models import Diagnostic, DiagnosticKind, FileCategory, ProjectClassification
from .reporter import render_json, render_text
from .runner import LintReport, LintRunner, run_lint

__all__ = [
    "DEFAULT_RULES",
    "Diagnostic",
    "DiagnosticKind",
    "FileCategory",
    "LintReport",
    "LintRules",
    "LintRunner",
    "LinterSettings",
    "ProjectClassification",
    "parse_dir_list",
    "render_json",
    "render_text",
    "run_lint",
]
